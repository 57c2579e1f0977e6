"""
文字参照・URL・メールアドレスの保護（マスキング）モジュール。

テキストを「変換してよい部分（LITERAL）」と「保護する部分（REFERENCE/LINK）」の
スパン列に分割し、変換ルールが保護部分に触れないようにします。
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from core import logger
from core.messages import msg
from text.common import CHAR_REF_PATTERN, LINK_PATTERN

# リンク検出時に文字参照1個を表す代理文字（LINK_PATTERN のメールアドレス部分にはマッチしない）
_REFERENCE_STAND_IN = "\u0001"

# MaskedText.text で使用する区切り文字
REFERENCE_SENTINEL = "\u0001"
LINK_SENTINEL = "\u0000"


class SpanKind(Enum):
    """スパンの種別。"""
    LITERAL = "literal"
    REFERENCE = "reference"
    LINK = "link"


@dataclass(frozen=True)
class Span:
    """テキストの一区間。"""
    kind: SpanKind
    text: str

    @property
    def is_protected(self) -> bool:
        """変換ルールから保護される区間かどうか。"""
        return self.kind is not SpanKind.LITERAL


@dataclass
class MaskedText:
    """マスキング結果を保持するデータクラス。"""
    spans: list[Span] = field(default_factory=list)

    @property
    def references(self) -> list[str]:
        """文字参照の一覧（出現順）。"""
        return [s.text for s in self.spans if s.kind is SpanKind.REFERENCE]

    @property
    def links(self) -> list[str]:
        """URL・メールアドレスの一覧（出現順）。"""
        return [s.text for s in self.spans if s.kind is SpanKind.LINK]

    @property
    def text(self) -> str:
        """
        保護区間を位置プレースホルダーに置き換えた文字列。

        文字参照は ``\\u0001<番号>\\u0001``、URL・メールアドレスは
        ``\\u0000<番号>\\u0000`` で表す。ログ出力用。
        """
        parts: list[str] = []
        ref_index = 0
        link_index = 0
        for span in self.spans:
            if span.kind is SpanKind.REFERENCE:
                parts.append(f"{REFERENCE_SENTINEL}{ref_index}{REFERENCE_SENTINEL}")
                ref_index += 1
            elif span.kind is SpanKind.LINK:
                parts.append(f"{LINK_SENTINEL}{link_index}{LINK_SENTINEL}")
                link_index += 1
            else:
                parts.append(span.text)
        return "".join(parts)


def _split_references(text: str) -> list[Span]:
    """文字参照でテキストを分割する。"""
    spans: list[Span] = []
    pos = 0
    for match in CHAR_REF_PATTERN.finditer(text):
        if match.start() > pos:
            spans.append(Span(SpanKind.LITERAL, text[pos:match.start()]))
        spans.append(Span(SpanKind.REFERENCE, match.group(0)))
        pos = match.end()
    if pos < len(text):
        spans.append(Span(SpanKind.LITERAL, text[pos:]))
    return spans


def _split_links(spans: list[Span]) -> list[Span]:
    """
    文字参照で分割済みのスパン列から、さらにURL・メールアドレスを分離する。

    文字参照は代理文字1文字として検索対象に含めるため、
    文字参照をまたぐURLも1つのLINKスパンとして保護される。
    """
    # units[i] は検索用文字列 view の i 文字目に対応する元のテキスト
    units: list[str] = []
    unit_kinds: list[SpanKind] = []
    for span in spans:
        if span.kind is SpanKind.REFERENCE:
            units.append(span.text)
            unit_kinds.append(SpanKind.REFERENCE)
        else:
            units.extend(span.text)
            unit_kinds.extend([SpanKind.LITERAL] * len(span.text))

    view = "".join(
        _REFERENCE_STAND_IN if kind is SpanKind.REFERENCE else unit
        for unit, kind in zip(units, unit_kinds)
    )

    result: list[Span] = []
    literal_buf: list[str] = []

    def flush_literal() -> None:
        if literal_buf:
            result.append(Span(SpanKind.LITERAL, "".join(literal_buf)))
            literal_buf.clear()

    def emit_range(start: int, end: int) -> None:
        for i in range(start, end):
            if unit_kinds[i] is SpanKind.REFERENCE:
                flush_literal()
                result.append(Span(SpanKind.REFERENCE, units[i]))
            else:
                literal_buf.append(units[i])

    pos = 0
    for match in LINK_PATTERN.finditer(view):
        emit_range(pos, match.start())
        flush_literal()
        result.append(Span(SpanKind.LINK, "".join(units[match.start():match.end()])))
        pos = match.end()
    emit_range(pos, len(units))
    flush_literal()
    return result


def mask_text(text: str, log: logging.Logger | None = None, verbose: bool = False) -> MaskedText:
    """
    テキスト中の文字参照・URL・メールアドレスを保護スパンに分離する。

    Parameters
    ----------
    text : str
        処理対象のテキスト（文字参照は未デコードのまま）。
    log : logging.Logger | None
        デバッグ出力先。None の場合はアプリケーションロガーの子ロガー。
    verbose : bool
        True の場合、検出した保護区間をデバッグ出力する。

    Returns
    -------
    MaskedText
        スパン列と、文字参照・リンクの一覧。

    Notes
    -----
    処理順序:
    1. 文字参照（``&#?[A-Za-z0-9]{2,8};``）を REFERENCE として分離
    2. 1の結果に対してメールアドレス・URLを検索し LINK として分離

    Examples
    --------
    >>> masked = mask_text("連絡先はinfo@example21.comです。")
    >>> masked.links
    ['info@example21.com']
    >>> masked.text
    '連絡先は\\x000\\x00です。'
    """
    masked = MaskedText(spans=_split_links(_split_references(text)))

    if verbose:
        log = log or logger.get_logger("masking")
        for reference in masked.references:
            log.debug(msg("debug_reference_found", match=reference))
        for link in masked.links:
            log.debug(msg("debug_link_found", match=link))

    return masked


def unmask(masked: MaskedText, literal_transform: Callable[[str], str] | None = None) -> str:
    """
    スパン列を文字列に戻す。

    保護スパンはマスキング時の文字列をそのまま復元し、
    LITERALスパンには literal_transform を適用する（None の場合はそのまま）。
    """
    parts: list[str] = []
    for span in masked.spans:
        if span.is_protected or literal_transform is None:
            parts.append(span.text)
        else:
            parts.append(literal_transform(span.text))
    return "".join(parts)
