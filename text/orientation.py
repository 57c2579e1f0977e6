"""
文字の向き（text-orientation）調整モジュール。

縦書きで向きを固定すべき文字を1文字ずつspanで囲みます。
- 横倒し（sideways）: ÷ ∴ ≠ ≦ ≧ ∧ ∨ ＜ ＞ ‐ －
- 正立（upright）: ギリシャ文字・キリル文字
"""
import logging
import re

from core import logger
from core.config import SIDEWAYS_CLASS, UPRIGHT_CLASS
from core.messages import msg
from text.common import SIDEWAYS_PATTERN, UPRIGHT_PATTERN, wrap_span


def _wrap_each_char(
    pattern: re.Pattern[str],
    text: str,
    css_class: str,
    log: logging.Logger | None,
) -> str:
    def replace(match: re.Match[str]) -> str:
        if log is not None:
            log.debug(msg("debug_orientation", char=match.group(0), css_class=css_class))
        return wrap_span(match.group(0), css_class)

    return pattern.sub(replace, text)


def apply_orientation(text: str, log: logging.Logger | None = None, verbose: bool = False) -> str:
    """
    向きを固定する文字を1文字ずつspanで囲む。

    隣接する文字もまとめずに個別のspanにする（文字ごとに回転を独立させるため）。

    Examples
    --------
    >>> apply_orientation("≠")
    '<span class="sideways">≠</span>'
    >>> apply_orientation("αβ")
    '<span class="upright">α</span><span class="upright">β</span>'
    """
    debug_log = (log or logger.get_logger("orientation")) if verbose else None

    result = _wrap_each_char(SIDEWAYS_PATTERN, text, SIDEWAYS_CLASS, debug_log)
    result = _wrap_each_char(UPRIGHT_PATTERN, result, UPRIGHT_CLASS, debug_log)
    return result
