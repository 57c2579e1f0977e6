"""
縦中横（tate-chu-yoko）変換モジュール。

縦書きの中で横向きに組む短い数字列と、2文字の感嘆符・疑問符を
``<span class="tcy">`` で囲みます。
"""
import logging
import re

from core import logger
from core.config import TCY_CLASS
from core.messages import msg
from text.common import EMPHASIS_MARK_PATTERN, digit_run_pattern, wrap_span


def _wrap_matches(
    pattern: re.Pattern[str],
    text: str,
    log: logging.Logger | None,
    message_key: str,
    field_name: str,
) -> str:
    """パターンにマッチした部分をすべて tcy の span で囲む。"""
    def replace(match: re.Match[str]) -> str:
        if log is not None:
            log.debug(msg(message_key, **{field_name: match.group(0)}))
        return wrap_span(match.group(0), TCY_CLASS)

    return pattern.sub(replace, text)


def apply_tcy(
    text: str,
    tcy_digit: int,
    log: logging.Logger | None = None,
    verbose: bool = False,
) -> str:
    """
    数字列と感嘆符・疑問符を縦中横用のspanで囲む。

    Parameters
    ----------
    text : str
        保護区間（文字参照・URL等）を含まないテキスト。
    tcy_digit : int
        縦中横にする数字列の最大桁数。0 の場合は数字を変換しない。
    log : logging.Logger | None
        デバッグ出力先。None の場合はアプリケーションロガーの子ロガー。
    verbose : bool
        True の場合、変換した箇所をデバッグ出力する。

    Returns
    -------
    str
        span要素を挿入したテキスト。

    Notes
    -----
    変換ルール:
    - 数字: 2桁以上 tcy_digit 桁以下の数字列。前後に数字が続く場合
      （tcy_digit より長い数字列）は一部だけを囲むことはせず、変換しない
    - 感嘆符・疑問符: ちょうど2文字の並び（!! !? ?! ??）。3文字以上は変換しない

    Examples
    --------
    >>> apply_tcy("12ああああ34ああ457", 3)
    '<span class="tcy">12</span>ああああ<span class="tcy">34</span>ああ<span class="tcy">457</span>'
    >>> apply_tcy("1234", 2)
    '1234'
    >>> apply_tcy("!!ああ!!!", 0)
    '<span class="tcy">!!</span>ああ!!!'
    """
    debug_log = (log or logger.get_logger("tcy")) if verbose else None

    result = text

    # 数字の変換処理
    if tcy_digit == 0:
        if debug_log is not None:
            debug_log.debug(msg("debug_tcy_disabled"))
    else:
        result = _wrap_matches(digit_run_pattern(tcy_digit), result, debug_log, "debug_number", "digits")

    # 感嘆符・疑問符の処理
    result = _wrap_matches(EMPHASIS_MARK_PATTERN, result, debug_log, "debug_emphasis_marks", "marks")

    return result
