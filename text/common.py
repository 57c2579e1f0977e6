import re

from core.config import SIDEWAYS_CHARS, UPRIGHT_RANGES


# =============================================================================
# 正規表現パターン
# =============================================================================

# 文字参照（名前付き・10進数・16進数）: &amp; &#12354; &#x3042;
CHAR_REF_PATTERN = re.compile(r'&#?[A-Za-z0-9]{2,8};')

# メールアドレスまたはURL
LINK_PATTERN = re.compile(
    r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}|(?i:https?)://\S+'
)

# 前後に数字が続かない数字列（桁数の上限は tcy_digit に応じて生成）
_DIGIT_RUN_TEMPLATE = r'(?<![0-9])[0-9]{{2,{max_digit}}}(?![0-9])'

# ちょうど2文字の感嘆符・疑問符（!! !? ?! ??）
EMPHASIS_MARK_PATTERN = re.compile(r'(?<![!?])[!?]{2}(?![!?])')

# 横倒しにする記号
SIDEWAYS_PATTERN = re.compile(f'[{re.escape(SIDEWAYS_CHARS)}]')

# 正立させる文字（ギリシャ文字・キリル文字）
UPRIGHT_PATTERN = re.compile(f'[{UPRIGHT_RANGES}]')


def digit_run_pattern(max_digit: int) -> re.Pattern[str]:
    """
    最大桁数 max_digit の数字列にマッチするパターンを返す。

    max_digit が 2 未満の場合、どの数字列にもマッチしないパターンを返す。
    """
    if max_digit < 2:
        return re.compile(r'(?!)')
    return re.compile(_DIGIT_RUN_TEMPLATE.format(max_digit=max_digit))


def wrap_span(text: str, css_class: str) -> str:
    """テキストを指定classのspan要素で囲む。"""
    return f'<span class="{css_class}">{text}</span>'
