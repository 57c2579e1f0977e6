"""
HTML木構造アダプターモジュール。

BeautifulSoup（html.parser）による解析・シリアライズを、
変換エンジンが必要とする最小限の操作（ノード種別、テキスト、子要素、
タグ名・class属性、親要素、ノード置換）として提供します。

文字参照はデコードせず、元の表記のままテキストとして保持します。
"""
import re

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Doctype, PreformattedString, Script, Stylesheet
from bs4.formatter import HTMLFormatter

from core.exceptions import MalformedMarkupError
from core.messages import msg

PARSER = "html.parser"

# 完全なHTML文書かどうか（html要素またはbody要素を含む）
_DOCUMENT_PATTERN = re.compile(r'<(?:html|body)\b', re.IGNORECASE)

# XHTMLとして書かれているか（XML宣言、xmlns属性、自己終了タグ "<br/>"）
_XHTML_PATTERN = re.compile(r'<\?xml\b|\sxmlns(?::\w+)?\s*=|<[A-Za-z][^<>]*/>', re.IGNORECASE)

# 閉じられないまま入力の末尾に達したタグ: "<div>テスト</div"
_UNTERMINATED_TAG_PATTERN = re.compile(r'<[/!?]?[A-Za-z][^<>]*\Z')

# パーサーが文字参照をデコードしない文字列（コメント、doctype、script/style の中身など）
_RAW_STRING_TYPES = (PreformattedString, Script, Stylesheet)

# 出力時にテキスト・属性値を再エスケープしない
# HTMLでは void 要素を "<br>"、XHTMLでは "<br/>" と書く
_HTML_FORMATTER = HTMLFormatter(entity_substitution=None, void_element_close_prefix=None)
_XHTML_FORMATTER = HTMLFormatter(entity_substitution=None, void_element_close_prefix="/")


class _Doctype(Doctype):
    """末尾に改行を付けずに出力する doctype。"""
    SUFFIX = ">"


class _KeywordDoctype(_Doctype):
    """"doctype" キーワードを含めて保持している doctype（"<!doctype html>" など）。"""
    PREFIX = "<!"


# =============================================================================
# 入力判定
# =============================================================================

def is_document(markup: str) -> bool:
    """html要素またはbody要素を含む完全なHTML文書かどうか。"""
    return _DOCUMENT_PATTERN.search(markup) is not None


def is_xhtml(markup: str) -> bool:
    """XHTMLの書式（void 要素を "/>" で閉じる）で出力すべき入力かどうか。"""
    return _XHTML_PATTERN.search(markup) is not None


def check_terminated(markup: str) -> None:
    """
    入力が閉じられていないタグで終わっていないかをチェックする。

    Raises
    ------
    MalformedMarkupError
        末尾のタグが ``>`` で閉じられていない場合。
    """
    match = _UNTERMINATED_TAG_PATTERN.search(markup)
    if match:
        raise MalformedMarkupError(msg("exception_malformed_markup", tail=match.group(0)), markup)


# =============================================================================
# 解析・シリアライズ
# =============================================================================

def _escape_ampersands(markup: str) -> str:
    """すべての & を &amp; にして、パーサーに文字参照をデコードさせない。"""
    return markup.replace("&", "&amp;")


def _restore_raw_strings(soup: BeautifulSoup) -> None:
    """
    パーサーがデコードしない文字列について、_escape_ampersands の変更を元に戻す。

    doctype は元の表記どおりに出力される型に置き換える。
    """
    for node in list(soup.descendants):
        if not isinstance(node, _RAW_STRING_TYPES):
            continue
        restored = node.replace("&amp;", "&")
        string_type = type(node)
        if isinstance(node, Doctype):
            string_type = _KeywordDoctype if restored[:8].lower() == "doctype " else _Doctype
        if restored != node or string_type is not type(node):
            node.replace_with(string_type(restored))


def _parse(markup: str) -> BeautifulSoup:
    # class属性はリストに分割せず、元の文字列のまま扱う
    soup = BeautifulSoup(_escape_ampersands(markup), PARSER, multi_valued_attributes=None)
    _restore_raw_strings(soup)
    return soup


def parse_markup(markup: str) -> BeautifulSoup:
    """
    HTML文書またはHTML断片・テキストを解析する。

    Parameters
    ----------
    markup : str
        HTML文書、HTML断片、またはタグを含まないテキスト。

    Returns
    -------
    BeautifulSoup
        解析結果のルート。テキストノード・属性値には
        文字参照や & が元の表記のまま残る。

    Raises
    ------
    MalformedMarkupError
        入力が閉じられていないタグで終わっている場合。
    """
    check_terminated(markup)
    return _parse(markup)


def parse_fragment(markup: str) -> list[Tag | NavigableString]:
    """
    変換エンジンが生成したマークアップ断片を解析し、親から切り離したノード列を返す。
    """
    soup = _parse(markup)
    return [node.extract() for node in list(soup.contents)]


def find_body(soup: BeautifulSoup) -> Tag | None:
    """body要素を返す。存在しない場合は None。"""
    return soup.body


def find_content_root(soup: BeautifulSoup) -> Tag | None:
    """
    文書の本文を含む要素を返す。

    html.parser は省略された body タグを補わないため、
    body要素がない文書では html要素を返す。どちらもない場合は None。
    """
    return soup.body or soup.html


def _formatter(xhtml: bool) -> HTMLFormatter:
    return _XHTML_FORMATTER if xhtml else _HTML_FORMATTER


def serialize(node: Tag, xhtml: bool = False) -> str:
    """
    ノード（木全体）をマークアップに戻す。テキストは再エスケープしない。

    xhtml=True の場合は void 要素を "<br/>" の形で出力する。
    """
    return node.decode(formatter=_formatter(xhtml))


def serialize_contents(node: Tag, xhtml: bool = False, skip_tags: frozenset[str] = frozenset()) -> str:
    """
    ノードの子要素のみをマークアップに戻す。テキストは再エスケープしない。

    skip_tags に含まれるタグ名の子要素は出力しない。
    """
    formatter = _formatter(xhtml)
    if not skip_tags:
        return node.decode_contents(formatter=formatter)

    parts: list[str] = []
    for child in node.contents:
        if tag_name(child) in skip_tags:
            continue
        if isinstance(child, Tag):
            parts.append(child.decode(formatter=formatter))
        else:
            parts.append(child.output_ready(formatter))
    return "".join(parts)


# =============================================================================
# ノード操作
# =============================================================================

def is_text_node(node: object) -> bool:
    """変換対象になり得るテキストノードかどうか。"""
    return isinstance(node, NavigableString) and not isinstance(node, _RAW_STRING_TYPES)


def is_element_node(node: object) -> bool:
    """要素ノードかどうか。"""
    return isinstance(node, Tag)


def tag_name(node: object) -> str | None:
    """要素のタグ名（小文字）。要素でない場合は None。"""
    if isinstance(node, Tag) and node.name:
        return node.name.lower()
    return None


def class_attribute(node: object) -> str | None:
    """要素のclass属性の値。要素でない場合や属性がない場合は None。"""
    if not isinstance(node, Tag):
        return None
    value = node.get("class")
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return value


def children(node: Tag) -> list[Tag | NavigableString]:
    """子ノードのスナップショット（置換しても走査位置がずれない）。"""
    return list(node.contents)


def replace_node(node: Tag | NavigableString, new_nodes: list[Tag | NavigableString]) -> None:
    """ノードを new_nodes（0個以上）で置き換える。兄弟ノードの順序は保たれる。"""
    if new_nodes:
        node.replace_with(*new_nodes)
    else:
        node.extract()
