"""
入力パースモジュール。

HTML文書・断片の解析とシリアライズ、ノード操作を提供する。
"""
from parsers.html_tree import (
    PARSER,
    is_document,
    is_xhtml,
    check_terminated,
    parse_markup,
    parse_fragment,
    find_body,
    find_content_root,
    serialize,
    serialize_contents,
    is_text_node,
    is_element_node,
    tag_name,
    class_attribute,
    children,
    replace_node,
)

__all__ = [
    "PARSER",
    "is_document",
    "is_xhtml",
    "check_terminated",
    "parse_markup",
    "parse_fragment",
    "find_body",
    "find_content_root",
    "serialize",
    "serialize_contents",
    "is_text_node",
    "is_element_node",
    "tag_name",
    "class_attribute",
    "children",
    "replace_node",
]
