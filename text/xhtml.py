"""
XHTML木構造の走査モジュール。

文書木を深さ優先で走査し、除外対象でないテキストノードだけに
テキスト変換パイプラインを適用して、結果のマークアップで置き換えます。
"""
import logging

from core import logger
from core.config import EXCLUDE_CLASSES, EXCLUDE_TAGS, METADATA_TAGS
from core.messages import msg
from parsers.html_tree import (
    children,
    class_attribute,
    is_element_node,
    is_text_node,
    parse_fragment,
    replace_node,
    tag_name,
)
from text.processing import TextProcessor


def is_excluded_element(node: object) -> bool:
    """
    要素自体が除外条件に該当するかどうか。

    除外条件:
    - タグ名が code, pre, math, svg のいずれか
    - class属性に tcy, upright, sideways のいずれかを含む（部分一致。"tcytext" も該当）
    """
    if not is_element_node(node):
        return False
    if tag_name(node) in EXCLUDE_TAGS:
        return True
    class_names = class_attribute(node)
    return bool(class_names) and any(cls in class_names for cls in EXCLUDE_CLASSES)


def is_metadata_element(node: object) -> bool:
    """head要素など、本文ではない要素かどうか。"""
    return tag_name(node) in METADATA_TAGS


def should_skip(node: object) -> bool:
    """
    ノード自身またはいずれかの祖先が除外条件に該当するかどうか。

    head要素の中も本文ではないため対象外とする。
    """
    current = node
    while current is not None:
        if is_excluded_element(current) or is_metadata_element(current):
            return True
        current = current.parent
    return False


class XhtmlWalker:
    """文書木を走査してテキストノードを変換するクラス。"""

    def __init__(
        self,
        processor: TextProcessor,
        log: logging.Logger | None = None,
        verbose: bool = False,
    ):
        self.processor = processor
        self.log = log or logger.get_logger("walker")
        self.verbose = verbose

    def _debug(self, key: str, **kwargs) -> None:
        if self.verbose:
            self.log.debug(msg(key, **kwargs))

    def process_nodes(self, node) -> None:
        """
        node の子孫を再帰的に処理する（木をその場で書き換える）。

        Parameters
        ----------
        node : bs4.Tag
            走査の起点（body要素、または断片を包むルート）。

        Notes
        -----
        子ノードの一覧は走査前にスナップショットを取るため、
        テキストノードを複数ノードに置き換えても後続の兄弟の走査には影響しない。
        置き換えで挿入されたノードは再走査しない。
        """
        for child in children(node):
            if should_skip(child):
                self._debug("debug_skip_node", node=str(child))
                continue

            if is_text_node(child):
                self._process_text_node(child)
            elif is_element_node(child):
                self._debug("debug_tag_node", name=tag_name(child))
                self.process_nodes(child)

    def _process_text_node(self, text_node) -> None:
        original = str(text_node)
        self._debug("debug_text_node", text=original)

        transformed = self.processor.process_text(original)
        if transformed == original:
            return
        replace_node(text_node, parse_fragment(transformed))
