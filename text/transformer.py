"""
縦書き組版補正の変換ファサードモジュール。

HTML文書（またはテキスト）全体に縦中横・文字の向きの変換を適用します。

Examples
--------
>>> from text.transformer import transform
>>> transform("12ああああ34ああ457あああ89", {"tcyDigit": 3})
'<span class="tcy">12</span>ああああ<span class="tcy">34</span>ああ<span class="tcy">457</span>あああ<span class="tcy">89</span>'
"""
import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

from core import logger
from core.config import METADATA_TAGS, TcyConfig, resolve_config
from core.exceptions import MalformedMarkupError
from core.messages import msg
from parsers.html_tree import (
    find_content_root,
    is_document,
    is_xhtml,
    parse_markup,
    serialize,
    serialize_contents,
)
from text.processing import TextProcessor
from text.xhtml import XhtmlWalker


class TategakiTransformer:
    """HTMLに縦書き用の組版補正を適用するクラス。

    Parameters
    ----------
    config : TcyConfig | dict[str, Any] | None
        変換設定。辞書の場合は ``tcyDigit``/``tcy_digit``、
        ``autoTextOrientation``/``auto_text_orientation`` を受け付ける。
    log : logging.Logger | None
        デバッグ出力先。None の場合はアプリケーションロガーの子ロガー。
    verbose : bool
        True の場合、処理内容をデバッグレベルで出力する。
    """

    def __init__(
        self,
        config: TcyConfig | dict[str, Any] | None = None,
        log: logging.Logger | None = None,
        verbose: bool = False,
    ):
        self.config = resolve_config(config)
        self.log = log or logger.get_logger("transformer")
        self.verbose = verbose
        self.processor = TextProcessor(self.config, log=self.log, verbose=verbose)
        self.walker = XhtmlWalker(self.processor, log=self.log, verbose=verbose)

    def _debug(self, key: str, **kwargs) -> None:
        if self.verbose:
            self.log.debug(msg(key, **kwargs))

    def _walk(self, html: str) -> tuple[BeautifulSoup, Tag] | None:
        """
        入力を解析して変換対象の部分木を処理する。

        Returns
        -------
        tuple[BeautifulSoup, Tag] | None
            (解析結果のルート, 処理した部分木のルート)。
            不正なマークアップ、または本文となる要素が得られない文書の場合は None。

        Notes
        -----
        body タグを省略した文書（"<html><p>12</p></html>"）は html要素を起点に処理する。
        head要素の中は走査しない。
        """
        try:
            soup = parse_markup(html)
        except MalformedMarkupError as e:
            if self.verbose:
                self.log.warning(msg("debug_fallback_malformed", error=str(e)))
            return None

        if is_document(html):
            self._debug("debug_mode_document")
            root = find_content_root(soup)
            if root is None:
                self._debug("debug_fallback_no_body")
                return None
        else:
            # 解析結果のルートを、断片を包む一時的なコンテナとして扱う
            self._debug("debug_mode_fragment")
            root = soup

        self.walker.process_nodes(root)
        return soup, root

    def transform(self, html: str) -> str:
        """
        HTMLを変換し、変換後のマークアップを返す。

        Parameters
        ----------
        html : str
            HTML文書、HTML断片、またはテキスト。

        Returns
        -------
        str
            - HTML文書の場合: body要素の中身（body タグがなければ head以外の html要素の中身）
            - 断片・テキストの場合: 変換後の断片
            - 不正なマークアップ、または本文となる要素が得られない文書の場合: 入力そのもの
        """
        self._debug("debug_input", html=html)
        self._debug(
            "debug_options",
            tcy_digit=self.config.tcy_digit,
            orientation=self.config.auto_text_orientation,
        )

        if not html:
            return html

        walked = self._walk(html)
        if walked is None:
            return html

        skip_tags = METADATA_TAGS if is_document(html) else frozenset()
        result = serialize_contents(walked[1], xhtml=is_xhtml(html), skip_tags=skip_tags)
        self._debug("debug_result", html=result)
        return result

    def transform_document(self, html: str) -> str:
        """
        HTML文書全体を変換し、doctype・head を含む文書全体を返す。

        ファイル単位の変換に使用する。変換対象は transform() と同じく
        body要素（断片の場合は全体）で、フォールバック条件も同じ。
        void 要素は入力の書式（HTMLなら "<br>"、XHTMLなら "<br/>"）で出力する。
        """
        self._debug("debug_input", html=html)

        if not html:
            return html

        walked = self._walk(html)
        if walked is None:
            return html

        result = serialize(walked[0], xhtml=is_xhtml(html))
        self._debug("debug_result", html=result)
        return result

    @staticmethod
    def transform_text(html: str, config: TcyConfig | dict[str, Any] | None = None) -> str:
        """インスタンスを生成せずに変換する。"""
        return TategakiTransformer(config).transform(html)


def transform(html: str, config: TcyConfig | dict[str, Any] | None = None) -> str:
    """
    HTMLに縦中横・文字の向きの変換を適用する。

    TategakiTransformer(config).transform(html) と同じ。
    """
    return TategakiTransformer.transform_text(html, config)
