"""
XHTML木構造の走査（除外判定・XhtmlWalker）のテスト。
"""
import logging

import pytest

from parsers.html_tree import parse_markup, serialize_contents
from text.processing import TextProcessor
from text.xhtml import XhtmlWalker, is_excluded_element, is_metadata_element, should_skip


class TestExclusion:
    """除外判定のテスト。"""

    @pytest.mark.parametrize("markup", [
        "<code>12</code>",
        "<pre>12</pre>",
        "<math><mn>12</mn></math>",
        "<svg><text>12</text></svg>",
        '<span class="tcy">12</span>',
        '<span class="upright">α</span>',
        '<span class="sideways">≠</span>',
        '<p class="note tcytext">12</p>',
    ])
    def test_excluded(self, markup):
        soup = parse_markup(markup)
        assert is_excluded_element(soup.contents[0])

    @pytest.mark.parametrize("markup", [
        "<p>12</p>",
        '<p class="note">12</p>',
        '<p class="">12</p>',
        '<p id="tcy">12</p>',
    ])
    def test_not_excluded(self, markup):
        soup = parse_markup(markup)
        assert not is_excluded_element(soup.contents[0])

    def test_text_node_is_not_excluded_itself(self):
        soup = parse_markup("<code>12</code>")
        assert not is_excluded_element(soup.code.contents[0])

    def test_should_skip_checks_ancestors(self):
        """除外要素の子孫はどの深さでもスキップ対象。"""
        soup = parse_markup('<div class="tcy"><p><b>12</b></p></div><p>34</p>')
        assert should_skip(soup.b.contents[0])
        assert not should_skip(soup.find_all("p")[1].contents[0])

    def test_head_is_skipped(self):
        """head要素の中は本文ではないため変換しない。"""
        soup = parse_markup("<html><head><title>12</title></head><p>34</p></html>")
        assert is_metadata_element(soup.head)
        assert should_skip(soup.title.contents[0])
        assert not should_skip(soup.p.contents[0])


class TestXhtmlWalker:
    """XhtmlWalker.process_nodes のテスト。"""

    def walk(self, markup: str) -> str:
        soup = parse_markup(markup)
        XhtmlWalker(TextProcessor()).process_nodes(soup)
        return serialize_contents(soup)

    def test_nested_elements(self):
        assert self.walk("<div><p>12<b>34</b>56</p></div>") == (
            '<div><p><span class="tcy">12</span><b><span class="tcy">34</span></b>'
            '<span class="tcy">56</span></p></div>'
        )

    def test_excluded_subtree_at_depth(self):
        assert self.walk("<p>12<code><b>34</b></code></p>") == (
            '<p><span class="tcy">12</span><code><b>34</b></code></p>'
        )

    def test_existing_marker_is_not_rewrapped(self):
        markup = '<p><span class="tcy">12</span></p>'
        assert self.walk(markup) == markup

    def test_unchanged_text_node_is_kept(self):
        soup = parse_markup("<p>ああ</p>")
        original = soup.p.contents[0]
        XhtmlWalker(TextProcessor()).process_nodes(soup)
        assert soup.p.contents[0] is original

    def test_siblings_after_replacement_are_processed(self):
        """置き換え後も後続の兄弟ノードを処理する。"""
        assert self.walk("<p>12</p>34<p>56</p>") == (
            '<p><span class="tcy">12</span></p><span class="tcy">34</span>'
            '<p><span class="tcy">56</span></p>'
        )

    def test_fragment_head_is_untouched(self):
        markup = "<head><title>12</title></head>"
        assert self.walk(markup) == markup

    def test_comments_are_untouched(self):
        markup = "<p><!-- 12 -->ああ</p>"
        assert self.walk(markup) == markup

    def test_verbose_logs_skipped_nodes(self, caplog, test_log):
        caplog.set_level(logging.DEBUG, logger=test_log.name)
        soup = parse_markup("<p>12</p><pre>34</pre>")
        walker = XhtmlWalker(TextProcessor(log=test_log), log=test_log, verbose=True)
        walker.process_nodes(soup)
        assert "タグを処理: p" in caplog.text
        assert "除外ノードをスキップ: <pre>34</pre>" in caplog.text
        assert "テキストノードを処理: 12" in caplog.text
