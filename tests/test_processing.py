"""
テキスト変換パイプライン（TextProcessor）のテスト。
"""
import logging

from core.config import TcyConfig
from text.processing import TextProcessor


class TestTextProcessor:
    """TextProcessor.process_text のテスト。"""

    def test_default_config(self, default_config):
        processor = TextProcessor(default_config)
        assert processor.process_text("12ああ≠α!!") == (
            '<span class="tcy">12</span>ああ'
            '<span class="sideways">≠</span>'
            '<span class="upright">α</span>'
            '<span class="tcy">!!</span>'
        )

    def test_orientation_disabled(self):
        processor = TextProcessor(TcyConfig(auto_text_orientation=False))
        assert processor.process_text("12≠α") == '<span class="tcy">12</span>≠α'

    def test_reference_digits_are_protected(self):
        """文字参照内の数字は変換しない。"""
        processor = TextProcessor(TcyConfig(tcy_digit=5))
        assert processor.process_text("&#12354;") == "&#12354;"

    def test_hex_references_around_digits(self):
        processor = TextProcessor()
        assert processor.process_text("&#x3042;&#x3044;12&#x3046;&#x3048;34") == (
            '&#x3042;&#x3044;<span class="tcy">12</span>&#x3046;&#x3048;<span class="tcy">34</span>'
        )

    def test_email_is_protected(self):
        processor = TextProcessor()
        assert processor.process_text("連絡先はinfo@example21.comです。") == (
            "連絡先はinfo@example21.comです。"
        )

    def test_url_is_protected(self):
        processor = TextProcessor()
        assert processor.process_text("https://example.com/12 を参照!!") == (
            'https://example.com/12 を参照<span class="tcy">!!</span>'
        )

    def test_reference_letters_are_not_reoriented(self):
        """名前付き文字参照はギリシャ文字として扱わない。"""
        processor = TextProcessor()
        assert processor.process_text("&alpha;α") == '&alpha;<span class="upright">α</span>'

    def test_stateless_between_calls(self):
        """呼び出し間で状態を持たない。"""
        processor = TextProcessor()
        first = processor.process_text("12 a@example.com")
        second = processor.process_text("12 a@example.com")
        assert first == second == '<span class="tcy">12</span> a@example.com'

    def test_verbose_logs_result(self, caplog, test_log):
        caplog.set_level(logging.DEBUG, logger=test_log.name)
        TextProcessor(log=test_log, verbose=True).process_text("12")
        assert '変換後テキスト: <span class="tcy">12</span>' in caplog.text
