"""
テキスト処理モジュール。

縦中横・文字の向きの変換ルール、文字参照・URLの保護、
XHTML木の走査、変換ファサードを提供する。
"""
from text.common import (
    CHAR_REF_PATTERN,
    LINK_PATTERN,
    EMPHASIS_MARK_PATTERN,
    SIDEWAYS_PATTERN,
    UPRIGHT_PATTERN,
    digit_run_pattern,
    wrap_span,
)
from text.masking import (
    Span,
    SpanKind,
    MaskedText,
    mask_text,
    unmask,
)
from text.tcy import apply_tcy
from text.orientation import apply_orientation
from text.processing import TextProcessor
from text.xhtml import XhtmlWalker, is_excluded_element, is_metadata_element, should_skip
from text.transformer import TategakiTransformer, transform
from text.stylesheet import CSS_CONTENT, write_css_file

__all__ = [
    # common
    "CHAR_REF_PATTERN",
    "LINK_PATTERN",
    "EMPHASIS_MARK_PATTERN",
    "SIDEWAYS_PATTERN",
    "UPRIGHT_PATTERN",
    "digit_run_pattern",
    "wrap_span",
    # masking
    "Span",
    "SpanKind",
    "MaskedText",
    "mask_text",
    "unmask",
    # rules
    "apply_tcy",
    "apply_orientation",
    # processing
    "TextProcessor",
    # xhtml
    "XhtmlWalker",
    "is_excluded_element",
    "is_metadata_element",
    "should_skip",
    # transformer
    "TategakiTransformer",
    "transform",
    # stylesheet
    "CSS_CONTENT",
    "write_css_file",
]
