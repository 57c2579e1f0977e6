"""
Pytest の共通設定とフィクスチャ。
"""
import logging
import sys
from pathlib import Path

import pytest

# プロジェクトルートをパスに追加
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import TcyConfig  # noqa: E402
from core.messages import get_ui_language, set_ui_language  # noqa: E402


SAMPLE_DOCUMENT = (
    '<!DOCTYPE html>\n'
    '<html lang="ja">\n'
    '<head><meta charset="utf-8"/><title>第1章</title></head>\n'
    '<body>\n'
    '<p>2025年12月!!</p>\n'
    '<pre>12</pre>\n'
    '</body>\n'
    '</html>\n'
)


@pytest.fixture(autouse=True)
def japanese_ui():
    """メッセージを日本語に固定する（OSロケールに依存させない）。"""
    previous = get_ui_language()
    set_ui_language("ja")
    yield
    set_ui_language(previous)


@pytest.fixture
def default_config() -> TcyConfig:
    """デフォルト設定。"""
    return TcyConfig()


@pytest.fixture
def test_log() -> logging.Logger:
    """テスト用のロガー（デバッグ出力の検証に使用）。"""
    return logging.getLogger("tests.tategaki")


@pytest.fixture
def sample_document() -> str:
    """変換対象のHTML文書。"""
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_html_file(tmp_path: Path) -> Path:
    """変換対象のHTMLファイル。"""
    path = tmp_path / "chapter1.html"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
