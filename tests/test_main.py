"""
ファイル・フォルダ処理（main）のテスト。
"""
from pathlib import Path

import pytest

import main
from core.config import TcyConfig
from core.exceptions import FileNotFoundError_, NoContentError, TategakiError
from main import get_output_path, natural_sort_key, process_file, process_folder


class TestUtilities:
    """ユーティリティ関数のテスト。"""

    def test_natural_sort_key(self):
        paths = [Path("ch10.html"), Path("ch2.html"), Path("ch1.html")]
        assert [p.name for p in sorted(paths, key=natural_sort_key)] == [
            "ch1.html", "ch2.html", "ch10.html",
        ]

    def test_get_output_path(self):
        assert get_output_path(Path("/books/chapter1.xhtml")) == Path("/books/chapter1_tategaki.xhtml")


class TestProcessFile:
    """process_file のテスト。"""

    def test_transforms_file(self, sample_html_file):
        output_path = process_file(sample_html_file)
        assert output_path == sample_html_file.parent / "chapter1_tategaki.html"
        content = output_path.read_text(encoding="utf-8")
        assert '<p>2025年<span class="tcy">12</span>月<span class="tcy">!!</span></p>' in content
        assert "<title>第1章</title>" in content
        # 入力ファイルは変更しない
        assert "span" not in sample_html_file.read_text(encoding="utf-8")

    def test_config(self, sample_html_file):
        output_path = process_file(sample_html_file, TcyConfig(tcy_digit=4))
        content = output_path.read_text(encoding="utf-8")
        assert '<span class="tcy">2025</span>' in content

    def test_write_css(self, sample_html_file):
        process_file(sample_html_file, write_css=True)
        assert (sample_html_file.parent / "tategaki.css").exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError_):
            process_file(tmp_path / "missing.html")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("12", encoding="utf-8")
        with pytest.raises(TategakiError):
            process_file(path)


class TestProcessFolder:
    """process_folder のテスト。"""

    def test_natural_order_and_skips_outputs(self, tmp_path):
        for name in ("ch10.html", "ch2.xhtml", "ch1.htm", "ch1_tategaki.htm", "readme.txt"):
            (tmp_path / name).write_text("<p>12</p>", encoding="utf-8")

        outputs = process_folder(tmp_path)

        assert [p.name for p in outputs] == [
            "ch1_tategaki.htm", "ch2_tategaki.xhtml", "ch10_tategaki.html",
        ]
        assert outputs[0].read_text(encoding="utf-8") == '<p><span class="tcy">12</span></p>'

    def test_empty_folder(self, tmp_path):
        with pytest.raises(NoContentError):
            process_folder(tmp_path)

    def test_missing_folder(self, tmp_path):
        with pytest.raises(FileNotFoundError_):
            process_folder(tmp_path / "missing")


class TestMain:
    """対話式メイン処理のテスト。"""

    def test_single_file_with_defaults(self, sample_html_file, monkeypatch):
        # 言語, 桁数, 向き, 詳細ログ, CSS, 処理モード, パス
        answers = iter(["1", "", "", "", "1", "1", f'"{sample_html_file}"'])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        main.main()

        assert (sample_html_file.parent / "chapter1_tategaki.html").exists()
        assert (sample_html_file.parent / "tategaki.css").exists()

    def test_missing_path_aborts(self, tmp_path, monkeypatch, capsys):
        answers = iter(["1", "3", "2", "2", "2", "2", str(tmp_path / "missing")])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        main.main()

        assert "処理を中断しました" in capsys.readouterr().out
