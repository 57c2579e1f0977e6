"""
縦中横・文字の向き用スタイルシートモジュール。

変換で挿入されるspan要素（tcy, sideways, upright）に対応するCSSを提供します。
"""
from pathlib import Path

from core.config import CSS_FILENAME, SIDEWAYS_CLASS, TCY_CLASS, UPRIGHT_CLASS


CSS_CONTENT = f"""
/* 縦中横 */
.{TCY_CLASS} {{
    -webkit-text-combine: horizontal;
    -epub-text-combine: horizontal;
    text-combine-upright: all;
}}
/* 横倒し */
.{SIDEWAYS_CLASS} {{
    -webkit-text-orientation: sideways;
    -epub-text-orientation: sideways;
    text-orientation: sideways;
}}
/* 正立 */
.{UPRIGHT_CLASS} {{
    -webkit-text-orientation: upright;
    -epub-text-orientation: upright;
    text-orientation: upright;
}}
"""


def write_css_file(dest_dir: Path) -> Path:
    """
    CSSファイルを出力する。

    Parameters
    ----------
    dest_dir : Path
        出力先ディレクトリ。tategaki.css として出力されます。

    Returns
    -------
    Path
        出力したCSSファイルのパス。
    """
    css_path = Path(dest_dir) / CSS_FILENAME
    with open(css_path, "w", encoding="utf-8") as f:
        f.write(CSS_CONTENT)
    return css_path
