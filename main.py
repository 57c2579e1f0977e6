"""
縦書き組版補正ツールのメインモジュール。

HTML/XHTMLファイルの本文に縦中横・文字の向きの変換を適用し、
元のファイル名末尾に「_tategaki」を付加したファイルとして保存する。
"""
import re
from datetime import datetime
from enum import Enum
from pathlib import Path

from core import logger
from core.messages import msg, set_ui_language
from core.config import (
    CSS_FILENAME,
    DEFAULT_TCY_DIGIT,
    INPUT_SUFFIXES,
    OUTPUT_SUFFIX,
    TcyConfig,
)
from core.exceptions import FileNotFoundError_, NoContentError, TategakiError
from text.stylesheet import write_css_file
from text.transformer import TategakiTransformer


# =============================================================================
# 列挙型
# =============================================================================

class ProcessingMode(Enum):
    """処理モードを表す列挙型。"""
    SINGLE_FILE = "single"
    FOLDER = "folder"


# =============================================================================
# ユーティリティ関数
# =============================================================================

def natural_sort_key(path: Path) -> list:
    """
    自然順ソートのためのキー関数。

    ファイル名内の数字を数値として扱い、人間が期待する順序でソートする。
    例: file1, file2, file10 → file1, file2, file10 (文字列だと file1, file10, file2)
    """
    def convert(text: str):
        return int(text) if text.isdigit() else text.lower()
    return [convert(c) for c in re.split(r'(\d+)', path.name)]


def get_output_path(source_path: Path) -> Path:
    """出力ファイルのパス（元のファイル名末尾に「_tategaki」を付加）を返す。"""
    return source_path.parent / f"{source_path.stem}{OUTPUT_SUFFIX}{source_path.suffix}"


def _is_output_file(path: Path) -> bool:
    """このツールが出力したファイルかどうか（フォルダ処理での再変換を避ける）。"""
    return path.stem.endswith(OUTPUT_SUFFIX)


def _log_processing_start(start_time: datetime, config: TcyConfig) -> None:
    """処理開始ログを出力する。"""
    logger.info(msg("processing_start", time=start_time.strftime('%Y-%m-%d %H:%M:%S')))
    logger.info(msg(
        "config_summary",
        tcy_digit=config.tcy_digit,
        orientation=config.auto_text_orientation,
    ))


def _log_processing_end(start_time: datetime) -> None:
    """処理終了ログを出力する。"""
    end_time = datetime.now()
    logger.separator("=", 50)
    logger.info(msg("processing_end", time=end_time.strftime('%Y-%m-%d %H:%M:%S')))
    logger.info(msg("elapsed_time", time=end_time - start_time))


# =============================================================================
# バリデーション関数
# =============================================================================

def _validate_file_exists(file_path: Path) -> None:
    """ファイルの存在をチェックする。"""
    if not file_path.exists() or not file_path.is_file():
        raise FileNotFoundError_(str(file_path), msg("file_type_input_html"))


def _validate_folder_exists(folder_path: Path) -> None:
    """フォルダの存在をチェックする。"""
    if not folder_path.exists() or not folder_path.is_dir():
        raise FileNotFoundError_(str(folder_path), msg("file_type_input_folder"))


def _validate_suffix(file_path: Path) -> None:
    """対応している拡張子かをチェックする。"""
    if file_path.suffix.lower() not in INPUT_SUFFIXES:
        raise TategakiError(msg("unsupported_suffix", name=file_path.name, ext="/".join(INPUT_SUFFIXES)))


# =============================================================================
# 処理関数
# =============================================================================

def _transform_file(source_path: Path, transformer: TategakiTransformer) -> Path:
    """1ファイルを変換して保存し、出力先のパスを返す。"""
    logger.info(msg("processing_file", name=source_path.name))

    with open(source_path, 'r', encoding='utf-8') as f:
        content = f.read()

    output_path = get_output_path(source_path)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(transformer.transform_document(content))

    logger.success(msg("output_file", path=output_path))
    return output_path


def _write_stylesheet(dest_dir: Path) -> Path:
    css_path = write_css_file(dest_dir)
    logger.info(msg("css_saved", path=css_path))
    return css_path


def process_file(
    source_file: str | Path,
    config: TcyConfig | None = None,
    verbose: bool = False,
    write_css: bool = False,
) -> Path:
    """
    単一のHTML/XHTMLファイルを変換する。

    Parameters
    ----------
    source_file : str | Path
        入力ファイルのパス（.html/.htm/.xhtml）。
    config : TcyConfig | None
        変換設定。None の場合はデフォルト設定。
    verbose : bool
        True の場合、変換処理の詳細をデバッグ出力する。
    write_css : bool
        True の場合、入力ファイルと同じフォルダに tategaki.css を出力する。

    Returns
    -------
    Path
        出力ファイルのパス。

    Raises
    ------
    FileNotFoundError_
        入力ファイルが存在しない場合。
    TategakiError
        対応していない拡張子の場合。
    """
    source_path = Path(source_file)
    config = config or TcyConfig()

    _validate_file_exists(source_path)
    _validate_suffix(source_path)

    start_time = datetime.now()
    _log_processing_start(start_time, config)

    transformer = TategakiTransformer(config, verbose=verbose)
    output_path = _transform_file(source_path, transformer)

    if write_css:
        _write_stylesheet(source_path.parent)

    _log_processing_end(start_time)
    return output_path


def process_folder(
    source_folder: str | Path,
    config: TcyConfig | None = None,
    verbose: bool = False,
    write_css: bool = False,
) -> list[Path]:
    """
    フォルダ内の複数HTML/XHTMLファイルを自然順に変換する。

    このツールの出力ファイル（*_tategaki.*）は対象外。

    Returns
    -------
    list[Path]
        出力ファイルのパスのリスト（処理順）。

    Raises
    ------
    FileNotFoundError_
        フォルダが存在しない場合。
    NoContentError
        対象ファイルが1つもない場合。
    """
    folder_path = Path(source_folder)
    config = config or TcyConfig()

    _validate_folder_exists(folder_path)

    source_files = sorted(
        (p for p in folder_path.iterdir()
         if p.is_file() and p.suffix.lower() in INPUT_SUFFIXES and not _is_output_file(p)),
        key=natural_sort_key,
    )
    if not source_files:
        raise NoContentError(msg("no_files_in_folder", folder=folder_path, ext="/".join(INPUT_SUFFIXES)))

    start_time = datetime.now()
    _log_processing_start(start_time, config)
    logger.info(msg("file_count", count=len(source_files)))

    transformer = TategakiTransformer(config, verbose=verbose)
    output_paths: list[Path] = []
    for i, src_file in enumerate(source_files, 1):
        logger.separator("=", 50)
        logger.progress(i, len(source_files), src_file.name)
        logger.progress_done()
        output_paths.append(_transform_file(src_file, transformer))

    if write_css:
        _write_stylesheet(folder_path)

    _log_processing_end(start_time)
    return output_paths


# =============================================================================
# UI入力ヘルパー関数
# =============================================================================

def _prompt_choice(
    prompt: str,
    options: list[str],
    default: int = 1
) -> int:
    """
    選択肢を表示してユーザー入力を取得する。

    Parameters
    ----------
    prompt : str
        質問文
    options : list[str]
        選択肢のリスト
    default : int
        デフォルト値（1始まり）

    Returns
    -------
    int
        選択されたインデックス（1始まり）
    """
    print(prompt)
    for i, option in enumerate(options, 1):
        print(f"  {i}: {option}")
    logger.separator("-")

    choice = input(msg("choice_prompt", n=len(options), d=default)).strip()

    if not choice:
        return default

    try:
        value = int(choice)
        if 1 <= value <= len(options):
            return value
        print(msg("invalid_value", n=len(options), d=default))
    except ValueError:
        print(msg("invalid_input", n=len(options), d=default))

    return default


def _prompt_yes_no(prompt: str, default_yes: bool) -> bool:
    """はい/いいえの選択を行う。"""
    options = [msg("opt_yes"), msg("opt_no")]
    choice = _prompt_choice(prompt, options, default=1 if default_yes else 2)
    return choice == 1


def _prompt_language() -> None:
    """UI言語選択を行う。"""
    options = [msg("opt_lang_ja"), msg("opt_lang_en")]
    choice = _prompt_choice(msg("select_language"), options, default=1)
    set_ui_language("ja" if choice == 1 else "en")


def _prompt_tcy_digit() -> int:
    """縦中横の最大桁数の入力を行う。"""
    value = input(msg("tcy_digit_prompt", d=DEFAULT_TCY_DIGIT)).strip()
    if not value:
        return DEFAULT_TCY_DIGIT
    try:
        digit = int(value)
        if digit >= 0:
            return digit
    except ValueError:
        pass
    print(msg("invalid_tcy_digit", d=DEFAULT_TCY_DIGIT))
    return DEFAULT_TCY_DIGIT


def _prompt_processing_mode() -> ProcessingMode:
    """処理モード選択を行う。"""
    options = [msg("opt_single"), msg("opt_folder")]
    choice = _prompt_choice(msg("select_processing_mode"), options, default=1)
    return ProcessingMode.SINGLE_FILE if choice == 1 else ProcessingMode.FOLDER


def _prompt_source_path(is_folder: bool) -> str:
    """ソースパス入力を行う。"""
    logger.separator("-")
    if is_folder:
        source = input(msg("prompt_folder_path"))
    else:
        source = input(msg("prompt_file_path", ext="/".join(INPUT_SUFFIXES)))
    # 引用符付き入力への対応: "path" や 'path' をトリム
    return source.strip().strip('"').strip("'")


# =============================================================================
# メイン関数
# =============================================================================

def main() -> None:
    """縦書き組版補正ツールのメイン処理。"""
    logger.separator("=")
    print(msg("tool_title"))
    logger.separator("=")

    # 言語選択
    _prompt_language()
    logger.separator("-")

    # 変換設定
    tcy_digit = _prompt_tcy_digit()
    logger.separator("-")
    auto_text_orientation = _prompt_yes_no(msg("orientation_question"), default_yes=True)
    logger.separator("-")
    verbose = _prompt_yes_no(msg("verbose_question"), default_yes=False)
    if verbose:
        logger.set_log_level(logger.LogLevel.DEBUG)
    logger.separator("-")
    write_css = _prompt_yes_no(msg("css_question", name=CSS_FILENAME), default_yes=False)
    logger.separator("-")

    # 処理モード選択
    processing_mode = _prompt_processing_mode()
    is_folder = processing_mode == ProcessingMode.FOLDER
    source = _prompt_source_path(is_folder)

    try:
        config = TcyConfig(tcy_digit=tcy_digit, auto_text_orientation=auto_text_orientation)
        if is_folder:
            process_folder(source, config, verbose=verbose, write_css=write_css)
        else:
            process_file(source, config, verbose=verbose, write_css=write_css)
    except TategakiError as e:
        logger.error(str(e))
        print(msg("processing_aborted"))


if __name__ == "__main__":
    main()
