"""
縦書き組版補正ツールのロギングモジュール。

ロガーは2系統あります。
- "tategaki" ロガー: 対話式CLI（main.py）の進捗・処理結果・エラーを
  標準出力へメッセージのみの形式で出力する。下のヘルパー関数から使用する。
- "tategaki.<name>" 子ロガー: get_logger(name) で取得し、変換エンジンの
  各コンポーネント（masking, tcy, orientation, processing, walker, transformer）に注入する。
  "[TCY Debug]" 行は verbose=True のときだけ DEBUG レベルで出力され、
  set_log_level(LogLevel.DEBUG) で表示される。

メッセージ本文はすべて core.messages の日本語/英語カタログから取得します。
"""
import io
import logging
import sys
from enum import IntEnum

from core.messages import msg


class LogLevel(IntEnum):
    """ログレベル定義。"""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


# Windows cp932 環境でのUnicodeEncodeError対策
if sys.stdout.encoding and sys.stdout.encoding.lower() != 'utf-8':
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')

# アプリケーション用のロガーを作成
LOGGER_NAME = "tategaki"
_logger = logging.getLogger(LOGGER_NAME)
_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    アプリケーションロガー（または子ロガー）を返す。

    Parameters
    ----------
    name : str | None
        子ロガー名（例: "walker"）。None の場合はアプリケーションロガー自体。

    Returns
    -------
    logging.Logger
        "tategaki" または "tategaki.<name>" のロガー。
    """
    if name is None:
        return _logger
    return _logger.getChild(name)


def set_log_level(level: LogLevel) -> None:
    """ログレベルを設定する。"""
    _logger.setLevel(level)


def debug(message: str) -> None:
    """デバッグメッセージを出力する。"""
    _logger.debug(message)


def info(message: str) -> None:
    """情報メッセージを出力する。"""
    _logger.info(message)


def warning(message: str) -> None:
    """警告メッセージを出力する。"""
    _logger.warning(msg("log_warning", message=message))


def error(message: str) -> None:
    """エラーメッセージを出力する。"""
    _logger.error(f"❌ {message}")


def success(message: str) -> None:
    """成功メッセージを出力する。"""
    _logger.info(f"✅ {msg('log_success', message=message)}")


def section(title: str) -> None:
    """セクション見出しを出力する。"""
    _logger.info("-" * 30)
    _logger.info(f"★{title}")


def separator(char: str = "=", length: int = 60) -> None:
    """区切り線を出力する。"""
    _logger.info(char * length)


def progress(current: int, total: int, message: str = "") -> None:
    """進捗状況を出力する（改行なし）。"""
    print(f"  {msg('log_progress', message=message, current=current, total=total)}", end='\r', flush=True)


def progress_done() -> None:
    """進捗表示の終了（改行を出力）。"""
    print()
