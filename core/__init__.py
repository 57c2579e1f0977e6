"""
コアモジュール。

共通の例外、ロガー、設定、UIメッセージを提供する。
"""
from core.exceptions import (
    TategakiError,
    FileNotFoundError_,
    MalformedMarkupError,
    InvalidConfigError,
    NoContentError,
)
from core.logger import (
    debug, info, warning, error, success, section, separator, progress, progress_done,
    set_log_level, get_logger, LogLevel
)
from core.config import (
    DEFAULT_TCY_DIGIT,
    DEFAULT_AUTO_TEXT_ORIENTATION,
    EXCLUDE_TAGS,
    EXCLUDE_CLASSES,
    TcyConfig,
    resolve_config,
)
from core.messages import msg, set_ui_language, get_ui_language

__all__ = [
    # exceptions
    "TategakiError", "FileNotFoundError_", "MalformedMarkupError",
    "InvalidConfigError", "NoContentError",
    # logger
    "debug", "info", "warning", "error", "success", "section", "separator",
    "progress", "progress_done", "set_log_level", "get_logger", "LogLevel",
    # config
    "DEFAULT_TCY_DIGIT", "DEFAULT_AUTO_TEXT_ORIENTATION",
    "EXCLUDE_TAGS", "EXCLUDE_CLASSES", "TcyConfig", "resolve_config",
    # messages
    "msg", "set_ui_language", "get_ui_language",
]
