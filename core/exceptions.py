"""
縦書き組版補正処理用のカスタム例外クラス。

処理パイプラインの各段階で発生するエラーを明確に分類し、
適切なエラーハンドリングを可能にします。
"""
from core.messages import msg


class TategakiError(Exception):
    """縦書き組版補正処理の基底例外クラス。"""
    pass


class FileNotFoundError_(TategakiError):
    """必要なファイルが見つからない場合の例外。"""

    def __init__(self, file_path: str, file_type: str = ""):
        self.file_path = file_path
        self.file_type = file_type
        super().__init__(msg("exception_file_not_found", file_type=file_type, file_path=file_path))


class MalformedMarkupError(TategakiError):
    """入力マークアップを木構造として解釈できない場合のエラー。"""

    def __init__(self, message: str, markup: str = ""):
        self.markup = markup
        super().__init__(message)


class InvalidConfigError(TategakiError):
    """変換設定の値が不正な場合のエラー。"""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(msg("exception_invalid_config", field=field_name, value=repr(value)))


class NoContentError(TategakiError):
    """処理対象のコンテンツが存在しない場合のエラー。"""

    def __init__(self, message: str):
        super().__init__(message)
