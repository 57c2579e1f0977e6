"""
縦書き組版補正ツールの設定定数モジュール。

プロジェクト全体で使用される設定値を一元管理します。
"""
from dataclasses import dataclass
from typing import Any

from core.exceptions import InvalidConfigError


# --- 変換設定のデフォルト値 ---
DEFAULT_TCY_DIGIT = 2  # 縦中横にする数字の最大桁数（0で数字の縦中横を無効化）
DEFAULT_AUTO_TEXT_ORIENTATION = True  # 記号・ギリシャ文字等の向きを自動調整するか

# --- 除外設定 ---
EXCLUDE_TAGS: frozenset[str] = frozenset({"code", "pre", "math", "svg"})
EXCLUDE_CLASSES: tuple[str, ...] = ("tcy", "upright", "sideways")  # class属性の部分一致で判定
METADATA_TAGS: frozenset[str] = frozenset({"head"})  # 本文ではない要素（body のない文書・断片で使用）

# --- マーカー（span要素のclass名） ---
TCY_CLASS = "tcy"
SIDEWAYS_CLASS = "sideways"
UPRIGHT_CLASS = "upright"

# --- 文字種設定 ---
SIDEWAYS_CHARS = "÷∴≠≦≧∧∨＜＞‐－"  # 横倒しにする記号
UPRIGHT_RANGES = "Α-Ωα-ωА-Яа-я"  # 正立させる文字（ギリシャ文字・キリル文字）

# --- ファイル設定 ---
INPUT_SUFFIXES: tuple[str, ...] = (".html", ".htm", ".xhtml")
OUTPUT_SUFFIX = "_tategaki"  # 出力ファイル名の末尾に付加する文字列
CSS_FILENAME = "tategaki.css"


@dataclass(frozen=True)
class TcyConfig:
    """変換設定を保持するデータクラス。"""
    tcy_digit: int = DEFAULT_TCY_DIGIT                               # 縦中横の最大桁数
    auto_text_orientation: bool = DEFAULT_AUTO_TEXT_ORIENTATION      # 文字の向きの自動調整

    def __post_init__(self):
        # bool は int のサブクラスのため明示的に除外する
        if isinstance(self.tcy_digit, bool) or not isinstance(self.tcy_digit, int):
            raise InvalidConfigError("tcy_digit", self.tcy_digit)
        if self.tcy_digit < 0:
            raise InvalidConfigError("tcy_digit", self.tcy_digit)
        if not isinstance(self.auto_text_orientation, bool):
            raise InvalidConfigError("auto_text_orientation", self.auto_text_orientation)

    @classmethod
    def from_options(cls, options: dict[str, Any] | None = None, **kwargs) -> "TcyConfig":
        """
        オプション辞書から設定を生成する。

        Parameters
        ----------
        options : dict[str, Any] | None
            オプション辞書。``tcy_digit``/``tcyDigit``、
            ``auto_text_orientation``/``autoTextOrientation`` を受け付ける。
        **kwargs
            options と同じキーを個別に指定する場合に使用。

        Returns
        -------
        TcyConfig
            生成された設定。未指定の項目はデフォルト値になる。
        """
        merged = dict(options or {})
        merged.update(kwargs)

        tcy_digit = merged.get("tcy_digit", merged.get("tcyDigit", DEFAULT_TCY_DIGIT))
        auto_text_orientation = merged.get(
            "auto_text_orientation",
            merged.get("autoTextOrientation", DEFAULT_AUTO_TEXT_ORIENTATION),
        )
        return cls(tcy_digit=tcy_digit, auto_text_orientation=auto_text_orientation)


def resolve_config(config: "TcyConfig | dict[str, Any] | None") -> TcyConfig:
    """TcyConfig・オプション辞書・None のいずれからも TcyConfig を得る。"""
    if config is None:
        return TcyConfig()
    if isinstance(config, TcyConfig):
        return config
    return TcyConfig.from_options(config)
