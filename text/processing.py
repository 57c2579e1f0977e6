"""
テキスト変換パイプラインモジュール。

1つのテキストノードの内容に対して、
マスキング → 縦中横 → 文字の向き → マスキング解除 を順に適用します。
"""
import logging

from core import logger
from core.config import TcyConfig
from core.messages import msg
from text.masking import mask_text, unmask
from text.orientation import apply_orientation
from text.tcy import apply_tcy


class TextProcessor:
    """テキストノード1つ分の変換を行うクラス。

    設定は読み取り専用で、呼び出し間で状態を持ちません。
    """

    def __init__(
        self,
        config: TcyConfig | None = None,
        log: logging.Logger | None = None,
        verbose: bool = False,
    ):
        self.config = config or TcyConfig()
        self.log = log or logger.get_logger("processing")
        self.verbose = verbose

    def _transform_literal(self, text: str) -> str:
        """保護区間を含まないテキストに変換ルールを適用する。"""
        result = apply_tcy(text, self.config.tcy_digit, log=self.log, verbose=self.verbose)
        if self.config.auto_text_orientation:
            result = apply_orientation(result, log=self.log, verbose=self.verbose)
        return result

    def process_text(self, text: str) -> str:
        """
        テキストに縦書き用の変換ルールを適用する。

        Parameters
        ----------
        text : str
            テキストノードの内容（文字参照は未デコード）。

        Returns
        -------
        str
            span要素を挿入したマークアップ文字列。
            文字参照・URL・メールアドレスは元の文字列のまま残る。

        Examples
        --------
        >>> TextProcessor().process_text("&#x3042;12")
        '&#x3042;<span class="tcy">12</span>'
        """
        masked = mask_text(text, log=self.log, verbose=self.verbose)
        result = unmask(masked, self._transform_literal)

        if self.verbose:
            self.log.debug(msg("debug_transformed", text=result))
        return result
