"""
全域配置模組

提供轉換過濾器的建構期配置（建立後不可變）以及日誌開關。

使用方式:
    from pinyinstream import PinyinTransformEngine, PinyinTransformConfig, OutputType

    config = PinyinTransformConfig(output_type=OutputType.BOTH, keep_original=False)
    engine = PinyinTransformEngine(config, verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinstream").setLevel(logging.DEBUG)
"""

import logging
import sys
from dataclasses import dataclass
from enum import IntFlag
from typing import Optional

from .utils.logger import setup_logger

DEFAULT_MIN_TERM_LENGTH = 2
DEFAULT_MAX_POLYPHONE_FREQ = 10
NO_POLYPHONE_LIMIT = sys.maxsize


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


class OutputType(IntFlag):
    """輸出種類（位元旗標，BOTH = PINYIN | ABBREVIATION）"""
    PINYIN = 0x01        # 只輸出全拼
    ABBREVIATION = 0x02  # 只輸出縮寫（首字母）
    BOTH = 0x03          # 同時輸出全拼與縮寫


_VALID_OUTPUT_TYPES = (OutputType.PINYIN, OutputType.ABBREVIATION, OutputType.BOTH)


def normalize_polyphone_freq(value: Optional[int]) -> int:
    """None 或 < 1 表示不限制，轉為 NO_POLYPHONE_LIMIT"""
    if value is None or value < 1:
        return NO_POLYPHONE_LIMIT
    return value


@dataclass(frozen=True)
class PinyinTransformConfig:
    """
    拼音轉換配置

    屬性:
        output_type: 輸出全拼、縮寫或兩者
        min_term_length: 詞元中至少要有幾個中文字元才轉換（最小為 1）
        max_polyphone_freq: 多音字（讀音不同）出現超過此次數後不再組合，
                            只取第一個讀音，避免組合爆炸；None 或 < 1 表示不限制
        keep_original: 是否同時輸出原詞元
    """

    output_type: OutputType = OutputType.PINYIN
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH
    max_polyphone_freq: Optional[int] = DEFAULT_MAX_POLYPHONE_FREQ
    keep_original: bool = True

    def __post_init__(self):
        """驗證並正規化配置值"""
        if self.output_type not in _VALID_OUTPUT_TYPES:
            raise ValueError(f"Unsupported output_type: {self.output_type!r}")
        object.__setattr__(self, "output_type", OutputType(self.output_type))

        if self.min_term_length < 1:
            object.__setattr__(self, "min_term_length", 1)

        object.__setattr__(self, "max_polyphone_freq", normalize_polyphone_freq(self.max_polyphone_freq))

    @property
    def wants_pinyin(self) -> bool:
        return bool(self.output_type & OutputType.PINYIN)

    @property
    def wants_abbreviation(self) -> bool:
        return bool(self.output_type & OutputType.ABBREVIATION)

    @property
    def is_polyphone_limited(self) -> bool:
        return self.max_polyphone_freq != NO_POLYPHONE_LIMIT


# 預設配置實例（全拼、>=2 個中文字、上限 10、保留原詞元）
DEFAULT_CONFIG = PinyinTransformConfig()
