"""
核心抽象層

定義語言無關的資料結構、介面與例外。
"""

from .events import TransformEvent, TransformEventHandler
from .exceptions import PinyinStreamError, UnsupportedFormatCombination
from .protocols import RomanizationLookupProtocol
from .token import DEFAULT_TOKEN_TYPE, PINYIN_TOKEN_TYPE, InputToken, Token
from .tokenizer_interface import Tokenizer

__all__ = [
    "Token",
    "InputToken",
    "DEFAULT_TOKEN_TYPE",
    "PINYIN_TOKEN_TYPE",
    "Tokenizer",
    "RomanizationLookupProtocol",
    "TransformEvent",
    "TransformEventHandler",
    "PinyinStreamError",
    "UnsupportedFormatCombination",
]
