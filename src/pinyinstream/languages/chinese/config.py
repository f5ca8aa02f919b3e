"""
中文配置模組

定義中文字元判定範圍與拼音輸出格式。
"""

from dataclasses import dataclass
from enum import Enum

from pinyinstream.core.exceptions import UnsupportedFormatCombination


class ChinesePhoneticConfig:
    """
    中文字元判定配置

    計入「中文字元數」的 Unicode 區塊（含標點區塊，
    使全形標點也算在詞元長度內，但它們查不到拼音，不會產生組合）。
    """

    # =========================================================================
    # 1. 計入中文字元數的 Unicode 區塊 (start, end)，皆為閉區間
    # =========================================================================
    CHINESE_BLOCKS = (
        (0x4E00, 0x9FFF),  # CJK Unified Ideographs
        (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
        (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
        (0x2000, 0x206F),  # General Punctuation
        (0x3000, 0x303F),  # CJK Symbols and Punctuation
        (0xFF00, 0xFFEF),  # Halfwidth and Fullwidth Forms
    )


class CaseType(Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"


class ToneType(Enum):
    WITHOUT_TONE = "without_tone"          # zhong
    WITH_TONE_NUMBER = "with_tone_number"  # zhong1
    WITH_TONE_MARK = "with_tone_mark"      # zhōng


class VCharType(Enum):
    WITH_V = "with_v"                      # lv
    WITH_U_UNICODE = "with_u_unicode"      # lü
    WITH_U_AND_COLON = "with_u_and_colon"  # lu:


@dataclass(frozen=True)
class PinyinOutputFormat:
    """
    拼音輸出格式

    預設為小寫、無聲調、以 'v' 表示 ü，正是轉換過濾器所需的格式。
    """
    case_type: CaseType = CaseType.LOWERCASE
    tone_type: ToneType = ToneType.WITHOUT_TONE
    v_char_type: VCharType = VCharType.WITH_V

    def validate(self) -> None:
        """
        檢查格式組合

        Raises:
            UnsupportedFormatCombination: 聲調符號只能搭配 Unicode ü
        """
        if self.tone_type is ToneType.WITH_TONE_MARK and self.v_char_type is not VCharType.WITH_U_UNICODE:
            raise UnsupportedFormatCombination(
                f"tone marks require {VCharType.WITH_U_UNICODE.name}, got {self.v_char_type.name}",
                format_repr=repr(self),
            )


DEFAULT_OUTPUT_FORMAT = PinyinOutputFormat()
