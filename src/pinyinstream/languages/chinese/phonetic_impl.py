"""
拼音查詢實作模組

以 pypinyin 的多音字模式（heteronym）查詢單一漢字的所有候選讀音，
並依 PinyinOutputFormat 調整大小寫、聲調與 ü 的表示方式。

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在第一次查詢時才會載入 pypinyin。
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from pinyinstream.utils.logger import get_logger

from .config import DEFAULT_OUTPUT_FORMAT, CaseType, PinyinOutputFormat, ToneType, VCharType
from .utils import _get_pypinyin


# =============================================================================
# 拼音快取 (Performance Critical)
# =============================================================================
# 同一個字在串流中會反覆出現，以 (字元, 格式) 為 key 快取查詢結果

@lru_cache(maxsize=50000)
def cached_get_char_pinyins(char: str, output_format: PinyinOutputFormat) -> Tuple[str, ...]:
    """快取版單字候選讀音（主要讀音在前、已去重）"""
    pypinyin = _get_pypinyin()

    if output_format.tone_type is ToneType.WITH_TONE_MARK:
        style = pypinyin.Style.TONE
    elif output_format.tone_type is ToneType.WITH_TONE_NUMBER:
        style = pypinyin.Style.TONE3
    else:
        style = pypinyin.Style.NORMAL
    v_to_u = output_format.v_char_type is not VCharType.WITH_V

    result = pypinyin.pinyin(
        char,
        style=style,
        heteronym=True,
        errors=lambda _: [],
        v_to_u=v_to_u,
        neutral_tone_with_five=True,
    )
    if not result or not result[0]:
        return ()

    candidates: Dict[str, None] = {}
    for reading in result[0]:
        if not reading:
            continue
        if output_format.v_char_type is VCharType.WITH_U_AND_COLON:
            reading = reading.replace("ü", "u:")
        if output_format.case_type is CaseType.UPPERCASE:
            reading = reading.upper()
        candidates.setdefault(reading, None)
    return tuple(candidates)


class PinyinLookup:
    """
    拼音查詢器（RomanizationLookupProtocol 的 pypinyin 實作）

    功能:
    - 字元 -> 有序候選讀音列表（多音字會有多個）
    - 查不到拼音的字元（英數、標點）回傳空列表
    - 格式組合不合法時拋出 UnsupportedFormatCombination
    """

    def __init__(self, output_format: Optional[PinyinOutputFormat] = None):
        self.output_format = output_format or DEFAULT_OUTPUT_FORMAT
        self._logger = get_logger("lookup.pinyin")

    def lookup(self, char: str) -> List[str]:
        """
        查詢單一字元的候選讀音

        Args:
            char: 單個字元

        Returns:
            List[str]: 候選讀音，主要讀音在前

        Raises:
            UnsupportedFormatCombination: 輸出格式組合不合法

        範例：
            >>> PinyinLookup().lookup("北")
            ['bei']
        """
        self.output_format.validate()
        if not char:
            return []
        return list(cached_get_char_pinyins(char, self.output_format))

    @staticmethod
    def get_cache_stats() -> Dict[str, Any]:
        info = cached_get_char_pinyins.cache_info()
        return {
            "hits": info.hits,
            "misses": info.misses,
            "maxsize": info.maxsize,
            "currsize": info.currsize,
        }

    @staticmethod
    def clear_cache() -> None:
        cached_get_char_pinyins.cache_clear()
