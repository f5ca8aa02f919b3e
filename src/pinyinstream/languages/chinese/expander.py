"""
拼音組合展開器

將一個詞元的每個字元展開為候選讀音，再以「有界廣度優先」的方式逐字組合，
產生整個詞元的全拼集合與縮寫（首字母）集合。

多音字會讓組合數以乘積成長。為了避免記憶體爆炸，當「讀音不只一種」的字元
累計達到 max_polyphone_freq 次後，之後的每個字元都只取第一個讀音。
計數在字元處理完之後才累加，所以第 N 個多音字本身仍會完整展開，
從下一個字元開始才收斂；一旦達到門檻，之後的字元永遠只取第一個讀音。

使用方式:
    from pinyinstream.languages.chinese import PinyinCombinationExpander

    expander = PinyinCombinationExpander()
    expander.expand_full("重慶")          # 含 'zhongqing' 與 'chongqing'
    expander.expand_abbreviation("重慶")  # 含 'zq' 與 'cq'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from pinyinstream.config import DEFAULT_CONFIG, PinyinTransformConfig, normalize_polyphone_freq
from pinyinstream.core.events import TransformEventHandler, emit_event
from pinyinstream.core.exceptions import UnsupportedFormatCombination
from pinyinstream.core.protocols.lookup import RomanizationLookupProtocol
from pinyinstream.utils.logger import get_logger

from .phonetic_impl import PinyinLookup
from .utils import chinese_char_count


@dataclass
class PronunciationCandidates:
    """
    單一詞元的展開結果

    Attributes:
        full_forms: 去重後的全拼（如 "beijing"）
        abbreviations: 去重後的縮寫（如 "bj"）
    """
    full_forms: List[str] = field(default_factory=list)
    abbreviations: List[str] = field(default_factory=list)

    def merged(self) -> List[str]:
        """全拼在前、縮寫在後的去重聯集"""
        return list(dict.fromkeys(self.full_forms + self.abbreviations))

    def __bool__(self) -> bool:
        return bool(self.full_forms or self.abbreviations)


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def _first_letters(candidates: List[str]) -> List[str]:
    return _distinct(c[:1] for c in candidates)


class PinyinCombinationExpander:
    """
    拼音組合展開器

    功能:
    - expand_full: 全拼組合（多音字取笛卡兒積）
    - expand_abbreviation: 首字母組合
    - generate: 依配置判斷是否需要展開，並回傳 PronunciationCandidates

    結果以插入順序去重，同一配置下多次執行的輸出順序固定。
    """

    def __init__(
        self,
        config: Optional[PinyinTransformConfig] = None,
        lookup: Optional[RomanizationLookupProtocol] = None,
        classifier: Callable[[Optional[str]], int] = chinese_char_count,
        on_event: Optional[TransformEventHandler] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.lookup = lookup or PinyinLookup()
        self._count_chinese = classifier
        self._on_event = on_event
        self._logger = get_logger("expander.pinyin")

    # ========== 公開方法 ==========

    def generate(self, text: str) -> PronunciationCandidates:
        """
        依配置展開詞元

        中文字元數不足 min_term_length 時不展開，回傳空結果。
        全拼與縮寫共用同一次 lookup，lookup 失敗時每個詞元只回報一次。
        """
        candidates = PronunciationCandidates()
        if self._count_chinese(text) < self.config.min_term_length:
            return candidates

        columns = self._lookup_columns(text)
        if columns is None:
            return candidates

        cap = self.config.max_polyphone_freq
        if self.config.wants_pinyin:
            candidates.full_forms = self._combine_full(columns, cap)
        if self.config.wants_abbreviation:
            candidates.abbreviations = self._combine_abbreviation(columns, cap)
        return candidates

    def expand_full(self, text: str, max_polyphone_freq: Optional[int] = None) -> List[str]:
        """
        展開全拼

        Args:
            text: 詞元文字
            max_polyphone_freq: 多音字組合上限，None 時使用配置值；< 1 表示不限制

        Returns:
            List[str]: 去重後的全拼組合；lookup 失敗時為空列表
        """
        columns = self._lookup_columns(text)
        if columns is None:
            return []
        return self._combine_full(columns, self._resolve_cap(max_polyphone_freq))

    def expand_abbreviation(self, text: str, max_polyphone_freq: Optional[int] = None) -> List[str]:
        """展開首字母縮寫，規則與 expand_full 相同"""
        columns = self._lookup_columns(text)
        if columns is None:
            return []
        return self._combine_abbreviation(columns, self._resolve_cap(max_polyphone_freq))

    # ========== 內部實作 ==========

    def _resolve_cap(self, max_polyphone_freq: Optional[int]) -> int:
        if max_polyphone_freq is None:
            return self.config.max_polyphone_freq
        return normalize_polyphone_freq(max_polyphone_freq)

    def _lookup_columns(self, text: str) -> Optional[List[List[str]]]:
        """逐字查詢讀音；格式錯誤時回報降級並回傳 None"""
        try:
            return self._char_candidates(text)
        except UnsupportedFormatCombination as e:
            self._report_lookup_failure(text, e)
            return None

    def _combine_full(self, columns: List[List[str]], cap: int) -> List[str]:
        return self._combine([_distinct(c) for c in columns], cap)

    def _combine_abbreviation(self, columns: List[List[str]], cap: int) -> List[str]:
        return self._combine([_first_letters(c) for c in columns], cap)

    def _char_candidates(self, text: str) -> List[List[str]]:
        """逐字查詢讀音；查不到讀音的字元直接略過"""
        columns = []
        for char in text or "":
            readings = [r for r in self.lookup.lookup(char) if r]
            if readings:
                columns.append(readings)
        return columns

    @staticmethod
    def _combine(columns: List[List[str]], cap: int) -> List[str]:
        frontier: Dict[str, None] = {}
        polyphone_freq = 0

        for options in columns:
            if not frontier:
                frontier = dict.fromkeys(options)
            else:
                # 達到上限後只取第一個讀音，避免組合爆炸
                branch = options if polyphone_freq < cap else options[:1]
                frontier = dict.fromkeys(
                    prefix + option for prefix in frontier for option in branch
                )

            # 多音字：無論本步是否已收斂都要計數
            if len(options) > 1:
                polyphone_freq += 1

        return list(frontier)

    def _report_lookup_failure(self, text: str, error: UnsupportedFormatCombination) -> None:
        self._logger.warning(f"拼音格式不支援，略過詞元 {text!r}: {error}")
        emit_event(
            self._on_event,
            {
                "type": "degraded",
                "engine": "pinyin",
                "term": text,
                "stage": "lookup",
                "fallback": "original_only",
                "degrade_reason": "unsupported_format_combination",
                "exception_type": type(error).__name__,
                "exception_message": str(error),
            },
        )
