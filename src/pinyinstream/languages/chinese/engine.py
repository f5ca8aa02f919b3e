"""
拼音轉換引擎 (PinyinTransformEngine)

負責持有共享的拼音查詢器與組合展開器，
並提供工廠方法建立輕量的 PinyinTransformFilter 實例（每個串流一個）。
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from pinyinstream.config import DEFAULT_CONFIG, PinyinTransformConfig, configure_logging
from pinyinstream.core.events import TransformEventHandler
from pinyinstream.core.protocols.lookup import RomanizationLookupProtocol
from pinyinstream.core.token import Token
from pinyinstream.utils.logger import TimingContext, get_logger

from .config import PinyinOutputFormat
from .expander import PinyinCombinationExpander, PronunciationCandidates
from .phonetic_impl import PinyinLookup
from .tokenizer import ScriptRunTokenizer
from .transform_filter import PinyinTransformFilter


class PinyinTransformEngine:
    """
    拼音轉換引擎

    職責:
    - 持有共享的拼音查詢器、組合展開器與分詞器
    - 提供工廠方法建立輕量的 Filter 實例
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後透過 create_filter() 為每個詞元串流建立一個 Filter
    """

    _engine_name = "pinyin"

    def __init__(
        self,
        config: Optional[PinyinTransformConfig] = None,
        *,
        output_format: Optional[PinyinOutputFormat] = None,
        lookup: Optional[RomanizationLookupProtocol] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[TransformEventHandler] = None,
    ):
        self._init_logger(verbose=verbose, on_timing=on_timing)

        with self._log_timing("PinyinTransformEngine.__init__"):
            self._config = config or DEFAULT_CONFIG
            self._lookup = lookup or PinyinLookup(output_format=output_format)
            self._expander = PinyinCombinationExpander(
                config=self._config,
                lookup=self._lookup,
                on_event=on_event,
            )
            self._tokenizer = ScriptRunTokenizer()

            self._initialized = True
            self._logger.info(
                f"PinyinTransformEngine initialized "
                f"(type={self._config.output_type.name}, min_term_length={self._config.min_term_length}, "
                f"keep_original={self._config.keep_original})"
            )

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing
        configure_logging(verbose)
        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @property
    def config(self) -> PinyinTransformConfig:
        return self._config

    @property
    def lookup(self) -> RomanizationLookupProtocol:
        return self._lookup

    @property
    def expander(self) -> PinyinCombinationExpander:
        return self._expander

    @property
    def tokenizer(self) -> ScriptRunTokenizer:
        return self._tokenizer

    def is_initialized(self) -> bool:
        return self._initialized

    def get_cache_stats(self) -> Dict[str, Any]:
        if isinstance(self._lookup, PinyinLookup):
            return {"pinyin": self._lookup.get_cache_stats()}
        return {}

    def create_filter(self, tokens: Iterable[Any]) -> PinyinTransformFilter:
        """
        為一個上游詞元串流建立轉換過濾器

        Args:
            tokens: 上游詞元（Token 或具有相同欄位的物件）

        Returns:
            PinyinTransformFilter: 輕量、單次使用的迭代器
        """
        return PinyinTransformFilter(tokens, expander=self._expander)

    def expand(self, text: str) -> PronunciationCandidates:
        """直接展開單一詞元（不經過串流）"""
        return self._expander.generate(text)

    def transform(self, text: str) -> List[Token]:
        """
        分詞後轉換整段文字

        範例:
            >>> engine = PinyinTransformEngine()
            >>> [t.text for t in engine.transform("北京")]
            ['北京', 'beijing']
        """
        with self._log_timing(f"transform({len(text)} chars)"):
            tokens = list(self.create_filter(self._tokenizer.iter_tokens(text)))
        self._logger.debug(f"transform produced {len(tokens)} tokens")
        return tokens
