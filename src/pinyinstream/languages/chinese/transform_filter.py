"""
拼音轉換過濾器

位於上游詞元來源與下游消費者之間的拉取式 (pull-based) 狀態機：
每次 next() 最多向上游拉取所需的詞元，先輸出原詞元（若開啟），
再逐一輸出該詞元的拼音衍生詞元，耗盡後才拉取下一個上游詞元。

使用方式:
    from pinyinstream import PinyinTransformEngine

    engine = PinyinTransformEngine()
    for token in engine.create_filter(upstream_tokens):
        index.add(token.text, token.position_increment, token.type)

位置增量規則:
- 保留原詞元時，所有衍生詞元的增量皆為 0（與原詞元疊在同一位置）
- 不保留原詞元時，第一個衍生詞元沿用原增量，其餘為 0
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from pinyinstream.config import PinyinTransformConfig
from pinyinstream.core.token import InputToken, Token
from pinyinstream.utils.logger import get_logger

from .expander import PinyinCombinationExpander


class FilterState(Enum):
    NEED_INPUT = "need_input"
    EMIT_ORIGINAL = "emit_original"
    EMIT_DERIVED = "emit_derived"
    DONE = "done"


class PinyinTransformFilter(Iterator[Token]):
    """
    拼音轉換過濾器

    單次、只能向前的迭代器；同一實例不可被多執行緒同時使用。
    上游拋出的例外原樣往下游傳遞。

    建立方式:
        使用 PinyinTransformEngine.create_filter() 建立實例，
        或直接傳入上游與展開器。所有行為（含 keep_original）都依展開器的配置。
    """

    def __init__(
        self,
        tokens: Iterable[Any],
        expander: Optional[PinyinCombinationExpander] = None,
    ):
        self._input = iter(tokens)
        self.expander = expander or PinyinCombinationExpander()
        self._logger = get_logger("filter.pinyin")

        self._state = FilterState.NEED_INPUT
        self._current: Optional[InputToken] = None
        self._derived: Optional[Iterator[str]] = None
        self._derived_started = False

    @property
    def config(self) -> PinyinTransformConfig:
        return self.expander.config

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def current(self) -> Optional[InputToken]:
        """目前緩存的上游詞元快照"""
        return self._current

    def __iter__(self) -> "PinyinTransformFilter":
        return self

    def __next__(self) -> Token:
        while True:
            if self._state is FilterState.DONE:
                raise StopIteration

            if self._state is FilterState.NEED_INPUT:
                if not self._pull():
                    self._state = FilterState.DONE
                    raise StopIteration

            if self._state is FilterState.EMIT_ORIGINAL:
                self._state = FilterState.EMIT_DERIVED
                return self._current.to_token()

            token = self._next_derived()
            if token is not None:
                return token

            # 沒有中文、展開為空或已輸出完畢：丟棄緩存，下一輪取新詞元
            self._release()

    # ========== 狀態轉移 ==========

    def _pull(self) -> bool:
        try:
            upstream = next(self._input)
        except StopIteration:
            return False

        self._current = InputToken.capture(upstream)
        self._derived = None
        self._derived_started = False
        if self.config.keep_original:
            self._state = FilterState.EMIT_ORIGINAL
        else:
            self._state = FilterState.EMIT_DERIVED
        return True

    def _next_derived(self) -> Optional[Token]:
        if self._derived is None:
            terms = self.expander.generate(self._current.text).merged()
            if not terms:
                return None
            self._logger.debug(f"{self._current.text!r} -> {terms[:5]}{'...' if len(terms) > 5 else ''}")
            self._derived = iter(terms)
            self._derived_started = False

        term = next(self._derived, None)
        if term is None:
            return None

        if self.config.keep_original or self._derived_started:
            position_increment = 0
        else:
            position_increment = self._current.position_increment
        self._derived_started = True
        return self._current.derive(term, position_increment)

    def _release(self) -> None:
        self._current = None
        self._derived = None
        self._derived_started = False
        self._state = FilterState.NEED_INPUT
