"""
分詞器抽象基類
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from .token import Token


class Tokenizer(ABC):
    """
    分詞器抽象基類

    子類只需實作 get_token_indices()，其餘方法由索引推導。
    """

    @abstractmethod
    def get_token_indices(self, text: str) -> List[Tuple[int, int]]:
        """回傳每個詞元的 (start_index, end_index)"""
        pass

    def tokenize(self, text: str) -> List[str]:
        return [text[start:end] for start, end in self.get_token_indices(text)]

    def iter_tokens(self, text: str) -> Iterator[Token]:
        """以 Token 形式逐一產出（可直接作為轉換過濾器的上游）"""
        for start, end in self.get_token_indices(text):
            yield Token(text=text[start:end], start_offset=start, end_offset=end)
