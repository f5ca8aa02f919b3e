"""
詞元資料結構

Token 是上下游交換的可變記錄；InputToken 是轉換過濾器在每次向上游拉取時
擷取的不可變快照。上游來源可能在下一次拉取時重用/覆寫同一個 Token 物件，
因此過濾器只保留快照，從不持有上游物件的參照。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_TOKEN_TYPE = "word"
PINYIN_TOKEN_TYPE = "pinyin"


@dataclass
class Token:
    """
    詞元

    Attributes:
        text: 詞元文字
        position_increment: 相對前一個輸出詞元的位置增量（片語/鄰近查詢用）
        start_offset: 在原文中的起始位置（含）
        end_offset: 在原文中的結束位置（不含）
        type: 詞元類型，拼音衍生詞元固定為 "pinyin"
    """
    text: str
    position_increment: int = 1
    start_offset: int = 0
    end_offset: int = 0
    type: str = DEFAULT_TOKEN_TYPE

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class InputToken:
    """上游詞元的不可變快照"""
    text: str
    position_increment: int
    start_offset: int
    end_offset: int
    type: str = DEFAULT_TOKEN_TYPE

    @classmethod
    def capture(cls, token: Any) -> "InputToken":
        """
        從任何具有 Token 欄位的物件擷取快照

        Raises:
            ValueError: position_increment 為負數
        """
        position_increment = int(getattr(token, "position_increment", 1))
        if position_increment < 0:
            raise ValueError(
                f"position_increment must be >= 0, got {position_increment}"
            )
        text = str(token.text)
        start_offset = int(getattr(token, "start_offset", 0))
        end_offset = int(getattr(token, "end_offset", start_offset + len(text)))
        return cls(
            text=text,
            position_increment=position_increment,
            start_offset=start_offset,
            end_offset=end_offset,
            type=getattr(token, "type", None) or DEFAULT_TOKEN_TYPE,
        )

    @property
    def length(self) -> int:
        return len(self.text)

    def to_token(self) -> Token:
        """原樣輸出（新物件，不與快照共用狀態）"""
        return Token(
            text=self.text,
            position_increment=self.position_increment,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            type=self.type,
        )

    def derive(self, text: str, position_increment: int) -> Token:
        """建立同位置的拼音衍生詞元"""
        return Token(
            text=text,
            position_increment=position_increment,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            type=PINYIN_TOKEN_TYPE,
        )
