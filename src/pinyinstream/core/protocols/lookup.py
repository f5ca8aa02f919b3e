"""
Romanization Lookup Protocol

定義拼音查詢的最小介面（char -> candidates）。
"""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class RomanizationLookupProtocol(Protocol):
    def lookup(self, char: str) -> List[str]:
        """回傳單一字元的候選讀音（主要讀音在前，可為空列表）"""
        ...
