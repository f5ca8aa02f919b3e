"""
共用測試工具

DummyPinyinLookup 以固定字典取代 pypinyin：
- 避免測試結果隨 pypinyin 詞庫版本波動
- 讓多音字數量可控，便於驗證組合數與上限收斂
"""

from __future__ import annotations

import logging

import pytest

from pinyinstream.core.exceptions import UnsupportedFormatCombination

DUMMY_TABLE = {
    "北": ["bei"],
    "京": ["jing"],
    "上": ["shang"],
    "海": ["hai"],
    "重": ["zhong", "chong"],
    "行": ["xing", "hang"],
    "長": ["chang", "zhang"],
    "慶": ["qing"],
    "傳": ["chuan", "zhuan"],     # 首字母不同
    "折": ["zhe", "she", "zhe"],  # 重複讀音
    "幢": ["zhuang", "chuang"],
    "著": ["zhe", "zhuo", "zhao"],  # 首字母全為 z
}


class DummyPinyinLookup:
    """測試用 lookup：查表並記錄呼叫次數"""

    def __init__(self, table=None):
        self.table = dict(DUMMY_TABLE if table is None else table)
        self.calls = 0

    def lookup(self, char: str) -> list:
        self.calls += 1
        return list(self.table.get(char, []))


class FailingPinyinLookup:
    """測試用 lookup：每次查詢都回報格式錯誤"""

    def lookup(self, char: str) -> list:
        raise UnsupportedFormatCombination("bad format")


@pytest.fixture
def dummy_lookup():
    return DummyPinyinLookup()


@pytest.fixture
def failing_lookup():
    return FailingPinyinLookup()


@pytest.fixture
def restore_logging():
    """還原 setup_logger 對 pinyinstream 根 logger 的修改"""
    from pinyinstream.utils import logger as logger_module

    root = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    level = root.level
    yield root
    if logger_module._handler is not None:
        root.removeHandler(logger_module._handler)
        logger_module._handler = None
    root.setLevel(level)
