"""
中文拼音轉換模組

將含中文的詞元展開為全拼與首字母縮寫，供搜尋索引做拼音檢索。

安裝中文支援:
    pip install pinyinstream

主要類別:
- PinyinTransformEngine: 拼音轉換引擎
- PinyinTransformFilter: 拉取式詞元轉換過濾器
- PinyinCombinationExpander: 多音字組合展開器
- PinyinLookup: pypinyin 拼音查詢器
- ScriptRunTokenizer: 依文字系統分段的簡易分詞器

效能優化:
- cached_get_char_pinyins: 快取版單字讀音查詢
"""

from __future__ import annotations

import importlib
from typing import Any

from pinyinstream.utils.lazy_imports import CHINESE_INSTALL_HINT

INSTALL_HINT = CHINESE_INSTALL_HINT

_LAZY_IMPORTS = {
    "PinyinTransformEngine": (".engine", "PinyinTransformEngine"),
    "PinyinTransformFilter": (".transform_filter", "PinyinTransformFilter"),
    "FilterState": (".transform_filter", "FilterState"),
    "PinyinCombinationExpander": (".expander", "PinyinCombinationExpander"),
    "PronunciationCandidates": (".expander", "PronunciationCandidates"),
    "PinyinLookup": (".phonetic_impl", "PinyinLookup"),
    "cached_get_char_pinyins": (".phonetic_impl", "cached_get_char_pinyins"),
    "ScriptRunTokenizer": (".tokenizer", "ScriptRunTokenizer"),
    "ChinesePhoneticConfig": (".config", "ChinesePhoneticConfig"),
    "PinyinOutputFormat": (".config", "PinyinOutputFormat"),
    "CaseType": (".config", "CaseType"),
    "ToneType": (".config", "ToneType"),
    "VCharType": (".config", "VCharType"),
    "is_chinese_char": (".utils", "is_chinese_char"),
    "chinese_char_count": (".utils", "chinese_char_count"),
}

__all__ = [
    "PinyinTransformEngine",
    "PinyinTransformFilter",
    "FilterState",
    "PinyinCombinationExpander",
    "PronunciationCandidates",
    "PinyinLookup",
    "cached_get_char_pinyins",
    "ScriptRunTokenizer",
    "ChinesePhoneticConfig",
    "PinyinOutputFormat",
    "CaseType",
    "ToneType",
    "VCharType",
    "is_chinese_char",
    "chinese_char_count",
    "CHINESE_INSTALL_HINT",
    "INSTALL_HINT",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
