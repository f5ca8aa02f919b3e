"""
中文工具模組

提供中文字元判定，以及 pypinyin 的延遲載入。
"""

from typing import Any, Optional

from pinyinstream.utils.lazy_imports import CHINESE_INSTALL_HINT
from pinyinstream.utils.logger import get_logger

from .config import ChinesePhoneticConfig

logger = get_logger(__name__)

_pypinyin: Optional[Any] = None


def _get_pypinyin() -> Any:
    """
    取得 pypinyin 模組 (Lazy Loading)

    Raises:
        ImportError: 如果未安裝 pypinyin
    """
    global _pypinyin
    if _pypinyin is None:
        try:
            import pypinyin

            _pypinyin = pypinyin
        except ImportError as e:
            logger.error("無法載入 pypinyin")
            raise ImportError(CHINESE_INSTALL_HINT) from e
    return _pypinyin


def is_chinese_char(char: str, config=ChinesePhoneticConfig) -> bool:
    """
    判斷字元是否計入中文字元數

    Args:
        char: 單個字元

    Returns:
        bool: 是否落在 config.CHINESE_BLOCKS 任一區塊
    """
    if not char:
        return False
    code = ord(char[0])
    for start, end in config.CHINESE_BLOCKS:
        if start <= code <= end:
            return True
    return False


def chinese_char_count(text: Optional[str], config=ChinesePhoneticConfig) -> int:
    """
    計算字串中的中文字元數

    空字串、None 或只有空白時回傳 0。
    """
    if not text or not text.strip():
        return 0
    return sum(1 for ch in text if is_chinese_char(ch, config))
