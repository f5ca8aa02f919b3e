"""
pinyinstream - 串流式中文拼音詞元轉換器 (Streaming Pinyin Token Transformer)

核心概念：
- 上游分詞器逐一提供詞元
- 含中文的詞元展開為全拼 / 首字母縮寫（多音字取組合，並設上限避免爆炸）
- 衍生詞元與原詞元疊在同一位置輸出，搜尋索引即可用拼音命中中文詞

官方入口（穩定 API）：
- `pinyinstream.PinyinTransformEngine`
- `pinyinstream.PinyinTransformConfig`
"""

# =============================================================================
# 日誌工具
# =============================================================================
from pinyinstream.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from pinyinstream.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

# =============================================================================
# 配置
# =============================================================================
from pinyinstream.config import (
    DEFAULT_MAX_POLYPHONE_FREQ,
    DEFAULT_MIN_TERM_LENGTH,
    NO_POLYPHONE_LIMIT,
    OutputType,
    PinyinTransformConfig,
)

# =============================================================================
# 核心資料結構
# =============================================================================
from pinyinstream.core import (
    PINYIN_TOKEN_TYPE,
    InputToken,
    PinyinStreamError,
    RomanizationLookupProtocol,
    Token,
    TransformEvent,
    UnsupportedFormatCombination,
)

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from pinyinstream.languages.chinese.engine import PinyinTransformEngine
from pinyinstream.languages.chinese.expander import PinyinCombinationExpander, PronunciationCandidates
from pinyinstream.languages.chinese.transform_filter import PinyinTransformFilter

__all__ = [
    # Engine
    "PinyinTransformEngine",
    "PinyinTransformFilter",
    "PinyinCombinationExpander",
    "PronunciationCandidates",
    # Config
    "PinyinTransformConfig",
    "OutputType",
    "DEFAULT_MIN_TERM_LENGTH",
    "DEFAULT_MAX_POLYPHONE_FREQ",
    "NO_POLYPHONE_LIMIT",
    # Core
    "Token",
    "InputToken",
    "PINYIN_TOKEN_TYPE",
    "TransformEvent",
    "RomanizationLookupProtocol",
    "PinyinStreamError",
    "UnsupportedFormatCombination",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
]

__version__ = "0.1.0"
