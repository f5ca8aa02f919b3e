"""
日誌與計時工具

所有模組都透過 get_logger() 取得 "pinyinstream.*" 命名空間下的 logger，
函式庫本身在 import 時不會設定任何 handler，交由使用者以標準 logging 控制。

使用方式:
    from pinyinstream.utils.logger import get_logger, TimingContext

    logger = get_logger("filter.pinyin")
    with TimingContext("expand", logger):
        ...

    # 開啟詳細日誌
    from pinyinstream import enable_debug_logging
    enable_debug_logging()
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyinstream"
DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinstream 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "expander.pinyin"），None 時回傳根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為 pinyinstream 根 logger 掛上 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時相關日誌（TimingContext 以 DEBUG 輸出）"""
    setup_logger(level=logging.DEBUG)
    get_logger("timing").setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    區塊內拋出的例外不會被吞掉。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"{self.operation} took {self.elapsed:.3f}s")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        >>> @log_timing("build_index")
        ... def build():
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        op_name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(op_name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
