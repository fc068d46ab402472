"""
日誌工具模組

所有模組透過 get_logger() 取得掛在 "romakana" 之下的 logger。
函式庫本身不主動設定 handler，需要時可呼叫 setup_logger() / enable_debug_logging()。

使用方式:
    from romakana.utils.logger import get_logger, TimingContext

    logger = get_logger("romaji.compiler")
    with TimingContext("compile", logger):
        ...
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "romakana"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_handler: Optional[logging.Handler] = None


def get_logger(name: str = "") -> logging.Logger:
    """
    取得 romakana 命名空間下的 logger

    Args:
        name: 子 logger 名稱，例如 "romaji.compiler" 或 __name__

    Returns:
        logging.Logger: "romakana.<name>" logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件根 logger 掛上單一 StreamHandler（重複呼叫只會調整 level）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 套件根 logger
    """
    global _handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(_handler)
    _handler.setLevel(level)
    root.setLevel(level)
    return root


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌 (romakana.timing)"""
    setup_logger(level=logging.WARNING)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)
    if _handler is not None:
        _handler.setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    屬性:
        operation: 操作名稱
        logger: 輸出用 logger（預設 romakana.timing）
        level: 輸出等級
        callback: (operation, elapsed) 回呼
        elapsed: 離開 context 後的耗時（秒）
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    範例：
        >>> @log_timing("build_tables")
        ... def build():
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
