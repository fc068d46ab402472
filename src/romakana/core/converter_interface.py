"""
轉換器抽象基類

定義所有轉換器（假名→羅馬字、羅馬字→假名）共用的介面與日誌、計時功能。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from romakana.core.events import ConversionEvent, ConversionEventHandler
from romakana.utils.logger import TimingContext, get_logger, setup_logger


class BaseConverter(ABC):
    """
    轉換器抽象基類 (Abstract Base Class)

    職責:
    - 持有已編譯、唯讀的規則 trie（程序內共用）
    - 每次呼叫時視需要在全新的 root 上疊加自訂規則
    - 提供日誌、計時與事件回呼

    生命週期:
    - 建構時取得（必要時編譯）規則，之後可被多執行緒同時呼叫
    """

    _converter_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[ConversionEventHandler] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing
        self._event_handler = on_event

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"converter.{self._converter_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _emit(self, event: ConversionEvent) -> None:
        """把 fallback / placeholder 事件交給使用者的 on_event 回呼"""
        if self._event_handler is not None:
            self._event_handler(event)

    @property
    def name(self) -> str:
        return self._converter_name

    @abstractmethod
    def convert(self, text: Optional[str], **kwargs) -> str:
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        pass

    def __call__(self, text: Optional[str], **kwargs) -> str:
        return self.convert(text, **kwargs)
