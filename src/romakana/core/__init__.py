"""
核心抽象層

定義轉換器介面、事件模型與最長比對演算法。
"""

from .converter_interface import BaseConverter
from .events import ConversionEvent, ConversionEventHandler
from .matcher import TokenMatch, apply_overlay, convert, match_at, report_match, tokenize

__all__ = [
    "BaseConverter",
    "ConversionEvent",
    "ConversionEventHandler",
    "TokenMatch",
    "apply_overlay",
    "convert",
    "match_at",
    "report_match",
    "tokenize",
]
