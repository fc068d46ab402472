"""
事件模型（Event Model）

轉換器預設不輸出到 stdout。
若需要知道「哪些片段沒有規則可用、被原樣輸出」等資訊，請使用事件回呼（event handler）。

事件類型：
- fallback: 目前字元在 root 底下沒有任何子節點，原樣輸出一個字元
- placeholder: 最長比對停在一個從未被明確插入的中間節點，輸出的是佔位值
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class ConversionEvent(TypedDict, total=False):
    type: Literal["fallback", "placeholder"]
    converter: str

    start: int
    end: int
    text: str
    token: str


ConversionEventHandler = Callable[[ConversionEvent], None]
