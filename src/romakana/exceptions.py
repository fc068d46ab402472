"""
例外定義模組

分類：
- 建構期缺陷 (RuleTableError / DuplicateKeyError)：規則表本身有誤，於初始化時直接拋出
- 呼叫端錯誤 (UnsupportedMethodError)：未知的羅馬字方式
- 已發布的 Trie 被修改 (FrozenTrieError)
"""

from __future__ import annotations

from typing import Sequence, Tuple


class RomakanaError(Exception):
    """romakana 所有例外的基底類別"""


class RuleTableError(RomakanaError, RuntimeError):
    """規則表格式錯誤（例如白名單中的假名沒有對應的基礎節點）"""


class DuplicateKeyError(RuleTableError):
    """同一節點下重複插入相同的符號"""

    def __init__(self, key: str, path: Tuple[str, ...] = ()):
        self.key = key
        self.path = tuple(path)
        where = "".join(self.path) or "<root>"
        super().__init__(f"Duplicate key {key!r} under node {where!r}")


class FrozenTrieError(RomakanaError, TypeError):
    """已凍結 (published) 的 Trie 不可再修改"""


class UnsupportedMethodError(RomakanaError, ValueError):
    """未知的羅馬字方式"""

    def __init__(self, method: object, supported: Sequence[str] = ()):
        self.method = method
        self.supported = tuple(supported)
        message = f"Unsupported romanization method: {method!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)
