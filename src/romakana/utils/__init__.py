"""
工具模組

提供日誌、計時、Trie 與日文字元分類等通用工具。
"""

from .characters import (
    hiragana_to_katakana,
    is_hiragana,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_romaji,
    katakana_to_hiragana,
)
from .logger import (
    TimingContext,
    get_logger,
    log_timing,
)
from .trie import Trie, TrieNode, left_resolver, merge_nodes, overlay_resolver, right_resolver

__all__ = [
    # 日誌工具
    "get_logger",
    "log_timing",
    "TimingContext",

    # Trie
    "Trie",
    "TrieNode",
    "merge_nodes",
    "overlay_resolver",
    "right_resolver",
    "left_resolver",

    # 字元分類
    "is_hiragana",
    "is_katakana",
    "is_kana",
    "is_kanji",
    "is_romaji",
    "is_japanese_punctuation",
    "hiragana_to_katakana",
    "katakana_to_hiragana",
]
