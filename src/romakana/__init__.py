"""
romakana - 日文假名 ⇄ 羅馬字轉寫引擎

核心概念：
- 轉寫規則以「符號序列 Trie」表示，由規則編譯器從音節表推導（拗音、撥音、促音、長音）
- 轉換時在 Trie 上做貪婪最長比對，沒有規則的字元原樣輸出
- 使用者自訂規則只疊加在每次呼叫專用的新 Trie 上，不修改共用的規則

官方入口（穩定 API）：
- `romakana.to_romaji` / `romakana.to_kana`
- `romakana.to_hiragana` / `romakana.to_katakana`
- `romakana.RomajiConverter` / `romakana.KanaConverter`
"""

# =============================================================================
# 轉寫入口
# =============================================================================
from romakana.transliterator import to_hiragana, to_kana, to_katakana, to_romaji

# =============================================================================
# 轉換器（進階用途）
# =============================================================================
from romakana.kana import KanaConverter
from romakana.romaji import RomajiConverter, RomanizationMethod

# =============================================================================
# 字元分類
# =============================================================================
from romakana.utils.characters import (
    is_hiragana,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_romaji,
)

# =============================================================================
# 例外與日誌工具
# =============================================================================
from romakana.exceptions import (
    DuplicateKeyError,
    FrozenTrieError,
    RomakanaError,
    RuleTableError,
    UnsupportedMethodError,
)
from romakana.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# Trie（進階用途）
# =============================================================================
from romakana.utils.trie import Trie, TrieNode

__all__ = [
    # Transliteration
    "to_romaji",
    "to_kana",
    "to_hiragana",
    "to_katakana",
    # Converters
    "RomajiConverter",
    "KanaConverter",
    "RomanizationMethod",
    # Character predicates
    "is_hiragana",
    "is_katakana",
    "is_kana",
    "is_kanji",
    "is_romaji",
    "is_japanese_punctuation",
    # Errors
    "RomakanaError",
    "RuleTableError",
    "DuplicateKeyError",
    "FrozenTrieError",
    "UnsupportedMethodError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Trie (advanced)
    "Trie",
    "TrieNode",
]

__version__ = "0.1.0"
