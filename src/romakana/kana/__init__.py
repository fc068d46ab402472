"""
羅馬字 → 假名模組

提供輸入法風格的組字規則、編譯器與轉換器。
"""

from .compiler import KanaRuleSet, build_kana_trie, compile_kana_ruleset, get_kana_ruleset
from .config import DEFAULT_KANA_RULES, KanaRuleConfig
from .converter import KanaConverter

__all__ = [
    "KanaConverter",
    "KanaRuleConfig",
    "KanaRuleSet",
    "DEFAULT_KANA_RULES",
    "build_kana_trie",
    "compile_kana_ruleset",
    "get_kana_ruleset",
]
