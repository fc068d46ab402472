"""
假名 → 羅馬字模組

提供各羅馬字方式的規則表、規則編譯器與轉換器。
"""

from .compiler import RuleSet, compile_ruleset, get_ruleset
from .config import (
    HEPBURN,
    KUNREI,
    MODIFIED_HEPBURN,
    NIHON,
    WAPURO,
    RomajiRuleConfig,
    RomanizationMethod,
)
from .converter import RomajiConverter

__all__ = [
    "RomajiConverter",
    "RomanizationMethod",
    "RomajiRuleConfig",
    "RuleSet",
    "compile_ruleset",
    "get_ruleset",
    "HEPBURN",
    "MODIFIED_HEPBURN",
    "KUNREI",
    "NIHON",
    "WAPURO",
]
