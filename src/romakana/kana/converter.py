"""
羅馬字 → 假名轉換器

使用方式:
    from romakana.kana import KanaConverter

    converter = KanaConverter()
    converter.convert("onna")       # 'おんな'
    converter.convert("KATAKANA")   # 'カタカナ'
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from romakana.config import ConverterConfig
from romakana.core import matcher
from romakana.core.converter_interface import BaseConverter
from romakana.core.events import ConversionEventHandler
from romakana.utils.trie import MappingInput, Trie

from .compiler import KanaRuleSet, get_kana_ruleset


class KanaConverter(BaseConverter):
    """
    羅馬字 → 假名轉換器

    每個 token 先以平假名 trie 比對；若消耗的原文片段全為大寫，改用片假名 trie。
    """

    _converter_name = "kana"

    def __init__(
        self,
        *,
        use_obsolete_kana: bool = False,
        custom_mapping: Optional[MappingInput] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[ConversionEventHandler] = None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Args:
            use_obsolete_kana: wi / we 轉為 ゐ / ゑ（否則 うぃ / うぇ）
            custom_mapping: 預設的自訂規則，例如 {"dog": "いぬ"}
            verbose: 是否開啟詳細日誌
            on_timing: 計時回呼 (operation, elapsed)
            on_event: fallback / placeholder 事件回呼
            config: 進階配置（verbose / on_timing 的預設值）
        """
        if config is not None:
            verbose = verbose or config.verbose
            on_timing = on_timing or config.on_timing
        self._init_logger(verbose=verbose, on_timing=on_timing, on_event=on_event)

        with self._log_timing("kana.__init__"):
            self._ruleset: KanaRuleSet = get_kana_ruleset(use_obsolete_kana)
            self._hiragana: Trie = self._ruleset.hiragana
            self._katakana: Trie = self._ruleset.katakana
            if custom_mapping is not None:
                self._hiragana = matcher.apply_overlay(self._hiragana, custom_mapping).freeze()
                self._katakana = matcher.apply_overlay(self._katakana, custom_mapping).freeze()

    @property
    def ruleset(self) -> KanaRuleSet:
        return self._ruleset

    def convert(self, text: Optional[str], custom_mapping: Optional[MappingInput] = None) -> str:
        """
        轉換為假名

        Args:
            text: 輸入字串（None 或空字串回傳 ""）
            custom_mapping: 本次呼叫專用的自訂規則

        Returns:
            str: 假名結果；沒有規則的字元原樣保留
        """
        if not text:
            return ""

        hiragana = matcher.apply_overlay(self._hiragana, custom_mapping)
        katakana = matcher.apply_overlay(self._katakana, custom_mapping)
        parts: List[str] = []

        with self._log_timing("kana.convert"):
            pos = 0
            while pos < len(text):
                match = matcher.match_at(hiragana, text, pos)
                if match.source(text).isupper():
                    match = matcher.match_at(katakana, text, pos)
                matcher.report_match(match, text, self._emit, self._converter_name)
                parts.append(match.token)
                pos = match.end

        return "".join(parts)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "obsolete_kana": self._ruleset.obsolete_kana,
            "nodes": len(self._hiragana),
            "custom_mapping": self._hiragana is not self._ruleset.hiragana,
        }
