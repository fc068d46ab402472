"""
假名 → 羅馬字轉換器

使用方式:
    from romakana.romaji import RomajiConverter

    converter = RomajiConverter("hepburn")
    converter.convert("ワニカニ　が　すごい　だ", upcase_katakana=True)
    # 'WANIKANI ga sugoi da'
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from romakana.config import ConverterConfig
from romakana.core import matcher
from romakana.core.converter_interface import BaseConverter
from romakana.core.events import ConversionEventHandler
from romakana.core.matcher import TokenMatch
from romakana.utils.characters import is_all, is_katakana
from romakana.utils.trie import MappingInput, Trie

from .compiler import RuleSet, get_ruleset
from .config import RomanizationMethod


def upcase_katakana_token(match: TokenMatch, text: str) -> str:
    """消耗的原文片段全部是片假名時，輸出轉大寫"""
    if is_all(match.source(text), is_katakana):
        return match.token.upper()
    return match.token


class RomajiConverter(BaseConverter):
    """
    假名 → 羅馬字轉換器

    規則 trie 在程序內共用且唯讀；custom_mapping 會疊加在一棵全新的 trie 上，
    因此同一個實例可以被多個執行緒同時呼叫。
    """

    def __init__(
        self,
        method: Union[RomanizationMethod, str] = RomanizationMethod.HEPBURN,
        *,
        upcase_katakana: bool = False,
        custom_mapping: Optional[MappingInput] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[ConversionEventHandler] = None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Args:
            method: 羅馬字方式（hepburn / modified_hepburn / kunrei / nihon / wapuro）
            upcase_katakana: 預設是否把片假名來源的輸出轉大寫
            custom_mapping: 預設的自訂規則，例如 {"いぬ": "dog"}
            verbose: 是否開啟詳細日誌
            on_timing: 計時回呼 (operation, elapsed)
            on_event: fallback / placeholder 事件回呼
            config: 進階配置（verbose / on_timing 的預設值）

        Raises:
            UnsupportedMethodError: 未知的羅馬字方式
        """
        self._method = RomanizationMethod.parse(method)
        self._converter_name = f"romaji.{self._method.value}"
        if config is not None:
            verbose = verbose or config.verbose
            on_timing = on_timing or config.on_timing
        self._init_logger(verbose=verbose, on_timing=on_timing, on_event=on_event)

        with self._log_timing(f"{self._converter_name}.__init__"):
            self._ruleset: RuleSet = get_ruleset(self._method)
            self._upcase_katakana = upcase_katakana
            self._trie: Trie = self._ruleset.trie
            if custom_mapping is not None:
                self._trie = matcher.apply_overlay(self._ruleset.trie, custom_mapping).freeze()

    @property
    def method(self) -> RomanizationMethod:
        return self._method

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    def convert(
        self,
        text: Optional[str],
        upcase_katakana: Optional[bool] = None,
        custom_mapping: Optional[MappingInput] = None,
    ) -> str:
        """
        轉換為羅馬字

        Args:
            text: 輸入字串（None 或空字串回傳 ""）
            upcase_katakana: 覆寫建構時的設定
            custom_mapping: 本次呼叫專用的自訂規則

        Returns:
            str: 羅馬字結果；沒有規則的字元（漢字等）原樣保留
        """
        if not text:
            return ""

        upcase = self._upcase_katakana if upcase_katakana is None else upcase_katakana
        process = upcase_katakana_token if upcase and self._ruleset.upcase_katakana else None

        with self._log_timing(f"{self._converter_name}.convert"):
            return matcher.convert(
                self._trie,
                text,
                overlay=custom_mapping,
                process_token=process,
                on_event=self._emit,
                source=self._converter_name,
            )

    def get_stats(self) -> Dict[str, Any]:
        return {
            "method": self._method.value,
            "nodes": len(self._trie),
            "upcase_katakana": self._upcase_katakana,
            "long_vowel": self._ruleset.long_vowel.__name__,
            "custom_mapping": self._trie is not self._ruleset.trie,
        }
