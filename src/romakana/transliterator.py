"""
轉寫入口函式

使用方式:
    import romakana

    romakana.to_romaji("おんよみ")                        # "on'yomi"
    romakana.to_romaji("スーパー", method="wapuro")        # 'su-pa-'
    romakana.to_kana("kin'you")                          # 'きんよう'
    romakana.to_katakana("sūpā")                         # 'スーパー'

轉換器依參數快取；底層規則 trie 在程序內只編譯一次，可在多執行緒間直接共用。
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from romakana.kana.converter import KanaConverter
from romakana.romaji.config import RomanizationMethod
from romakana.romaji.converter import RomajiConverter
from romakana.utils.characters import hiragana_to_katakana, katakana_to_hiragana
from romakana.utils.trie import MappingInput


@lru_cache(maxsize=None)
def get_romaji_converter(method: RomanizationMethod = RomanizationMethod.HEPBURN) -> RomajiConverter:
    return RomajiConverter(method)


@lru_cache(maxsize=None)
def get_kana_converter(use_obsolete_kana: bool = False) -> KanaConverter:
    return KanaConverter(use_obsolete_kana=use_obsolete_kana)


def to_romaji(
    text: Optional[str],
    method: Union[RomanizationMethod, str] = RomanizationMethod.HEPBURN,
    upcase_katakana: bool = False,
    custom_mapping: Optional[MappingInput] = None,
) -> str:
    """
    假名轉羅馬字

    Args:
        text: 輸入字串
        method: 羅馬字方式（hepburn / modified_hepburn / kunrei / nihon / wapuro）
        upcase_katakana: 片假名來源的輸出轉為大寫
        custom_mapping: 本次呼叫專用的自訂規則，例如 {"いぬ": "dog"}

    Returns:
        str: 羅馬字結果（空輸入回傳 ""）

    Raises:
        UnsupportedMethodError: 未知的羅馬字方式
    """
    converter = get_romaji_converter(RomanizationMethod.parse(method))
    return converter.convert(text, upcase_katakana=upcase_katakana, custom_mapping=custom_mapping)


def to_kana(
    text: Optional[str],
    use_obsolete_kana: bool = False,
    custom_mapping: Optional[MappingInput] = None,
) -> str:
    """
    羅馬字轉假名（小寫片段輸出平假名，全大寫片段輸出片假名）

    範例：
        >>> to_kana("onna")
        'おんな'
        >>> to_kana("KATAKANA")
        'カタカナ'
    """
    return get_kana_converter(bool(use_obsolete_kana)).convert(text, custom_mapping=custom_mapping)


def to_hiragana(text: Optional[str], pass_romaji: bool = False, use_obsolete_kana: bool = False) -> str:
    """
    轉為平假名：片假名以 code point 位移轉換，羅馬字經組字轉換

    Args:
        text: 輸入字串
        pass_romaji: True 時羅馬字原樣保留
        use_obsolete_kana: 羅馬字 wi / we 轉為 ゐ / ゑ
    """
    if not text:
        return ""
    hiragana = katakana_to_hiragana(text)
    if pass_romaji:
        return hiragana
    return to_kana(hiragana.lower(), use_obsolete_kana=use_obsolete_kana)


def to_katakana(text: Optional[str], pass_romaji: bool = False, use_obsolete_kana: bool = False) -> str:
    """轉為片假名（長音母音轉為「ー」）"""
    if not text:
        return ""
    if pass_romaji:
        return hiragana_to_katakana(text)
    return hiragana_to_katakana(to_kana(text.upper(), use_obsolete_kana=use_obsolete_kana))
