"""
羅馬字規則配置模組

定義各羅馬字方式（Hepburn / Modified Hepburn / Kunrei / Nihon / Wāpuro）的規則表。
所有表格以平假名為鍵，片假名規則由 code point 位移推導。
"""

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Mapping, Tuple, Union

from romakana.exceptions import UnsupportedMethodError

LongVowelTransform = Callable[[str], str]


class RomanizationMethod(str, Enum):
    """羅馬字方式"""

    HEPBURN = "hepburn"
    MODIFIED_HEPBURN = "modified_hepburn"
    KUNREI = "kunrei"
    NIHON = "nihon"
    WAPURO = "wapuro"

    @classmethod
    def parse(cls, value: Union["RomanizationMethod", str]) -> "RomanizationMethod":
        """
        解析羅馬字方式（接受 enum 成員、名稱或值，不分大小寫）

        Raises:
            UnsupportedMethodError: 未知的羅馬字方式
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for method in cls:
                if normalized in (method.value, method.name.lower()):
                    return method
        raise UnsupportedMethodError(value, [method.value for method in cls])


# =========================================================================
# 長音轉換 (Long Vowel Transforms)
# =========================================================================


def double_final_vowel(token: str) -> str:
    """スーパー -> suupaa"""
    return token + token[-1]


def append_hyphen(token: str) -> str:
    """スーパー -> su-pa-"""
    return token + "-"


def compose_macron(token: str) -> str:
    """スーパー -> sūpā"""
    return token[:-1] + unicodedata.normalize("NFC", token[-1] + "\u0304")


# =========================================================================
# 共用表格
# =========================================================================

PUNCTUATION: Dict[str, str] = {
    "。": ".",
    "、": ",",
    "：": ":",
    "・": "/",
    "！": "!",
    "？": "?",
    "〜": "~",
    "ー": "-",
    "「": "‘",
    "」": "’",
    "『": "“",
    "』": "”",
    "［": "[",
    "］": "]",
    "（": "(",
    "）": ")",
    "｛": "{",
    "｝": "}",
    "\u3000": " ",
}

SMALL_Y_GLIDES: Tuple[str, str, str] = ("ゃ", "ゅ", "ょ")

NASAL_MORA = "ん"
SOKUON = "っ"
PROLONGED_SOUND_MARK = "ー"

# 撥音後接母音或 y 音時，以撇號區分（んや -> n'ya，にゃ -> nya）
NASAL_FOLLOWERS: Dict[str, str] = {
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
}

# 不會被促音重複子音的 root 子節點
GEMINATION_EXCLUSIONS: Tuple[str, ...] = (
    "あ", "い", "う", "え", "お",
    "や", "ゆ", "よ",
    "ん",
    "ぁ", "ぃ", "ぅ", "ぇ", "ぉ",
    "ゃ", "ゅ", "ょ",
    "っ",
)

_REGULAR_GLIDES = ("ya", "yu", "yo")

_HEPBURN_SYLLABARY: Dict[str, str] = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "を": "wo",
    "ん": "n",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo",
}

# 拗音：假名 -> (ゃ, ゅ, ょ) 的後綴，實際 token = 基礎 token 首字母 + 後綴
_HEPBURN_CONTRACTIONS: Dict[str, Tuple[str, str, str]] = {
    **{kana: _REGULAR_GLIDES for kana in "きにひみりぎびぴ"},
    "し": ("ha", "hu", "ho"),
    "ち": ("ha", "hu", "ho"),
    "じ": ("a", "u", "o"),
    "ぢ": ("a", "u", "o"),
}

_KUNREI_SYLLABARY: Dict[str, str] = {
    **_HEPBURN_SYLLABARY,
    "し": "si", "ち": "ti", "つ": "tu", "ふ": "hu",
    "じ": "zi", "ぢ": "zi", "づ": "zu",
    "を": "o",
}

_NIHON_SYLLABARY: Dict[str, str] = {
    **_KUNREI_SYLLABARY,
    "ぢ": "di", "づ": "du",
    "を": "wo",
}

# 訓令式、日本式的拗音全部規則化（sya / tya / zya / dya）
_REGULAR_CONTRACTIONS: Dict[str, Tuple[str, str, str]] = {
    kana: _REGULAR_GLIDES for kana in "きにひみりぎびぴしちじぢ"
}


@dataclass(frozen=True)
class RomajiRuleConfig:
    """
    單一羅馬字方式的規則表

    Attributes:
        method: 羅馬字方式
        syllabary: 基礎音節表（平假名 -> 羅馬字）
        contractions: 拗音白名單（假名 -> ゃ/ゅ/ょ 後綴）
        nasal_followers: 撥音後接的假名與其羅馬字
        gemination_exclusions: 促音不重複的假名
        affricate_digraph: 促音時改以替代子音重複的開頭（"ch"）
        affricate_substitute: 替代子音（"t"，ちゃっちゃ -> chatcha）
        long_vowel: 片假名長音符號的轉換函式
        punctuation: 標點對照表
        upcase_katakana: 是否支援片假名輸出大寫
    """

    method: RomanizationMethod
    syllabary: Mapping[str, str]
    contractions: Mapping[str, Tuple[str, str, str]]
    long_vowel: LongVowelTransform = double_final_vowel
    nasal_followers: Mapping[str, str] = field(default_factory=lambda: dict(NASAL_FOLLOWERS))
    gemination_exclusions: Tuple[str, ...] = GEMINATION_EXCLUSIONS
    affricate_digraph: str = "ch"
    affricate_substitute: str = "t"
    punctuation: Mapping[str, str] = field(default_factory=lambda: dict(PUNCTUATION))
    upcase_katakana: bool = True


HEPBURN = RomajiRuleConfig(
    method=RomanizationMethod.HEPBURN,
    syllabary=_HEPBURN_SYLLABARY,
    contractions=_HEPBURN_CONTRACTIONS,
)

MODIFIED_HEPBURN = RomajiRuleConfig(
    method=RomanizationMethod.MODIFIED_HEPBURN,
    syllabary=_HEPBURN_SYLLABARY,
    contractions=_HEPBURN_CONTRACTIONS,
    long_vowel=compose_macron,
)

KUNREI = RomajiRuleConfig(
    method=RomanizationMethod.KUNREI,
    syllabary=_KUNREI_SYLLABARY,
    contractions=_REGULAR_CONTRACTIONS,
)

NIHON = RomajiRuleConfig(
    method=RomanizationMethod.NIHON,
    syllabary=_NIHON_SYLLABARY,
    contractions=_REGULAR_CONTRACTIONS,
)

WAPURO = RomajiRuleConfig(
    method=RomanizationMethod.WAPURO,
    syllabary=_HEPBURN_SYLLABARY,
    contractions=_HEPBURN_CONTRACTIONS,
    long_vowel=append_hyphen,
)

RULE_CONFIGS: Dict[RomanizationMethod, RomajiRuleConfig] = {
    config.method: config for config in (HEPBURN, MODIFIED_HEPBURN, KUNREI, NIHON, WAPURO)
}
