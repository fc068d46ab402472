"""
羅馬字 → 假名規則配置模組

定義輸入法風格 (IME-style) 的組字規則表，值一律為平假名，
片假名規則由 code point 位移推導。
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from romakana.romaji.config import PUNCTUATION

VOWEL_ORDER = "aiueo"

VOWELS: Dict[str, str] = {"a": "あ", "i": "い", "u": "う", "e": "え", "o": "お"}

# 子音 + a/i/u/e/o
CONSONANT_ROWS: Dict[str, str] = {
    "k": "かきくけこ",
    "s": "さしすせそ",
    "t": "たちつてと",
    "n": "なにぬねの",
    "h": "はひふへほ",
    "m": "まみむめも",
    "r": "らりるれろ",
    "g": "がぎぐげご",
    "z": "ざじずぜぞ",
    "d": "だぢづでど",
    "b": "ばびぶべぼ",
    "p": "ぱぴぷぺぽ",
}

# 不規則的行（含外來語用的組合）
IRREGULAR_ROWS: Dict[str, Dict[str, str]] = {
    "y": {"a": "や", "i": "い", "u": "ゆ", "e": "いぇ", "o": "よ"},
    "w": {"a": "わ", "i": "うぃ", "u": "う", "e": "うぇ", "o": "を"},
    "f": {"a": "ふぁ", "i": "ふぃ", "u": "ふ", "e": "ふぇ", "o": "ふぉ"},
    "v": {"a": "ゔぁ", "i": "ゔぃ", "u": "ゔ", "e": "ゔぇ", "o": "ゔぉ"},
    "j": {"a": "じゃ", "i": "じ", "u": "じゅ", "e": "じぇ", "o": "じょ"},
    "sh": {"a": "しゃ", "i": "し", "u": "しゅ", "e": "しぇ", "o": "しょ"},
    "ch": {"a": "ちゃ", "i": "ち", "u": "ちゅ", "e": "ちぇ", "o": "ちょ"},
    "ts": {"a": "つぁ", "i": "つぃ", "u": "つ", "e": "つぇ", "o": "つぉ"},
}

# 小寫假名，前綴 x 或 l（xa -> ぁ，ltsu -> っ）
SMALL_KANA: Dict[str, str] = {
    "a": "ぁ", "i": "ぃ", "u": "ぅ", "e": "ぇ", "o": "ぉ",
    "ya": "ゃ", "yu": "ゅ", "yo": "ょ",
    "tu": "っ", "tsu": "っ",
    "wa": "ゎ",
    "ka": "ゕ", "ke": "ゖ",
    "n": "ん",
}

# 拗音：子音 + y + 母音（kya -> きゃ）
CONTRACTION_CONSONANTS: Dict[str, str] = {
    "k": "き", "s": "し", "t": "ち", "n": "に", "h": "ひ",
    "m": "み", "r": "り", "g": "ぎ", "z": "じ", "d": "ぢ",
    "b": "び", "p": "ぴ", "v": "ゔ", "q": "く", "f": "ふ",
    "j": "じ", "c": "ち",
}

CONTRACTION_GLIDES: Dict[str, str] = {"a": "ゃ", "i": "ぃ", "u": "ゅ", "e": "ぇ", "o": "ょ"}

# 促音：重複子音（kka -> っか）；n 不在此列（nn 是兩個 ん）
GEMINATION_CONSONANTS: Tuple[str, ...] = (
    "k", "s", "t", "h", "m", "y", "r", "w",
    "g", "z", "d", "b", "p", "f", "v", "j", "q",
)

# 長音母音 -> 對應的一般母音
LONG_VOWEL_MARKS: Dict[str, str] = {
    "ā": "a", "ī": "i", "ū": "u", "ē": "e", "ō": "o",
    "â": "a", "î": "i", "û": "u", "ê": "e", "ô": "o",
}

# 平假名長音的補字（kyō -> きょう，ē -> ええ）
LONG_VOWEL_SUFFIXES: Dict[str, str] = {"a": "あ", "i": "い", "u": "う", "e": "え", "o": "う"}

# 舊假名（use_obsolete_kana=True 時疊加）
OBSOLETE_KANA: Dict[str, str] = {"wi": "ゐ", "we": "ゑ"}


def _reverse_punctuation() -> Dict[str, str]:
    return {latin: mark for mark, latin in PUNCTUATION.items() if latin != " "}


@dataclass(frozen=True)
class KanaRuleConfig:
    """
    羅馬字 → 假名組字規則

    Attributes:
        nasal: 撥音的羅馬字（"n"，"n'" 亦同）
        sokuon: 促音假名
        affricate_digraph: "tch" 中被重複的二合字母
        affricate_prefix: "tch" 的前導子音
        prolonged_sound_mark: 片假名長音符號
    """

    vowels: Mapping[str, str] = field(default_factory=lambda: dict(VOWELS))
    consonant_rows: Mapping[str, str] = field(default_factory=lambda: dict(CONSONANT_ROWS))
    irregular_rows: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: dict(IRREGULAR_ROWS))
    small_kana: Mapping[str, str] = field(default_factory=lambda: dict(SMALL_KANA))
    small_prefixes: Tuple[str, ...] = ("x", "l")
    contraction_consonants: Mapping[str, str] = field(default_factory=lambda: dict(CONTRACTION_CONSONANTS))
    contraction_glides: Mapping[str, str] = field(default_factory=lambda: dict(CONTRACTION_GLIDES))
    gemination_consonants: Tuple[str, ...] = GEMINATION_CONSONANTS
    long_vowel_marks: Mapping[str, str] = field(default_factory=lambda: dict(LONG_VOWEL_MARKS))
    long_vowel_suffixes: Mapping[str, str] = field(default_factory=lambda: dict(LONG_VOWEL_SUFFIXES))
    punctuation: Mapping[str, str] = field(default_factory=_reverse_punctuation)
    obsolete_kana: Mapping[str, str] = field(default_factory=lambda: dict(OBSOLETE_KANA))
    nasal: str = "n"
    nasal_kana: str = "ん"
    sokuon: str = "っ"
    affricate_digraph: str = "ch"
    affricate_prefix: str = "t"
    prolonged_sound_mark: str = "ー"


DEFAULT_KANA_RULES = KanaRuleConfig()
