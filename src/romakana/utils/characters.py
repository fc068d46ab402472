"""
日文字元分類工具

提供平假名、片假名、漢字、羅馬字與日文標點的判斷函式，
以及平假名 ⇄ 片假名的 code point 位移轉換。
"""

from typing import Optional

HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30FC
KANJI_START = 0x4E00
KANJI_END = 0x9FAF
PROLONGED_SOUND_MARK = 0x30FC

# 平假名與片假名之間的固定位移
KANA_SHIFT = KATAKANA_START - HIRAGANA_START

# 羅馬字（含長音符號的拉丁字母與一般 ASCII 標點）
_ROMAJI_RANGES = (
    (0x0000, 0x007F),
    (0x0100, 0x0101),  # Ā ā
    (0x0112, 0x0113),  # Ē ē
    (0x012A, 0x012B),  # Ī ī
    (0x014C, 0x014D),  # Ō ō
    (0x016A, 0x016B),  # Ū ū
    (0x2018, 0x2019),  # ‘ ’
    (0x201C, 0x201D),  # “ ”
)

_ROMAJI_EXTRA = frozenset("âîûêôÂÎÛÊÔ")

_JAPANESE_PUNCTUATION_RANGES = (
    (0x3000, 0x303F),  # CJK 符號與標點
    (0x30FB, 0x30FB),  # ・
    (0xFF01, 0xFF0F),  # 全形 ASCII 標點
    (0xFF1A, 0xFF1F),
    (0xFF3B, 0xFF3F),
    (0xFF5B, 0xFF60),
    (0xFFE0, 0xFFEE),
)


def _code(char: str) -> Optional[int]:
    if not char or len(char) != 1:
        return None
    return ord(char)


def is_hiragana(char: str) -> bool:
    """
    判斷字元是否為平假名（長音符號「ー」也視為平假名的一部分）

    Args:
        char: 單個字元

    Returns:
        bool: 是否為平假名
    """
    code = _code(char)
    if code is None:
        return False
    return HIRAGANA_START <= code <= HIRAGANA_END or code == PROLONGED_SOUND_MARK


def is_katakana(char: str) -> bool:
    """判斷字元是否為片假名（含長音符號）"""
    code = _code(char)
    return code is not None and KATAKANA_START <= code <= KATAKANA_END


def is_kana(char: str) -> bool:
    return is_hiragana(char) or is_katakana(char)


def is_kanji(char: str) -> bool:
    """判斷字元是否為常用漢字 (CJK Unified Ideographs 4E00-9FAF)"""
    code = _code(char)
    return code is not None and KANJI_START <= code <= KANJI_END


def is_romaji(char: str) -> bool:
    """判斷字元是否為羅馬字（ASCII 與帶長音符號的母音）"""
    code = _code(char)
    if code is None:
        return False
    if char in _ROMAJI_EXTRA:
        return True
    return any(start <= code <= end for start, end in _ROMAJI_RANGES)


def is_japanese_punctuation(char: str) -> bool:
    code = _code(char)
    if code is None:
        return False
    return any(start <= code <= end for start, end in _JAPANESE_PUNCTUATION_RANGES)


def is_all(text: str, predicate) -> bool:
    """text 非空且每個字元都符合 predicate"""
    return bool(text) and all(predicate(char) for char in text)


def hiragana_to_katakana(text: str) -> str:
    """
    平假名轉片假名（其他字元原樣保留）

    範例：
        >>> hiragana_to_katakana("わにかに")
        'ワニカニ'
    """
    return "".join(
        chr(ord(char) + KANA_SHIFT) if HIRAGANA_START <= ord(char) <= HIRAGANA_END else char
        for char in text
    )


def katakana_to_hiragana(text: str) -> str:
    """
    片假名轉平假名（長音符號「ー」與沒有對應平假名的字元原樣保留）

    範例：
        >>> katakana_to_hiragana("スーパー")
        'すーぱー'
    """
    return "".join(
        chr(ord(char) - KANA_SHIFT)
        if KATAKANA_START <= ord(char) <= HIRAGANA_END + KANA_SHIFT
        else char
        for char in text
    )
