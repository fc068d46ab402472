"""
假名 ⇄ 羅馬字轉寫範例 (Transliteration Examples)

本檔案展示 romakana 的核心功能：
1. 基礎用法 - 各羅馬字方式
2. 片假名大寫
3. 自訂規則
4. 羅馬字轉假名（輸入法風格）
5. 事件與計時回呼
"""

import sys
from pathlib import Path

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from romakana import KanaConverter, RomajiConverter, to_hiragana, to_kana, to_katakana, to_romaji


def print_case(title, text, result):
    print(f"--- {title} ---")
    print(f"原文 (Input):  {text}")
    print(f"結果 (Output): {result}")
    print()


# =============================================================================
# 範例 1: 各羅馬字方式
# =============================================================================
def example_1_methods():
    print("=" * 60)
    print("範例 1: 羅馬字方式 (Romanization Methods)")
    print("=" * 60)

    text = "かっぱ　しゅっしゅ　スーパー"
    for method in ("hepburn", "modified_hepburn", "kunrei", "nihon", "wapuro"):
        print_case(method, text, to_romaji(text, method=method))


# =============================================================================
# 範例 2: 片假名大寫
# =============================================================================
def example_2_upcase_katakana():
    print("=" * 60)
    print("範例 2: 片假名大寫 (Upcase Katakana)")
    print("=" * 60)

    text = "ワニカニ　が　すごい　だ"
    print_case("upcase_katakana=True", text, to_romaji(text, upcase_katakana=True))


# =============================================================================
# 範例 3: 自訂規則（只影響這次呼叫）
# =============================================================================
def example_3_custom_mapping():
    print("=" * 60)
    print("範例 3: 自訂規則 (Custom Mapping)")
    print("=" * 60)

    converter = RomajiConverter("hepburn")
    print_case("預設", "いぬ", converter.convert("いぬ"))
    print_case("custom_mapping", "いぬ", converter.convert("いぬ", custom_mapping={"いぬ": "dog"}))


# =============================================================================
# 範例 4: 羅馬字轉假名
# =============================================================================
def example_4_to_kana():
    print("=" * 60)
    print("範例 4: 羅馬字轉假名 (Romaji to Kana)")
    print("=" * 60)

    for text in ("kin'you", "kinyou", "matcha", "tōkyō", "KATAKANA"):
        print_case("to_kana", text, to_kana(text))

    print_case("to_hiragana", "ワニカニ", to_hiragana("ワニカニ"))
    print_case("to_katakana", "sūpā", to_katakana("sūpā"))


# =============================================================================
# 範例 5: 事件與計時回呼
# =============================================================================
def example_5_events_and_timing():
    print("=" * 60)
    print("範例 5: 事件與計時 (Events & Timing)")
    print("=" * 60)

    events = []
    timings = []
    converter = KanaConverter(
        on_event=events.append,
        on_timing=lambda op, elapsed: timings.append((op, elapsed)),
    )
    print_case("未完成的輸入", "kak", converter.convert("kak"))

    for event in events:
        print(f"  event: {event['type']} {event['text']!r} -> {event['token']!r}")
    for operation, elapsed in timings:
        print(f"  timing: {operation} {elapsed * 1000:.3f}ms")
    print()


if __name__ == "__main__":
    example_1_methods()
    example_2_upcase_katakana()
    example_3_custom_mapping()
    example_4_to_kana()
    example_5_events_and_timing()
