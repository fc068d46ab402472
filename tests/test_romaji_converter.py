"""
假名 → 羅馬字轉換器測試

各羅馬字方式的行為對照表、片假名大寫、自訂規則與事件。
"""

import pytest

from romakana import RomajiConverter, UnsupportedMethodError, to_romaji

COMMON_CASES = [
    ("", ""),
    ("ワニカニ　ガ　スゴイ　ダ", "wanikani ga sugoi da"),
    ("わにかに　が　すごい　だ", "wanikani ga sugoi da"),
    ("きんにくまん", "kinnikuman"),
    ("んんにんにんにゃんやん", "nnninninnyan'yan"),
    ("っ", ""),
    ("ヶ", "ヶ"),
    ("ヵ", "ヵ"),
    ("ゃ ゅ ょ ぁ ぃ ぅ ぇ ぉ", "ya yu yo a i u e o"),
    ("おんよみ", "on'yomi"),
    ("んよ んあ んゆ", "n'yo n'a n'yu"),
    ("一抹げーむ", "一抹ge-mu"),
]

HEPBURN_CASES = COMMON_CASES + [
    ("ばつげーむ", "batsuge-mu"),
    ("スーパー", "suupaa"),
    ("缶コーヒー", "缶koohii"),
    ("かっぱ　たった　しゅっしゅ ちゃっちゃ　やっつ", "kappa tatta shusshu chatcha yattsu"),
    ("シンヨ", "shin'yo"),
    ("ふフ", "fufu"),
    ("ふとん", "futon"),
    ("フリー", "furii"),
    ("し", "shi"),
    ("しゅ", "shu"),
    ("ち", "chi"),
    ("ふ", "fu"),
    ("じゃ", "ja"),
]

NIHON_CASES = COMMON_CASES + [
    ("ばつげーむ", "batuge-mu"),
    ("スーパー", "suupaa"),
    ("缶コーヒー", "缶koohii"),
    ("かっぱ　たった　しゅっしゅ ちゃっちゃ　やっつ", "kappa tatta syussyu tyattya yattu"),
    ("シンヨ", "sin'yo"),
    ("ふフ", "huhu"),
    ("ふとん", "huton"),
    ("フリー", "hurii"),
    ("し", "si"),
    ("しゅ", "syu"),
    ("ち", "ti"),
    ("ふ", "hu"),
    ("じゃ", "zya"),
    ("ぢ", "di"),
]

WAPURO_CASES = COMMON_CASES + [
    ("ばつげーむ", "batsuge-mu"),
    ("スーパー", "su-pa-"),
    ("缶コーヒー", "缶ko-hi-"),
    ("かっぱ　たった　しゅっしゅ ちゃっちゃ　やっつ", "kappa tatta shusshu chatcha yattsu"),
    ("フリー", "furi-"),
]

KUNREI_CASES = [
    ("しゃしん", "syasin"),
    ("ちゅうい", "tyuui"),
    ("じゅんび", "zyunbi"),
    ("ぢ", "zi"),
    ("を", "o"),
    ("ツナミ", "tunami"),
    ("マッチ", "matti"),
]

MODIFIED_HEPBURN_CASES = [
    ("スーパー", "sūpā"),
    ("缶コーヒー", "缶kōhī"),
    ("ばつげーむ", "batsuge-mu"),
    ("マッチ", "matchi"),
]


@pytest.mark.parametrize("text, expected", HEPBURN_CASES)
def test_hepburn(text, expected):
    assert to_romaji(text, method="hepburn") == expected


@pytest.mark.parametrize("text, expected", NIHON_CASES)
def test_nihon(text, expected):
    assert to_romaji(text, method="nihon") == expected


@pytest.mark.parametrize("text, expected", WAPURO_CASES)
def test_wapuro(text, expected):
    assert to_romaji(text, method="wapuro") == expected


@pytest.mark.parametrize("text, expected", KUNREI_CASES)
def test_kunrei(text, expected):
    assert to_romaji(text, method="kunrei") == expected


@pytest.mark.parametrize("text, expected", MODIFIED_HEPBURN_CASES)
def test_modified_hepburn(text, expected):
    assert to_romaji(text, method="modified_hepburn") == expected


class TestUpcaseKatakana:
    def setup_method(self):
        self.converter = RomajiConverter("hepburn")

    def test_katakana_only(self):
        assert self.converter.convert("ワニカニ", upcase_katakana=True) == "WANIKANI"

    def test_mixed_scripts(self):
        """只有消耗的原文全為片假名的 token 轉大寫"""
        result = self.converter.convert("ワニカニ　が　すごい　だ", upcase_katakana=True)
        assert result == "WANIKANI ga sugoi da"

    def test_default_is_lowercase(self):
        assert self.converter.convert("ワニカニ") == "wanikani"

    def test_constructor_default(self):
        converter = RomajiConverter("nihon", upcase_katakana=True)
        assert converter.convert("ワニカニ") == "WANIKANI"
        assert converter.convert("ワニカニ", upcase_katakana=False) == "wanikani"

    @pytest.mark.parametrize("method", ["hepburn", "kunrei", "nihon", "wapuro"])
    def test_all_variants(self, method):
        assert to_romaji("ワニカニ", method=method, upcase_katakana=True) == "WANIKANI"

    def test_long_vowel_is_uppercased(self):
        assert to_romaji("スーパー", method="wapuro", upcase_katakana=True) == "SU-PA-"
        assert to_romaji("スーパー", method="modified_hepburn", upcase_katakana=True) == "SŪPĀ"


class TestCustomMapping:
    def test_custom_mapping_overrides_for_call(self):
        assert to_romaji("いぬ") == "inu"
        assert to_romaji("いぬ", custom_mapping={"い": "i", "いぬ": "dog"}) == "dog"
        assert to_romaji("いぬ") == "inu"

    def test_prefix_of_custom_key_keeps_base_value(self):
        assert to_romaji("いいぬ", custom_mapping={"いぬ": "dog"}) == "idog"
        assert to_romaji("い", custom_mapping={"いぬ": "dog"}) == "i"

    def test_custom_mapping_as_pairs(self):
        result = to_romaji("ねこといぬ", custom_mapping=[("ねこ", "cat"), ("いぬ", "dog")])
        assert result == "cattodog"

    def test_constructor_mapping(self):
        converter = RomajiConverter("hepburn", custom_mapping={"いぬ": "dog"})

        assert converter.convert("いぬ") == "dog"
        assert converter.convert("いぬ", custom_mapping={"いぬ": "hound"}) == "hound"
        assert converter.get_stats()["custom_mapping"] is True
        assert RomajiConverter("hepburn").convert("いぬ") == "inu"


class TestConverterBehaviour:
    def test_empty_input(self):
        converter = RomajiConverter()
        assert converter.convert("") == ""
        assert converter.convert(None) == ""
        assert to_romaji(None) == ""

    def test_unknown_method(self):
        with pytest.raises(UnsupportedMethodError):
            RomajiConverter("pinyin")
        with pytest.raises(UnsupportedMethodError):
            to_romaji("かな", method="pinyin")
        with pytest.raises(ValueError):
            to_romaji("", method="pinyin")

    def test_fallback_events(self):
        events = []
        converter = RomajiConverter("hepburn", on_event=events.append)

        assert converter.convert("缶コーヒー") == "缶koohii"
        assert len(events) == 1
        assert events[0]["type"] == "fallback"
        assert events[0]["text"] == "缶"
        assert events[0]["converter"] == "romaji.hepburn"

    def test_timing_callback(self):
        timings = []
        converter = RomajiConverter("kunrei", on_timing=lambda op, elapsed: timings.append((op, elapsed)))
        converter.convert("かな")

        operations = [op for op, _ in timings]
        assert "romaji.kunrei.convert" in operations
        assert all(elapsed >= 0 for _, elapsed in timings)

    def test_stats_report_long_vowel_transform(self):
        assert RomajiConverter("wapuro").get_stats()["long_vowel"] == "append_hyphen"
        assert RomajiConverter("modified_hepburn").get_stats()["long_vowel"] == "compose_macron"

    def test_events_go_through_emit(self):
        """事件經由 BaseConverter._emit 送出"""

        class RecordingConverter(RomajiConverter):
            def __init__(self, *args, **kwargs):
                self.emitted = []
                super().__init__(*args, **kwargs)

            def _emit(self, event):
                self.emitted.append(event)

        converter = RecordingConverter("hepburn")
        converter.convert("缶コーヒー")

        assert [event["type"] for event in converter.emitted] == ["fallback"]

    def test_callable(self):
        converter = RomajiConverter("wapuro")
        assert converter("スーパー") == "su-pa-"

    def test_stats(self):
        stats = RomajiConverter("nihon").get_stats()
        assert stats["method"] == "nihon"
        assert stats["long_vowel"] == "double_final_vowel"
        assert stats["nodes"] > 0
        assert stats["custom_mapping"] is False
