"""
轉寫入口函式測試

測試 to_hiragana / to_katakana、錯誤處理與多執行緒共用規則。
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import romakana
from romakana import to_hiragana, to_kana, to_katakana, to_romaji


class TestScriptConversion:
    def test_to_hiragana(self):
        assert to_hiragana("ワニカニ") == "わにかに"
        assert to_hiragana("スーパー") == "すーぱー"
        assert to_hiragana("kana") == "かな"
        assert to_hiragana("KANA") == "かな"
        assert to_hiragana("カナkana") == "かなかな"

    def test_to_hiragana_pass_romaji(self):
        assert to_hiragana("カナkana", pass_romaji=True) == "かなkana"

    def test_to_katakana(self):
        assert to_katakana("わにかに") == "ワニカニ"
        assert to_katakana("kana") == "カナ"
        assert to_katakana("sūpā") == "スーパー"
        assert to_katakana("かなkana") == "カナカナ"

    def test_to_katakana_pass_romaji(self):
        assert to_katakana("かなkana", pass_romaji=True) == "カナkana"

    def test_obsolete_kana_option(self):
        assert to_hiragana("wi", use_obsolete_kana=True) == "ゐ"
        assert to_hiragana("we") == "うぇ"
        assert to_katakana("wi", use_obsolete_kana=True) == "ヰ"
        assert to_katakana("we", use_obsolete_kana=True) == "ヱ"
        assert to_katakana("wi") == "ウィ"

    def test_empty_input(self):
        for func in (to_hiragana, to_katakana, to_kana, to_romaji):
            assert func("") == ""
            assert func(None) == ""

    def test_kanji_passes_through(self):
        assert to_hiragana("缶コーヒー") == "缶こーひー"
        assert to_katakana("缶こーひー") == "缶コーヒー"


class TestPublicSurface:
    def test_exports(self):
        for name in romakana.__all__:
            assert hasattr(romakana, name)

    def test_version(self):
        assert romakana.__version__

    def test_unsupported_method_is_value_error(self):
        with pytest.raises(romakana.UnsupportedMethodError) as exc_info:
            to_romaji("かな", method="unknown")

        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, romakana.RomakanaError)


class TestConcurrency:
    def test_shared_rules_under_threads(self):
        """多執行緒同時轉換（含每次呼叫的自訂規則）結果一致"""
        cases = [
            ("hepburn", "ワニカニ　ガ　スゴイ　ダ", None, "wanikani ga sugoi da"),
            ("nihon", "しゅっしゅ", None, "syussyu"),
            ("wapuro", "スーパー", None, "su-pa-"),
            ("hepburn", "いぬ", {"いぬ": "dog"}, "dog"),
            ("hepburn", "いぬ", None, "inu"),
        ]

        def run(index):
            method, text, mapping, expected = cases[index % len(cases)]
            return to_romaji(text, method=method, custom_mapping=mapping) == expected

        def run_kana(index):
            return to_kana("kin'you") == "きんよう" and to_kana("KATAKANA") == "カタカナ"

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, range(200)))
            kana_results = list(executor.map(run_kana, range(50)))

        assert all(results)
        assert all(kana_results)
