"""
假名 → 羅馬字規則編譯器測試

測試拗音、撥音撇號、促音（含 ch -> tch）、片假名長音、標點與規則表錯誤。
"""

import dataclasses

import pytest

from romakana.exceptions import DuplicateKeyError, RuleTableError, UnsupportedMethodError
from romakana.romaji.compiler import build_script_trie, compile_ruleset, get_ruleset
from romakana.romaji.config import (
    GEMINATION_EXCLUSIONS,
    HEPBURN,
    KUNREI,
    PUNCTUATION,
    RomanizationMethod,
    append_hyphen,
    compose_macron,
    double_final_vowel,
)
from romakana.utils.characters import hiragana_to_katakana


class TestRuleSetRegistry:
    def test_ruleset_is_compiled_once(self):
        first = get_ruleset("hepburn")
        second = get_ruleset(RomanizationMethod.HEPBURN)

        assert first is second
        assert first.method is RomanizationMethod.HEPBURN

    def test_published_trie_is_frozen(self):
        for method in RomanizationMethod:
            assert get_ruleset(method).trie.frozen

    def test_unknown_method(self):
        with pytest.raises(UnsupportedMethodError) as exc_info:
            get_ruleset("pinyin")

        assert exc_info.value.method == "pinyin"
        assert "hepburn" in exc_info.value.supported

    def test_parse_method(self):
        assert RomanizationMethod.parse("Hepburn") is RomanizationMethod.HEPBURN
        assert RomanizationMethod.parse("modified-hepburn") is RomanizationMethod.MODIFIED_HEPBURN
        assert RomanizationMethod.parse("NIHON") is RomanizationMethod.NIHON
        with pytest.raises(ValueError):
            RomanizationMethod.parse(None)


class TestHepburnRules:
    def setup_method(self):
        self.trie = get_ruleset("hepburn").trie

    def test_base_syllables(self):
        assert self.trie.get("し") == "shi"
        assert self.trie.get("ツ") == "tsu"
        assert self.trie.get("を") == "wo"
        assert self.trie.get("ぢ") == "ji"

    def test_contractions(self):
        """拗音：規則的 prefix + ya，以及 し/ち/じ/ぢ 的不規則後綴"""
        assert self.trie.get("きゃ") == "kya"
        assert self.trie.get("ピョ") == "pyo"
        assert self.trie.get("しゃ") == "sha"
        assert self.trie.get("ちょ") == "cho"
        assert self.trie.get("じゅ") == "ju"
        assert self.trie.get("ぢゃ") == "ja"
        assert self.trie.find("かゃ") is None

    def test_nasal_apostrophe(self):
        assert self.trie.get("んや") == "n'ya"
        assert self.trie.get("んあ") == "n'a"
        assert self.trie.get("ンヨ") == "n'yo"
        assert self.trie.find("んな") is None

    def test_gemination(self):
        assert self.trie.get("っ") == ""
        assert self.trie.get("っか") == "kka"
        assert self.trie.get("っしゅ") == "sshu"
        assert self.trie.get("ッパ") == "ppa"

    def test_gemination_of_affricates(self):
        """ch 開頭的 token 前置 t 而不是重複 c"""
        assert self.trie.get("っち") == "tchi"
        assert self.trie.get("っちゃ") == "tcha"

    def test_gemination_exclusions(self):
        for kana in ("あ", "や", "ん", "ゃ", "っ"):
            assert self.trie.find("っ" + kana) is None

    def test_gemination_doubles_every_mora(self):
        for kana, romaji in HEPBURN.syllabary.items():
            if kana in GEMINATION_EXCLUSIONS:
                continue
            expected = "t" + romaji if romaji.startswith("ch") else romaji[0] + romaji
            assert self.trie.get("っ" + kana) == expected
            assert self.trie.get("ッ" + hiragana_to_katakana(kana)) == expected

    def test_katakana_long_vowel(self):
        assert self.trie.get("コー") == "koo"
        assert self.trie.get("キャー") == "kyaa"
        assert self.trie.get("ンアー") is None

    def test_long_vowel_blacklist(self):
        """撥音、促音子樹與平假名沒有長音子節點"""
        assert self.trie.find("ンー") is None
        assert self.trie.find("ッー") is None
        assert self.trie.find("ッカー") is None
        assert self.trie.find("こー") is None

    def test_punctuation(self):
        assert len(PUNCTUATION) == 19
        assert self.trie.get("。") == "."
        assert self.trie.get("ー") == "-"
        assert self.trie.get("　") == " "
        assert self.trie.get("『") == "“"


class TestVariantRules:
    def test_kunrei_contractions_are_regular(self):
        trie = get_ruleset("kunrei").trie
        assert trie.get("しゃ") == "sya"
        assert trie.get("ちゃ") == "tya"
        assert trie.get("じゃ") == "zya"
        assert trie.get("を") == "o"
        assert trie.get("っち") == "tti"

    def test_nihon_distinguishes_di_du(self):
        trie = get_ruleset("nihon").trie
        assert trie.get("ぢ") == "di"
        assert trie.get("づ") == "du"
        assert trie.get("ぢゃ") == "dya"
        assert trie.get("を") == "wo"

    def test_long_vowel_transforms(self):
        assert get_ruleset("wapuro").trie.get("コー") == "ko-"
        assert get_ruleset("modified_hepburn").trie.get("コー") == "kō"
        assert get_ruleset("modified_hepburn").trie.get("キュー") == "kyū"

    def test_transform_functions(self):
        assert double_final_vowel("su") == "suu"
        assert append_hyphen("su") == "su-"
        assert compose_macron("su") == "sū"
        assert compose_macron("a") == "ā"


class TestCompilerErrors:
    def test_build_script_trie_is_not_frozen(self):
        trie = build_script_trie(KUNREI, katakana=True)
        assert not trie.frozen
        assert trie.get("シ") == "si"
        assert trie.find("し") is None

    def test_whitelist_entry_without_base_node(self):
        config = dataclasses.replace(HEPBURN, contractions={"ゐ": ("ya", "yu", "yo")})
        with pytest.raises(RuleTableError):
            compile_ruleset(config)

    def test_whitelist_entry_with_wrong_suffix_count(self):
        config = dataclasses.replace(HEPBURN, contractions={"き": ("ya", "yu")})
        with pytest.raises(RuleTableError):
            compile_ruleset(config)

    def test_missing_nasal(self):
        syllabary = {kana: romaji for kana, romaji in HEPBURN.syllabary.items() if kana != "ん"}
        config = dataclasses.replace(HEPBURN, syllabary=syllabary)
        with pytest.raises(RuleTableError):
            compile_ruleset(config)

    def test_punctuation_colliding_with_syllable(self):
        config = dataclasses.replace(HEPBURN, punctuation={"あ": "a"})
        with pytest.raises(DuplicateKeyError):
            compile_ruleset(config)
