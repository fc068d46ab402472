"""
日文字元分類測試
"""

from romakana.utils.characters import (
    hiragana_to_katakana,
    is_all,
    is_hiragana,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_romaji,
    katakana_to_hiragana,
)


class TestPredicates:
    def test_hiragana(self):
        assert is_hiragana("あ")
        assert is_hiragana("ゖ")
        assert is_hiragana("ー")
        assert not is_hiragana("ア")
        assert not is_hiragana("a")

    def test_katakana(self):
        assert is_katakana("ア")
        assert is_katakana("ヶ")
        assert is_katakana("ー")
        assert not is_katakana("あ")

    def test_kana_and_kanji(self):
        assert is_kana("あ")
        assert is_kana("ア")
        assert not is_kana("缶")
        assert is_kanji("缶")
        assert is_kanji("一")
        assert not is_kanji("あ")

    def test_romaji(self):
        assert is_romaji("a")
        assert is_romaji("Z")
        assert is_romaji("'")
        assert is_romaji("ā")
        assert is_romaji("ô")
        assert not is_romaji("あ")
        assert not is_romaji("缶")

    def test_japanese_punctuation(self):
        assert is_japanese_punctuation("。")
        assert is_japanese_punctuation("　")
        assert is_japanese_punctuation("・")
        assert is_japanese_punctuation("！")
        assert not is_japanese_punctuation("!")
        assert not is_japanese_punctuation("あ")

    def test_invalid_input(self):
        """空字串或多字元一律為 False"""
        for predicate in (is_hiragana, is_katakana, is_kanji, is_romaji, is_japanese_punctuation):
            assert not predicate("")
            assert not predicate("ああ")

    def test_is_all(self):
        assert is_all("カタカナ", is_katakana)
        assert not is_all("カタかな", is_katakana)
        assert not is_all("", is_katakana)


class TestKanaShift:
    def test_hiragana_to_katakana(self):
        assert hiragana_to_katakana("わにかに") == "ワニカニ"
        assert hiragana_to_katakana("ゔぁ") == "ヴァ"
        assert hiragana_to_katakana("すーぱー") == "スーパー"
        assert hiragana_to_katakana("abc缶") == "abc缶"

    def test_katakana_to_hiragana(self):
        assert katakana_to_hiragana("ワニカニ") == "わにかに"
        assert katakana_to_hiragana("スーパー") == "すーぱー"
        assert katakana_to_hiragana("ヷ") == "ヷ"
