"""
羅馬字 → 假名規則編譯器

依序建立：
1. 基礎音節（母音、各行、不規則行、x/l 小寫假名、撥音）
2. 拗音（kya -> きゃ）
3. 中間節點回顯（只打到一半的 "k" 輸出 "k" 而不是空字串）
4. 促音（kka -> っか，tchi -> っち）
5. 長音母音（kyō -> きょう / キョー）
6. 標點

平假名與片假名各自編譯一棵 trie（拉丁字母鍵、不分大小寫）。
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from romakana.exceptions import DuplicateKeyError, RuleTableError
from romakana.utils.characters import hiragana_to_katakana
from romakana.utils.logger import TimingContext, get_logger
from romakana.utils.trie import Trie, TrieNode, overlay_resolver

from .config import DEFAULT_KANA_RULES, VOWEL_ORDER, KanaRuleConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class KanaRuleSet:
    """
    編譯完成的組字規則

    Attributes:
        hiragana: 平假名 trie（已凍結）
        katakana: 片假名 trie（已凍結），用於全大寫的片段
        obsolete_kana: 是否已疊加舊假名（ゐ / ゑ）
    """

    hiragana: Trie
    katakana: Trie
    obsolete_kana: bool = False


def _identity(text: str) -> str:
    return text


def _insert_strict(trie: Trie, path: Sequence[str], value: str) -> TrieNode:
    """同一路徑不可被明確插入兩次"""
    existing = trie.find(path)
    if existing is not None and existing.terminal:
        raise DuplicateKeyError(path[-1], tuple(path[:-1]))
    return trie.insert(path, value)


def echo_placeholders(trie: Trie, katakana: bool = False) -> None:
    """
    中間節點輸出已輸入的字母（"k" -> "k"）

    片假名 trie 只用於全大寫的片段，因此以大寫回顯（"K" -> "K"）。
    """

    def echo(node: TrieNode) -> None:
        if not node.terminal and not node.value:
            text = "".join(node.path)
            node.value = text.upper() if katakana else text

    trie.root.traverse_children(echo)


def add_base_syllables(trie: Trie, config: KanaRuleConfig, script: Callable[[str], str]) -> None:
    for vowel, kana in config.vowels.items():
        _insert_strict(trie, vowel, script(kana))

    for consonant, row in config.consonant_rows.items():
        if len(row) != len(VOWEL_ORDER):
            raise RuleTableError(f"{consonant!r} 行需要 {len(VOWEL_ORDER)} 個假名，收到 {len(row)}")
        for vowel, kana in zip(VOWEL_ORDER, row):
            _insert_strict(trie, consonant + vowel, script(kana))

    for prefix, row in config.irregular_rows.items():
        for vowel, kana in row.items():
            _insert_strict(trie, prefix + vowel, script(kana))

    for prefix in config.small_prefixes:
        for romaji, kana in config.small_kana.items():
            _insert_strict(trie, prefix + romaji, script(kana))

    nasal = script(config.nasal_kana)
    _insert_strict(trie, config.nasal, nasal)
    _insert_strict(trie, config.nasal + "'", nasal)


def add_contractions(trie: Trie, config: KanaRuleConfig, script: Callable[[str], str]) -> None:
    """子音 + y + 母音 -> い段假名 + 小寫 ゃ/ぃ/ゅ/ぇ/ょ"""
    for consonant, base in config.contraction_consonants.items():
        for vowel, glide in config.contraction_glides.items():
            _insert_strict(trie, consonant + "y" + vowel, script(base + glide))


def add_gemination(trie: Trie, config: KanaRuleConfig, script: Callable[[str], str]) -> None:
    """
    重複子音：把該子音的整棵子樹複製到自己底下，每個 token 前加上 っ

    "tch" 同理：把 "c" 的子樹複製到 "t" 底下。
    """
    sokuon = script(config.sokuon)
    root = trie.root

    def prefix_sokuon(node: TrieNode) -> None:
        node.value = sokuon + node.value

    def geminate(parent: TrieNode, source: TrieNode) -> None:
        doubled = source.duplicate(copy_children=True)
        doubled.traverse(prefix_sokuon)
        parent.attach(doubled)

    for consonant in config.gemination_consonants:
        node = root.get_child(consonant)
        if node is None:
            raise RuleTableError(f"促音: 沒有子音 {consonant!r} 的基礎節點")
        geminate(node, node)

    prefix_node = root.get_child(config.affricate_prefix)
    digraph_node = root.get_child(config.affricate_digraph[0])
    if prefix_node is None or digraph_node is None:
        raise RuleTableError(f"促音: 缺少 {config.affricate_prefix + config.affricate_digraph!r} 所需的節點")
    geminate(prefix_node, digraph_node)


def add_long_vowels(trie: Trie, config: KanaRuleConfig, katakana: bool = False) -> int:
    """
    在每個擁有一般母音子節點的節點旁加上長音母音（ā / â ...）

    Returns:
        int: 新增的節點數
    """
    targets: List[TrieNode] = []

    def collect(node: TrieNode) -> None:
        if any(vowel in node for vowel in config.long_vowel_suffixes):
            targets.append(node)

    trie.root.traverse(collect)

    added = 0
    for node in targets:
        for mark, vowel in config.long_vowel_marks.items():
            child = node.get_child(vowel)
            if child is None:
                continue
            suffix = config.prolonged_sound_mark if katakana else config.long_vowel_suffixes[vowel]
            node.add(mark, child.value + suffix)
            added += 1
    return added


def build_kana_trie(config: KanaRuleConfig = DEFAULT_KANA_RULES, katakana: bool = False) -> Trie:
    """
    建立平假名或片假名的組字 trie

    Args:
        config: 組字規則
        katakana: True 時輸出片假名

    Returns:
        Trie: 尚未凍結、不分大小寫的 trie
    """
    script = hiragana_to_katakana if katakana else _identity
    trie: Trie = Trie(case_insensitive=True)

    add_base_syllables(trie, config, script)
    add_contractions(trie, config, script)
    echo_placeholders(trie, katakana=katakana)
    add_gemination(trie, config, script)
    add_long_vowels(trie, config, katakana=katakana)

    for latin, mark in config.punctuation.items():
        trie.root.add(latin, mark)

    return trie


def build_obsolete_overlay(config: KanaRuleConfig = DEFAULT_KANA_RULES, katakana: bool = False) -> Trie:
    script = hiragana_to_katakana if katakana else _identity
    return Trie.from_mapping(
        {romaji: script(kana) for romaji, kana in config.obsolete_kana.items()},
        case_insensitive=True,
    )


def compile_kana_ruleset(config: KanaRuleConfig = DEFAULT_KANA_RULES, obsolete_kana: bool = False) -> KanaRuleSet:
    with TimingContext(f"compile_kana_ruleset(obsolete={obsolete_kana})", logger) as timing:
        hiragana = build_kana_trie(config, katakana=False)
        katakana = build_kana_trie(config, katakana=True)
        if obsolete_kana:
            hiragana = Trie.merged(
                hiragana, build_obsolete_overlay(config, katakana=False), value_resolver=overlay_resolver
            )
            katakana = Trie.merged(
                katakana, build_obsolete_overlay(config, katakana=True), value_resolver=overlay_resolver
            )
        hiragana.freeze()
        katakana.freeze()

    logger.info(
        f"Compiled kana rule set (obsolete={obsolete_kana}): "
        f"{len(hiragana)} nodes per script in {timing.elapsed * 1000:.2f}ms"
    )
    return KanaRuleSet(hiragana=hiragana, katakana=katakana, obsolete_kana=obsolete_kana)


_kana_rulesets: Dict[bool, KanaRuleSet] = {}
_kana_rulesets_lock = threading.Lock()


def get_kana_ruleset(obsolete_kana: bool = False) -> KanaRuleSet:
    """取得（必要時編譯）程序內共用的組字規則"""
    ruleset = _kana_rulesets.get(obsolete_kana)
    if ruleset is not None:
        return ruleset

    with _kana_rulesets_lock:
        ruleset = _kana_rulesets.get(obsolete_kana)
        if ruleset is None:
            ruleset = compile_kana_ruleset(obsolete_kana=obsolete_kana)
            _kana_rulesets[obsolete_kana] = ruleset
    return ruleset
