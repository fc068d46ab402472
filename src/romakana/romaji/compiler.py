"""
假名 → 羅馬字規則編譯器

依序建立：
1. 基礎音節
2. 拗音（き + ゃ -> kya，し + ゃ -> sha）
3. 撥音撇號（ん + や -> n'ya）
4. 促音（っ + か -> kka，っ + ち -> tchi）
5. 片假名長音（コー -> koo / ko- / kō）
6. 平假名、片假名合併後加入標點

編譯結果在程序內只建立一次，發布後為唯讀 (frozen)，可在多執行緒間直接共用。
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Set, Union

from romakana.exceptions import RuleTableError
from romakana.utils.characters import hiragana_to_katakana
from romakana.utils.logger import TimingContext, get_logger
from romakana.utils.trie import Trie, TrieNode

from .config import (
    NASAL_MORA,
    PROLONGED_SOUND_MARK,
    RULE_CONFIGS,
    SMALL_Y_GLIDES,
    SOKUON,
    LongVowelTransform,
    RomajiRuleConfig,
    RomanizationMethod,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class RuleSet:
    """
    編譯完成的羅馬字規則

    Attributes:
        method: 羅馬字方式
        trie: 已凍結的規則 trie（平假名、片假名、標點）
        long_vowel: 長音轉換函式
        upcase_katakana: 是否支援片假名輸出大寫
    """

    method: RomanizationMethod
    trie: Trie
    long_vowel: LongVowelTransform
    upcase_katakana: bool = True


def _identity(text: str) -> str:
    return text


def _require(root: TrieNode, key: str, rule: str) -> TrieNode:
    node = root.get_child(key)
    if node is None:
        raise RuleTableError(f"{rule}: 基礎音節表中沒有 {key!r}")
    if not node.value:
        raise RuleTableError(f"{rule}: {key!r} 的基礎 token 為空")
    return node


def _geminate(node: TrieNode, config: RomajiRuleConfig) -> None:
    value = node.value
    if not value:
        return
    if value.startswith(config.affricate_digraph):
        node.value = config.affricate_substitute + value
    else:
        node.value = value[0] + value


def add_contractions(root: TrieNode, config: RomajiRuleConfig, script: Callable[[str], str]) -> None:
    """
    拗音：在白名單假名底下加入 ゃ/ゅ/ょ 子節點

    token = 基礎 token 的首字母 + 後綴（き + ゃ -> k + ya，し + ゃ -> s + ha）
    """
    glides = [script(glide) for glide in SMALL_Y_GLIDES]
    for kana, suffixes in config.contractions.items():
        if len(suffixes) != len(glides):
            raise RuleTableError(f"拗音白名單 {kana!r} 需要 {len(glides)} 個後綴，收到 {len(suffixes)}")
        node = _require(root, script(kana), "拗音白名單")
        prefix = node.value[0]
        for glide, suffix in zip(glides, suffixes):
            node.add(glide, prefix + suffix)


def add_nasal_apostrophes(root: TrieNode, config: RomajiRuleConfig, script: Callable[[str], str]) -> None:
    """撥音後接母音或 y 音：ん + や -> n'ya，與 にゃ (nya) 區分"""
    nasal = _require(root, script(NASAL_MORA), "撥音")
    prefix = nasal.value[0]
    for kana, romaji in config.nasal_followers.items():
        nasal.add(script(kana), f"{prefix}'{romaji}")


def add_gemination(root: TrieNode, config: RomajiRuleConfig, script: Callable[[str], str]) -> TrieNode:
    """
    促音：複製 root 底下除例外之外的所有子樹到 っ 底下，再把每個 token 的首子音重複

    以 "ch" 開頭的 token 改為前置 "t"（っち -> tchi）。
    """
    exclusions: Set[str] = {script(kana) for kana in config.gemination_exclusions}
    sokuon = root.add(script(SOKUON), "")

    for child in root:
        if child.key not in exclusions:
            sokuon.attach(child.duplicate(copy_children=True))

    sokuon.traverse_children(lambda node: _geminate(node, config), order="post")
    return sokuon


def add_long_vowels(root: TrieNode, config: RomajiRuleConfig, script: Callable[[str], str]) -> int:
    """
    長音符號：在撥音、促音子樹以外的每個節點加上「ー」子節點

    Returns:
        int: 新增的節點數
    """
    blacklist = {script(NASAL_MORA), script(SOKUON)}
    targets: List[TrieNode] = []

    def collect(node: TrieNode) -> None:
        if node.key == PROLONGED_SOUND_MARK or not node.value:
            return
        if node.path[0] in blacklist:
            return
        targets.append(node)

    root.traverse_children(collect)
    for node in targets:
        node.add(PROLONGED_SOUND_MARK, config.long_vowel(node.value))
    return len(targets)


def build_script_trie(config: RomajiRuleConfig, katakana: bool = False) -> Trie:
    """
    建立單一文字系統（平假名或片假名）的規則 trie

    Args:
        config: 羅馬字規則表
        katakana: True 時所有假名鍵轉為片假名，並加入長音規則

    Returns:
        Trie: 尚未凍結的 trie
    """
    script = hiragana_to_katakana if katakana else _identity
    trie: Trie = Trie()
    root = trie.root

    for kana, romaji in config.syllabary.items():
        root.add(script(kana), romaji)

    add_contractions(root, config, script)
    add_nasal_apostrophes(root, config, script)
    add_gemination(root, config, script)

    if katakana:
        add_long_vowels(root, config, script)

    return trie


def add_punctuation(trie: Trie, punctuation: Dict[str, str]) -> None:
    for mark, replacement in punctuation.items():
        trie.root.add(mark, replacement)


def compile_ruleset(config: RomajiRuleConfig) -> RuleSet:
    """
    編譯單一羅馬字方式的完整規則

    Raises:
        RuleTableError: 規則表本身有誤（含 DuplicateKeyError）
    """
    with TimingContext(f"compile_ruleset({config.method.value})", logger) as timing:
        hiragana = build_script_trie(config, katakana=False)
        katakana = build_script_trie(config, katakana=True)

        trie = Trie.merged(hiragana, katakana)
        add_punctuation(trie, dict(config.punctuation))
        trie.freeze()

    logger.info(
        f"Compiled {config.method.value} rule set: {len(trie)} nodes in {timing.elapsed * 1000:.2f}ms"
    )
    return RuleSet(
        method=config.method,
        trie=trie,
        long_vowel=config.long_vowel,
        upcase_katakana=config.upcase_katakana,
    )


# 程序內共用的已編譯規則（只建立一次，不會被釋放）
_rulesets: Dict[RomanizationMethod, RuleSet] = {}
_rulesets_lock = threading.Lock()


def get_ruleset(method: Union[RomanizationMethod, str] = RomanizationMethod.HEPBURN) -> RuleSet:
    """
    取得（必要時編譯）指定羅馬字方式的規則

    Raises:
        UnsupportedMethodError: 未知的羅馬字方式
    """
    method = RomanizationMethod.parse(method)
    ruleset = _rulesets.get(method)
    if ruleset is not None:
        return ruleset

    with _rulesets_lock:
        ruleset = _rulesets.get(method)
        if ruleset is None:
            ruleset = compile_ruleset(RULE_CONFIGS[method])
            _rulesets[method] = ruleset
    return ruleset
