"""
最長比對 (Greedy Longest-Match) 模組

在編譯好的 Trie 上由左到右掃描輸入：
- 每個位置從 root 出發，能往下走就往下走，走不動時輸出所在節點的 token
- 第一個字元在 root 底下就沒有子節點時，原樣輸出該字元並前進一格
- 不回溯：一旦停下就輸出，不會改試較短的路徑

掃描位置每次至少前進一格，因此迭代次數不超過輸入長度。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from romakana.core.events import ConversionEvent, ConversionEventHandler
from romakana.utils.logger import get_logger
from romakana.utils.trie import MappingInput, Trie, ValueResolver, overlay_resolver

logger = get_logger(__name__)

TERMINAL = "terminal"
PLACEHOLDER = "placeholder"
FALLBACK = "fallback"


@dataclass(frozen=True)
class TokenMatch:
    """
    單次比對結果

    Attributes:
        token: 輸出字串
        start: 消耗的輸入起點（含）
        end: 消耗的輸入終點（不含）
        kind: terminal / placeholder / fallback
    """

    token: str
    start: int
    end: int
    kind: str = TERMINAL

    def source(self, text: str) -> str:
        """取回這個 token 實際消耗的原文片段"""
        return text[self.start:self.end]


TokenProcessor = Callable[[TokenMatch, str], str]


def match_at(trie: Trie, text: str, pos: int) -> TokenMatch:
    """
    從 pos 開始做一次最長比對

    Args:
        trie: 規則 trie
        text: 輸入字串
        pos: 起點（必須小於 len(text)）

    Returns:
        TokenMatch: 至少消耗一個字元的比對結果
    """
    node = trie.get_child(trie.root, text[pos])
    if node is None:
        return TokenMatch(text[pos], pos, pos + 1, FALLBACK)

    end = pos + 1
    while end < len(text):
        child = trie.get_child(node, text[end])
        if child is None:
            break
        node = child
        end += 1

    return TokenMatch(node.value, pos, end, TERMINAL if node.terminal else PLACEHOLDER)


def tokenize(trie: Trie, text: str) -> Iterator[TokenMatch]:
    pos = 0
    while pos < len(text):
        match = match_at(trie, text, pos)
        yield match
        pos = match.end


def apply_overlay(
    base: Trie,
    overlay: Optional[MappingInput] = None,
    value_resolver: Optional[ValueResolver] = None,
) -> Trie:
    """
    把自訂規則疊加到 base 上，回傳一棵全新的 trie（base 與 overlay 都不會被修改）

    沒有 overlay 時直接回傳 base。value_resolver 預設為 overlay_resolver：
    自訂規則 {"いぬ": "dog"} 的佔位節點 "い" 不會蓋掉 base 的 "i"。
    """
    if overlay is None:
        return base

    overlay_trie = Trie.from_mapping(overlay, case_insensitive=base.case_insensitive)
    return Trie.merged(
        base,
        overlay_trie,
        value_resolver=value_resolver or overlay_resolver,
        case_insensitive=base.case_insensitive,
    )


def convert(
    trie: Trie,
    text: Optional[str],
    overlay: Optional[MappingInput] = None,
    value_resolver: Optional[ValueResolver] = None,
    process_token: Optional[TokenProcessor] = None,
    on_event: Optional[ConversionEventHandler] = None,
    source: str = "matcher",
) -> str:
    """
    以最長比對轉換整段文字

    Args:
        trie: 編譯好的規則 trie
        text: 輸入字串（None 或空字串直接回傳 ""）
        overlay: 本次呼叫專用的自訂規則（mapping、(path, value) 序列或 Trie）
        value_resolver: 合併 overlay 時的值決定函式（預設 overlay_resolver）
        process_token: token 後處理 (match, 原文) -> 輸出字串
        on_event: fallback / placeholder 事件回呼
        source: 事件中的 converter 名稱

    Returns:
        str: 所有 token 依輸入順序串接的結果
    """
    if not text:
        return ""

    active = apply_overlay(trie, overlay, value_resolver)
    parts: List[str] = []

    for match in tokenize(active, text):
        report_match(match, text, on_event, source)
        parts.append(process_token(match, text) if process_token is not None else match.token)

    return "".join(parts)


def report_match(
    match: TokenMatch,
    text: str,
    on_event: Optional[ConversionEventHandler] = None,
    source: str = "matcher",
) -> None:
    """fallback / placeholder 比對寫入 debug 日誌並送出事件"""
    if match.kind == TERMINAL:
        return

    logger.debug(f"{match.kind}: {match.source(text)!r} -> {match.token!r} @ {match.start}")
    if on_event is not None:
        on_event(
            ConversionEvent(
                type=match.kind,
                converter=source,
                start=match.start,
                end=match.end,
                text=match.source(text),
                token=match.token,
            )
        )
