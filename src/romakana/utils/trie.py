"""
符號序列 Trie（無第三方依賴）

用途：
- 以「符號序列 → token」的樹狀結構表示轉寫規則（假名→羅馬字、羅馬字→假名）
- 規則編譯期以 duplicate() + traverse_children() 對整棵子樹套用衍生規則（拗音、促音）
- 轉換期以 Trie.merged() 在全新的 root 上疊加使用者自訂規則，不修改 base trie

所有權：
- 每個節點只屬於其父節點；父節點引用為 weakref（非擁有關係），只用於重建路徑
- 子樹只能透過 duplicate() 出現在兩個位置，永遠是深拷貝
"""

from __future__ import annotations

import weakref
from typing import (
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from romakana.exceptions import DuplicateKeyError, FrozenTrieError

T = TypeVar("T")

Path = Tuple[str, ...]
Visitor = Callable[["TrieNode[T]"], None]
ValueResolver = Callable[["TrieNode[T]", "TrieNode[T]"], T]
MappingInput = Union["Trie", Mapping[str, T], Iterable[Tuple[Sequence[str], T]]]


def right_resolver(target: "TrieNode[T]", source: "TrieNode[T]") -> T:
    """右側優先（預設）：source 的值一律覆蓋 target，佔位節點也一樣"""
    return source.value


def overlay_resolver(target: "TrieNode[T]", source: "TrieNode[T]") -> T:
    """自訂規則疊加用：只有 source 明確插入的值才覆蓋，佔位節點保留 target 的值"""
    return source.value if source.terminal else target.value


def left_resolver(target: "TrieNode[T]", source: "TrieNode[T]") -> T:
    return target.value


class TrieNode(Generic[T]):
    """
    Trie 節點

    屬性:
        key: 進入此節點的符號（root 為 None）
        value: 走完路徑後輸出的 token（編譯期可被規則改寫）
        terminal: 是否由插入操作明確賦值（否則為路徑中間的佔位節點）
    """

    __slots__ = ("key", "_value", "_terminal", "_children", "_parent", "_frozen", "__weakref__")

    def __init__(self, key: Optional[str] = None, value: T = "", terminal: bool = False):
        self.key = key
        self._value = value
        self._terminal = terminal
        self._children: Dict[str, TrieNode[T]] = {}
        self._parent: Optional[weakref.ReferenceType] = None
        self._frozen = False

    def __repr__(self) -> str:
        return f"TrieNode(key={self.key!r}, value={self._value!r}, children={len(self._children)})"

    # ------------------------------------------------------------------
    # 讀取
    # ------------------------------------------------------------------

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._check_mutable()
        self._value = value

    @property
    def terminal(self) -> bool:
        return self._terminal

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def parent(self) -> Optional["TrieNode[T]"]:
        return self._parent() if self._parent is not None else None

    @property
    def path(self) -> Path:
        """從 root 到此節點的符號序列"""
        keys: List[str] = []
        node: Optional[TrieNode[T]] = self
        while node is not None and node.key is not None:
            keys.append(node.key)
            node = node.parent
        return tuple(reversed(keys))

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator["TrieNode[T]"]:
        return iter(list(self._children.values()))

    def __contains__(self, key: str) -> bool:
        return key in self._children

    def __getitem__(self, key: str) -> "TrieNode[T]":
        return self._children[key]

    def keys(self) -> List[str]:
        return list(self._children)

    def get_child(self, key: str) -> Optional["TrieNode[T]"]:
        return self._children.get(key)

    # ------------------------------------------------------------------
    # 修改（凍結後一律拒絕）
    # ------------------------------------------------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenTrieError(f"Trie node {''.join(self.path) or '<root>'!r} is frozen")

    def add(self, key: str, value: T, terminal: bool = True) -> "TrieNode[T]":
        """
        在此節點下新增單一符號的子節點

        Raises:
            DuplicateKeyError: 此節點已經有相同符號的子節點
        """
        return self.attach(TrieNode(key, value, terminal))

    def add_many(self, *pairs: Tuple[str, T]) -> List["TrieNode[T]"]:
        return [self.add(key, value) for key, value in pairs]

    def attach(self, child: "TrieNode[T]") -> "TrieNode[T]":
        """掛上一個尚無父節點的節點（通常來自 duplicate()）"""
        self._check_mutable()
        if child.key is None:
            raise ValueError("root 節點不可被掛到其他節點之下")
        if child.parent is not None:
            raise ValueError(f"節點 {child.key!r} 已經有父節點，請先 duplicate()")
        if child.key in self._children:
            raise DuplicateKeyError(child.key, self.path)
        child._parent = weakref.ref(self)
        self._children[child.key] = child
        return child

    def duplicate(self, copy_children: bool = False) -> "TrieNode[T]":
        """
        建立獨立的拷貝（不共享任何節點，也不繼承凍結狀態）

        Args:
            copy_children: 是否遞迴拷貝整棵子樹
        """
        node: TrieNode[T] = TrieNode(self.key, self._value, self._terminal)
        if copy_children:
            for child in self._children.values():
                node.attach(child.duplicate(copy_children=True))
        return node

    def merge(self, other: "TrieNode[T]", value_resolver: Optional[ValueResolver] = None) -> None:
        """
        把 other 遞迴合併進此節點（other 不會被修改）

        - 本節點的值 = value_resolver(self, other)，預設 right_resolver（other 勝出）
        - 只有 other 有的子節點：掛上完整拷貝
        - 雙方都有的子節點：遞迴合併
        """
        self._check_mutable()
        resolver = value_resolver or right_resolver
        self._value = resolver(self, other)
        self._terminal = self._terminal or other._terminal

        for key, other_child in other._children.items():
            child = self._children.get(key)
            if child is None:
                self.attach(other_child.duplicate(copy_children=True))
            else:
                child.merge(other_child, resolver)

    # ------------------------------------------------------------------
    # 走訪
    # ------------------------------------------------------------------

    def traverse(self, visitor: Visitor, max_depth: Optional[int] = None, order: str = "pre") -> None:
        """對自己與 max_depth 層以內的所有後代呼叫 visitor"""
        _check_order(order)
        self._walk(visitor, (), 0, max_depth, order, set(), include_self=True)

    def traverse_children(self, visitor: Visitor, max_depth: Optional[int] = None, order: str = "pre") -> None:
        """
        對距離此節點 1..max_depth 條邊的後代呼叫 visitor（max_depth=None 表示不限深度）

        每個節點只會被拜訪一次；已拜訪集合以相對路徑記錄。
        """
        _check_order(order)
        if max_depth is not None and max_depth < 1:
            return
        self._walk(visitor, (), 0, max_depth, order, set(), include_self=False)

    def _walk(
        self,
        visitor: Visitor,
        rel_path: Path,
        depth: int,
        max_depth: Optional[int],
        order: str,
        visited: Set[Path],
        include_self: bool,
    ) -> None:
        if rel_path in visited:
            return
        visited.add(rel_path)

        if include_self and order == "pre":
            visitor(self)

        if max_depth is None or depth < max_depth:
            for key, child in list(self._children.items()):
                child._walk(visitor, rel_path + (key,), depth + 1, max_depth, order, visited, True)

        if include_self and order == "post":
            visitor(self)

    def _freeze(self) -> None:
        self._frozen = True
        for child in self._children.values():
            child._freeze()


def _check_order(order: str) -> None:
    if order not in ("pre", "post"):
        raise ValueError(f"order 必須是 'pre' 或 'post'，收到 {order!r}")


def merge_nodes(
    target: TrieNode[T],
    source: TrieNode[T],
    value_resolver: Optional[ValueResolver] = None,
) -> TrieNode[T]:
    target.merge(source, value_resolver)
    return target


class Trie(Generic[T]):
    """
    擁有一個 root 的符號序列 Trie

    Attributes:
        case_insensitive: 拉丁字母鍵的 trie 以小寫儲存路徑，查詢時也轉小寫
        placeholder: 插入時自動建立的中間節點所使用的值
    """

    def __init__(self, case_insensitive: bool = False, placeholder: T = ""):
        self._root: TrieNode[T] = TrieNode(None, placeholder)
        self.case_insensitive = case_insensitive
        self.placeholder = placeholder

    def __repr__(self) -> str:
        return f"Trie(nodes={len(self)}, case_insensitive={self.case_insensitive}, frozen={self.frozen})"

    @property
    def root(self) -> TrieNode[T]:
        return self._root

    @property
    def frozen(self) -> bool:
        return self._root.frozen

    def normalize(self, symbol: str) -> str:
        return symbol.lower() if self.case_insensitive else symbol

    # ------------------------------------------------------------------
    # 建構
    # ------------------------------------------------------------------

    def insert(self, path: Sequence[str], value: T) -> TrieNode[T]:
        """
        沿 path 走下去，缺少的中間節點以 placeholder 建立，並設定終點節點的值

        Returns:
            TrieNode: 終點節點
        """
        if not path:
            raise ValueError("path 不可為空")

        node = self._root
        for symbol in path:
            symbol = self.normalize(symbol)
            child = node.get_child(symbol)
            if child is None:
                child = node.add(symbol, self.placeholder, terminal=False)
            node = child

        node.value = value
        node._terminal = True
        return node

    def get_child(self, node: TrieNode[T], symbol: str) -> Optional[TrieNode[T]]:
        return node.get_child(self.normalize(symbol))

    def freeze(self) -> "Trie[T]":
        """發布為唯讀；之後任何修改都會拋出 FrozenTrieError"""
        self._root._freeze()
        return self

    def duplicate(self) -> "Trie[T]":
        """深拷貝（未凍結）"""
        trie: Trie[T] = Trie(case_insensitive=self.case_insensitive, placeholder=self.placeholder)
        trie._root = self._root.duplicate(copy_children=True)
        return trie

    def merge(self, other: "Trie[T]", value_resolver: Optional[ValueResolver] = None) -> "Trie[T]":
        self._root.merge(other.root, value_resolver)
        return self

    @classmethod
    def merged(
        cls,
        *tries: "Trie[T]",
        value_resolver: Optional[ValueResolver] = None,
        case_insensitive: Optional[bool] = None,
    ) -> "Trie[T]":
        """
        依序把多棵 trie 合併進一個全新的 root（先 base 後 overlay，overlay 在衝突時勝出）
        """
        if case_insensitive is None:
            case_insensitive = tries[0].case_insensitive if tries else False
        placeholder = tries[0].placeholder if tries else ""

        result: Trie[T] = cls(case_insensitive=case_insensitive, placeholder=placeholder)
        for trie in tries:
            result.merge(trie, value_resolver)
        return result

    @classmethod
    def from_mapping(cls, mapping: MappingInput, case_insensitive: bool = False) -> "Trie[T]":
        """
        由 {路徑: 值} 或 [(路徑, 值), ...] 建立 trie

        例如 {"いぬ": "dog"} 或 [("い", "i"), ("いぬ", "dog")]
        """
        if isinstance(mapping, Trie):
            return mapping

        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        trie: Trie[T] = cls(case_insensitive=case_insensitive)
        for path, value in pairs:
            trie.insert(path, value)
        return trie

    # ------------------------------------------------------------------
    # 查詢
    # ------------------------------------------------------------------

    def find(self, path: Sequence[str]) -> Optional[TrieNode[T]]:
        node: Optional[TrieNode[T]] = self._root
        for symbol in path:
            node = self.get_child(node, symbol)
            if node is None:
                return None
        return node

    def get(self, path: Sequence[str], default: Optional[T] = None) -> Optional[T]:
        node = self.find(path) if path else None
        return node.value if node is not None else default

    def __contains__(self, path: Sequence[str]) -> bool:
        node = self.find(path) if path else None
        return node is not None and node.terminal

    def items(self) -> Iterator[Tuple[str, T]]:
        """逐一輸出 (路徑, 值)，root 除外"""
        stack: List[Tuple[str, TrieNode[T]]] = [
            (key, child) for key, child in reversed(list(self._root._children.items()))
        ]
        while stack:
            path, node = stack.pop()
            yield path, node.value
            for key, child in reversed(list(node._children.items())):
                stack.append((path + key, child))

    def __len__(self) -> int:
        return sum(1 for _ in self.items())
