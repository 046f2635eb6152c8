"""Small container classes: an LRU cache, a stack with minimum and a trie."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Optional


class LRUCache:
    """Fixed-capacity integer cache that evicts the least recently used key."""

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get(self, key: int) -> int:
        """Value stored under key, marking it most recently used; -1 if absent."""
        if key not in self._items:
            return self.MISSING
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store value under key, evicting the least recently used key if full."""
        if self.capacity == 0:
            return
        self._items[key] = value
        self._items.move_to_end(key)
        if len(self._items) > self.capacity:
            self._items.popitem(last=False)


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        # Each entry holds the pushed value and the minimum at that depth.
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, x: int) -> None:
        """Push x onto the stack."""
        current_min = min(x, self._entries[-1][1]) if self._entries else x
        self._entries.append((x, current_min))

    def pop(self) -> None:
        """Remove the top element."""
        if not self._entries:
            raise IndexError("pop from an empty stack")
        self._entries.pop()

    def top(self) -> int:
        """The top element."""
        if not self._entries:
            raise IndexError("top of an empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """The smallest element currently on the stack."""
        if not self._entries:
            raise IndexError("minimum of an empty stack")
        return self._entries[-1][1]


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree over words made of lowercase ASCII letters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    @staticmethod
    def _check(text: str) -> None:
        for c in text:
            if c not in ascii_lowercase:
                raise ValueError(f"unsupported character {c!r}")

    def _walk(self, text: str) -> Optional[_TrieNode]:
        self._check(text)
        node = self._root
        for c in text:
            child = node.children.get(c)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        self._check(word)
        node = self._root
        for c in word:
            node = node.children.setdefault(c, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether word itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether any inserted word begins with prefix."""
        return self._walk(prefix) is not None