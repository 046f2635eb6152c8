"""Node types shared by the algorithms, plus small formatting and random helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, MutableSequence, Optional, Sequence


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


@dataclass(eq=False, repr=False)
class Node:
    """A node with tree links, a sibling/next link and a random link."""

    val: Any = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    next: Optional["Node"] = None
    random: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.val!r})"


def format_list_node(head: Optional[ListNode]) -> str:
    """Render a linked list as ``[a -> b -> c]``."""
    parts = []
    while head is not None:
        parts.append(str(head.val))
        head = head.next
    return "[" + " -> ".join(parts) + "]"


def random_number(low: int, high: int) -> int:
    """Return a random integer in the closed range ``[low, high]``."""
    return random.randint(low, high)


def random_ints(size: int = -1) -> list[int]:
    """Return ``size`` random integers in ``[0, 99]``; ``-1`` picks a random size below 100."""
    if size == -1:
        size = random.randrange(100)
    return [random.randrange(100) for _ in range(size)]


def format_vector(values: Sequence[Any]) -> str:
    """Render a sequence as ``[a , b , ]``."""
    return "[" + "".join(f"{value} , " for value in values) + "]"


def format_2d_vector(rows: Sequence[Sequence[Any]]) -> str:
    """Render a grid between dashed rules, one row per line."""
    rule = "-------------"
    lines = [rule]
    lines.extend("".join(f"{cell} " for cell in row) for row in rows)
    lines.append(rule)
    return "\n".join(lines)


def swap_items(values: MutableSequence[Any], i: int, j: int) -> None:
    """Swap two positions of a mutable sequence in place."""
    values[i], values[j] = values[j], values[i]