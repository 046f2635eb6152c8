"""Pattern matching and string splitting exercises."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def is_match(s: str, p: str) -> bool:
    """Whether the whole of s matches p, where '.' is any char and 'x*' repeats x."""
    m, n = len(p), len(s)
    table = [[False] * (n + 1) for _ in range(m + 1)]
    table[0][0] = True
    for i in range(1, m + 1):
        pc = p[i - 1]
        for j in range(n + 1):
            if pc == "*" and i > 1:
                prev = p[i - 2]
                table[i][j] = table[i - 2][j] or (
                    j > 0 and prev in (s[j - 1], ".") and table[i][j - 1]
                )
            else:
                table[i][j] = j > 0 and pc in (s[j - 1], ".") and table[i - 1][j - 1]
    return table[m][n]


def is_match_recursive(s: str, p: str) -> bool:
    """Same matching rules as :func:`is_match`, decided by recursion."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def partition(s: str) -> list[list[str]]:
    """Every way to cut s into palindromic pieces, shortest first piece first."""
    if not s:
        return []
    result: list[list[str]] = []
    current: list[str] = []

    def extend(start: int) -> None:
        if start == len(s):
            result.append(list(current))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                current.append(piece)
                extend(end)
                current.pop()

    extend(0)
    return result


def word_break(s: str, words: Sequence[str]) -> bool:
    """Whether s is a concatenation of words (each usable any number of times)."""
    vocabulary = list(words)
    if any(not word for word in vocabulary):
        raise ValueError("words must not be empty strings")

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s.startswith(word, start) and breakable(start + len(word))
            for word in vocabulary
        )

    return breakable(0)


def word_break_dp(s: str, words: Sequence[str]) -> bool:
    """Same question as :func:`word_break`, answered with a reachability table."""
    reach = [False] * (len(s) + 1)
    reach[0] = True
    for start in range(len(s)):
        if not reach[start]:
            continue
        for word in words:
            if s.startswith(word, start):
                reach[start + len(word)] = True
    return reach[-1]