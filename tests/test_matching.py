import itertools

import pytest

from algokit.matching import (
    is_match,
    is_match_recursive,
    partition,
    word_break,
    word_break_dp,
)

STRINGS = ["", "a", "aa", "ab", "aab", "abc", "mississippi", "ccab"]
PATTERNS = [
    "",
    "a",
    "a*",
    ".*",
    ".",
    "c*a*b",
    "mis*is*p*.",
    "mis*is*ip*.",
    "a.c",
    "ab*",
    "b*a*",
]


@pytest.mark.parametrize("s,p", list(itertools.product(STRINGS, PATTERNS)))
def test_is_match_agrees_with_recursive(s, p):
    assert is_match(s, p) == is_match_recursive(s, p)


@pytest.mark.parametrize("s", ["", "a", "abc", "mississippi"])
def test_literal_pattern_matches_itself(s):
    assert is_match(s, s) is True
    assert is_match_recursive(s, s) is True


@pytest.mark.parametrize("s", ["abc", "mississippi", "xyz"])
def test_changed_literal_does_not_match(s):
    changed = s[:-1] + ("q" if s[-1] != "q" else "r")
    assert is_match(s, changed) is False
    assert is_match_recursive(s, changed) is False


@pytest.mark.parametrize("s", STRINGS)
def test_dot_star_and_dots_match_everything(s):
    assert is_match(s, ".*") is True
    assert is_match(s, "." * len(s)) is True
    assert is_match(s, "." * (len(s) + 1)) is False


def test_source_example():
    assert is_match("aab", "c*a*b") is True


def test_partition_aab():
    assert partition("aab") == [["a", "a", "b"], ["aa", "b"]]


def test_partition_empty():
    assert partition("") == []


@pytest.mark.parametrize("s", ["racecar", "abba", "abcba", "noonx"])
def test_partition_invariants(s):
    parts = partition(s)
    assert [list(s)] == parts[:1]
    assert s in ["".join(p) for p in parts] and all("".join(p) == s for p in parts)
    assert all(piece == piece[::-1] for p in parts for piece in p)
    assert len({tuple(p) for p in parts}) == len(parts)


def test_partition_whole_palindrome_is_last():
    parts = partition("racecar")
    assert parts[-1] == ["racecar"]


SOURCE_CASES = [
    ("leetcode", ["leet", "code"]),
    ("applepenapple", ["apple", "pen"]),
    ("catsandog", ["cats", "dog", "sand", "and", "cat"]),
    ("catsandog", ["ndog", "catsa", "dog", "sand", "and", "cat"]),
    ("cars", ["car", "ca", "rs"]),
]


@pytest.mark.parametrize("s,words", SOURCE_CASES)
def test_word_break_strategies_agree(s, words):
    assert word_break(s, words) == word_break_dp(s, words)


@pytest.mark.parametrize(
    "words,picks",
    [
        (["leet", "code"], [0, 1]),
        (["apple", "pen"], [0, 1, 0]),
        (["car", "ca", "rs"], [1, 2, 1, 0]),
    ],
)
def test_concatenation_of_words_is_breakable(words, picks):
    s = "".join(words[i] for i in picks)
    assert word_break(s, words) is True
    assert word_break_dp(s, words) is True


def test_unknown_character_is_not_breakable():
    words = ["cats", "dog", "sand", "and", "cat"]
    assert word_break("catsandzog", words) is False
    assert word_break_dp("catsandzog", words) is False


def test_word_break_rejects_empty_word():
    with pytest.raises(ValueError):
        word_break("abc", ["", "abc"])