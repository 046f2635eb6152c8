"""Graph searches over word ladders, grids and course prerequisites."""

from __future__ import annotations

from collections import defaultdict, deque
from string import ascii_lowercase
from typing import MutableSequence, Sequence

_BORDER_MARK = "?"


def ladder_length(begin_word: str, end_word: str, words: Sequence[str]) -> int:
    """Words in the shortest ladder from begin_word to end_word, or 0.

    Each step changes one lowercase letter and must land on a word from words.
    """
    vocabulary = set(words)
    depth = {begin_word: 1}
    queue = deque([begin_word])
    while queue:
        word = queue.popleft()
        if word == end_word:
            return depth[word]
        for i, current in enumerate(word):
            for letter in ascii_lowercase:
                if letter == current:
                    continue
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in vocabulary and candidate not in depth:
                    depth[candidate] = depth[word] + 1
                    queue.append(candidate)
    return 0


def _one_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def ladder_length_scan(begin_word: str, end_word: str, words: Sequence[str]) -> int:
    """Same answer as :func:`ladder_length`, comparing against every listed word."""
    seen = {begin_word}
    frontier = [begin_word]
    level = 0
    while frontier:
        level += 1
        following: list[str] = []
        for word in frontier:
            if word == end_word:
                return level
            for candidate in words:
                if candidate not in seen and _one_apart(candidate, word):
                    seen.add(candidate)
                    following.append(candidate)
        frontier = following
    return 0


def _flood(
    grid: Sequence[MutableSequence[str]], row: int, col: int, target: str, mark: str
) -> None:
    """Replace the target-valued region containing (row, col) with mark."""
    stack = [(row, col)]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < len(grid) and 0 <= j < len(grid[i])):
            continue
        if grid[i][j] != target:
            continue
        grid[i][j] = mark
        stack.extend(((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)))


def solve_surrounded(board: Sequence[MutableSequence[str]]) -> None:
    """Turn every 'O' region not touching the border into 'X', in place.

    Boards with fewer than two rows are left unchanged.
    """
    if len(board) < 2:
        return
    rows, cols = len(board), len(board[0])
    for j in range(cols):
        _flood(board, 0, j, "O", _BORDER_MARK)
        _flood(board, rows - 1, j, "O", _BORDER_MARK)
    for i in range(1, rows - 1):
        _flood(board, i, 0, "O", _BORDER_MARK)
        _flood(board, i, cols - 1, "O", _BORDER_MARK)
    for row in board:
        for j, cell in enumerate(row):
            if cell == "O":
                row[j] = "X"
            elif cell == _BORDER_MARK:
                row[j] = "O"


def num_islands(grid: Sequence[MutableSequence[str]]) -> int:
    """Count regions of '1' joined edge to edge; the grid is cleared to '0'."""
    count = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "1":
                count += 1
                _flood(grid, i, j, "1", "0")
    return count


def _prerequisite_pairs(
    num_courses: int, prerequisites: Sequence[Sequence[int]]
) -> list[tuple[int, int]]:
    pairs = []
    for course, required, *_ in prerequisites:
        for value in (course, required):
            if not 0 <= value < num_courses:
                raise ValueError(f"course {value} is out of range")
        pairs.append((course, required))
    return pairs


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Whether all courses can be taken, given ``[course, required]`` pairs.

    Courses are released in order of having no outstanding requirements.
    """
    unlocks: dict[int, list[int]] = defaultdict(list)
    waiting = [0] * num_courses
    for course, required in _prerequisite_pairs(num_courses, prerequisites):
        unlocks[required].append(course)
        waiting[course] += 1
    queue = deque(course for course, count in enumerate(waiting) if count == 0)
    done = len(queue)
    while queue:
        for course in unlocks[queue.popleft()]:
            waiting[course] -= 1
            if waiting[course] == 0:
                queue.append(course)
                done += 1
    return done == num_courses


def can_finish_dfs(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Same question as :func:`can_finish`, answered by searching for a cycle."""
    requires: dict[int, list[int]] = defaultdict(list)
    for course, required in _prerequisite_pairs(num_courses, prerequisites):
        requires[course].append(required)
    state = [0] * num_courses  # 0 unvisited, 1 on the current path, 2 finished
    for start in range(num_courses):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(requires[start]))]
        while stack:
            course, pending = stack[-1]
            advanced = False
            for required in pending:
                if state[required] == 1:
                    return False
                if state[required] == 0:
                    state[required] = 1
                    stack.append((required, iter(requires[required])))
                    advanced = True
                    break
            if not advanced:
                state[course] = 2
                stack.pop()
    return True