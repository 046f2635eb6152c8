"""Binary-tree exercises."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Iterator, Optional, Sequence

from algokit.helpers import Node, TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    """Yield the values of each non-empty level, top to bottom."""
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        values = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node is None:
                continue
            values.append(node.val)
            queue.append(node.left)
            queue.append(node.right)
        if values:
            yield values


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level read left to right."""
    return list(_levels(root))


def level_order_recursive(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, gathered by a pre-order walk."""
    result: list[list[int]] = []

    def visit(node: Optional[TreeNode], level: int) -> None:
        if node is None:
            return
        if level >= len(result):
            result.append([])
        result[level].append(node.val)
        visit(node.left, level + 1)
        visit(node.right, level + 1)

    visit(root, 0)
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    return [
        values[::-1] if depth % 2 == 1 else values
        for depth, values in enumerate(_levels(root))
    ]


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of levels in the tree."""
    return sum(1 for _ in _levels(root))


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order and in-order traversals by slicing."""
    if not preorder:
        return None
    val = preorder[0]
    root = TreeNode(val)
    try:
        split = list(inorder).index(val)
    except ValueError:
        split = 0
    left_inorder = inorder[:split]
    right_inorder = inorder[split + 1:]
    left_size = len(left_inorder)
    root.left = build_tree(preorder[1:1 + left_size], left_inorder)
    root.right = build_tree(preorder[1 + left_size:], right_inorder)
    return root


def build_tree_indexed(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its traversals, walking the pre-order with one cursor."""
    cursor = 0

    def build(left: int, right: int) -> Optional[TreeNode]:
        nonlocal cursor
        if cursor >= len(preorder):
            return None
        target = preorder[cursor]
        while left < right and inorder[left] != target:
            left += 1
        if left >= right:
            return None
        node = TreeNode(target)
        cursor += 1
        node.left = build(0, left)
        node.right = build(left + 1, right)
        return node

    return build(0, len(preorder))


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Height-balanced search tree built from an ascending sequence."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        index = (left + right) // 2
        if index < 0 or index >= len(nums) or left > right:
            return None
        node = TreeNode(nums[index])
        node.left = build(left, index - 1)
        node.right = build(index + 1, right)
        return node

    return build(0, len(nums))


def connect(root: Optional[Node]) -> Optional[Node]:
    """Point each node's ``next`` at its right neighbour in a perfect binary tree."""
    if root is None:
        return None
    if root.left is not None:
        root.left.next = root.right
    if root.right is not None and root.next is not None:
        root.right.next = root.next.left
    connect(root.left)
    connect(root.right)
    return root


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum along any path between two nodes of the tree."""
    if root is None:
        raise ValueError("an empty tree has no path")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The k-th smallest value of a search tree, counted from 1; 0 if there is none."""
    if k < 1:
        return 0
    return next(islice(_inorder(root), k - 1, None), 0)


def _path_to(
    node: Optional[TreeNode], target: Optional[TreeNode], path: list[TreeNode]
) -> bool:
    if node is None:
        return False
    path.append(node)
    if (
        node is target
        or _path_to(node.left, target, path)
        or _path_to(node.right, target, path)
    ):
        return True
    path.pop()
    return False


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Deepest node that has both p and q below it (or is one of them)."""
    p_path: list[TreeNode] = []
    q_path: list[TreeNode] = []
    _path_to(root, p, p_path)
    _path_to(root, q, q_path)
    result = None
    for a, b in zip(p_path, q_path):
        if a is b:
            result = a
    return result


def lowest_common_ancestor_iterative(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Lowest common ancestor found by a post-order walk with an explicit stack."""
    if root is None:
        return None
    stack = [root]
    candidates: list[TreeNode] = []
    found_p = found_q = False
    last = root
    while stack:
        node = stack[-1]
        if node is p:
            if not found_p and not found_q:
                candidates.append(node)
            found_p = True
        elif node is q:
            if not found_p and not found_q:
                candidates.append(node)
            found_q = True
        if not found_p and not found_q:
            candidates.append(node)
        if found_p and found_q and any(c is node for c in candidates):
            return node
        if last is not node.right:
            if last is not node.left and node.left is not None:
                stack.append(node.left)
                continue
            if node.right is not None:
                stack.append(node.right)
                continue
        last = node
        stack.pop()
    return None