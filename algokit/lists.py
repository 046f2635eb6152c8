"""Linked-list exercises."""

from __future__ import annotations

from typing import Optional

from algokit.helpers import ListNode, Node


def copy_random_list(head: Optional[Node]) -> Optional[Node]:
    """Deep-copy a list whose nodes carry ``next`` and ``random`` links."""
    if head is None:
        return None
    copies: dict[Node, Node] = {}
    node: Optional[Node] = head
    while node is not None:
        copies[node] = Node(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies[head]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Detect a cycle with a slow and a fast pointer."""
    if head is None or head.next is None:
        return False
    slow, fast = head, head.next
    while fast is not slow:
        if fast is None or fast.next is None:
            return False
        fast = fast.next.next
        slow = slow.next
    return True


def has_cycle_by_set(head: Optional[ListNode]) -> bool:
    """Detect a cycle by remembering visited nodes."""
    seen: set[ListNode] = set()
    while head is not None:
        if head in seen:
            return True
        seen.add(head)
        head = head.next
    return False


def _merge(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list by merge sort, relinking its nodes."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return _merge(sort_list(head), sort_list(second))


def sort_list_by_selection(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list by repeatedly unlinking its smallest node."""
    dummy = ListNode()
    tail = dummy
    while head is not None:
        before_min: Optional[ListNode] = None
        smallest = head
        prev, node = head, head.next
        while node is not None:
            if node.val < smallest.val:
                before_min, smallest = prev, node
            prev, node = node, node.next
        if before_min is None:
            head = head.next
        else:
            before_min.next = smallest.next
        tail.next = smallest
        tail = smallest
    tail.next = None
    return dummy.next


def _length(head: Optional[ListNode]) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """First node shared by two lists, found by aligning their lengths."""
    len_a, len_b = _length(head_a), _length(head_b)
    while len_a > len_b:
        head_a = head_a.next
        len_a -= 1
    while len_b > len_a:
        head_b = head_b.next
        len_b -= 1
    while head_a is not None and head_b is not None:
        if head_a is head_b:
            return head_a
        head_a, head_b = head_a.next, head_b.next
    return None


def get_intersection_node_by_switching(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """First node shared by two lists, found by walking both lists in turn."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return b


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the list reversed.

    The original tail node becomes the new head; the nodes before it are copied.
    """
    if head is None:
        return None
    reversed_part: Optional[ListNode] = None
    while head.next is not None:
        reversed_part = ListNode(head.val, reversed_part)
        head = head.next
    head.next = reversed_part
    return head


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Whether the values read the same both ways; reverses the first half in place."""
    if head is None:
        return True
    n = _length(head)
    before: Optional[ListNode] = None
    node = head
    for _ in range(n // 2):
        following = node.next
        node.next = before
        before, node = node, following
    after = node.next if n % 2 else node
    for _ in range(n // 2):
        if before.val != after.val:
            return False
        before, after = before.next, after.next
    return True


def delete_node(node: Optional[ListNode]) -> None:
    """Remove a node's value from its list by shifting later values forward."""
    if node is None:
        return
    last = node
    while node.next is not None:
        node.val = node.next.val
        last = node
        node = node.next
    last.next = None