"""Singly linked lists and in-place list algorithms."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end and return the new head."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"position {n} out of range for list of length {length}")
    steps = length - n
    if steps == 0:
        return head.next
    prev = head
    for _ in range(steps - 1):
        prev = prev.next
    prev.next = prev.next.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate a linked list k places to the right and return its new head."""
    if head is None or head.next is None or k == 0:
        return head
    if k < 0:
        raise ValueError("rotation must not be negative")
    nodes = list(_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head
    split = len(nodes) - k
    nodes[split - 1].next = None
    nodes[-1].next = head
    return nodes[split]


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node, the second of the two middles for even lengths."""
    nodes = list(_nodes(head))
    return nodes[len(nodes) // 2] if nodes else None