"""Singly linked lists and palindrome checks on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.data
            node = node.next


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list from ``values``; return its head, or None if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return True if the list reads the same forwards and backwards."""
    values = list(head) if head is not None else []
    return values == values[::-1]


def _middle(head: ListNode) -> ListNode:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome_inplace(head: Optional[ListNode]) -> bool:
    """Palindrome check using constant extra space.

    The second half is reversed temporarily and restored before returning.
    """
    if head is None or head.next is None:
        return True
    middle = _middle(head)
    middle.next = _reverse(middle.next)
    try:
        left, right = head, middle.next
        while right is not None:
            if left.data != right.data:
                return False
            left, right = left.next, right.next
        return True
    finally:
        middle.next = _reverse(middle.next)