"""Singly linked lists of integers and digit-wise addition over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None


def _iter_values(head: Optional[ListNode]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``, in order."""
    return list(_iter_values(head))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant digit first."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(_iter_values(l1), _iter_values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_values(digits)