"""Singly linked lists and algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order.

    Raises ``ValueError`` if the list contains a cycle.
    """
    values: list[int] = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Remove consecutive repeated values in place and return the head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or ``None`` if they never meet."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a