"""Singly linked list and binary tree node types shared by the algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> List[int]:
    """Return the values of the list starting at ``head``."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values