"""Singly linked list algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from interviewkit.nodes import ListNode, list_values


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int
    next: Optional[RandomNode] = field(default=None, repr=False)
    random: Optional[RandomNode] = field(default=None, repr=False)


def values_reversed(head: Optional[ListNode]) -> List[int]:
    """Return the values of the list from its tail back to its head."""
    return list_values(head)[::-1]


def delete_node(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Remove ``node`` from the list and return the (possibly new) head.

    A node with a successor is removed in constant time by taking over the
    successor's value; only the tail needs a walk from the head.
    """
    if head is None or node is None:
        return head
    if node.next is not None:
        successor = node.next
        node.val = successor.val
        node.next = successor.next
        return head
    if node is head:
        return None
    previous = head
    while previous.next is not None and previous.next is not node:
        previous = previous.next
    if previous.next is node:
        previous.next = None
    return head


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node of a sorted list whose value occurs more than once."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None:
        current = previous.next
        while current.next is not None and current.next.val == current.val:
            current = current.next
        if current is not previous.next:
            previous.next = current.next
        else:
            previous = previous.next
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Keep one node for each value of a sorted list."""
    current = head
    while current is not None:
        following = current.next
        while following is not None and following.val == current.val:
            following = following.next
        current.next = following
        current = following
    return head


def kth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return the ``k``-th node counted from the tail (the tail is 1), or None."""
    if head is None or k <= 0:
        return None
    ahead = head
    for _ in range(k - 1):
        if ahead.next is None:
            return None
        ahead = ahead.next
    behind = head
    while ahead.next is not None:
        ahead = ahead.next
        behind = behind.next
    return behind


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the list's cycle begins, or None if it has none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    fast = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def merge_sorted(head1: Optional[ListNode], head2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list and return its head."""
    dummy = ListNode(0)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: Dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next
    node = head
    while node is not None:
        copy = copies[id(node)]
        if node.next is not None:
            copy.next = copies[id(node.next)]
        if node.random is not None:
            copy.random = copies[id(node.random)]
        node = node.next
    return copies[id(head)] if head is not None else None


def _length(head: Optional[ListNode]) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None."""
    if head_a is None or head_b is None:
        return None
    len_a, len_b = _length(head_a), _length(head_b)
    for _ in range(len_b - len_a):
        head_b = head_b.next
    for _ in range(len_a - len_b):
        head_a = head_a.next
    while head_a is not None and head_b is not None and head_a is not head_b:
        head_a = head_a.next
        head_b = head_b.next
    return head_a if head_a is not None and head_b is not None else None