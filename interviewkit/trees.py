"""Binary tree algorithms."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Sequence

from interviewkit.nodes import TreeNode


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder walks."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")
    positions: Dict[int, int] = {value: i for i, value in enumerate(inorder)}

    def build(p_left: int, p_right: int, i_left: int, i_right: int) -> Optional[TreeNode]:
        if p_left > p_right or i_left > i_right:
            return None
        value = preorder[p_left]
        i = positions.get(value)
        if i is None or not i_left <= i <= i_right:
            raise ValueError("traversals do not describe the same tree")
        node = TreeNode(value)
        left_size = i - i_left
        node.left = build(p_left + 1, p_left + left_size, i_left, i - 1)
        node.right = build(p_left + left_size + 1, p_right, i + 1, i_right)
        return node

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def next_in_order(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the inorder successor of ``node``.

    Nodes are expected to carry a ``parent`` attribute; a missing one counts
    as no parent.
    """
    if node is None:
        return None
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    parent = getattr(node, "parent", None)
    while parent is not None and node is parent.right:
        node = parent
        parent = getattr(node, "parent", None)
    return parent


def is_same_tree(s: Optional[TreeNode], t: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if s is None and t is None:
        return True
    if s is None or t is None or s.val != t.val:
        return False
    return is_same_tree(s.left, t.left) and is_same_tree(s.right, t.right)


def is_subtree(s: Optional[TreeNode], t: Optional[TreeNode]) -> bool:
    """Tell whether ``t`` equals some whole subtree of ``s``."""
    if s is None:
        return False
    return is_same_tree(s, t) or is_subtree(s.left, t) or is_subtree(s.right, t)


def mirror_recursive(root: Optional[TreeNode]) -> None:
    """Mirror the tree in place, recursively."""
    if root is None:
        return
    root.left, root.right = root.right, root.left
    mirror_recursive(root.left)
    mirror_recursive(root.right)


def mirror_iterative(root: Optional[TreeNode]) -> None:
    """Mirror the tree in place with an explicit stack."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _mirrored(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None or left.val != right.val:
        return False
    return _mirrored(left.left, right.right) and _mirrored(left.right, right.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree equals its own mirror image."""
    return root is None or _mirrored(root.left, root.right)


def levels(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the values of each level, top to bottom, left to right."""
    result: List[List[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        result.append(level)
    return result


def level_order(root: Optional[TreeNode]) -> List[int]:
    """Return all values in breadth-first order."""
    return [value for level in levels(root) for value in level]


def zigzag_levels(root: Optional[TreeNode]) -> List[List[int]]:
    """Return the levels, alternating left-to-right and right-to-left."""
    return [level if depth % 2 == 0 else level[::-1] for depth, level in enumerate(levels(root))]


def verify_postorder_bst(sequence: Sequence[int]) -> bool:
    """Tell whether distinct values can be the postorder walk of a search tree."""

    def check(start: int, end: int) -> bool:
        if start >= end:
            return True
        root = sequence[end]
        split = next((i for i in range(start, end) if sequence[i] > root), end)
        if any(sequence[j] < root for j in range(split, end)):
            return False
        return check(start, split - 1) and check(split, end - 1)

    return check(0, len(sequence) - 1)


def path_sum(root: Optional[TreeNode], total: int) -> List[List[int]]:
    """Return every root-to-leaf path whose values add up to ``total``."""
    result: List[List[int]] = []
    path: List[int] = []

    def walk(node: Optional[TreeNode], remaining: int) -> None:
        if node is None:
            return
        path.append(node.val)
        if node.left is None and node.right is None and remaining == node.val:
            result.append(list(path))
        walk(node.left, remaining - node.val)
        walk(node.right, remaining - node.val)
        path.pop()

    walk(root, total)
    return result


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def tree_to_linked_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink a search tree into a sorted doubly linked list and return its head.

    ``left`` points to the previous node and ``right`` to the next one.
    """
    head: Optional[TreeNode] = None
    previous: Optional[TreeNode] = None
    for node in list(_inorder_nodes(root)):
        node.left = previous
        if previous is None:
            head = node
        else:
            previous.right = node
        previous = node
    if previous is not None:
        previous.right = None
    return head


def serialize(root: Optional[TreeNode]) -> str:
    """Write the tree in preorder, ``#`` for empty links, each token followed by a space."""
    tokens: List[str] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            tokens.append("#")
            return
        tokens.append(str(node.val))
        walk(node.left)
        walk(node.right)

    walk(root)
    return "".join(token + " " for token in tokens)


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from the text made by :func:`serialize`."""
    tokens = iter(data.split())

    def read() -> Optional[TreeNode]:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("serialized tree is truncated") from None
        if token == "#":
            return None
        node = TreeNode(int(token))
        node.left = read()
        node.right = read()
        return node

    return read()


def kth_smallest(root: Optional[TreeNode], k: int) -> Optional[int]:
    """Return the ``k``-th smallest value of a search tree, or None."""
    if k < 1:
        return None
    for count, node in enumerate(_inorder_nodes(root), start=1):
        if count == k:
            return node.val
    return None


def tree_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(tree_depth(root.left), tree_depth(root.right))


def _balanced_depth(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    left = _balanced_depth(node.left)
    if left < 0:
        return -1
    right = _balanced_depth(node.right)
    if right < 0 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in depth by at most one."""
    return _balanced_depth(root) >= 0


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` below or at it."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right