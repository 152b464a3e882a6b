import pytest

from interviewkit.nodes import TreeNode
from interviewkit.trees import (
    build_tree,
    deserialize,
    is_balanced,
    is_same_tree,
    is_subtree,
    is_symmetric,
    kth_smallest,
    level_order,
    levels,
    lowest_common_ancestor,
    mirror_iterative,
    mirror_recursive,
    next_in_order,
    path_sum,
    serialize,
    tree_depth,
    tree_to_linked_list,
    verify_postorder_bst,
    zigzag_levels,
)

PREORDER = [1, 2, 4, 7, 3, 5, 6, 8]
INORDER = [4, 7, 2, 1, 5, 3, 8, 6]


def _preorder(node):
    if node is None:
        return []
    return [node.val] + _preorder(node.left) + _preorder(node.right)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _postorder(node):
    if node is None:
        return []
    return _postorder(node.left) + _postorder(node.right) + [node.val]


def _find(node, value):
    if node is None:
        return None
    if node.val == value:
        return node
    return _find(node.left, value) or _find(node.right, value)


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.val:
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def _bst(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _set_parents(node, parent=None):
    if node is None:
        return
    node.parent = parent
    _set_parents(node.left, node)
    _set_parents(node.right, node)


def test_build_tree_reproduces_traversals():
    root = build_tree(PREORDER, INORDER)
    assert _preorder(root) == PREORDER
    assert _inorder(root) == INORDER


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_rejects_inconsistent_input():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree([1, 2], [3, 1])


def test_next_in_order_walks_inorder():
    root = build_tree(PREORDER, INORDER)
    _set_parents(root)
    node = _find(root, INORDER[0])
    seen = []
    while node is not None:
        seen.append(node.val)
        node = next_in_order(node)
    assert seen == INORDER


def test_next_in_order_of_none():
    assert next_in_order(None) is None


def test_subtree_and_same_tree():
    root = build_tree(PREORDER, INORDER)
    copy = deserialize(serialize(root.right))
    assert is_same_tree(root.right, copy)
    assert is_subtree(root, copy)
    copy.val += 100
    assert not is_subtree(root, copy)
    assert not is_subtree(None, copy)


@pytest.mark.parametrize("mirror", [mirror_recursive, mirror_iterative])
def test_mirror_reverses_levels(mirror):
    root = build_tree(PREORDER, INORDER)
    before = levels(root)
    mirror(root)
    assert levels(root) == [level[::-1] for level in before]
    assert _inorder(root) == INORDER[::-1]


def test_mirrors_agree_and_invert():
    a = build_tree(PREORDER, INORDER)
    b = build_tree(PREORDER, INORDER)
    mirror_recursive(a)
    mirror_iterative(b)
    assert is_same_tree(a, b)
    mirror_iterative(a)
    assert is_same_tree(a, build_tree(PREORDER, INORDER))


def test_is_symmetric():
    side = build_tree(PREORDER, INORDER)
    other = deserialize(serialize(side))
    mirror_recursive(other)
    root = TreeNode(0, side, other)
    assert is_symmetric(root)
    other.val += 1
    assert not is_symmetric(root)
    assert is_symmetric(None)


def test_level_order_flattens_levels():
    root = build_tree(PREORDER, INORDER)
    assert level_order(root) == [v for level in levels(root) for v in level]
    assert sorted(level_order(root)) == sorted(PREORDER)
    assert level_order(None) == []


def test_zigzag_levels():
    root = build_tree(PREORDER, INORDER)
    plain = levels(root)
    zigzag = zigzag_levels(root)
    assert len(zigzag) == len(plain)
    for depth, (z, p) in enumerate(zip(zigzag, plain)):
        assert z == (p if depth % 2 == 0 else p[::-1])


def test_verify_postorder_bst():
    values = [8, 6, 10, 5, 7, 9, 11]
    assert verify_postorder_bst(_postorder(_bst(values)))
    assert not verify_postorder_bst([7, 4, 6, 5])
    assert verify_postorder_bst([])


def test_path_sum():
    root = deserialize("10 5 4 # # 7 # # 12 # # ")
    paths = path_sum(root, 22)
    assert len(paths) == 2
    for path in paths:
        assert sum(path) == 22
        assert path[0] == root.val
    assert path_sum(root, 1000) == []


def test_tree_to_linked_list():
    values = [10, 6, 14, 4, 8, 12, 16]
    head = tree_to_linked_list(_bst(values))
    forward = []
    node = tail = head
    while node is not None:
        forward.append(node.val)
        tail = node
        node = node.right
    assert forward == sorted(values)
    backward = []
    while tail is not None:
        backward.append(tail.val)
        tail = tail.left
    assert backward == sorted(values, reverse=True)


def test_serialize_format():
    assert serialize(TreeNode(1, TreeNode(2))) == "1 2 # # # "
    assert serialize(None) == "# "


def test_serialize_round_trip():
    root = build_tree(PREORDER, INORDER)
    assert is_same_tree(deserialize(serialize(root)), root)


def test_deserialize_truncated():
    with pytest.raises(ValueError):
        deserialize("1 2 #")


def test_kth_smallest():
    values = [5, 3, 6, 2, 4, 1]
    root = _bst(values)
    for k in range(1, len(values) + 1):
        assert kth_smallest(root, k) == sorted(values)[k - 1]
    assert kth_smallest(root, len(values) + 1) is None
    assert kth_smallest(root, 0) is None


def test_tree_depth():
    chain = _bst([1, 2, 3, 4])
    assert tree_depth(chain) == len([1, 2, 3, 4])
    assert tree_depth(None) == 0


def test_is_balanced():
    assert is_balanced(_bst([4, 2, 6, 1, 3, 5, 7]))
    assert not is_balanced(_bst([1, 2, 3]))
    assert is_balanced(None)


def test_lowest_common_ancestor():
    root = build_tree(PREORDER, INORDER)
    n7, n5, n8 = _find(root, 7), _find(root, 5), _find(root, 8)
    assert lowest_common_ancestor(root, n7, n5) is root
    assert lowest_common_ancestor(root, n5, n8) is _find(root, 3)
    assert lowest_common_ancestor(root, n7, n7) is n7