import pytest

from binarytrees.bst import array_to_bst, bst_insert, bst_remove, bst_search
from binarytrees.measure import is_bst, size
from binarytrees.traversal import inorder, preorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _parents_consistent(tree):
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True


def test_insert_sequence():
    root = bst_insert(None, 98)
    assert root.value == 98
    for value in (402, 12, 46, 128, 256, 512, 1):
        node = bst_insert(root, value)
        assert node.value == value
    assert list(preorder(root)) == [98, 12, 1, 46, 402, 128, 256, 512]
    assert root.parent is None
    assert _parents_consistent(root)


def test_insert_duplicate_raises():
    root = bst_insert(None, 98)
    bst_insert(root, 128)
    with pytest.raises(ValueError):
        bst_insert(root, 128)
    assert size(root) == 2


def test_inserted_node_parent():
    root = bst_insert(None, 10)
    node = bst_insert(root, 5)
    assert node.parent is root
    assert root.left is node


def test_array_to_bst_shape():
    tree = array_to_bst(ARRAY)
    assert list(preorder(tree)) == [
        79, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 84, 91, 98, 95,
    ]
    assert is_bst(tree)
    assert list(inorder(tree)) == sorted(ARRAY)


def test_array_to_bst_skips_duplicates():
    tree = array_to_bst([5, 3, 5, 8, 3])
    assert list(preorder(tree)) == [5, 3, 8]


def test_array_to_bst_empty():
    assert array_to_bst([]) is None


def test_search_found():
    tree = array_to_bst(ARRAY)
    node = bst_search(tree, 32)
    assert node.value == 32
    assert list(preorder(node)) == [32, 22, 34]


def test_search_missing():
    tree = array_to_bst(ARRAY)
    assert bst_search(tree, 512) is None


def test_search_empty_tree():
    assert bst_search(None, 1) is None


def test_remove_sequence():
    tree = array_to_bst(ARRAY)

    tree = bst_remove(tree, 79)
    assert list(preorder(tree)) == [
        84, 47, 21, 2, 1, 20, 32, 22, 34, 68, 62, 87, 91, 98, 95,
    ]

    tree = bst_remove(tree, 21)
    assert list(preorder(tree)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 68, 62, 87, 91, 98, 95,
    ]

    tree = bst_remove(tree, 68)
    assert list(preorder(tree)) == [
        84, 47, 22, 2, 1, 20, 32, 34, 62, 87, 91, 98, 95,
    ]
    assert is_bst(tree)
    assert _parents_consistent(tree)
    assert bst_search(tree, 62).parent.value == 47


def test_remove_missing_value_leaves_tree():
    tree = array_to_bst(ARRAY)
    tree = bst_remove(tree, 1000)
    assert list(inorder(tree)) == sorted(ARRAY)


def test_remove_from_empty():
    assert bst_remove(None, 5) is None


def test_remove_only_node():
    assert bst_remove(bst_insert(None, 5), 5) is None


def test_remove_root_with_one_child_makes_child_root():
    root = array_to_bst([5, 8, 9])
    root = bst_remove(root, 5)
    assert root.value == 8
    assert root.parent is None
    assert list(preorder(root)) == [8, 9]
    assert _parents_consistent(root)