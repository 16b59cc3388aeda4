import io

from binarytrees.node import Node
from binarytrees.printing import format_tree, print_tree


def _full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


EXPECTED_FULL = (
    "       .-------(098)-------.\n"
    "  .--(012)--.         .--(402)--.\n"
    "(006)     (016)     (256)     (512)\n"
)


def test_format_full_tree():
    assert format_tree(_full_tree()) == EXPECTED_FULL


def test_print_tree_writes_to_file():
    buffer = io.StringIO()
    print_tree(_full_tree(), buffer)
    assert buffer.getvalue() == EXPECTED_FULL


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(_full_tree())
    assert capsys.readouterr().out == EXPECTED_FULL


def test_format_two_children():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    assert format_tree(root) == "  .--(098)--.\n(012)     (402)\n"


def test_format_single_node():
    assert format_tree(Node(98)) == "(098)\n"


def test_format_negative_value():
    assert format_tree(Node(-5)) == "(-05)\n"


def test_format_none_is_empty():
    assert format_tree(None) == ""


def test_print_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_lines_have_no_trailing_spaces():
    for line in format_tree(_full_tree()).splitlines():
        assert line == line.rstrip()