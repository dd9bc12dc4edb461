import io

from arbor.metrics import height
from arbor.node import Node
from arbor.render import print_tree, render
from arbor.traversal import preorder


def _sample():
    root = Node(98)
    root.add_left(12)
    root.left.add_left(6)
    root.left.add_right(16)
    root.add_right(402)
    root.right.add_left(256)
    root.right.add_right(512)
    return root


def _main_tree():
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    root.left.insert_right(54)
    root.insert_right(128)
    root.insert_left(45)
    return root


def test_render_sample():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_sample()) == expected


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_empty():
    assert render(None) == ""


def test_line_count_matches_height():
    for tree in (_sample(), _main_tree(), Node(1)):
        assert len(render(tree).splitlines()) == height(tree) + 1


def test_every_label_present():
    tree = _main_tree()
    text = render(tree)
    for value in preorder(tree):
        assert "(%03d)" % value in text


def test_no_trailing_spaces():
    for line in render(_main_tree()).splitlines():
        assert line == line.rstrip(" ")


def test_label_row_matches_depth():
    tree = _main_tree()
    lines = render(tree).splitlines()
    stack = [tree]
    while stack:
        node = stack.pop()
        assert "(%03d)" % node.value in lines[node.depth()]
        stack.extend(c for c in (node.left, node.right) if c is not None)


def test_wide_tree_does_not_truncate():
    root = Node(0)
    node = root
    for value in range(1, 60):
        node = node.add_right(value)
    text = render(root)
    assert "(059)" in text
    assert len(text.splitlines()) == height(root) + 1


def test_print_tree_writes_render():
    out = io.StringIO()
    tree = _sample()
    print_tree(tree, out)
    assert out.getvalue() == render(tree)


def test_print_tree_defaults_to_stdout(capsys):
    tree = _main_tree()
    print_tree(tree)
    assert capsys.readouterr().out == render(tree)