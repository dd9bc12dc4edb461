import pytest

from arbor.node import Node
from arbor.traversal import inorder, postorder, preorder


def _sample():
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    root.left.add_left(6)
    root.left.add_right(56)
    root.right.add_left(256)
    root.right.add_right(512)
    return root


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.add_left(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.add_right(value)
                    break
                node = node.right
    return root


def test_preorder_sample():
    assert list(preorder(_sample())) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_sample():
    assert list(inorder(_sample())) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder_sample():
    assert list(postorder(_sample())) == [6, 56, 12, 256, 512, 402, 98]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(Node(42))) == [42]


@pytest.mark.parametrize(
    "values",
    [[50, 30, 70, 20, 40, 60, 80], [1, 2, 3, 4, 5], [5, 4, 3, 2, 1], [10, 5, 15, 12, 3]],
)
def test_inorder_of_search_tree_is_sorted(values):
    assert list(inorder(_bst(values))) == sorted(values)


@pytest.mark.parametrize("values", [[50, 30, 70, 20, 40], [3, 1, 2], [8]])
def test_root_positions(values):
    tree = _bst(values)
    assert list(preorder(tree))[0] == values[0]
    assert list(postorder(tree))[-1] == values[0]


@pytest.mark.parametrize("values", [[50, 30, 70, 20, 40, 60], [9, 1, 7, 3]])
def test_all_orders_visit_same_values(values):
    tree = _bst(values)
    expected = sorted(values)
    assert sorted(preorder(tree)) == expected
    assert sorted(postorder(tree)) == expected


def test_left_chain_orders():
    root = Node(1)
    root.add_left(2).add_left(3)
    assert list(preorder(root)) == [1, 2, 3]
    assert list(inorder(root)) == [3, 2, 1]
    assert list(postorder(root)) == [3, 2, 1]