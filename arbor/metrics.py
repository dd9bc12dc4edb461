"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Optional

from arbor.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the height of the tree; 0 for an empty tree or a single node."""
    if tree is None or tree.is_leaf():
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def _edge_height(tree: Optional[Node]) -> int:
    if tree is None:
        return -1
    return max(_edge_height(tree.left), _edge_height(tree.right)) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height."""
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one level."""
    if tree is None:
        return False
    depth = 0
    node = tree.left
    while node is not None:
        depth += 1
        node = node.left

    def check(node: Node, level: int) -> bool:
        if node.is_leaf():
            return level == depth
        if node.left is None or node.right is None:
            return False
        return check(node.left, level + 1) and check(node.right, level + 1)

    return check(tree, 0)