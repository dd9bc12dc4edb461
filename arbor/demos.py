"""Example programs that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from arbor.metrics import balance, height, internal_nodes, is_full, is_perfect, leaves, size
from arbor.node import Node
from arbor.render import print_tree
from arbor.traversal import inorder, postorder, preorder

_NULL = "(nil)"


def _shared_tree() -> Node:
    """Return the five-node tree several demos start from."""
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_node_tree() -> Node:
    root = Node(98)
    left = root.add_left(12)
    right = root.add_right(402)
    left.add_left(6)
    left.add_right(56)
    right.add_left(256)
    right.add_right(512)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.add_left(12)
    root.add_right(128)
    root.left.add_right(54)
    root.right.add_right(402)
    root.left.add_left(10)
    root.right.add_left(110)
    root.right.right.add_left(200)
    root.right.right.add_right(512)
    return root


def _demo_node(out: TextIO) -> None:
    root = Node(98)
    left = root.add_left(12)
    left.add_left(6)
    left.add_right(16)
    right = root.add_right(402)
    right.add_left(256)
    right.add_right(512)
    print_tree(root, out)


def _demo_insert_left(out: TextIO) -> None:
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = Node(98)
    root.add_left(12)
    root.add_right(402)
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _shared_tree()
    print_tree(root, out)
    root.delete()


def _report_nodes(
    out: TextIO, label: str, check: Callable[[Node], object], nodes: Sequence[Node]
) -> None:
    for node in nodes:
        result = check(node)
        if isinstance(result, bool):
            result = int(result)
        print(f"{label.format(node.value)}: {result}", file=out)


def _demo_is_leaf(out: TextIO) -> None:
    root = _shared_tree()
    print_tree(root, out)
    _report_nodes(out, "Is {} a leaf", Node.is_leaf, [root, root.right, root.right.right])


def _demo_is_root(out: TextIO) -> None:
    root = _shared_tree()
    print_tree(root, out)
    _report_nodes(out, "Is {} a root", Node.is_root, [root, root.right, root.right.right])


def _traversal_demo(walk: Callable[[Node], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _seven_node_tree()
        print_tree(root, out)
        for value in walk(root):
            print(value, file=out)

    return demo


def _measure_demo(label: str, measure: Callable[[Node], object]) -> Callable[[TextIO], None]:
    def demo(out: TextIO) -> None:
        root = _shared_tree()
        print_tree(root, out)
        _report_nodes(out, label, measure, [root, root.right, root.left.right])

    return demo


def _demo_balance(out: TextIO) -> None:
    root = _shared_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _shared_tree()
    root.left.add_left(10)
    print_tree(root, out)
    _report_nodes(out, "Is {} full", is_full, [root, root.left, root.right])


def _demo_is_perfect(out: TextIO) -> None:
    root = _shared_tree()
    root.left.add_left(10)
    root.right.add_left(10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)
    root.right.right.add_left(10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)
    root.right.right.add_right(10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _relative_line(kind: str, node: Node, relative: Optional[Node]) -> str:
    shown = _NULL if relative is None else str(relative.value)
    return f"{kind} of {node.value}: {shown}"


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(_relative_line("Sibling", node, node.sibling()), file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(_relative_line("Uncle", node, node.uncle()), file=out)


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_node,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal_demo(preorder),
    7: _traversal_demo(inorder),
    8: _traversal_demo(postorder),
    9: _measure_demo("Height from {}", height),
    10: _measure_demo("Depth of {}", Node.depth),
    11: _measure_demo("Size of {}", size),
    12: _measure_demo("Leaves in {}", leaves),
    13: _measure_demo("Nodes in {}", internal_nodes),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, file: Optional[TextIO] = None) -> None:
    """Run the numbered demo, writing its output to a stream (stdout by default)."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(file if file is not None else sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demos named on the command line, or all of them."""
    parser = argparse.ArgumentParser(description="Run binary tree demos.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        choices=sorted(_DEMOS),
        metavar="N",
        help="demo number between 0 and %d" % max(_DEMOS),
    )
    args = parser.parse_args(argv)
    for number in args.numbers or sorted(_DEMOS):
        run_demo(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())