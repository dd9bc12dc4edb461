# arbor

A small library for binary trees built from linked nodes. Each node holds an
integer value and knows its parent, its left child and its right child. On top
of that the library gives you traversals, shape metrics and an ASCII picture of
the tree. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from arbor.node import Node

root = Node(98)
root.add_left(12)
root.add_right(402)
root.left.insert_right(54)   # 12 gets a right child 54
root.insert_right(128)       # 128 goes between 98 and 402
```

`Node` is a dataclass with the fields `value`, `parent`, `left` and `right`.
Nodes compare by identity, not by value.

- `add_left(value)` / `add_right(value)` create a new child on that side and
  return it. A child already on that side is replaced (and dropped).
- `insert_left(value)` / `insert_right(value)` create a new child on that side
  and return it. A child already on that side becomes the new node's child on
  the same side, so it moves one level down.

A node can answer questions about its position in the tree:

- `is_leaf()` – `True` if it has no children
- `is_root()` – `True` if it has no parent
- `depth()` – the number of edges between it and the root
- `sibling()` – the other child of its parent, or `None`
- `uncle()` – the sibling of its parent, or `None`

`delete()` detaches the node from its parent and clears the `parent`, `left`
and `right` links of every node in its subtree.

## Traversals

```python
from arbor.traversal import preorder, inorder, postorder

list(preorder(root))   # node, left subtree, right subtree
list(inorder(root))    # left subtree, node, right subtree
list(postorder(root))  # left subtree, right subtree, node
```

Each is a generator of node values. An empty tree (`None`) yields nothing.

## Metrics

```python
from arbor.metrics import (
    height, size, leaves, internal_nodes, balance, is_full, is_perfect,
)
```

Every function takes the root node, or `None` for an empty tree.

| function | result |
| --- | --- |
| `height(tree)` | edges on the longest path down from the root; 0 for a single node or `None` |
| `size(tree)` | number of nodes |
| `leaves(tree)` | number of nodes with no children |
| `internal_nodes(tree)` | number of nodes with at least one child |
| `balance(tree)` | height of the left subtree minus height of the right, an empty subtree counting as -1; 0 for `None` |
| `is_full(tree)` | every node has zero or two children; `False` for `None` |
| `is_perfect(tree)` | every node has zero or two children and all leaves are at the same depth; `False` for `None` |

## Printing

```python
from arbor.node import Node
from arbor.render import render, print_tree

root = Node(98)
root.add_left(12)
root.add_right(402)

text = render(root)   # one line per level, each ending in a newline
print_tree(root)      # writes to standard output unless a file is given
```

```
  .--(098)--.
(012)     (402)
```

Each value is drawn at least three digits wide, zero-padded, in parentheses,
with its children hung beneath it. `render(None)` returns an empty string.

## Demonstrations

`arbor.demos` builds a set of example trees, prints them and reports on them
with the functions above, one demonstration per part of the library, numbered
0 to 18 (0: building nodes, 1–2: inserting, 3: deleting, 4–5: leaf and root
checks, 6–8: traversals, 9–13: height, depth, size, leaves, internal nodes,
14: balance, 15: full, 16: perfect, 17: sibling, 18: uncle).

From the command line, give the numbers to run, or none to run them all:

```
arbor-demo 14
arbor-demo
```

From Python, `run_demo(number, file=None)` runs one demonstration and writes
its output to `file` (standard output by default); an unknown number raises
`ValueError`. A missing sibling or uncle is shown as `(nil)`.

## What it does not do

Trees here are plain linked structures: values are integers kept wherever you
put them. There is no ordered insertion or lookup by value, no self-balancing,
and no heap operations. Nothing is stored to disk; a tree lives only in memory.