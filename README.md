# arbortree

`arbortree` is a small library of binary trees that hold integers. Each node
keeps a link to its parent as well as to its left and right children. The
library gives you:

- nodes that you build and insert into,
- relationship queries: leaf, root, sibling and uncle,
- pre-order, in-order and post-order traversals,
- metrics: height, depth, size, leaf count, internal node count, balance
  factor, and checks for full and perfect trees,
- an ASCII drawing of a tree.

It is a library only; it has no command-line program.

## Installation

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
from arbortree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # 128 takes the right slot; 402 becomes its right child
```

`insert_left` and `insert_right` return the new node. If the slot already
holds a child, that child moves down below the new node, on the same side.

You can also create a node directly with `Node(value, parent=some_node)`.
This only records the parent: the node is not placed in either of the
parent's child slots until you assign it, for example
`some_node.left = Node(6, parent=some_node)`.

Other methods on a node:

- `is_leaf()`: true when the node has no children.
- `is_root()`: true when the node has no parent.
- `sibling()`: the other child of the node's parent, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.
- `delete()`: removes the node from its parent's child slot and clears every
  parent and child link inside its subtree.

## Traversals

```python
from arbortree.traversal import preorder, inorder, postorder

list(preorder(root))    # node, then left subtree, then right subtree
list(inorder(root))     # left subtree, node, right subtree
list(postorder(root))   # left subtree, right subtree, then node
```

Each traversal is a generator of node values. An empty tree (`None`) yields
nothing.

## Metrics

```python
from arbortree import metrics

metrics.height(root)          # number of levels, counting the node itself
metrics.depth(root.left)      # number of edges from the node up to its root
metrics.size(root)            # number of nodes
metrics.leaves(root)          # number of nodes without children
metrics.internal_nodes(root)  # number of nodes with at least one child
metrics.balance(root)         # height of the left subtree minus height of the right
metrics.is_full(root)         # every node has zero or two children
metrics.is_perfect(root)      # full, and every leaf is on the same level
```

Every metric accepts `None` for an empty tree and returns 0 or `False` for it,
except `is_full`, which counts an empty tree as full.

## Printing

```python
from arbortree.printing import format_tree, print_tree

print_tree(root)          # writes the drawing to standard output
text = format_tree(root)  # the same drawing as a string
```

`print_tree` takes an optional `file` argument to write somewhere other than
standard output. `format_tree(None)` returns an empty string.

Each value is drawn as a zero-padded box, such as `(098)`. Dashes link a
parent to its children, and a dot marks where each child attaches. For a
root 98 with children 12 (children 6 and 16) and 402 (children 256 and 512):

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```