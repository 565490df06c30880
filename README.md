# bstree

A small library of binary trees whose nodes know their parent, together with
a binary search tree that supports insertion, search, minimum and maximum,
successor lookup and deletion. Any tree can be written out as a Graphviz
`dot` graph.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Plain binary trees

`bstree.tree.Node` is a binary tree node that holds an integer `value` and
links to its `parent`, `left` and `right` nodes.

```python
from bstree.tree import Node

root = Node(5)
root.add_left_child(3)        # returns the new node
root.add_right_child(7)

root.count_nodes()            # 3
root.tree_depth()             # 1 (edges on the longest downward path)
root.get_node_by_value(3)     # a copy of the node holding 3
```

- `copy()` returns a shallow copy that shares the node's parent and children.
- `get_node_by_value(value)` and `get_node_by_full_property(node)` return a
  copy of the matching node, or `None`. Both walk a single path: into the
  left child when there is one, into the right child only otherwise.
  `get_node_by_full_property` matches on the node's value and on the values
  of its parent and both children.
- `discard_node_by_value(value)` follows that same path, cutting every link
  it walks down and detaching the matching node from its parent. It returns
  whether a match was found.
- `sibling()` returns the other child of the node's parent, or `None`.

## Binary search trees

`bstree.bst.BstNode` keeps integer keys in search-tree order: smaller keys
go left, equal and larger keys go right.

```python
from bstree.bst import BstNode

root = BstNode(15)
for key in (6, 18, 17, 20, 3, 7, 2, 4, 13, 9):
    root.insert(key)          # returns the new node

root.search(13)               # the node holding 13, or None
root.minimum()                # node holding 2
root.maximum()                # node holding 20
root.search(13).successor()   # node holding 15
root.search(20).successor()   # None: 20 is the largest key
root.search(9).root()         # the root node, 15
```

`root.delete(target)` removes `target` (a node of the tree, as returned by
`search`) and returns the root of the tree that remains. When the root
itself is deleted, the node that took its place is returned; when the last
node is deleted, the result is `None`.

`add_left_child`, `add_right_child` and `copy` work as on `Node`;
`add_left_child` and `add_right_child` do not check search-tree order.

## Graphviz export

```python
from bstree.dot import tree_to_dot, write_dotfile

print(tree_to_dot(root))
write_dotfile(root, "bst_graph.dot")
```

Both accept a `Node` or a `BstNode` tree, or `None` for an empty graph. The
output is an undirected graph named `tree` with one `parent--child;` edge
per line; each node's own edges come before those of its subtrees.

## Command line

```
bstree
bstree --output-dir graphs
```

builds a sample search tree, prints the results of searches, minimum,
maximum, root and successor queries, deletes several keys, and writes the
tree before and after the deletions as `bst_graph.dot` and
`bst_graph_deleted.dot`. The files go to the current directory, or to the
directory given with `--output-dir`, which is created if needed.

## What it does not do

The package only writes `dot` text; it does not render images. Use the
Graphviz tools, for example `dot -Tpng`, for that. Trees live in memory
only; there is no way to load a tree back from a file.