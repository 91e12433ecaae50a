# bintree

Small binary tree and binary search tree structures whose nodes keep a
link to their parent, with helpers that turn a tree into an undirected
Graphviz `dot` graph.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The binary search tree

`bintree.bst.BstNode` holds an integer `key` plus `parent`, `left` and
`right` links.

```python
from bintree.bst import BstNode
from bintree.dot import bst_to_dot, generate_dotfile_bst

root = BstNode(15)
for key in (6, 18, 17, 20, 3, 7, 2, 4, 13, 14, 19, 21, 1):
    root.tree_insert(key)

found = root.tree_search(13)                    # a node with key 13, or None
print(root.minimum().key, root.maximum().key)   # 1 21

root.tree_delete(3)
print(bst_to_dot(root))                         # the graph as a string
generate_dotfile_bst(root, "bst_graph.dot")
```

Things to know:

- `tree_insert(value)` walks down from the node it is called on and
  returns the new node. Values equal to a key go to the right. It raises
  `ValueError` if it meets a node whose key is `None`.
- `tree_search`, `minimum` and `maximum` return a *copy* of the node
  found (see `copy()`): a new object with the same key that shares its
  parent and children with the original. Setting attributes on the copy
  does not change the tree.
- `get_root()` follows parent links up to the topmost node.
- `tree_successor()` returns the node with the next larger key, or
  `None` for the largest key.
- `tree_successor_simpler()` is a shortcut variant. It only takes the
  minimum of the right subtree when that right child has a parent and
  both children; otherwise it falls back to the parent, returning `None`
  when the walk ends at the root. It raises `ValueError` when it needs a
  parent that does not exist, for instance when called on a root that
  has no full right child. Its answers differ from `tree_successor()` in
  many cases.
- `tree_delete(value)` removes the node holding `value`. Missing values
  are ignored. Deleting a childless root sets its key to `None`; a root
  with exactly one child is left as it is. A node with two children is
  replaced by its successor.
- `add_left_child(key)` and `add_right_child(key)` attach a new child,
  replacing any existing one, and return it.

## The plain binary tree

`bintree.tree.Node` is a binary tree not ordered by value, holding an
integer `value` plus `parent`, `left` and `right` links.

```python
from bintree.tree import Node
from bintree.dot import tree_to_dot

root = Node(5)
left = root.add_left_child(3)
right = root.add_right_child(7)
left.add_left_child(2)
left.add_right_child(4)
right.add_right_child(10)

print(root.tree_depth())    # 2
print(root.count_nodes())   # 6
print(left.sibling().value) # 7
print(tree_to_dot(root))
```

- `count_nodes()` counts the subtree including the node itself;
  `tree_depth()` counts edges on the longest downward path.
- `sibling()` returns the other child of the node's parent, or `None`.
- `get_node_by_value(value)` and `get_node_by_full_property(node)`
  return a copy of the match. They follow the left child when there is
  one and only go right when there is no left child, so values in a
  right subtree below a node with a left child are not found.
  `get_node_by_full_property` compares the value and the values of the
  parent and both children.
- `discard_node_by_value(value)` cuts off every link along the path it
  follows, dropping that branch whether or not the value was found, and
  returns whether it was found.

## Graphviz output

`bintree.dot` offers `tree_to_dot(root)` and `bst_to_dot(root)`, which
return the graph text, and `generate_dotfile(root, output_path)` and
`generate_dotfile_bst(root, output_path)`, which write it to a file.
The output is `graph tree{`, one tab-indented `parent--child;` line per
edge (a node's own edges before those of its subtrees, left before
right), and a closing `}`. `bst_to_dot` raises `ValueError` if an edge
touches a node whose key is `None`.

The package only writes `dot` text; it does not draw pictures. Render
the files with Graphviz, for example
`dot -Tpng bst_graph.dot -o bst_graph.png`.

## The demo command

```
bintree
```

This runs the binary search tree demonstration: it builds a tree,
inserts and deletes keys, prints the results of search, minimum,
maximum, root and successor queries, and writes `after_insert.dot`,
`after_delete.dot` and `bst_graph.dot`.

```
bintree --binary-tree
```

runs the plain binary tree demonstration instead and writes
`prime.dot`, `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.

`--out-dir DIR` chooses where the files go (the current directory by
default; it is created if missing). The same demonstrations are
available from Python as `bintree.cli.demo_binary_search_tree(out_dir)`
and `bintree.cli.demo_binary_tree(out_dir)`, which return the report
lines instead of printing them.