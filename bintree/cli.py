"""Command-line demonstration of the binary tree and search tree."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .bst import BstNode
from .dot import generate_dotfile, generate_dotfile_bst
from .tree import Node

_INSERT_KEYS = (17, 20, 3, 7, 2, 4, 13, 14, 19, 21, 1)
_SEARCH_KEYS = (15, 9, 22)
_SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)


def demo_binary_search_tree(out_dir: Union[str, Path]) -> List[str]:
    """Build, draw and query a sample search tree; return the report lines."""
    out = Path(out_dir)
    lines: List[str] = []

    root = BstNode(15)
    root.add_left_child(6)
    root.add_right_child(18)
    for key in _INSERT_KEYS:
        root.tree_insert(key)
    generate_dotfile_bst(root, out / "after_insert.dot")

    root.tree_delete(3)
    generate_dotfile_bst(root, out / "after_delete.dot")
    generate_dotfile_bst(root, out / "bst_graph.dot")

    for key in _SEARCH_KEYS:
        found = root.tree_search(key)
        if found is None:
            lines.append(f"tree search result of key {key} is not found")
        else:
            lines.append(f"tree search result of key {key} is found -> {found.key}")

    lines.append(f"minimum result {root.minimum().key}")
    max_node = root.maximum()
    lines.append(f"maximum result {max_node.key}")
    lines.append(f"root node {max_node.get_root().key}")

    for key in _SUCCESSOR_KEYS:
        node = root.tree_search(key)
        if node is None:
            lines.append(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.tree_successor_simpler()
        if successor is None:
            lines.append(f"successor of node ({key}) is not found")
        else:
            lines.append(f"successor of node ({key}) is {successor.key}")
    return lines


def demo_binary_tree(out_dir: Union[str, Path]) -> List[str]:
    """Build, draw and query a sample binary tree; return the report lines."""
    out = Path(out_dir)
    lines: List[str] = []

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    generate_dotfile(root, out / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    generate_dotfile(root, out / "prime_t2.dot")

    lines.append(f"Current tree depth: {root.tree_depth()}")
    lines.append(f"Amount of nodes in current tree: {root.count_nodes()}")
    lines.append(f"Amount of nodes in current subtree: {right.count_nodes()}")

    left.sibling()

    by_value = root.get_node_by_value(3)
    lines.append(f"left subtree seek by value {by_value!r}")
    if by_value is not None:
        by_property = root.get_node_by_full_property(by_value)
        lines.append(f"left subtree seek by full property {by_property!r}")

    detached = root.copy()
    flag = detached.discard_node_by_value(3)
    lines.append(f"status of node deletion: {flag}")
    generate_dotfile(detached, out / "prime_t3.dot")

    lines.append(f"Depth after discard {detached.tree_depth()}")
    lines.append(f"Count nodes after discard {detached.count_nodes()}")
    generate_dotfile(root, out / "prime_t4.dot")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a demonstration, writing its Graphviz files and printing its report."""
    parser = argparse.ArgumentParser(
        prog="bintree", description="Demonstrate binary trees and draw them as Graphviz files."
    )
    parser.add_argument(
        "--out-dir", default=".", help="directory for the generated .dot files"
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="run the plain binary tree demonstration instead of the search tree one",
    )
    args = parser.parse_args(argv)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    demo = demo_binary_tree if args.binary_tree else demo_binary_search_tree
    for line in demo(out_dir):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())