"""Render binary trees as undirected Graphviz documents."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol, TypeVar, Union

from .bst import BstNode
from .tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


class _Binary(Protocol):
    left: Optional["_Binary"]
    right: Optional["_Binary"]


_N = TypeVar("_N", Node, BstNode)


def _edges(node: _N, label: Callable[[_N], str]) -> Iterator[str]:
    """Yield one edge line per child, the node's own edges before its subtrees'."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        yield from _edges(child, label)


def _render(root: _N, label: Callable[[_N], str]) -> str:
    return _PREAMBLE + "".join(_edges(root, label)) + _EPILOGUE


def _node_label(node: Node) -> str:
    return str(node.value)


def _bst_label(node: BstNode) -> str:
    if node.key is None:
        raise ValueError("cannot draw an edge to or from a node without a key")
    return str(node.key)


def tree_to_dot(root: Node) -> str:
    """Return the Graphviz text for the binary tree below ``root``."""
    return _render(root, _node_label)


def bst_to_dot(root: BstNode) -> str:
    """Return the Graphviz text for the search tree below ``root``.

    Raises ``ValueError`` if an edge touches a node without a key.
    """
    return _render(root, _bst_label)


def _write(text: str, output_path: Union[str, Path]) -> None:
    with open(output_path, "w", encoding="utf-8", newline="") as output:
        output.write(text)


def generate_dotfile(root: Node, output_path: Union[str, Path]) -> None:
    """Write the Graphviz text for a binary tree to ``output_path``."""
    _write(tree_to_dot(root), output_path)


def generate_dotfile_bst(root: BstNode, output_path: Union[str, Path]) -> None:
    """Write the Graphviz text for a search tree to ``output_path``."""
    _write(bst_to_dot(root), output_path)