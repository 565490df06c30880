"""Render binary trees as Graphviz ``dot`` text."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional, Union

from bstree.bst import BstNode
from bstree.tree import Node

AnyNode = Union[Node, BstNode]

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


def _label(node: AnyNode) -> int:
    return node.key if isinstance(node, BstNode) else node.value


def _edges(node: AnyNode) -> Iterator[str]:
    """Yield one edge line per child, a node's own edges before its subtrees'."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{_label(node)}--{_label(child)};\n"
    for child in children:
        yield from _edges(child)


def tree_to_dot(root: Optional[AnyNode]) -> str:
    """Return the undirected dot graph of the tree below ``root``."""
    body = "" if root is None else "".join(_edges(root))
    return _PREAMBLE + body + _EPILOGUE


def write_dotfile(root: Optional[AnyNode], output_path: Union[str, os.PathLike]) -> None:
    """Write the dot graph of the tree below ``root`` to ``output_path``."""
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(tree_to_dot(root))