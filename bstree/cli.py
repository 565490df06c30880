"""Command that exercises the binary search tree and writes dot graphs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from bstree.bst import BstNode
from bstree.dot import write_dotfile

_DEMO_KEYS = (6, 18, 17, 20, 3, 7, 2, 4, 13, 9)
_SEARCH_KEYS = (6, 18)
_SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)
_DELETE_KEYS = (20, 7, 22, 3, 15, 17, 6)


def build_demo_tree() -> BstNode:
    """Build the sample tree rooted at 15."""
    root = BstNode(15)
    for key in _DEMO_KEYS:
        root.insert(key)
    return root


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bstree",
        description="Exercise a binary search tree and write its dot graphs.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the generated dot files (default: current directory)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration; return the exit status."""
    args = _parse_args(argv)
    out_dir: Path = args.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    root: Optional[BstNode] = build_demo_tree()
    write_dotfile(root, out_dir / "bst_graph.dot")

    for key in _SEARCH_KEYS:
        found = root.search(key)
        if found is None:
            print(f"tree search result of key {key} is not found")
        else:
            print(f"tree search result of key {key} is minimum -> {found.minimum().key}")
            print(f"found -> {found.key}")

    min_node = root.minimum()
    print(f"minimum result {min_node.key}")
    max_node = root.maximum()
    print(f"maximum result {max_node.key}")
    print(f"root node {max_node.root().key}")

    for key in _SUCCESSOR_KEYS:
        node = root.search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.successor()
        result = "not found" if successor is None else successor.key
        print(f"successor of node ({key}) is {result}")

    for key in _DELETE_KEYS:
        target = None if root is None else root.search(key)
        if target is None:
            print(f"not found key {key}, can't delete that node")
            continue
        root = root.delete(target)
        print(f"deleted key {key} success")

    write_dotfile(root, out_dir / "bst_graph_deleted.dot")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())