"""Check whether a binary tree satisfies the strict binary-search-tree property."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree of integers."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if an in-order walk of ``root`` yields strictly increasing values."""
    stack: list[TreeNode] = []
    node = root
    prev: Optional[TreeNode] = None
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if prev is not None and node.val <= prev.val:
            return False
        prev = node
        node = node.right
    return True


def main(argv: Optional[list[str]] = None) -> int:
    """Validate two sample trees and print the outcome of each."""
    invalid = TreeNode(
        5,
        TreeNode(1, TreeNode(0), TreeNode(0)),
        TreeNode(4, TreeNode(3), TreeNode(6)),
    )
    valid = TreeNode(2, TreeNode(1), TreeNode(3))
    print(f"The test 1 is: {int(is_valid_bst(valid))}")
    print(f"The test 2 is: {int(is_valid_bst(invalid))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())