"""AVL and plain binary search trees, with a lookup-time comparison."""

from __future__ import annotations

import argparse
import random
import time
from typing import Iterator, Optional

_RAND_MAX = 2**31 - 1


class _AVLNode:
    __slots__ = ("value", "height", "left", "right", "parent")

    def __init__(self, value: int, parent: Optional["_AVLNode"]) -> None:
        self.value = value
        self.height = 0
        self.left: Optional[_AVLNode] = None
        self.right: Optional[_AVLNode] = None
        self.parent = parent


def _height(node: Optional[_AVLNode]) -> int:
    return -1 if node is None else node.height


def _update_height(node: Optional[_AVLNode]) -> None:
    if node is not None:
        node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: Optional[_AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _in_order(node) -> Iterator[int]:
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


class AVLTree:
    """Self-balancing binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_AVLNode] = None

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height -1."""
        return _height(self._root)

    def __iter__(self) -> Iterator[int]:
        return _in_order(self._root)

    def search(self, value: int) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def insert(self, value: int) -> None:
        """Insert ``value`` and restore balance up to the root."""
        if self._root is None:
            self._root = _AVLNode(value, None)
            return
        parent = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node = _AVLNode(value, parent)
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._rebalance(parent)

    def _child_taller(self, node: _AVLNode) -> Optional[_AVLNode]:
        left, right = _height(node.left), _height(node.right)
        if left > right:
            return node.left
        if left < right:
            return node.right
        if node.parent is not None and node is node.parent.left:
            return node.left
        return node.right

    def _transplant(self, node: _AVLNode, replacement: Optional[_AVLNode]) -> None:
        if node.parent is None:
            self._root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement
        if replacement is not None:
            replacement.parent = node.parent

    def _rotate_left(self, node: _AVLNode) -> None:
        pivot = node.right
        inner = pivot.left
        pivot.left = node
        node.right = inner
        if inner is not None:
            inner.parent = node
        self._transplant(node, pivot)
        node.parent = pivot
        _update_height(node)
        _update_height(pivot)

    def _rotate_right(self, node: _AVLNode) -> None:
        pivot = node.left
        inner = pivot.right
        pivot.right = node
        node.left = inner
        if inner is not None:
            inner.parent = node
        self._transplant(node, pivot)
        node.parent = pivot
        _update_height(node)
        _update_height(pivot)

    def _restructure(self, node: _AVLNode) -> None:
        child = self._child_taller(node)
        grandchild = self._child_taller(child)
        if child is node.left and grandchild is child.left:
            self._rotate_right(node)
        elif child is node.left and grandchild is child.right:
            self._rotate_left(child)
            self._rotate_right(node)
        elif child is node.right and grandchild is child.right:
            self._rotate_left(node)
        else:
            self._rotate_right(child)
            self._rotate_left(node)

    def _rebalance(self, node: Optional[_AVLNode]) -> None:
        while node is not None:
            _update_height(node)
            parent = node.parent
            if abs(_balance(node)) > 1:
                self._restructure(node)
            node = parent


class _BSTNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: Optional[_BSTNode] = None
        self.right: Optional[_BSTNode] = None


class BinarySearchTree:
    """Unbalanced binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self._root: Optional[_BSTNode] = None

    def __iter__(self) -> Iterator[int]:
        return _in_order(self._root)

    def insert(self, value: int) -> None:
        """Insert ``value`` unless it is already present."""
        if self._root is None:
            self._root = _BSTNode(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _BSTNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _BSTNode(value)
                    return
                node = node.right
            else:
                return

    def search(self, value: int) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False


def benchmark(
    n: int = 100_000, searches: int = 1000, rng: Optional[random.Random] = None
) -> tuple[int, int]:
    """Fill both trees with 0..n-1 shuffled and time lookups.

    Half of the lookups hit stored values, half miss. Returns the average
    lookup time in nanoseconds as ``(bst, avl)``.
    """
    if n < 1 or searches < 1:
        raise ValueError("n and searches must be positive")
    rng = rng if rng is not None else random.Random()
    values = list(range(n))
    rng.shuffle(values)

    avl = AVLTree()
    bst = BinarySearchTree()
    for value in values:
        avl.insert(value)
        bst.insert(value)

    total_bst = 0
    total_avl = 0
    for i in range(searches):
        if i < searches // 2:
            target = values[rng.randrange(n)]
        else:
            target = n + rng.randint(0, _RAND_MAX)

        start = time.perf_counter_ns()
        bst.search(target)
        total_bst += time.perf_counter_ns() - start

        start = time.perf_counter_ns()
        avl.search(target)
        total_avl += time.perf_counter_ns() - start

    return total_bst // searches, total_avl // searches


def main(argv: Optional[list[str]] = None) -> int:
    """Compare average lookup times of the two trees."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--n", type=int, default=100_000)
    parser.add_argument("--searches", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    bst_avg, avl_avg = benchmark(args.n, args.searches, random.Random(args.seed))
    print(f"BST promedio: {bst_avg} ns")
    print(f"AVL promedio: {avl_avg} ns")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())