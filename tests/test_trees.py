import math
import random

import pytest

from algolab.trees import AVLTree, BinarySearchTree, benchmark, main


def _shuffled(count, seed):
    values = list(range(count))
    random.Random(seed).shuffle(values)
    return values


def test_empty_avl_height():
    assert AVLTree().height() == -1


def test_single_node_height_zero():
    tree = AVLTree()
    tree.insert(10)
    assert tree.height() == 0


def test_sorted_seven_gives_perfect_tree():
    tree = AVLTree()
    for value in range(1, 8):
        tree.insert(value)
    assert tree.height() == 2
    assert list(tree) == list(range(1, 8))


@pytest.mark.parametrize("order", ["ascending", "descending", "shuffled"])
def test_avl_height_is_logarithmic(order):
    count = 1000
    values = list(range(count))
    if order == "descending":
        values.reverse()
    elif order == "shuffled":
        values = _shuffled(count, 7)
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    assert tree.height() <= 1.45 * math.log2(count + 2)
    assert list(tree) == sorted(values)


def test_avl_zigzag_inserts_stay_balanced():
    tree = AVLTree()
    for value in [10, 5, 7, 20, 15, 17, 1, 3]:
        tree.insert(value)
    assert list(tree) == sorted([10, 5, 7, 20, 15, 17, 1, 3])
    assert tree.height() <= 1.45 * math.log2(8 + 2)


def test_avl_search():
    tree = AVLTree()
    values = _shuffled(200, 3)
    for value in values:
        tree.insert(value)
    assert all(tree.search(v) for v in values)
    assert not tree.search(-1)
    assert not tree.search(200)


def test_avl_keeps_duplicates():
    tree = AVLTree()
    for value in [5, 5, 5]:
        tree.insert(value)
    assert list(tree) == [5, 5, 5]
    assert tree.search(5)


def test_bst_ignores_duplicates():
    tree = BinarySearchTree()
    for value in [5, 5, 5]:
        tree.insert(value)
    assert list(tree) == [5]


def test_bst_iteration_sorted_and_search():
    tree = BinarySearchTree()
    values = _shuffled(300, 11)
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)
    assert tree.search(values[0])
    assert not tree.search(len(values))


def test_bst_empty_search():
    assert BinarySearchTree().search(1) is False


def test_bst_handles_degenerate_chain():
    tree = BinarySearchTree()
    count = 3000
    for value in range(count):
        tree.insert(value)
    assert tree.search(count - 1)
    assert list(tree) == list(range(count))


def test_benchmark_returns_nonnegative_averages():
    bst_avg, avl_avg = benchmark(200, 20, random.Random(5))
    assert isinstance(bst_avg, int) and isinstance(avl_avg, int)
    assert bst_avg >= 0 and avl_avg >= 0


@pytest.mark.parametrize("n, searches", [(0, 10), (10, 0)])
def test_benchmark_rejects_empty(n, searches):
    with pytest.raises(ValueError):
        benchmark(n, searches, random.Random(1))


def test_main_output(capsys):
    assert main(["--n", "100", "--searches", "10", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("BST promedio: ") and lines[0].endswith(" ns")
    assert lines[1].startswith("AVL promedio: ") and lines[1].endswith(" ns")