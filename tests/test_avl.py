import math
import random

import pytest

from dsakit.avl import AVLTree, main

SAMPLE = [20, 4, 15, 70, 50, 100, 80]


def build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    return tree


def root_height(tree):
    return max(tree.height_of(k) for k in tree)


def test_in_order_is_sorted():
    tree = build(SAMPLE)
    assert tree.in_order() == sorted(SAMPLE)
    assert list(tree) == sorted(SAMPLE)


def test_duplicates_ignored():
    tree = build(SAMPLE + SAMPLE)
    assert len(tree) == len(SAMPLE)
    assert tree.in_order() == sorted(SAMPLE)


def test_remove_key():
    tree = build(SAMPLE)
    tree.remove(70)
    assert 70 not in tree
    assert tree.in_order() == sorted(k for k in SAMPLE if k != 70)
    assert len(tree) == len(SAMPLE) - 1


def test_remove_absent_is_noop():
    tree = build(SAMPLE)
    tree.remove(999)
    assert len(tree) == len(SAMPLE)
    assert tree.in_order() == sorted(SAMPLE)


def test_height_of_missing_raises():
    tree = build(SAMPLE)
    with pytest.raises(KeyError):
        tree.height_of(12345)


def test_single_node_height():
    tree = build([42])
    assert tree.height_of(42) == 1


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.in_order() == []
    assert 1 not in tree


@pytest.mark.parametrize("n", [7, 100, 1023])
def test_sorted_insert_stays_balanced(n):
    tree = build(range(n))
    assert len(tree) == n
    assert root_height(tree) <= 1.45 * math.log2(n + 2)


def test_random_insert_and_delete_keep_balance():
    rng = random.Random(7)
    keys = rng.sample(range(10000), 500)
    tree = build(keys)
    for key in keys[::2]:
        tree.remove(key)
    remaining = sorted(keys[1::2])
    assert tree.in_order() == remaining
    assert root_height(tree) <= 1.45 * math.log2(len(remaining) + 2)
    assert all(k in tree for k in remaining)


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "In-order traversal: 4 15 20 50 70 80 100" in out
    assert "After deleting 70: 4 15 20 50 80 100" in out