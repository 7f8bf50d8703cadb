import numpy as np
import pytest

from . import tools
from .. import MinSegmentTree, MaxSegmentTree, SumSegmentTree
from ...algebras import MinAddAlgebra, SumAffineAlgebra


def test_min_tree_defaults_to_set_updates():
    tree = MinSegmentTree([6, -2, 1, 8, 10])
    assert tree.mode == "set"
    assert tree.min() == -2
    assert tree.min(2) == 1
    tree.update(0, 4, 5)
    tree.update(3, 1)
    assert tree.min(0, 3) == 1
    assert tree.min(4, 4) == 5


def test_min_tree_with_increments():
    tree = MinSegmentTree(size=6, fill=0, mode="add")
    assert isinstance(tree.algebra, MinAddAlgebra)
    tree.update(0, 5, 3)
    tree.update(2, 3, -4)
    assert tree.min() == -1
    assert tree.min(4) == 3
    assert tree.to_list() == [3, 3, -1, -1, 3, 3]


def test_max_tree():
    tree = MaxSegmentTree(np.array([0.5, 2.5, 1.0]))
    assert tree.max() == 2.5
    tree.update(1, 0.0)
    assert tree.max() == 1.0
    assert tree.max(0, 1) == 0.5

    add_tree = MaxSegmentTree([1, 2, 3], mode="add")
    add_tree.update(0, 1, 5)
    assert add_tree.max() == 7


def test_sum_tree_modes():
    tree = SumSegmentTree(size=4, fill=1, mode="add")
    tree.update(1, 2, 2)
    assert tree.sum() == 8
    assert tree.mean(1, 2) == 3
    assert tree.mean() == 2

    set_tree = SumSegmentTree([1, 2, 3, 4])
    set_tree.update(0, 2, 0)
    assert set_tree.sum() == 4
    assert set_tree.sum(3) == 4

    affine_tree = SumSegmentTree([1, 2, 3, 4], mode="affine")
    assert isinstance(affine_tree.algebra, SumAffineAlgebra)
    affine_tree.update(0, 3, (2, -1))
    assert affine_tree.to_list() == [1, 3, 5, 7]
    assert affine_tree.sum(1, 2) == 8


def test_alternate_constructors_pick_algebra_by_mode():
    tree = SumSegmentTree.filled(5, 2, mode="add")
    assert isinstance(tree, SumSegmentTree)
    assert tree.sum() == 10

    min_tree = MinSegmentTree.from_sequence([3, 1, 2], mode="add")
    assert isinstance(min_tree.algebra, MinAddAlgebra)
    min_tree.update(1, 2, 5)
    assert min_tree.min() == 3


def test_unsupported_mode_is_rejected():
    with pytest.raises(ValueError):
        MinSegmentTree([1, 2], mode="affine")
    with pytest.raises(ValueError):
        SumSegmentTree([1, 2], mode="multiply")


def test_sum_tree_matches_numpy():
    rng = np.random.default_rng(7)
    values = rng.integers(-100, 101, size=50)
    tree = SumSegmentTree(values, mode="add")
    reference = values.copy()
    for _ in range(200):
        lo, hi = tools.random_range(rng, 50)
        if rng.random() < 0.5:
            delta = int(rng.integers(-10, 11))
            tree.update(lo, hi, delta)
            reference[lo:hi + 1] += delta
        else:
            assert tree.sum(lo, hi) == int(reference[lo:hi + 1].sum())
    assert np.array_equal(tree.to_numpy(), reference)


def test_min_tree_matches_numpy():
    rng = np.random.default_rng(8)
    values = rng.integers(-100, 101, size=40)
    tree = MinSegmentTree(values)
    reference = values.copy()
    for _ in range(200):
        lo, hi = tools.random_range(rng, 40)
        if rng.random() < 0.5:
            delta = int(rng.integers(-100, 101))
            tree.update(lo, hi, delta)
            reference[lo:hi + 1] = delta
        else:
            assert tree.min(lo, hi) == int(reference[lo:hi + 1].min())
