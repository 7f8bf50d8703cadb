import functools
import typing as T

import numpy as np

from ...interfaces import Algebra
from ..base.segment_tree import LazySegmentTree


class NaiveArray:
    """Plain list that applies every update index by index."""

    def __init__(self, algebra: Algebra, values: T.Iterable):
        self.algebra = algebra
        self.values = list(values)

    def update(self, lo: int, hi: int, delta) -> None:
        for i in range(lo, hi + 1):
            self.values[i] = self.algebra.apply_delta(self.values[i], delta, 1)

    def query(self, lo: int, hi: int):
        return functools.reduce(self.algebra.join_values, self.values[lo:hi + 1])


def assert_same(a, b) -> None:
    assert np.array_equal(np.asarray(a), np.asarray(b)), f"{a} != {b}"


def random_range(rng: np.random.Generator, n: int) -> T.Tuple[int, int]:
    lo, hi = sorted(int(x) for x in rng.integers(0, n, size=2))
    return lo, hi


def snapshot(tree: LazySegmentTree) -> T.Tuple[T.List, T.List, T.List[bool]]:
    return list(tree.values), list(tree.deltas), list(tree.pending)


def compare_with_naive(tree: LazySegmentTree,
                       naive: NaiveArray,
                       rng: np.random.Generator,
                       make_delta: T.Callable[[np.random.Generator], T.Any],
                       steps: int = 300) -> None:
    n = tree.size()
    for _ in range(steps):
        lo, hi = random_range(rng, n)
        if rng.random() < 0.5:
            delta = make_delta(rng)
            tree.update(lo, hi, delta)
            naive.update(lo, hi, delta)
        else:
            assert_same(tree.query(lo, hi), naive.query(lo, hi))
    for i in range(n):
        assert_same(tree.at(i), naive.values[i])
