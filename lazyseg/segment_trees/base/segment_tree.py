import operator
import typing as T

import numpy as np

from ...base import BaseObject, SegmentTreeParams
from ...interfaces import Algebra, T_V, T_D


def _own(item: T_V) -> T_V:
    # arrays entering the tree are copied so later in-place edits by the caller cannot reach it
    if isinstance(item, np.ndarray):
        return item.copy()
    if isinstance(item, np.generic):
        return item.item()
    return item


def _materialize(values: T.Iterable[T_V]) -> T.List[T_V]:
    if isinstance(values, np.ndarray):
        if values.ndim == 0:
            raise ValueError("values must be a sequence, got a 0-d array")
        if values.ndim == 1:
            return values.tolist()
        return [row.copy() for row in values]
    return [_own(v) for v in values]


class LazySegmentTree(BaseObject, T.Generic[T_V, T_D]):
    """Fixed-size array with O(log n) range queries and range updates.

    Queries fold `algebra.join_values` over an inclusive index range and
    updates apply a delta to every index of an inclusive range. Updates are
    deferred: a node fully covered by an update absorbs the delta and hands
    it to its children only when a later call descends through it.

    Nodes live in three flat lists of `4 * n` slots, the children of node `i`
    being `2 * i + 1` and `2 * i + 2`. A node flagged in `pending` holds in
    `deltas` an update that neither its own value nor its subtree has seen.
    """

    def __init__(self,
                 algebra: Algebra[T_V, T_D],
                 values: T.Optional[T.Iterable[T_V]] = None,
                 size: T.Optional[int] = None,
                 fill: T.Optional[T_V] = None,
                 params: SegmentTreeParams = SegmentTreeParams()):
        """Initialization.
        Args:
            algebra (Algebra): value and delta operations of the tree
            values (iterable): initial leaves, left to right
            size (int): number of leaves, when building a uniform tree
            fill: value of every leaf, when building a uniform tree
            params (SegmentTreeParams)
        """
        if not isinstance(algebra, Algebra):
            raise ValueError("argument algebra must be an instance of Algebra")
        if not isinstance(params, SegmentTreeParams):
            raise ValueError("argument params must be an instance of SegmentTreeParams")
        if (values is None) == (size is None):
            raise ValueError("exactly one of values or size must be provided")
        super(LazySegmentTree, self).__init__()
        self.algebra: Algebra[T_V, T_D] = algebra
        self.params: SegmentTreeParams = params

        if values is not None:
            if fill is not None:
                raise ValueError("fill can only be used together with size")
            leaves = _materialize(values)
            self.length: int = len(leaves)
            leaf = leaves.__getitem__
        else:
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
                raise ValueError(f"size must be an integer, got {size!r}")
            if size < 0:
                raise ValueError(f"size must be >= 0, got {size}")
            if fill is None:
                raise ValueError("fill value must be provided along with size")
            self.length = int(size)
            fill = _own(fill)
            leaf = lambda _: fill

        slots = 4 * max(self.length, 1)
        self.values: T.List[T.Optional[T_V]] = [None for _ in range(slots)]
        self.deltas: T.List[T.Optional[T_D]] = [None for _ in range(slots)]
        self.pending: T.List[bool] = [False for _ in range(slots)]
        if self.length > 0:
            self._build(0, 0, self.length - 1, leaf)
        self.log.info(f"built {type(self).__name__} of size {self.length} over {self.algebra!r}")

    @classmethod
    def filled(cls, size: int, value: T_V, algebra: Algebra[T_V, T_D],
               params: SegmentTreeParams = SegmentTreeParams()) -> "LazySegmentTree[T_V, T_D]":
        return cls(algebra, size=size, fill=value, params=params)

    @classmethod
    def from_sequence(cls, values: T.Iterable[T_V], algebra: Algebra[T_V, T_D],
                      params: SegmentTreeParams = SegmentTreeParams()) -> "LazySegmentTree[T_V, T_D]":
        return cls(algebra, values=values, params=params)

    def _build(self, i: int, lo: int, hi: int, leaf: T.Callable[[int], T_V]) -> None:
        if lo == hi:
            self.values[i] = leaf(lo)
            return
        mid = (lo + hi) // 2
        self._build(2 * i + 1, lo, mid, leaf)
        self._build(2 * i + 2, mid + 1, hi, leaf)
        self.values[i] = self.algebra.join_values(self.values[2 * i + 1], self.values[2 * i + 2])

    def _push(self, i: int, lo: int, hi: int) -> None:
        """Applies the pending delta of node `i` to its value and defers it to both children."""
        if not self.pending[i]:
            return
        delta = self.deltas[i]
        self.values[i] = self.algebra.apply_delta(self.values[i], delta, hi - lo + 1)
        if lo != hi:
            for child in (2 * i + 1, 2 * i + 2):
                if self.pending[child]:
                    self.deltas[child] = self.algebra.join_deltas(self.deltas[child], delta)
                else:
                    self.deltas[child] = delta
                self.pending[child] = True
        self.deltas[i] = None
        self.pending[i] = False

    def _query(self, i: int, lo: int, hi: int, target_lo: int, target_hi: int) -> T_V:
        if self.params.check_invariants:
            assert lo <= target_lo <= target_hi <= hi, \
                f"target [{target_lo}, {target_hi}] escapes node range [{lo}, {hi}]"
        self._push(i, lo, hi)
        if lo == target_lo and hi == target_hi:
            return self.values[i]
        mid = (lo + hi) // 2
        if target_hi <= mid:
            return self._query(2 * i + 1, lo, mid, target_lo, target_hi)
        if mid + 1 <= target_lo:
            return self._query(2 * i + 2, mid + 1, hi, target_lo, target_hi)
        return self.algebra.join_values(
            self._query(2 * i + 1, lo, mid, target_lo, mid),
            self._query(2 * i + 2, mid + 1, hi, mid + 1, target_hi),
        )

    def _update(self, i: int, lo: int, hi: int, target_lo: int, target_hi: int, delta: T_D) -> None:
        self._push(i, lo, hi)
        if hi < target_lo or lo > target_hi:
            return
        if target_lo <= lo and hi <= target_hi:
            # the push above left this node without a pending delta
            self.deltas[i] = delta
            self.pending[i] = True
            self._push(i, lo, hi)
            return
        mid = (lo + hi) // 2
        self._update(2 * i + 1, lo, mid, target_lo, target_hi, delta)
        self._update(2 * i + 2, mid + 1, hi, target_lo, target_hi, delta)
        self.values[i] = self.algebra.join_values(self.values[2 * i + 1], self.values[2 * i + 2])

    def _check_range(self, lo: int, hi: int) -> T.Tuple[int, int]:
        lo, hi = operator.index(lo), operator.index(hi)
        if not 0 <= lo <= hi < self.length:
            self.log.warning(f"rejected range [{lo}, {hi}] for size {self.length}")
            raise IndexError(f"range [{lo}, {hi}] out of bounds for {type(self).__name__} of size {self.length}")
        return lo, hi

    def size(self) -> int:
        return self.length

    def query(self, lo: int, hi: int) -> T_V:
        """Returns the join of every value in [lo, hi], both ends included."""
        lo, hi = self._check_range(lo, hi)
        self.log.debug(f"query [{lo}, {hi}]")
        return self._query(0, 0, self.length - 1, lo, hi)

    def reduce(self, lo: int = 0, hi: T.Optional[int] = None) -> T_V:
        """Same as `query`, `hi` defaulting to the last index."""
        if hi is None:
            hi = self.length - 1
        return self.query(lo, hi)

    def at(self, i: int) -> T_V:
        return self.query(i, i)

    def update(self, lo: int, *args) -> None:
        """Applies a delta to a single index or to an inclusive range.

        Called as `update(i, delta)` or as `update(lo, hi, delta)`.
        """
        if len(args) == 1:
            hi, delta = lo, args[0]
        elif len(args) == 2:
            hi, delta = args
        else:
            raise TypeError(f"update expects (i, delta) or (lo, hi, delta), got {len(args) + 1} arguments")
        lo, hi = self._check_range(lo, hi)
        self.log.debug(f"update [{lo}, {hi}] with {delta!r}")
        self._update(0, 0, self.length - 1, lo, hi, _own(delta))

    def to_list(self) -> T.List[T_V]:
        return [self.at(i) for i in range(self.length)]

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self.to_list(), dtype=dtype)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, idx: int) -> T_V:
        if isinstance(idx, slice):
            raise TypeError(f"{type(self).__name__} does not support slicing, use query(lo, hi)")
        return self.at(idx)

    def __iter__(self) -> T.Iterator[T_V]:
        for i in range(self.length):
            yield self.at(i)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.length}, algebra={self.algebra!r})"
