from abc import ABC, abstractmethod
import typing as T

T_V = T.TypeVar("T_V")
T_D = T.TypeVar("T_D")


class Algebra(T.Generic[T_V, T_D], ABC):
    """Pair of operations a lazy segment tree is parameterized with.

    Values (`T_V`) are aggregated with `join_values` and pending updates
    (`T_D`) are composed with `join_deltas`. Implementations must satisfy:

    - `join_values` and `join_deltas` are associative and side effect free.
    - `apply_delta(join_values(v, ..., v), d, m)` equals the join of `m`
      copies of `apply_delta(v, d, 1)`.
    - applying `d1, ..., dm` one after the other equals a single application
      of `join_deltas(d1, ..., dm)`.

    None of these can be checked at runtime: an algebra that breaks them
    makes the tree return wrong aggregates without raising.
    """

    @abstractmethod
    def join_values(self, a: T_V, b: T_V) -> T_V:
        raise NotImplementedError()

    @abstractmethod
    def apply_delta(self, value: T_V, delta: T_D, length: int) -> T_V:
        """Aggregate of `length` contiguous leaves after `delta` is applied to each of them."""
        raise NotImplementedError()

    @abstractmethod
    def join_deltas(self, older: T_D, newer: T_D) -> T_D:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
