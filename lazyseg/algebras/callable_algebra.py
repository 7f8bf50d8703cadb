import typing as T

from ..interfaces import Algebra, T_V, T_D


class CallableAlgebra(Algebra[T_V, T_D]):
    def __init__(self,
                 join_values: T.Callable[[T_V, T_V], T_V],
                 apply_delta: T.Callable[[T_V, T_D, int], T_V],
                 join_deltas: T.Callable[[T_D, T_D], T_D],
                 name: str = "CallableAlgebra"):
        """Algebra assembled from three plain functions.
        Args:
            join_values (function): associative aggregation of two values
            apply_delta (function): (value, delta, length) -> updated value
            join_deltas (function): (older, newer) -> combined delta
            name (str): label shown in reprs and logs
        """
        for label, fn in (("join_values", join_values), ("apply_delta", apply_delta), ("join_deltas", join_deltas)):
            if not callable(fn):
                raise ValueError(f"argument {label} must be callable")
        self._join_values = join_values
        self._apply_delta = apply_delta
        self._join_deltas = join_deltas
        self.name = name

    def join_values(self, a: T_V, b: T_V) -> T_V:
        return self._join_values(a, b)

    def apply_delta(self, value: T_V, delta: T_D, length: int) -> T_V:
        return self._apply_delta(value, delta, length)

    def join_deltas(self, older: T_D, newer: T_D) -> T_D:
        return self._join_deltas(older, newer)

    def __repr__(self) -> str:
        return f"{self.name}()"
