"""
Element-wise algebras over fixed-shape numpy arrays.

Every leaf holds an array of the same shape, and aggregates and deltas are
arrays of that shape too. Operations always build new arrays, so values
returned by a tree must be treated as read-only.
"""

import numpy as np

from ..interfaces import Algebra


class VectorMinSetAlgebra(Algebra[np.ndarray, np.ndarray]):
    def join_values(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.minimum(a, b)

    def apply_delta(self, value: np.ndarray, delta: np.ndarray, length: int) -> np.ndarray:
        return np.array(delta)

    def join_deltas(self, older: np.ndarray, newer: np.ndarray) -> np.ndarray:
        return newer


class VectorMaxSetAlgebra(Algebra[np.ndarray, np.ndarray]):
    def join_values(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.maximum(a, b)

    def apply_delta(self, value: np.ndarray, delta: np.ndarray, length: int) -> np.ndarray:
        return np.array(delta)

    def join_deltas(self, older: np.ndarray, newer: np.ndarray) -> np.ndarray:
        return newer


class VectorSumAddAlgebra(Algebra[np.ndarray, np.ndarray]):
    def join_values(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.add(a, b)

    def apply_delta(self, value: np.ndarray, delta: np.ndarray, length: int) -> np.ndarray:
        return value + np.asarray(delta) * length

    def join_deltas(self, older: np.ndarray, newer: np.ndarray) -> np.ndarray:
        return np.add(older, newer)
