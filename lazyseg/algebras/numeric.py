import typing as T

from ..interfaces import Algebra

Number = T.Union[int, float]
AffineDelta = T.Tuple[Number, Number]


class MinSetAlgebra(Algebra[Number, Number]):
    """Range minimum with "set every index to d" updates."""

    def join_values(self, a: Number, b: Number) -> Number:
        return min(a, b)

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return delta

    def join_deltas(self, older: Number, newer: Number) -> Number:
        # the most recent assignment prevails
        return newer


class MaxSetAlgebra(Algebra[Number, Number]):
    def join_values(self, a: Number, b: Number) -> Number:
        return max(a, b)

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return delta

    def join_deltas(self, older: Number, newer: Number) -> Number:
        return newer


class MinAddAlgebra(Algebra[Number, Number]):
    """Range minimum with "increment every index by d" updates."""

    def join_values(self, a: Number, b: Number) -> Number:
        return min(a, b)

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return value + delta

    def join_deltas(self, older: Number, newer: Number) -> Number:
        return older + newer


class MaxAddAlgebra(Algebra[Number, Number]):
    def join_values(self, a: Number, b: Number) -> Number:
        return max(a, b)

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return value + delta

    def join_deltas(self, older: Number, newer: Number) -> Number:
        return older + newer


class SumAddAlgebra(Algebra[Number, Number]):
    """Range sum with "increment every index by d" updates."""

    def join_values(self, a: Number, b: Number) -> Number:
        return a + b

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return value + delta * length

    def join_deltas(self, older: Number, newer: Number) -> Number:
        return older + newer


class SumSetAlgebra(Algebra[Number, Number]):
    def join_values(self, a: Number, b: Number) -> Number:
        return a + b

    def apply_delta(self, value: Number, delta: Number, length: int) -> Number:
        return delta * length

    def join_deltas(self, older: Number, newer: Number) -> Number:
        return newer


class SumAffineAlgebra(Algebra[Number, AffineDelta]):
    """Range sum with updates of the form x -> scale * x + offset.

    A delta is the tuple `(scale, offset)`. `(0, c)` assigns `c` and `(1, c)`
    increments by `c`, so both update styles can be mixed on one tree.
    """

    def join_values(self, a: Number, b: Number) -> Number:
        return a + b

    def apply_delta(self, value: Number, delta: AffineDelta, length: int) -> Number:
        scale, offset = delta
        return scale * value + offset * length

    def join_deltas(self, older: AffineDelta, newer: AffineDelta) -> AffineDelta:
        older_scale, older_offset = older
        newer_scale, newer_offset = newer
        return older_scale * newer_scale, newer_scale * older_offset + newer_offset
