import typing as T

from .base.numeric_segment_tree import NumericSegmentTree
from ..algebras import SumSetAlgebra, SumAddAlgebra, SumAffineAlgebra


class SumSegmentTree(NumericSegmentTree):
    # "affine" deltas are (scale, offset) tuples
    ALGEBRAS = {"set": SumSetAlgebra, "add": SumAddAlgebra, "affine": SumAffineAlgebra}

    def sum(self, lo: int = 0, hi: T.Optional[int] = None) -> float:
        return self.reduce(lo, hi)

    def mean(self, lo: int = 0, hi: T.Optional[int] = None) -> float:
        if hi is None:
            hi = self.length - 1
        return self.sum(lo, hi) / (hi - lo + 1)
