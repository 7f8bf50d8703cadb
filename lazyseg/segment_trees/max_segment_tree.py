import typing as T

from .base.numeric_segment_tree import NumericSegmentTree
from ..algebras import MaxSetAlgebra, MaxAddAlgebra


class MaxSegmentTree(NumericSegmentTree):
    ALGEBRAS = {"set": MaxSetAlgebra, "add": MaxAddAlgebra}

    def max(self, lo: int = 0, hi: T.Optional[int] = None) -> float:
        return self.reduce(lo, hi)
