import typing as T

from .base.numeric_segment_tree import NumericSegmentTree
from ..algebras import MinSetAlgebra, MinAddAlgebra


class MinSegmentTree(NumericSegmentTree):
    ALGEBRAS = {"set": MinSetAlgebra, "add": MinAddAlgebra}

    def min(self, lo: int = 0, hi: T.Optional[int] = None) -> float:
        return self.reduce(lo, hi)
