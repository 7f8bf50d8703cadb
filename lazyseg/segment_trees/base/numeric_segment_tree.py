import typing as T

from .segment_tree import LazySegmentTree
from ...base import SegmentTreeParams
from ...interfaces import Algebra


class NumericSegmentTree(LazySegmentTree):
    """Lazy segment tree over numbers whose algebra is picked by update mode."""

    ALGEBRAS: T.Dict[str, T.Type[Algebra]] = {}

    def __init__(self,
                 values: T.Optional[T.Iterable[float]] = None,
                 size: T.Optional[int] = None,
                 fill: T.Optional[float] = None,
                 mode: str = "set",
                 params: SegmentTreeParams = SegmentTreeParams()):
        if mode not in self.ALGEBRAS:
            raise ValueError(f"unsupported update mode {mode!r} for {type(self).__name__}, "
                             f"expected one of {sorted(self.ALGEBRAS)}")
        self.mode: str = mode
        super(NumericSegmentTree, self).__init__(self.ALGEBRAS[mode](), values=values, size=size, fill=fill,
                                                 params=params)

    @classmethod
    def filled(cls, size: int, value: float, mode: str = "set",
               params: SegmentTreeParams = SegmentTreeParams()) -> "NumericSegmentTree":
        return cls(size=size, fill=value, mode=mode, params=params)

    @classmethod
    def from_sequence(cls, values: T.Iterable[float], mode: str = "set",
                      params: SegmentTreeParams = SegmentTreeParams()) -> "NumericSegmentTree":
        return cls(values=values, mode=mode, params=params)
