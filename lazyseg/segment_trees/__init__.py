import typing as T
from .base import LazySegmentTree, NumericSegmentTree
from .min_segment_tree import MinSegmentTree
from .max_segment_tree import MaxSegmentTree
from .sum_segment_tree import SumSegmentTree

AnyNumericSegmentTree = T.Union[MinSegmentTree, MaxSegmentTree, SumSegmentTree]
