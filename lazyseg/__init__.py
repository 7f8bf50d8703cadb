from .base import BaseObject, SegmentTreeParams
from .interfaces import Algebra
from .segment_trees import LazySegmentTree, NumericSegmentTree, MinSegmentTree, MaxSegmentTree, SumSegmentTree, \
    AnyNumericSegmentTree
from . import algebras, segment_trees

__version__ = "0.1.0"
