from .segment_tree import LazySegmentTree
from .numeric_segment_tree import NumericSegmentTree
