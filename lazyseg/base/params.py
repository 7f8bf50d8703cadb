from dataclasses import dataclass


@dataclass
class SegmentTreeParams:
    # assert on every query step that the clipped target stays inside the node range
    check_invariants: bool = True
