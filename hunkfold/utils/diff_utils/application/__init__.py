"""
Hunk application helpers: shifting and merging.
"""

from .hunk_utils import (
    ShiftDirection,
    shift_hunk_up,
    shift_hunk_down,
    shift_hunk,
    merge_hunk_pair,
    merge_adjacent_hunks,
)
from .hunk_ordering import are_hunks_adjacent, find_ordering_violation, check_hunk_order
