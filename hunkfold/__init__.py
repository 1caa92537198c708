"""
hunkfold - shift and merge unified-diff hunks.
"""

__version__ = "0.1.0"

from hunkfold.models import Hunk
from hunkfold.utils.diff_utils import (
    HunkError,
    HunkOrderError,
    ShiftDirection,
    shift_hunk_up,
    shift_hunk_down,
    shift_hunk,
    merge_hunk_pair,
    merge_adjacent_hunks,
    are_hunks_adjacent,
    find_ordering_violation,
    check_hunk_order,
)
