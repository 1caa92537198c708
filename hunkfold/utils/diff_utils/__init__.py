"""
diff_utils package - Utilities for manipulating parsed diff hunks.

This package shifts hunk boundaries and merges adjacent hunks. It works on
in-memory Hunk records only; parsing and applying diffs happen elsewhere.
"""

# Core utilities
from .core import HunkError, HunkOrderError, get_config_value, is_strict_order_enabled

# Application utilities
from .application import ShiftDirection, shift_hunk_up, shift_hunk_down, shift_hunk
from .application import merge_hunk_pair, merge_adjacent_hunks
from .application import are_hunks_adjacent, find_ordering_violation, check_hunk_order
