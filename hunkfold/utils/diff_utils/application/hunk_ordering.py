"""
Utilities for checking the relative position of hunks.
"""

from typing import Optional, Sequence

from hunkfold.models.hunk import Hunk
from hunkfold.utils.logging_utils import logger
from ..core.config import is_strict_order_enabled
from ..core.exceptions import HunkOrderError

def are_hunks_adjacent(first: Hunk, second: Hunk) -> bool:
    """
    Check whether ``second`` starts right after ``first`` ends.

    Both the old and the new numbering must line up; a hunk that only touches
    its predecessor in one of them is kept apart.
    """
    return (
        second.old_start == first.old_end + 1
        and second.new_start == first.new_end + 1
    )

def find_ordering_violation(hunks: Sequence[Hunk]) -> Optional[int]:
    """
    Find the first hunk that does not come strictly after its predecessor.
    
    Args:
        hunks: The hunks to check, in the order they will be processed
        
    Returns:
        The index of the offending hunk, or None if the hunks are sorted and
        non-overlapping in both numberings
    """
    for i in range(1, len(hunks)):
        previous = hunks[i - 1]
        current = hunks[i]
        if current.old_start <= previous.old_end or current.new_start <= previous.new_end:
            return i
    return None

def check_hunk_order(hunks: Sequence[Hunk], strict: Optional[bool] = None) -> None:
    """
    Check that hunks are sorted and non-overlapping.
    
    Args:
        hunks: The hunks to check
        strict: Raise on a violation instead of logging it. Defaults to the
                HUNKFOLD_STRICT_ORDER setting.
        
    Raises:
        HunkOrderError: If strict and the hunks are out of order or overlap
    """
    index = find_ordering_violation(hunks)
    if index is None:
        return

    if strict is None:
        strict = is_strict_order_enabled()

    previous = hunks[index - 1]
    current = hunks[index]
    message = (
        f"Hunk {index} (old {current.old_start}-{current.old_end}, new {current.new_start}-{current.new_end}) "
        f"does not follow hunk {index - 1} (old {previous.old_start}-{previous.old_end}, "
        f"new {previous.new_start}-{previous.new_end})"
    )
    if strict:
        raise HunkOrderError(message, {
            'type': 'hunk_order',
            'index': index,
            'previous': previous.to_dict(),
            'current': current.to_dict(),
        })
    logger.warning(f"{message}; merging in the given order")
