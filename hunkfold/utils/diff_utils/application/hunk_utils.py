"""
Utilities for shifting and merging diff hunks.
"""

import enum
from typing import List, Optional, Sequence, Union

from hunkfold.models.hunk import Hunk
from hunkfold.utils.logging_utils import logger
from .hunk_ordering import are_hunks_adjacent, check_hunk_order

class ShiftDirection(enum.Enum):
    """Direction in which a hunk boundary is moved."""
    UP = "up"
    DOWN = "down"

def shift_hunk_up(hunk: Hunk) -> Optional[Hunk]:
    """
    Move the start of a hunk up by one line, absorbing the line before it.
    
    Args:
        hunk: The hunk to shift
        
    Returns:
        The shifted hunk, or None if the line before the hunk is unknown
    """
    if hunk.previous_line is None:
        logger.debug(f"Cannot shift hunk at old line {hunk.old_start} up: no previous line")
        return None

    # Both context lines are stale once the boundary moves
    return Hunk(
        old_start=hunk.old_start - 1,
        old_end=hunk.old_end,
        new_start=hunk.new_start - 1,
        new_end=hunk.new_end,
        new_content=[hunk.previous_line] + list(hunk.new_content),
        newline_added_at_end=hunk.newline_added_at_end,
    )

def shift_hunk_down(hunk: Hunk) -> Optional[Hunk]:
    """
    Move the end of a hunk down by one line, absorbing the line after it.
    
    The result never carries ``newline_added_at_end``: a line now follows the
    hunk, so it no longer ends at EOF.
    
    Args:
        hunk: The hunk to shift
        
    Returns:
        The shifted hunk, or None if the line after the hunk is unknown
    """
    if hunk.next_line is None:
        logger.debug(f"Cannot shift hunk at old line {hunk.old_start} down: no next line")
        return None

    return Hunk(
        old_start=hunk.old_start,
        old_end=hunk.old_end + 1,
        new_start=hunk.new_start,
        new_end=hunk.new_end + 1,
        new_content=list(hunk.new_content) + [hunk.next_line],
    )

def shift_hunk(hunk: Hunk, direction: Union[ShiftDirection, str]) -> Optional[Hunk]:
    """Shift a hunk one line in the given direction ('up' or 'down')."""
    direction = ShiftDirection(direction)
    if direction is ShiftDirection.UP:
        return shift_hunk_up(hunk)
    return shift_hunk_down(hunk)

def merge_hunk_pair(first: Hunk, second: Hunk) -> Hunk:
    """
    Merge two hunks into one spanning both.

    Context before the merged region comes from ``first``; context after it
    and the EOF marker come from ``second``. Adjacency is not checked.
    """
    return Hunk(
        old_start=first.old_start,
        old_end=second.old_end,
        new_start=first.new_start,
        new_end=second.new_end,
        new_content=list(first.new_content) + list(second.new_content),
        previous_line=first.previous_line,
        next_line=second.next_line,
        newline_added_at_end=second.newline_added_at_end,
    )

def merge_adjacent_hunks(hunks: Sequence[Hunk]) -> List[Hunk]:
    """
    Collapse every run of adjacent hunks into a single hunk.
    
    Hunks separated by at least one unchanged line (in either numbering) are
    left as they are. Order is preserved.
    
    Args:
        hunks: The hunks to merge, sorted by position
        
    Returns:
        A new list of hunks with no two neighbours adjacent
    """
    if not hunks:
        return []

    check_hunk_order(hunks)

    merged = []
    current = hunks[0]
    for hunk in hunks[1:]:
        if are_hunks_adjacent(current, hunk):
            current = merge_hunk_pair(current, hunk)
        else:
            merged.append(current)
            current = hunk
    merged.append(current)

    if len(merged) != len(hunks):
        logger.debug(f"Merged {len(hunks)} hunks into {len(merged)}")
    return merged
