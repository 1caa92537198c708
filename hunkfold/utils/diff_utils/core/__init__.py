"""
Core utilities for hunk manipulation.
"""

from .exceptions import HunkError, HunkOrderError
from .config import get_config_value, is_strict_order_enabled
