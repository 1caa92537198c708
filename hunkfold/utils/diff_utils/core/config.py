"""
Configuration settings for hunk utilities.

Defaults live here as module constants and can be overridden per process
through environment variables.
"""

import os

# Ordering checks
STRICT_ORDER_ENABLED = False      # Raise instead of warn on unsorted/overlapping merge input

# Environment variable names for configuration overrides
ENV_PREFIX = "HUNKFOLD_"
ENV_STRICT_ORDER = f"{ENV_PREFIX}STRICT_ORDER"

def get_config_value(env_var: str, default_value):
    """
    Get a configuration value from environment variable or use default.
    
    Args:
        env_var: The environment variable name
        default_value: The default value to use if env var is not set
        
    Returns:
        The configuration value
    """
    value = os.environ.get(env_var)
    if value is None:
        return default_value
    
    # Try to convert to the same type as default_value
    try:
        if isinstance(default_value, bool):
            return value.lower() in ('true', 'yes', '1', 'y')
        elif isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        else:
            return value
    except (ValueError, TypeError):
        return default_value

def is_strict_order_enabled():
    """Check if merge input must be sorted and non-overlapping."""
    return get_config_value(ENV_STRICT_ORDER, STRICT_ORDER_ENABLED)
