"""
Environment variable utilities.
Typed accessors used by the configuration layer.
"""

import os
from typing import Optional


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable with optional default.

    Empty values are treated as unset.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_env_float(key: str, default: Optional[float] = None) -> Optional[float]:
    """
    Get environment variable as a float.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Float value or default

    Raises:
        ValueError: If the variable is set but is not a number
    """
    value = get_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be a number, got: {value!r}")
