"""
Shared helpers for the LinkedIn integrations client.
Contains logging setup and environment variable access.
"""

from shared.utils.logging import setup_logging
from shared.utils.env import get_env, get_env_float

__all__ = [
    "setup_logging",
    "get_env",
    "get_env_float",
]
