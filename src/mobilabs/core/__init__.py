"""
Core MobiLabs components.

This module contains configuration and the error taxonomy.
"""

from mobilabs.core.config import Config, load_config
from mobilabs.core.errors import MobiLabsError, PlatformError, UnsupportedOperationError

__all__ = [
    "Config",
    "load_config",
    "MobiLabsError",
    "PlatformError",
    "UnsupportedOperationError",
]
