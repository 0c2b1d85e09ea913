"""
Warden Shared Module
=====================

Common utilities, models, errors and configuration management shared
across the Warden toolkit.
"""

from shared.config import WardenConfig, get_config
from shared.errors import ConfigError, HashingError, WardenError

__all__ = [
    "ConfigError",
    "HashingError",
    "WardenConfig",
    "WardenError",
    "get_config",
]
