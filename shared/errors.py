"""
Warden Exceptions
==================

Single exception hierarchy for the toolkit. Analysis functions are total
and raise nothing; only configuration loading and password hashing can
fail.
"""

from __future__ import annotations


class WardenError(Exception):
    """Base class for every error raised by Warden."""


class ConfigError(WardenError):
    """A configuration file or section holds unusable values."""


class HashingError(WardenError):
    """The memory-hard hashing backend failed to produce a hash.

    Raised for internal library failures (e.g. memory exhaustion), never
    because of a property of the password itself.
    """
