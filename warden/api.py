"""
Warden Functional API
======================

Module-level operations for callers that do not need an engine instance.

    >>> from warden import check_password_policy, hash_password_sha1
    >>> check_password_policy("Tr0ub4dor&3").is_compliant
    True
    >>> hash_password_sha1("password")
    '5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8'

Hashing functions share one :class:`Argon2Hasher` built from
:func:`shared.config.get_config`; pass a config to :func:`get_hasher` to
replace it. Its records go to the ``warden.api`` logger, set up from the
same ``[global]`` settings.
"""

from __future__ import annotations

from typing import Iterable, Optional

from shared.config import WardenConfig, get_config
from shared.logger import WardenLogger
from warden.analyzers.policy import check_password_policy
from warden.core.models import HashOutcome
from warden.hashing.argon import Argon2Hasher
from warden.hashing.breach import breach_count_from_range, breach_lookup_key
from warden.hashing.digest import sha1_digest

__all__ = [
    "batch_hash_outcomes",
    "batch_hash_passwords",
    "breach_count_from_range",
    "breach_lookup_key",
    "check_password_policy",
    "get_hasher",
    "hash_password",
    "hash_password_sha1",
    "needs_rehash",
    "verify_password_hash",
]


def get_hasher(config: Optional[WardenConfig] = None) -> Argon2Hasher:
    """Return the shared hasher, rebuilding it when *config* is given."""
    if not hasattr(get_hasher, "_cached") or config is not None:
        cfg = config or get_config()
        get_hasher._cached = Argon2Hasher(  # type: ignore[attr-defined]
            cfg.hashing, logger=WardenLogger.from_config("api", cfg)
        )
    return get_hasher._cached  # type: ignore[attr-defined]


def hash_password(password: str) -> str:
    """Argon2id PHC string for *password*.

    Raises:
        HashingError: On an internal Argon2 failure.
    """
    return get_hasher().hash(password)


def verify_password_hash(password: str, hash: str) -> bool:
    """``True`` iff *password* matches *hash*; malformed hashes give ``False``."""
    return get_hasher().verify(password, hash)


def batch_hash_passwords(passwords: Iterable[str]) -> dict[str, str]:
    """Hash distinct passwords in parallel; failures map to ``"ERROR"``."""
    return get_hasher().batch_hash(passwords)


def batch_hash_outcomes(passwords: Iterable[str]) -> dict[str, HashOutcome]:
    """Like :func:`batch_hash_passwords` but with a typed result per entry."""
    return get_hasher().batch_hash_outcomes(passwords)


def needs_rehash(hash: str) -> bool:
    return get_hasher().needs_rehash(hash)


def hash_password_sha1(password: str) -> str:
    """Uppercase hex SHA-1 of *password*, for breach lookups only."""
    return sha1_digest(password)
