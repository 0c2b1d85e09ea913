"""
Warden Hashing
===============

Argon2id credential hashing, SHA-1 breach-lookup digests and the
offline half of a k-anonymity breach check.
"""

from warden.hashing.argon import Argon2Hasher
from warden.hashing.breach import breach_count_from_range, breach_lookup_key
from warden.hashing.digest import encode_password, sha1_digest

__all__ = [
    "Argon2Hasher",
    "breach_count_from_range",
    "breach_lookup_key",
    "encode_password",
    "sha1_digest",
]
