"""
Warden -- Password Policy & Hashing Toolkit
============================================

Password policy checks with ordered feedback, Argon2id hashing and
verification, parallel batch hashing, and SHA-1 digests for k-anonymity
breach lookups.

Modules:
    - warden.analyzers: Fingerprint, scoring, entropy, feedback, policy
    - warden.hashing: Argon2id hasher, SHA-1 digest, breach lookup keys
    - warden.core: Data models and the engine facade
    - warden.output: Console and report output
    - warden.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
"""

from shared.config import ERROR_SENTINEL
from shared.errors import HashingError, WardenError
from warden.analyzers.policy import PasswordPolicyAnalyzer
from warden.api import (
    batch_hash_outcomes,
    batch_hash_passwords,
    breach_count_from_range,
    breach_lookup_key,
    check_password_policy,
    get_hasher,
    hash_password,
    hash_password_sha1,
    needs_rehash,
    verify_password_hash,
)
from warden.core.models import HashOutcome, PasswordAnalysis, PatternAnalysis

__version__ = "1.0.0"
__tool_name__ = "warden"

__all__ = [
    "ERROR_SENTINEL",
    "HashOutcome",
    "HashingError",
    "PasswordAnalysis",
    "PasswordPolicyAnalyzer",
    "PatternAnalysis",
    "WardenError",
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
