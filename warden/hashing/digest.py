"""
Fast Digest for Breach Lookups
===============================

SHA-1 over the UTF-8 bytes of a password, as uppercase hex. This is the
key format of k-anonymity breach corpora such as Pwned Passwords.

SHA-1 is fast. Use it only to build a lookup key, never to store
or verify a credential; credential storage goes through
:class:`warden.hashing.argon.Argon2Hasher`.

Reference:
    Li, L. et al. (2019). Protocols for Checking Compromised Credentials.
    ACM CCS.
"""

from __future__ import annotations

import hashlib


def encode_password(password: str) -> bytes:
    """UTF-8 bytes of *password*.

    Lone surrogates (possible in a Python ``str``, impossible in valid
    UTF-8) are passed through instead of raising, which keeps hashing and
    digesting total over every ``str``.
    """
    return password.encode("utf-8", "surrogatepass")


def sha1_digest(password: str) -> str:
    """Uppercase hex SHA-1 of *password*. Never raises."""
    return hashlib.sha1(encode_password(password)).hexdigest().upper()
