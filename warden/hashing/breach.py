"""
k-Anonymity Breach Lookup Keys
===============================

Prepares the SHA-1 range query used by breach corpora and reads the
answer, without doing any network I/O itself.

The digest is split into a 5-character prefix, which is the only part
sent to the range endpoint, and a 35-character suffix matched locally
against the ``SUFFIX:COUNT`` lines the endpoint returns. Padded responses
include decoy suffixes with a count of 0; those never count as a hit.

Reference:
    Hunt, T. (2018). I've Just Launched "Pwned Passwords" V2 With Half a
    Billion Passwords for Download.
"""

from __future__ import annotations

from warden.core.models import BreachLookupKey
from warden.hashing.digest import sha1_digest

PREFIX_LENGTH = 5


def breach_lookup_key(password: str) -> BreachLookupKey:
    """Digest *password* and split it for a range query."""
    digest = sha1_digest(password)
    return BreachLookupKey(
        digest=digest,
        prefix=digest[:PREFIX_LENGTH],
        suffix=digest[PREFIX_LENGTH:],
    )


def breach_count_from_range(password: str, body: str) -> int:
    """Occurrences of *password* in an already fetched range response.

    Args:
        password: The password whose prefix was queried.
        body: The response text, one ``SUFFIX:COUNT`` entry per line.

    Returns:
        The breach count, or 0 when the suffix is absent. Malformed lines
        are skipped.
    """
    suffix = breach_lookup_key(password).suffix
    for line in body.splitlines():
        entry_suffix, sep, count = line.partition(":")
        if not sep or entry_suffix.strip().upper() != suffix:
            continue
        try:
            return max(0, int(count.strip()))
        except ValueError:
            return 0
    return 0
