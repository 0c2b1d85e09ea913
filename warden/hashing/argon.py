"""
Argon2id Password Hashing
==========================

Wraps :class:`argon2.PasswordHasher` (argon2-cffi) for credential storage.

Each hash gets a fresh salt from ``os.urandom`` inside argon2-cffi, and
the result is a self-describing PHC string carrying algorithm, version,
parameters, salt and digest::

    $argon2id$v=19$m=19456,t=2,p=1$<salt>$<digest>

Batch hashing fans distinct passwords out over a thread pool. The Argon2
C core releases the GIL, so threads run the hashes in parallel. A failed
entry is recorded, never raised, so one failure cannot sink the batch.

References:
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing
      and Proof-of-Work Applications.
    - OWASP Password Storage Cheat Sheet (2023).
"""

from __future__ import annotations

import contextvars
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional

from argon2 import PasswordHasher, Type
from argon2 import exceptions as argon2_exceptions

from shared.config import HashingConfig
from shared.errors import HashingError
from shared.logger import WardenLogger
from warden.core.models import HashOutcome
from warden.hashing.digest import encode_password


class Argon2Hasher:
    """Hash, verify and batch-hash passwords with Argon2id.

    Usage::

        hasher = Argon2Hasher()
        stored = hasher.hash("correct horse")
        hasher.verify("correct horse", stored)      # True
        hasher.verify("correct horse", "garbage")   # False

    Args:
        config: Argon2 parameters and batch settings; validated on entry.
        logger: Logger to use; a ``warden.hashing`` logger by default.
    """

    def __init__(
        self,
        config: Optional[HashingConfig] = None,
        logger: Optional[WardenLogger] = None,
    ) -> None:
        self.config = (config or HashingConfig()).validate()
        self.logger = logger or WardenLogger("hashing")
        self._hasher = PasswordHasher(
            time_cost=self.config.time_cost,
            memory_cost=self.config.memory_cost,
            parallelism=self.config.parallelism,
            hash_len=self.config.hash_len,
            salt_len=self.config.salt_len,
            type=Type.ID,
        )

    # ------------------------------------------------------------------ #
    #  Single password
    # ------------------------------------------------------------------ #

    def hash(self, password: str) -> str:
        """Hash *password* with a fresh random salt.

        Any string is accepted, including the empty string.

        Raises:
            HashingError: If the Argon2 backend fails (e.g. cannot
                allocate the configured memory).
        """
        try:
            return self._hasher.hash(encode_password(password))
        except argon2_exceptions.HashingError as exc:
            self.logger.exception("Argon2 hashing failed: %s", exc)
            raise HashingError("Failed to hash password") from exc

    def verify(self, password: str, hash: str) -> bool:
        """Check *password* against a stored PHC *hash* string.

        A hash that cannot be parsed counts as "no match": this returns
        ``False`` rather than raising.
        """
        try:
            return self._hasher.verify(hash, encode_password(password))
        except argon2_exceptions.VerifyMismatchError:
            return False
        except (
            argon2_exceptions.VerificationError,
            argon2_exceptions.InvalidHashError,
            UnicodeEncodeError,
        ) as exc:
            self.logger.debug("Unusable stored hash treated as mismatch: %s", type(exc).__name__)
            return False

    def needs_rehash(self, hash: str) -> bool:
        """Whether *hash* was made with parameters other than the configured ones.

        Unparseable hashes always need replacing.
        """
        try:
            return self._hasher.check_needs_rehash(hash)
        except (argon2_exceptions.InvalidHashError, UnicodeError):
            return True

    # ------------------------------------------------------------------ #
    #  Batch
    # ------------------------------------------------------------------ #

    def batch_hash_outcomes(self, passwords: Iterable[str]) -> dict[str, HashOutcome]:
        """Hash every distinct password in parallel.

        Duplicate inputs collapse into one entry. Completion order is not
        meaningful; the mapping is keyed by password.
        """
        distinct = list(dict.fromkeys(passwords))
        outcomes: dict[str, HashOutcome] = {}
        if not distinct:
            return outcomes

        with self.logger.operation("batch_hash"):
            self.logger.debug(
                "Hashing %d distinct passwords", len(distinct),
                workers=self.config.batch_workers,
            )
            with ThreadPoolExecutor(max_workers=self.config.batch_workers) as pool:
                # Each task gets its own context copy so worker records keep
                # this batch's operation.
                futures = {
                    pool.submit(contextvars.copy_context().run, self.hash, pw): pw
                    for pw in distinct
                }
                for future in as_completed(futures):
                    password = futures[future]
                    try:
                        outcomes[password] = HashOutcome(
                            password=password, hash=future.result()
                        )
                    except HashingError as exc:
                        outcomes[password] = HashOutcome(password=password, error=str(exc))

            failed = sum(1 for o in outcomes.values() if not o.ok)
            if failed:
                self.logger.warning(
                    "%d of %d batch entries failed to hash", failed, len(distinct)
                )

        return outcomes

    def batch_hash(self, passwords: Iterable[str]) -> dict[str, str]:
        """Map each distinct password to its hash or the error sentinel.

        Never raises as a whole; a failed entry holds
        ``config.error_sentinel`` (``"ERROR"`` by default).
        """
        sentinel = self.config.error_sentinel
        return {
            password: outcome.hash if outcome.hash is not None else sentinel
            for password, outcome in self.batch_hash_outcomes(passwords).items()
        }
