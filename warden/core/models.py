"""
Warden Core Data Models
========================

Pydantic models for password analysis and hashing results.

Every model is immutable and is meant to cross a serialisation boundary:
``model_dump()`` yields the canonical snake_case field names, while
``to_wire()`` yields the camelCase names used by non-Python callers
(``isCompliant``, ``strengthScore``, ``patternAnalysis``, ...). Field names
are part of the public contract and must not be renamed.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys for cross-language callers."""
        return self.model_dump(by_alias=True)


# ===================================================================== #
#  Password Analysis Models
# ===================================================================== #


class PatternAnalysis(_WireModel):
    """Structural fingerprint of a password.

    Attributes:
        has_uppercase: At least one Unicode uppercase character.
        has_lowercase: At least one Unicode lowercase character.
        has_numbers: At least one Unicode numeric character.
        has_symbols: At least one character that is neither alphabetic nor numeric.
        length: Number of characters (code points, not bytes).
        repeated_chars: Overlapping 3-character windows of one repeated character.
        sequential_chars: Sequence pattern categories matched (0-4).
    """

    has_uppercase: bool = False
    has_lowercase: bool = False
    has_numbers: bool = False
    has_symbols: bool = False
    length: int = Field(default=0, ge=0)
    repeated_chars: int = Field(default=0, ge=0)
    sequential_chars: int = Field(default=0, ge=0, le=4)


class PasswordAnalysis(_WireModel):
    """Complete result of a policy check.

    Attributes:
        is_compliant: Whether the password satisfies the minimum policy.
        strength_score: Heuristic score from 0 to 100.
        entropy_bits: Theoretical entropy estimate in bits.
        pattern_analysis: The fingerprint every other field was derived from.
        feedback: Ordered advisory messages.
        analysis_time_ms: Wall-clock time of the check; informational only.
    """

    is_compliant: bool
    strength_score: int = Field(ge=0, le=100)
    entropy_bits: float = Field(ge=0.0)
    pattern_analysis: PatternAnalysis
    feedback: list[str] = Field(default_factory=list)
    analysis_time_ms: int = Field(default=0, ge=0)


# ===================================================================== #
#  Hashing Models
# ===================================================================== #


class HashOutcome(_WireModel):
    """Per-entry result of a batch hash.

    Exactly one of *hash* and *error* is set.
    """

    password: str
    hash: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.hash is not None


class BreachLookupKey(_WireModel):
    """SHA-1 digest split for a k-anonymity range lookup.

    Only *prefix* leaves the machine; *suffix* is matched locally against
    the returned range.
    """

    digest: str = Field(min_length=40, max_length=40)
    prefix: str = Field(min_length=5, max_length=5)
    suffix: str = Field(min_length=35, max_length=35)


class BenchmarkResult(_WireModel):
    """Sequential vs. batch hashing throughput for one input size."""

    count: int = Field(ge=0)
    workers: Optional[int] = None
    sequential_seconds: float = Field(ge=0.0)
    batch_seconds: float = Field(ge=0.0)

    @property
    def speedup(self) -> float:
        """How many times faster the batch run was (0.0 if it took no time)."""
        if self.batch_seconds <= 0:
            return 0.0
        return self.sequential_seconds / self.batch_seconds
