"""
Warden Core Module
===================

Data models shared by the analyzers and the hashing service, and (in
:mod:`warden.core.engine`) the engine facade the CLI drives. The engine
is not re-exported here because the analyzers import these models.
"""

from warden.core.models import (
    BenchmarkResult,
    BreachLookupKey,
    HashOutcome,
    PasswordAnalysis,
    PatternAnalysis,
)

__all__ = [
    "BenchmarkResult",
    "BreachLookupKey",
    "HashOutcome",
    "PasswordAnalysis",
    "PatternAnalysis",
]
