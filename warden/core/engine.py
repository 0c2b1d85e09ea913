"""
Warden Engine
==============

Facade over the analyzers and the hashing service. The engine owns one
configured :class:`Argon2Hasher` and turns analysis results into
:class:`~shared.models.ScanResult` findings for the console and report
layers.

The module-level API in :mod:`warden.api` covers plain function calls;
the engine is what the CLI drives.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from shared.config import WardenConfig
from shared.logger import WardenLogger
from shared.models import Finding, ScanResult, Severity
from warden.analyzers.feedback import SEQUENTIAL, TOO_COMMON, TOO_SHORT
from warden.analyzers.policy import PasswordPolicyAnalyzer
from warden.core.models import (
    BenchmarkResult,
    BreachLookupKey,
    HashOutcome,
    PasswordAnalysis,
)
from warden.hashing.argon import Argon2Hasher
from warden.hashing.benchmark import DEFAULT_SIZES, run_benchmark
from warden.hashing.breach import breach_lookup_key
from warden.hashing.digest import sha1_digest

# Feedback that corresponds to a hard policy gate rather than advice.
_POLICY_VIOLATIONS = frozenset({TOO_SHORT, TOO_COMMON, SEQUENTIAL})

_REFERENCES = [
    "NIST SP 800-63B (2017). Digital Identity Guidelines, Section 5.1.1.2.",
]


def mask_password(password: str) -> str:
    """First and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class WardenEngine:
    """Orchestrates policy checks and hashing for the CLI.

    Usage::

        engine = WardenEngine()
        result = engine.assess_password("P@ssw0rd!")
        analysis, stored = engine.hash_if_compliant("correct-Horse-battery-9")

    Attributes:
        config: Warden configuration.
        logger: Logger for the engine.
        analyzer: Policy analyzer used by :meth:`analyze`.
        hasher: The Argon2id hasher built from ``config.hashing``.
    """

    def __init__(self, config: Optional[WardenConfig] = None) -> None:
        self.config = config or WardenConfig()
        self.logger = WardenLogger.from_config("engine", self.config)
        self.analyzer = PasswordPolicyAnalyzer()
        self.hasher = Argon2Hasher(
            self.config.hashing,
            logger=WardenLogger.from_config("hashing", self.config),
        )

    # ------------------------------------------------------------------ #
    #  Policy
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> PasswordAnalysis:
        analysis = self.analyzer.analyze(password)
        self.logger.debug(
            "Policy check: compliant=%s score=%d",
            analysis.is_compliant,
            analysis.strength_score,
            length=analysis.pattern_analysis.length,
        )
        return analysis

    def assess_password(self, password: str, *, store: bool = False) -> ScanResult:
        """Run the policy check and express the outcome as findings.

        With *store* set, a compliant password is also hashed, as a
        registration flow would. The hash itself lands in the metadata
        only when ``report.include_hashes`` is enabled.
        """
        result = ScanResult(
            tool_name="warden",
            target=self._display_password(password) or "[empty]",
            start_time=datetime.now(timezone.utc),
        )

        if store:
            analysis, stored = self.hash_if_compliant(password)
        else:
            analysis, stored = self.analyze(password), None
        result.metadata = analysis.model_dump()
        if stored is not None and self.config.report.include_hashes:
            result.metadata["hash"] = stored
        fingerprint = analysis.pattern_analysis

        verdict = "Compliant" if analysis.is_compliant else "Non-Compliant"
        result.add_finding(Finding(
            title=f"Password Policy: {verdict}",
            description=(
                f"Score: {analysis.strength_score}/100. "
                f"Entropy: {analysis.entropy_bits:.2f} bits. "
                f"Length: {fingerprint.length}."
            ),
            severity=(
                Severity.INFO
                if analysis.is_compliant
                else Severity.from_score(analysis.strength_score)
            ),
            evidence={
                "strength_score": analysis.strength_score,
                "entropy_bits": round(analysis.entropy_bits, 2),
                "repeated_chars": fingerprint.repeated_chars,
                "sequential_chars": fingerprint.sequential_chars,
            },
            references=_REFERENCES,
        ))

        for message in analysis.feedback:
            if message in _POLICY_VIOLATIONS:
                result.add_finding(Finding(
                    title="Policy Violation",
                    description=message,
                    severity=Severity.MEDIUM,
                ))
            else:
                result.add_finding(Finding(
                    title="Improvement Suggestion",
                    description=message,
                    severity=Severity.LOW,
                ))

        if store:
            if stored is not None:
                result.add_finding(Finding(
                    title="Hash Stored",
                    description="Compliant password hashed with Argon2id.",
                    severity=Severity.INFO,
                ))
            else:
                result.add_finding(Finding(
                    title="Hash Refused",
                    description="Non-compliant passwords are not hashed.",
                    severity=Severity.MEDIUM,
                    recommendation="Address the policy violations and try again.",
                ))

        return result.finalize(
            f"Password is {verdict.lower()}: score={analysis.strength_score}/100, "
            f"entropy={analysis.entropy_bits:.1f} bits"
        )

    # ------------------------------------------------------------------ #
    #  Hashing
    # ------------------------------------------------------------------ #

    def hash(self, password: str) -> str:
        return self.hasher.hash(password)

    def verify(self, password: str, hash: str) -> bool:
        return self.hasher.verify(password, hash)

    def batch_hash(self, passwords: Iterable[str]) -> dict[str, HashOutcome]:
        return self.hasher.batch_hash_outcomes(passwords)

    def hash_if_compliant(
        self, password: str
    ) -> tuple[PasswordAnalysis, Optional[str]]:
        """Hash *password* only when it passes the policy.

        Returns:
            The analysis, and the hash or ``None`` for a non-compliant password.

        Raises:
            HashingError: If the password is compliant but hashing fails.
        """
        analysis = self.analyze(password)
        if not analysis.is_compliant:
            return analysis, None
        return analysis, self.hasher.hash(password)

    def digest(self, password: str) -> str:
        return sha1_digest(password)

    def breach_key(self, password: str) -> BreachLookupKey:
        return breach_lookup_key(password)

    def benchmark(self, sizes: Sequence[int] = DEFAULT_SIZES) -> list[BenchmarkResult]:
        return run_benchmark(self.hasher, sizes)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _display_password(self, password: str) -> str:
        if self.config.report.mask_passwords:
            return mask_password(password)
        return password
