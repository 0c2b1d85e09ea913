"""
Password Policy Evaluator
==========================

Entry point for analysis: runs the fingerprint through scoring, entropy
and feedback, then decides compliance.

A password is compliant when all of these hold:

- at least 8 characters,
- strength score above 50,
- not in the common-password set,
- no sequence pattern matched.

Sequence matches only cost 15 points in the score yet veto compliance
outright, so a password can score well above 50 and still fail. Keep
both behaviours.
"""

from __future__ import annotations

import time

from warden.analyzers.entropy import calculate_entropy
from warden.analyzers.feedback import MIN_RECOMMENDED_LENGTH, generate_feedback
from warden.analyzers.patterns import analyze_patterns, is_common_password
from warden.analyzers.scoring import calculate_strength_score
from warden.core.models import PasswordAnalysis, PatternAnalysis

COMPLIANCE_SCORE_THRESHOLD = 50


class PasswordPolicyAnalyzer:
    """Evaluates passwords against the Warden policy.

    Holds no state between calls, so one instance can be shared across
    threads.

    Usage::

        analyzer = PasswordPolicyAnalyzer()
        result = analyzer.analyze("MyP@ssw0rd!")
        print(f"Score: {result.strength_score}")
        print(f"Compliant: {result.is_compliant}")
    """

    def analyze(self, password: str) -> PasswordAnalysis:
        """Analyse *password* against the policy.

        Args:
            password: The password to analyse. Any string is accepted.

        Returns:
            PasswordAnalysis with score, entropy, fingerprint, feedback
            and the compliance verdict. Never raises.
        """
        start = time.perf_counter()

        analysis = analyze_patterns(password)
        score = calculate_strength_score(analysis)
        entropy_bits = calculate_entropy(analysis)
        feedback = generate_feedback(password, analysis, score)
        compliant = self._is_compliant(password, analysis, score)

        elapsed_ms = int((time.perf_counter() - start) * 1000)

        return PasswordAnalysis(
            is_compliant=compliant,
            strength_score=score,
            entropy_bits=entropy_bits,
            pattern_analysis=analysis,
            feedback=feedback,
            analysis_time_ms=elapsed_ms,
        )

    @staticmethod
    def _is_compliant(password: str, analysis: PatternAnalysis, score: int) -> bool:
        return (
            analysis.length >= MIN_RECOMMENDED_LENGTH
            and score > COMPLIANCE_SCORE_THRESHOLD
            and not is_common_password(password)
            and analysis.sequential_chars == 0
        )


_DEFAULT_ANALYZER = PasswordPolicyAnalyzer()


def check_password_policy(password: str) -> PasswordAnalysis:
    """Analyse *password* with the shared :class:`PasswordPolicyAnalyzer`."""
    return _DEFAULT_ANALYZER.analyze(password)
