"""
Warden Analyzers
=================

Pattern fingerprinting, scoring, entropy estimation, feedback and the
policy evaluator that combines them.
"""

from warden.analyzers.entropy import calculate_entropy, charset_size
from warden.analyzers.feedback import generate_feedback
from warden.analyzers.patterns import (
    COMMON_PASSWORDS,
    SEQUENCE_PATTERNS,
    analyze_patterns,
    is_common_password,
)
from warden.analyzers.policy import PasswordPolicyAnalyzer, check_password_policy
from warden.analyzers.scoring import calculate_strength_score

__all__ = [
    "PasswordPolicyAnalyzer",
    "COMMON_PASSWORDS",
    "SEQUENCE_PATTERNS",
    "analyze_patterns",
    "calculate_entropy",
    "calculate_strength_score",
    "charset_size",
    "check_password_policy",
    "generate_feedback",
    "is_common_password",
]
