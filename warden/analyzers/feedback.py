"""
Feedback Generator
===================

Turns a fingerprint and score into advisory messages. Every check runs
independently and messages always appear in the order of
:data:`FEEDBACK_MESSAGES`; callers may rely on that order.
"""

from __future__ import annotations

from warden.analyzers.patterns import is_common_password
from warden.core.models import PatternAnalysis

MIN_RECOMMENDED_LENGTH = 8
PASSWORD_MANAGER_THRESHOLD = 75

TOO_SHORT = "Password is too short (minimum 8 characters recommended)."
TOO_COMMON = "This password is too common and easy to guess."
SEQUENTIAL = "Passwords must not contain sequential characters (e.g., 'abc', '123')."
ADD_UPPERCASE = "Consider adding uppercase letters for more strength."
ADD_NUMBERS = "Adding numbers will make your password stronger."
ADD_SYMBOLS = "Special characters like !@#$%^&* add significant security."
USE_MANAGER = (
    "For maximum security, use a password manager to generate long, random passwords."
)

FEEDBACK_MESSAGES: tuple[str, ...] = (
    TOO_SHORT,
    TOO_COMMON,
    SEQUENTIAL,
    ADD_UPPERCASE,
    ADD_NUMBERS,
    ADD_SYMBOLS,
    USE_MANAGER,
)


def generate_feedback(
    password: str, analysis: PatternAnalysis, score: int
) -> list[str]:
    """Ordered advisory messages for *password*.

    Args:
        password: The raw password (needed for the common-password check).
        analysis: Its fingerprint.
        score: Its strength score.

    Returns:
        Zero or more messages; an empty list means nothing to improve.
    """
    checks = (
        analysis.length < MIN_RECOMMENDED_LENGTH,
        is_common_password(password),
        analysis.sequential_chars > 0,
        not analysis.has_uppercase,
        not analysis.has_numbers,
        not analysis.has_symbols,
        score < PASSWORD_MANAGER_THRESHOLD,
    )
    return [message for message, hit in zip(FEEDBACK_MESSAGES, checks) if hit]
