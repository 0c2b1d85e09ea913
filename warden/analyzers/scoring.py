"""
Strength Scoring
=================

Additive point system over the password fingerprint:

======================  ======
Signal                  Points
======================  ======
length 0-7              +5
length 8-11             +25
length 12+              +40
lowercase present       +10
uppercase present       +10
numbers present         +15
symbols present         +20
any repeated run        -10
any sequence match      -15
======================  ======

Penalties saturate at zero and the total is capped at 100. The weights
are a heuristic for user guidance, not a measure of guessing resistance.
"""

from __future__ import annotations

from warden.core.models import PatternAnalysis

MAX_SCORE = 100

REPEATED_PENALTY = 10
SEQUENTIAL_PENALTY = 15

_CLASS_POINTS: tuple[tuple[str, int], ...] = (
    ("has_lowercase", 10),
    ("has_uppercase", 10),
    ("has_numbers", 15),
    ("has_symbols", 20),
)


def length_points(length: int) -> int:
    if length < 8:
        return 5
    if length < 12:
        return 25
    return 40


def calculate_strength_score(analysis: PatternAnalysis) -> int:
    """Score *analysis* on the 0-100 scale."""
    score = length_points(analysis.length)
    score += sum(points for flag, points in _CLASS_POINTS if getattr(analysis, flag))

    if analysis.repeated_chars > 0:
        score = max(0, score - REPEATED_PENALTY)
    if analysis.sequential_chars > 0:
        score = max(0, score - SEQUENTIAL_PENALTY)

    return min(score, MAX_SCORE)
