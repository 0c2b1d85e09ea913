"""
Password Entropy Estimator
===========================

Combinatorial entropy of a password drawn uniformly from the union of
the character classes it uses:

    H = length * log2(pool_size)

Pool sizes per class: lowercase 26, uppercase 26, digits 10, symbols 32.
The symbol pool is an assumed alphabet (printable ASCII punctuation), not
a count of the symbols actually present, so the figure is an upper-bound
approximation rather than a measured value.

Reference:
    NIST SP 800-63-2 (2013), Appendix A: Estimating Password Entropy.
"""

from __future__ import annotations

import math

from warden.core.models import PatternAnalysis

LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32


def charset_size(analysis: PatternAnalysis) -> int:
    """Sum of the pool sizes of every character class present."""
    size = 0
    if analysis.has_lowercase:
        size += LOWERCASE_POOL
    if analysis.has_uppercase:
        size += UPPERCASE_POOL
    if analysis.has_numbers:
        size += DIGIT_POOL
    if analysis.has_symbols:
        size += SYMBOL_POOL
    return size


def calculate_entropy(analysis: PatternAnalysis) -> float:
    """Entropy estimate in bits; 0.0 when no character class is present."""
    pool = charset_size(analysis)
    if pool == 0:
        return 0.0
    return analysis.length * math.log2(pool)
