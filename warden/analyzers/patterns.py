"""
Password Pattern Analyzer
==========================

Derives the :class:`PatternAnalysis` fingerprint of a password: which
character classes it uses, how long it is, how many runs of one repeated
character it contains and which sequence categories it matches.

Character classes are Unicode properties, matched with the ``regex``
package:

- uppercase / lowercase: the derived ``Uppercase`` / ``Lowercase``
  properties, so ``"É"`` and ``"Ⓐ"`` are uppercase;
- numbers: general category ``N*``, so ``"٣"`` (Arabic-Indic three) is a
  number but the ideograph ``"一"`` (category ``Lo``) is not;
- symbols: anything neither ``Alphabetic`` nor ``N*``. Vowel signs such
  as ``"ि"`` are ``Alphabetic``; a bare combining accent is a symbol.

``str.isnumeric`` and ``str.isalnum`` disagree with these definitions on
exactly those characters and must not be used here.

Length counts code points, not encoded bytes.

Sequence detection runs four fixed pattern categories against the
lower-cased password. A category contributes at most one to
``sequential_chars`` however often it matches.
"""

from __future__ import annotations

import re

import regex

from warden.core.models import PatternAnalysis


# ===================================================================== #
#  Pattern and Password Databases
# ===================================================================== #

# Compiled once at import and shared read-only by every analysis.
_UPPERCASE = regex.compile(r"\p{Uppercase}")
_LOWERCASE = regex.compile(r"\p{Lowercase}")
_NUMBER = regex.compile(r"\p{N}")
_SYMBOL = regex.compile(r"[^\p{Alphabetic}\p{N}]")

SEQUENCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d{4}"),
    re.compile(r"abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl"),
    re.compile(r"123|234|345|456|567|678|789"),
    re.compile(r"qwe|wer|ert|rty|tyu|yui|uio|iop"),
)

COMMON_PASSWORDS: frozenset[str] = frozenset({"password", "123456", "qwerty", "admin"})


def is_common_password(password: str) -> bool:
    """Case-insensitive exact match against the common-password set."""
    return password.lower() in COMMON_PASSWORDS


def count_repeated_chars(password: str) -> int:
    """Count 3-character windows made of a single repeated character.

    Windows overlap: ``"aaaa"`` holds two (positions 0-2 and 1-3).
    """
    return sum(
        1
        for i in range(len(password) - 2)
        if password[i] == password[i + 1] == password[i + 2]
    )


def count_sequential_chars(password: str) -> int:
    """Count the sequence pattern categories present in *password*."""
    lowered = password.lower()
    return sum(1 for pattern in SEQUENCE_PATTERNS if pattern.search(lowered))


def analyze_patterns(password: str) -> PatternAnalysis:
    """Build the fingerprint of *password*.

    Pure and deterministic; accepts any string, including the empty one.
    """
    return PatternAnalysis(
        has_uppercase=_UPPERCASE.search(password) is not None,
        has_lowercase=_LOWERCASE.search(password) is not None,
        has_numbers=_NUMBER.search(password) is not None,
        has_symbols=_SYMBOL.search(password) is not None,
        length=len(password),
        repeated_chars=count_repeated_chars(password),
        sequential_chars=count_sequential_chars(password),
    )
