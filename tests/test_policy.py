import pytest

from warden import PasswordPolicyAnalyzer, check_password_policy
from warden.analyzers.feedback import (
    ADD_NUMBERS,
    ADD_SYMBOLS,
    SEQUENTIAL,
    TOO_COMMON,
    USE_MANAGER,
)


@pytest.mark.parametrize("password", ["", "a", "Ab1!", "Xk9#mW2"])
def test_short_passwords_never_compliant(password):
    assert not check_password_policy(password).is_compliant


@pytest.mark.parametrize(
    "password", ["password", "PASSWORD", "Password", "123456", "QWERTY", "admin"]
)
def test_common_passwords_never_compliant(password):
    result = check_password_policy(password)
    assert not result.is_compliant
    assert TOO_COMMON in result.feedback


def test_compliant_password():
    result = check_password_policy("Tr0ub4dor&3")
    assert result.is_compliant
    assert result.strength_score == 80


def test_sequence_vetoes_compliance_despite_high_score():
    result = check_password_policy("Xk9#mW2$abcL")
    assert result.strength_score > 50
    assert result.pattern_analysis.sequential_chars == 1
    assert not result.is_compliant
    assert SEQUENTIAL in result.feedback


def test_score_threshold_is_exclusive():
    # 25 (length 8) + 10 (lower) + 15 (numbers) = 50
    result = check_password_policy("zx8vn7mq")
    assert result.strength_score == 50
    assert not result.is_compliant


def test_numeric_ideograph_is_not_a_number():
    # 25 (length 8) + 10 (upper) + 10 (lower); "一" adds nothing
    result = check_password_policy("Zmxkwp一k")
    assert result.strength_score == 45
    assert not result.is_compliant
    assert result.feedback == [ADD_NUMBERS, ADD_SYMBOLS, USE_MANAGER]


def test_vowel_sign_is_not_a_symbol():
    result = check_password_policy("Abcdefghकि")
    assert not result.pattern_analysis.has_symbols
    assert ADD_SYMBOLS in result.feedback


def test_empty_password_entropy_zero():
    result = check_password_policy("")
    assert result.entropy_bits == 0.0
    assert result.pattern_analysis.length == 0


@pytest.mark.parametrize(
    "password",
    ["𐏿", "\x00" * 64, "\U0001F512" * 300, "é" * 10_000, "a\nb\tc"],
)
def test_total_over_adversarial_input(password):
    result = check_password_policy(password)
    assert 0 <= result.strength_score <= 100
    assert result.entropy_bits >= 0
    assert result.analysis_time_ms >= 0


def test_result_serialises_to_camel_case():
    wire = check_password_policy("abc123").to_wire()
    assert set(wire) == {
        "isCompliant",
        "strengthScore",
        "entropyBits",
        "patternAnalysis",
        "feedback",
        "analysisTimeMs",
    }
    assert wire["patternAnalysis"]["sequentialChars"] == 2


def test_analyzer_matches_module_function():
    analyzer = PasswordPolicyAnalyzer()
    for password in ("", "Tr0ub4dor&3", "Xk9#mW2$abcL", "Zmxkwp一k"):
        expected = check_password_policy(password).model_dump(exclude={"analysis_time_ms"})
        actual = analyzer.analyze(password).model_dump(exclude={"analysis_time_ms"})
        assert actual == expected
