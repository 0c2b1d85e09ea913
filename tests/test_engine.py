from warden.analyzers.feedback import TOO_COMMON, USE_MANAGER
from warden.analyzers.policy import PasswordPolicyAnalyzer
from warden.core.engine import WardenEngine, mask_password
from warden.core.models import PasswordAnalysis
from shared.models import Severity

STRONG = "Xk9#mW2$pL7!"


def test_mask_password():
    assert mask_password("secret") == "s****t"
    assert mask_password("ab") == "**"
    assert mask_password("") == ""


def test_assess_non_compliant(engine):
    result = engine.assess_password("password")
    assert result.target == "p******d"
    assert result.end_time is not None

    primary = result.findings[0]
    assert primary.title == "Password Policy: Non-Compliant"
    assert primary.severity != Severity.INFO

    violations = [f for f in result.findings if f.title == "Policy Violation"]
    assert TOO_COMMON in [f.description for f in violations]
    assert all(f.severity == Severity.MEDIUM for f in violations)

    suggestions = [f for f in result.findings if f.title == "Improvement Suggestion"]
    assert USE_MANAGER in [f.description for f in suggestions]


def test_assess_metadata_round_trips(engine):
    result = engine.assess_password(STRONG)
    analysis = PasswordAnalysis.model_validate(result.metadata)
    assert analysis.is_compliant
    assert analysis.strength_score == 95
    assert result.findings[0].severity == Severity.INFO
    assert len(result.findings) == 1


def test_unmasked_target(fast_config):
    fast_config.report.mask_passwords = False
    engine = WardenEngine(fast_config)
    assert engine.assess_password("hunter2").target == "hunter2"


def test_empty_password_target(engine):
    assert engine.assess_password("").target == "[empty]"


def test_hash_if_compliant(engine):
    analysis, stored = engine.hash_if_compliant(STRONG)
    assert analysis.is_compliant
    assert engine.verify(STRONG, stored)

    analysis, stored = engine.hash_if_compliant("abc123")
    assert not analysis.is_compliant
    assert stored is None


def test_store_hides_hash_by_default(engine):
    result = engine.assess_password(STRONG, store=True)
    assert "hash" not in result.metadata
    assert "Hash Stored" in [f.title for f in result.findings]


def test_store_with_include_hashes(fast_config):
    fast_config.report.include_hashes = True
    engine = WardenEngine(fast_config)
    result = engine.assess_password(STRONG, store=True)
    assert engine.verify(STRONG, result.metadata["hash"])


def test_store_refused_for_weak_password(engine):
    result = engine.assess_password("abc", store=True)
    assert "Hash Refused" in [f.title for f in result.findings]


def test_batch_and_digest(engine):
    outcomes = engine.batch_hash(["a", "b", "a"])
    assert set(outcomes) == {"a", "b"}
    assert all(o.ok for o in outcomes.values())
    assert engine.digest("password") == "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"
    assert engine.breach_key("password").prefix == "5BAA6"


def test_benchmark(engine):
    results = engine.benchmark((2,))
    assert len(results) == 1
    assert results[0].count == 2
    assert results[0].workers == 2
    assert results[0].sequential_seconds > 0
    assert results[0].speedup >= 0


def test_engine_uses_policy_analyzer(engine):
    assert isinstance(engine.analyzer, PasswordPolicyAnalyzer)
    assert engine.analyze("Tr0ub4dor&3").strength_score == 80
