import json

from shared.console import WardenConsole
from shared.models import Finding, ScanResult, Severity
from warden import check_password_policy
from warden.core.models import BenchmarkResult, HashOutcome
from warden.hashing.breach import breach_lookup_key
from warden.output import WardenConsoleOutput, WardenReportGenerator


def _recording_output(mask=True):
    console = WardenConsole(record=True)
    # Wide enough that no table cell wraps.
    console.rich.width = 200
    return console, WardenConsoleOutput(console, mask_passwords=mask)


def test_display_analysis_renders_feedback():
    console, display = _recording_output()
    display.display_analysis(check_password_policy("abc123"))
    text = console.rich.export_text()
    assert "NON-COMPLIANT" in text
    assert "'abc', '123'" in text


def test_batch_table_masks_passwords():
    console, display = _recording_output()
    display.display_batch({
        "hunter22": HashOutcome(password="hunter22", hash="$argon2id$v=19$stub"),
        "broken": HashOutcome(password="broken", error="Failed to hash password"),
    })
    text = console.rich.export_text()
    assert "hunter22" not in text
    assert "h******2" in text
    assert "1 failed" in text


def test_breach_and_benchmark_tables():
    console, display = _recording_output()
    display.display_breach_key(breach_lookup_key("password"))
    display.display_benchmark([
        BenchmarkResult(count=10, workers=None, sequential_seconds=2.0, batch_seconds=0.5)
    ])
    text = console.rich.export_text()
    assert "5BAA6" in text
    assert "4.00x" in text


def _scan_result():
    result = ScanResult(tool_name="warden", target="p******d")
    result.add_finding(Finding(
        severity=Severity.MEDIUM,
        title="Policy Violation",
        description="This <password> is too common.",
        recommendation="Pick something else & longer.",
    ))
    result.metadata = {"strength_score": 35}
    return result.finalize("Password is non-compliant")


def test_json_report(tmp_path):
    path = WardenReportGenerator().generate_json(_scan_result(), tmp_path / "r" / "out.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"]["severity_counts"]["MEDIUM"] == 1
    assert data["findings"][0]["severity"] == "MEDIUM"
    assert data["metadata"] == {"strength_score": 35}


def test_html_report_escapes(tmp_path):
    path = WardenReportGenerator(version="9.9").generate_html(
        _scan_result(), tmp_path / "out.html"
    )
    text = path.read_text(encoding="utf-8")
    assert "&lt;password&gt;" in text
    assert "&amp; longer" in text
    assert "severity-medium" in text
    assert "Warden v9.9" in text


def test_severity_from_score():
    assert Severity.from_score(0) == Severity.HIGH
    assert Severity.from_score(50) == Severity.MEDIUM
    assert Severity.from_score(74) == Severity.LOW
    assert Severity.from_score(75) == Severity.INFO


def test_highest_severity():
    result = _scan_result()
    result.add_finding(Finding(severity=Severity.LOW, title="t", description="d"))
    assert result.highest_severity == Severity.MEDIUM
    assert result.duration_seconds >= 0
