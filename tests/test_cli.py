import json

import pytest
from click.testing import CliRunner

from shared.config import WardenConfig
from warden.cli import cli
from warden.hashing.argon import Argon2Hasher


@pytest.fixture
def run(config_file):
    runner = CliRunner()

    def invoke(*args, output="json"):
        return runner.invoke(
            cli, ["--config", str(config_file), "--quiet", "--output", output, *args]
        )

    return invoke


def test_check_json(run):
    result = run("check", "Tr0ub4dor&3")
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["metadata"]["is_compliant"] is True
    assert report["report_metadata"]["tool"] == "warden"
    assert report["summary"]["total_findings"] == len(report["findings"])


def test_check_non_compliant_still_succeeds(run):
    result = run("check", "password")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["metadata"]["is_compliant"] is False


def test_check_console(run):
    assert run("check", "abc123", output="console").exit_code == 0


def test_check_html_report(run, tmp_path):
    out = tmp_path / "report.html"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--quiet", "--output", "html", "--output-file", str(out), "check", "abc"]
    )
    assert result.exit_code == 0, result.output
    text = out.read_text(encoding="utf-8")
    assert "Password Policy: Non-Compliant" in text
    # The sequence message quotes its examples; they must arrive escaped.
    assert "&#x27;abc&#x27;" in text
    assert "a*c" in text


def test_hash_then_verify(run, config_file):
    result = run("hash", "s3cret!")
    assert result.exit_code == 0, result.output
    stored = json.loads(result.stdout)["hash"]
    assert stored.startswith("$argon2id$v=19$m=8,t=1,p=1$")

    ok = run("verify", "s3cret!", stored)
    assert ok.exit_code == 0
    assert json.loads(ok.stdout) == {"valid": True, "needsRehash": False}

    bad = run("verify", "s3cret!x", stored)
    assert bad.exit_code == 1
    assert json.loads(bad.stdout)["valid"] is False


def test_verify_reports_rehash(run):
    stored = Argon2Hasher().hash("pw")
    result = run("verify", "pw", stored)
    assert result.exit_code == 0
    assert json.loads(result.stdout)["needsRehash"] is True


def test_verify_malformed_hash(run):
    assert run("verify", "pw", "not-a-hash").exit_code == 1


def test_batch(run, tmp_path):
    path = tmp_path / "passwords.txt"
    path.write_text("alpha\nbeta\n\nalpha\n", encoding="utf-8")
    result = run("batch", str(path))
    assert result.exit_code == 0, result.output
    hashes = json.loads(result.stdout)
    assert set(hashes) == {"alpha", "beta"}
    hasher = Argon2Hasher(WardenConfig.load(path.parent / "warden.toml").hashing)
    assert hasher.verify("alpha", hashes["alpha"])


def test_batch_console(run, tmp_path):
    path = tmp_path / "passwords.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    assert run("batch", str(path), output="console").exit_code == 0


def test_sha1(run):
    result = run("sha1", "password")
    assert json.loads(result.stdout) == {"sha1": "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"}


def test_breach_key(run):
    result = run("breach-key", "password")
    assert json.loads(result.stdout)["prefix"] == "5BAA6"


def test_benchmark(run):
    result = run("benchmark", "--count", "2")
    assert result.exit_code == 0, result.output
    rows = json.loads(result.stdout)
    assert [r["count"] for r in rows] == [2]
    assert {"sequentialSeconds", "batchSeconds", "workers"} <= set(rows[0])


def test_invalid_config_exits_1(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[hashing]\nparallelism = 0\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(path), "--quiet", "sha1", "x"])
    assert result.exit_code == 1


def test_hashing_failure_exits_1(run, monkeypatch):
    from shared.errors import HashingError

    def boom(self, password):
        raise HashingError("Failed to hash password")

    monkeypatch.setattr(Argon2Hasher, "hash", boom)
    assert run("hash", "pw").exit_code == 1
