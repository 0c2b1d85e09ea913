"""
Warden Report Models
=====================

Pydantic v2 models for the findings the engine derives from an analysis
or hashing run. The console and report layers consume these, never the
raw analysis models, so every output format shows the same findings.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class Severity(str, Enum):
    """Finding severity level, ordered most to least severe."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """CSS class name for severity-based styling."""
        return f"severity-{self.value.lower()}"

    @classmethod
    def from_score(cls, score: int) -> Severity:
        """Map a 0-100 strength score to the severity of a weak password.

        A higher strength score means a *less* severe finding:
          - 0-24  : HIGH
          - 25-50 : MEDIUM
          - 51-74 : LOW
          - 75+   : INFO
        """
        if score < 25:
            return cls.HIGH
        if score <= 50:
            return cls.MEDIUM
        if score < 75:
            return cls.LOW
        return cls.INFO


class Finding(BaseModel):
    """A single observation produced by the engine.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation.
        evidence:       Supporting data, JSON-encoded when not a string.
        recommendation: Suggested remediation.
        references:     External references.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = Field(default="")
    recommendation: str = Field(default="")
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to a JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class ScanResult(BaseModel):
    """Top-level output of one engine operation.

    Bundles the findings, a summary line, timing and the raw analysis
    payload (``metadata``) into one serialisable object for the report
    generators.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` until :meth:`finalize`."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        """The most severe finding, or ``None`` when the list is empty."""
        if not self.findings:
            return None
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Stamp *end_time* and set *summary* (derived from counts if omitted).

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt]
            self.summary = (
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
