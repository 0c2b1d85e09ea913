"""
Warden Report Generator
========================

Writes :class:`~shared.models.ScanResult` objects as JSON or as a
self-contained HTML page (inline CSS, no template engine).
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Warden Report - {title}</title>
    <style>
        body {{
            font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: #0d1117; color: #c9d1d9; line-height: 1.6; padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        h1 {{ color: #58a6ff; }}
        h2 {{ color: #bc8cff; border-bottom: 1px solid #30363d; }}
        .section {{
            background: #161b22; border: 1px solid #30363d;
            border-radius: 8px; padding: 1.5rem; margin-bottom: 1.5rem;
        }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 0.5rem 1rem; text-align: left; border: 1px solid #30363d; }}
        th {{ background: #21262d; color: #58a6ff; }}
        .badge {{ padding: 0.2rem 0.6rem; border-radius: 4px; font-weight: 700; }}
        .severity-info {{ background: rgba(88,166,255,0.2); color: #58a6ff; }}
        .severity-low {{ background: rgba(63,185,80,0.2); color: #3fb950; }}
        .severity-medium {{ background: rgba(210,153,34,0.2); color: #d29922; }}
        .severity-high {{ background: rgba(248,81,73,0.2); color: #f85149; }}
        .severity-critical {{ background: rgba(248,81,73,0.4); color: #ff7b72; }}
        pre {{ background: #21262d; padding: 1rem; overflow-x: auto; }}
        .footer {{ color: #8b949e; font-size: 0.8rem; text-align: center; }}
    </style>
</head>
<body>
<div class="container">
    <h1>Warden Report</h1>
    <div class="section">
        <h2>Summary</h2>
        <p>{summary}</p>
        <table>
            <tr><th>Target</th><td>{target}</td></tr>
            <tr><th>Duration</th><td>{duration}</td></tr>
            <tr><th>Findings</th><td>{finding_count}</td></tr>
        </table>
    </div>
    <div class="section">
        <h2>Findings</h2>
        {findings_html}
    </div>
    {raw_data_section}
    <div class="footer">Warden v{version} | Report generated {timestamp}</div>
</div>
</body>
</html>
"""


class WardenReportGenerator:
    """Generates HTML and JSON reports from a :class:`ScanResult`.

    Usage::

        generator = WardenReportGenerator()
        generator.generate_json(scan_result, Path("report.json"))
        generator.generate_html(scan_result, Path("report.html"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        """The JSON report as a plain dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write a standalone HTML report and return its path."""
        duration = result.duration_seconds
        html_content = _HTML_TEMPLATE.format(
            title=html.escape(title or result.target),
            summary=html.escape(result.summary),
            target=html.escape(result.target),
            duration=f"{duration:.3f}s" if duration is not None else "n/a",
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            raw_data_section=self._build_raw_data_section(result),
            version=html.escape(self.version),
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    @staticmethod
    def _build_findings_html(result: ScanResult) -> str:
        if not result.findings:
            return "<p>No findings.</p>"

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding">'
                f'<h3><span class="badge {finding.severity.css_class}">'
                f"{finding.severity.value}</span> {html.escape(finding.title)}</h3>"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><strong>Recommendation:</strong> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            if finding.references:
                refs = ", ".join(html.escape(r) for r in finding.references)
                parts.append(f"<p><small>References: {refs}</small></p>")
            parts.append("</div>")
        return "\n".join(parts)

    @staticmethod
    def _build_raw_data_section(result: ScanResult) -> str:
        if not result.metadata:
            return ""
        raw = json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
        return (
            '<div class="section"><h2>Analysis Data</h2>'
            f"<pre>{html.escape(raw)}</pre></div>"
        )
