"""
Warden Console Output
======================

Rich renderers for policy checks, hashes, batch results, breach lookup
keys and benchmark tables, built on :class:`shared.console.WardenConsole`.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import WardenConsole
from warden.core.engine import mask_password
from warden.core.models import (
    BenchmarkResult,
    BreachLookupKey,
    HashOutcome,
    PasswordAnalysis,
)

_METER_WIDTH = 40


def _meter_style(position: int) -> str:
    if position < _METER_WIDTH * 0.25:
        return "red"
    if position < _METER_WIDTH * 0.50:
        return "yellow"
    if position < _METER_WIDTH * 0.75:
        return "green"
    return "bright_green"


def _yes_no(flag: bool) -> str:
    return "[green]Yes[/green]" if flag else "[red]No[/red]"


class WardenConsoleOutput:
    """Console renderers for Warden results.

    Usage::

        display = WardenConsoleOutput(WardenConsole())
        display.display_analysis(check_password_policy("hunter2"))
    """

    def __init__(self, console: WardenConsole, *, mask_passwords: bool = True) -> None:
        self.console = console
        self.mask_passwords = mask_passwords
        self._rich = console.rich

    def _label(self, password: str) -> str:
        return mask_password(password) if self.mask_passwords else password

    # ------------------------------------------------------------------ #
    #  Policy check
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: PasswordAnalysis) -> None:
        """Score meter, fingerprint table and ordered feedback."""
        self.console.section("Password Policy Check")

        filled = max(0, min(_METER_WIDTH, int(result.strength_score / 100 * _METER_WIDTH)))
        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.strength_score}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i < filled:
                meter.append("█", style=_meter_style(i))
            else:
                meter.append("░", style="dim")
        meter.append("]  ", style="dim")
        if result.is_compliant:
            meter.append("COMPLIANT", style="bold bright_green")
        else:
            meter.append("NON-COMPLIANT", style="bold white on red")
        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        fingerprint = result.pattern_analysis
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Length", str(fingerprint.length))
        tbl.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
        tbl.add_row("Lowercase", _yes_no(fingerprint.has_lowercase))
        tbl.add_row("Uppercase", _yes_no(fingerprint.has_uppercase))
        tbl.add_row("Numbers", _yes_no(fingerprint.has_numbers))
        tbl.add_row("Symbols", _yes_no(fingerprint.has_symbols))
        tbl.add_row("Repeated runs", str(fingerprint.repeated_chars))
        tbl.add_row("Sequence patterns", str(fingerprint.sequential_chars))
        tbl.add_row("Analysis time", f"{result.analysis_time_ms} ms")
        self._rich.print(tbl)

        if result.feedback:
            fb_tbl = Table(
                title="Feedback",
                border_style="yellow",
                header_style="bold yellow",
                show_lines=True,
            )
            fb_tbl.add_column("#", style="dim", width=4, justify="right")
            fb_tbl.add_column("Message")
            for idx, message in enumerate(result.feedback, start=1):
                fb_tbl.add_row(str(idx), Text(message))
            self._rich.print(fb_tbl)
        else:
            self.console.success("No improvements to suggest.")

    # ------------------------------------------------------------------ #
    #  Hashing
    # ------------------------------------------------------------------ #

    def display_hash(self, hash_string: str) -> None:
        self.console.section("Argon2id Hash")
        self._rich.print(Panel(Text(hash_string), border_style="cyan"))

    def display_verification(self, matches: bool) -> None:
        if matches:
            self.console.success("Password matches the stored hash.")
        else:
            self.console.error("Password does not match the stored hash.")

    def display_batch(self, outcomes: Mapping[str, HashOutcome]) -> None:
        self.console.section("Batch Hashing")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Password", style="bold")
        tbl.add_column("Result")
        for password, outcome in outcomes.items():
            if outcome.ok:
                tbl.add_row(Text(self._label(password)), Text(outcome.hash or ""))
            else:
                tbl.add_row(
                    Text(self._label(password)),
                    Text(f"ERROR: {outcome.error}", style="bold red"),
                )
        self._rich.print(tbl)

        failed = sum(1 for o in outcomes.values() if not o.ok)
        summary = f"{len(outcomes)} distinct passwords hashed, {failed} failed."
        if failed:
            self.console.warning(summary)
        else:
            self.console.success(summary)

    def display_digest(self, digest: str) -> None:
        self.console.section("SHA-1 Breach Digest")
        self._rich.print(Panel(Text(digest), border_style="cyan"))
        self.console.warning("Lookup key only. Never store SHA-1 digests as credentials.")

    def display_breach_key(self, key: BreachLookupKey) -> None:
        self.console.section("Breach Lookup Key")
        self.console.table(
            "k-Anonymity Range Query",
            ["Part", "Value", "Shared"],
            [
                ("Digest", key.digest, "No"),
                ("Prefix", key.prefix, "Yes"),
                ("Suffix", key.suffix, "No"),
            ],
            styles=["bold", "", "dim"],
        )

    def display_benchmark(self, results: Sequence[BenchmarkResult]) -> None:
        self.console.section("Hashing Benchmark")
        self.console.table(
            "Sequential vs. Batch Argon2id",
            ["Passwords", "Sequential", "Batch", "Speedup"],
            [
                (
                    r.count,
                    f"{r.sequential_seconds:.3f}s",
                    f"{r.batch_seconds:.3f}s",
                    f"{r.speedup:.2f}x",
                )
                for r in results
            ],
            styles=["bold", "", "", "bright_green"],
        )
