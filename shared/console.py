"""
Warden Console Interface
=========================

Rich-powered console abstraction giving every Warden command the same
banner, section headers, severity-coloured messages, tables and status
spinner.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_WARDEN_THEME = Theme(
    {
        "warden.banner": "bold bright_cyan",
        "warden.section": "bold bright_magenta",
        "warden.success": "bold green",
        "warden.warning": "bold yellow",
        "warden.error": "bold red",
        "warden.info": "bold bright_blue",
        "warden.dim": "dim white",
        "warden.critical": "bold white on red",
        "warden.high": "bold red",
        "warden.medium": "bold yellow",
        "warden.low": "bold bright_cyan",
        "warden.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
 __        __            _
 \ \      / /_ _ _ __ __| | ___ _ __
  \ \ /\ / / _` | '__/ _` |/ _ \ '_ \
   \ V  V / (_| | | | (_| |  __/ | | |
    \_/\_/ \__,_|_|  \__,_|\___|_| |_|
[/bright_cyan]"""

_TAGLINE = "Password Policy & Hashing Toolkit"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "warden.critical",
    "HIGH": "warden.high",
    "MEDIUM": "warden.medium",
    "LOW": "warden.low",
    "INFO": "warden.informational",
}


class WardenConsole:
    """Unified console interface for all Warden commands.

    Usage::

        con = WardenConsole()
        con.banner()
        con.section("Policy Check")
        con.success("Password is compliant")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
            record: Keep rendered output so it can be exported afterwards.
        """
        self._console = Console(
            theme=_WARDEN_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[warden.banner]{_TAGLINE}[/warden.banner]\n"
            f"[warden.dim]Version: {version}  |  {now}[/warden.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="warden.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[warden.success][✔] SUCCESS:[/warden.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[warden.warning][⚠] WARNING:[/warden.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(f"[warden.error][✘] ERROR:[/warden.error] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[warden.info][ℹ] INFO:[/warden.info] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each cell is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = _SEVERITY_STYLES.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            # Finding text may contain "[" from user-facing examples.
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Show a spinner while the block runs.

        Example::

            with con.status("Hashing..."):
                digest = hasher.hash(password)
        """
        with self._console.status(
            f"[warden.info]{message}[/warden.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)
