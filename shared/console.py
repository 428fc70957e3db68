"""
Gauger Console Interface
=========================

Rich-powered console abstraction giving every Gauger command the same
look: banner, section rules, status-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_GAUGE_THEME = Theme(
    {
        "gauge.banner": "bold bright_cyan",
        "gauge.section": "bold bright_magenta",
        "gauge.success": "bold green",
        "gauge.warning": "bold yellow",
        "gauge.dim": "dim white",
        "gauge.high": "bold red",
        "gauge.medium": "bold yellow",
        "gauge.low": "bold bright_cyan",
        "gauge.informational": "bold bright_blue",
    }
)

_BANNER_TITLE = "GAUGER"
_TAGLINE = "Password Strength Analyzer"
_FOOTNOTE = "All analysis is performed locally. Passwords never leave this process."


class GaugeConsole:
    """Unified console interface for Gauger commands.

    Usage::

        con = GaugeConsole()
        con.banner()
        con.section("Analysis")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
        """
        self._console = Console(
            theme=_GAUGE_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Gauger banner panel."""
        body = Text.from_markup(
            f"[gauge.banner]{_BANNER_TITLE}[/gauge.banner]\n"
            f"{_TAGLINE}\n"
            f"[gauge.dim]Version: {version}  |  {_FOOTNOTE}[/gauge.dim]"
        )
        self._console.print(
            Panel(Align.center(body), border_style="bright_cyan", padding=(1, 2))
        )

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="gauge.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[gauge.success][✔] SUCCESS:[/gauge.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[gauge.warning][⚠] WARNING:[/gauge.warning] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any], *, title: str = "Findings") -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        severity_style_map: dict[str, str] = {
            "HIGH": "gauge.high",
            "MEDIUM": "gauge.medium",
            "LOW": "gauge.low",
            "INFO": "gauge.informational",
        }

        tbl = Table(
            title=title,
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
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            # Descriptions can quote user input; keep it out of markup parsing.
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)
