"""
Gauger Console Output
======================

Rich renderers for analysis results: a colour-banded strength meter, a
details table, the weakness findings, numbered suggestions and a
generated-password panel. Passwords are always shown masked except for
the generated one, which exists to be copied.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import GaugeConsole
from gauger.core.models import GaugeReport, GeneratedPassword, PasswordAnalysis


_STRENGTH_COLOURS: dict[str, str] = {
    "very_weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}


def mask_password(password: str) -> str:
    """Show the first and last character only."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


def _yes_no(flag: bool) -> str:
    return "[green]Yes[/green]" if flag else "[red]No[/red]"


class GaugeConsoleOutput:
    """Console renderers for Gauger results.

    Args:
        console: Shared console instance.
    """

    def __init__(self, console: GaugeConsole) -> None:
        self.console = console
        self._rich = console.rich

    def display_analysis(self, result: PasswordAnalysis, masked: str = "") -> None:
        """Display the strength meter, details and weakness findings."""
        self.console.section("Password Analysis")

        strength_colour = _STRENGTH_COLOURS.get(result.strength.value, "white")

        meter_width = 40
        filled = max(0, min(meter_width, int((result.score / 100) * meter_width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(meter_width):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < meter_width * 0.25:
                meter.append("█", style="red")
            elif i < meter_width * 0.50:
                meter.append("█", style="yellow")
            elif i < meter_width * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(result.strength.label.upper(), style=strength_colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if masked:
            tbl.add_row("Password", Text(masked))
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Lowercase", _yes_no(result.has_lower))
        tbl.add_row("Uppercase", _yes_no(result.has_upper))
        tbl.add_row("Digits", _yes_no(result.has_digit))
        tbl.add_row("Symbols", _yes_no(result.has_symbol))
        tbl.add_row("Entropy (est.)", f"{result.entropy_bits:.2f} bits")
        if result.crack_time_estimates:
            slowest = result.crack_time_estimates[0]
            tbl.add_row("Time to crack (online)", slowest.display)
            fastest = result.crack_time_estimates[-1]
            tbl.add_row("Time to crack (offline, massive)", fastest.display)

        self._rich.print(tbl)

        if result.weaknesses:
            self.console.findings_table(result.weaknesses, title="Weaknesses")
        else:
            self.console.success("No weaknesses detected.")

    def display_suggestions(self, suggestions: list[str]) -> None:
        """Display numbered improvement suggestions."""
        if not suggestions:
            return
        self._rich.print()
        self._rich.print("[bold]Improvement Suggestions:[/bold]")
        for idx, suggestion in enumerate(suggestions, start=1):
            self._rich.print(f"  [bright_cyan]{idx}.[/bright_cyan] {suggestion}")

    def display_generated(self, generated: GeneratedPassword) -> None:
        """Display a generated strong password ready to copy."""
        body = Text(generated.value, style="bold bright_white")
        self._rich.print()
        self._rich.print(Panel(body, title="Generated Strong Password", border_style="green"))
        if not generated.secure:
            self.console.warning(
                "Generated with a non-cryptographic random source; do not adopt it."
            )
        self._rich.print(
            "[dim]Store this password in a password manager if you decide to use it.[/dim]"
        )

    def display_report(self, report: GaugeReport, masked: str = "") -> None:
        self.display_analysis(report.analysis, masked)
        self.display_suggestions(report.suggestions)
        if report.generated is not None:
            self.display_generated(report.generated)
