"""Display utilities for template propagation results."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from tidyfinder.application.services.propagation_service import PropagationReport


@final
class PropagationResultDisplay:
    """Render the outcome of a template run, listing every failed folder."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, report: PropagationReport, *, quiet: bool = False) -> None:
        failures = report.failures
        if quiet and not failures:
            return

        style = "green" if not failures else "yellow" if report.copied_count else "red"
        self.console.print(f"\n[bold {style}]{escape(report.summary())}[/bold {style}]")
        self.console.print(f"Copied {report.copied_count}/{report.total}")

        if not failures:
            return

        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for outcome in failures:
            reason = outcome.reason or "unknown error"
            self.console.print(
                f"[red]  • {escape(outcome.target.name)}: {escape(reason)}[/red]"
            )
