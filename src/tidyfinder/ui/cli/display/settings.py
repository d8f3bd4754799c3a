"""src/tidyfinder/ui/cli/display/settings.py
What: Render Finder settings and folder view resets for the terminal.
Why: Keep Rich formatting out of the command classes.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tidyfinder.features.preferences import FinderSettings, ResetReport


def _state(value: bool) -> Text:
    return Text("on", style="green") if value else Text("off", style="dim")


@final
class SettingsDisplay:
    """Print settings snapshots and reset summaries."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_settings(self, settings: FinderSettings) -> None:
        table = Table(
            title="Finder Settings",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Setting", style="bold")
        table.add_column("Value")

        table.add_row("View Style", Text(settings.view_style.display_name, style="cyan"))
        for option, value in settings.option_values().items():
            table.add_row(option.display_name, _state(value))

        self.console.print(table)

    def show_reset(self, report: ResetReport, *, quiet: bool = False) -> None:
        if quiet and not report.failures:
            return

        self.console.print(
            f"\n[bold]Removed saved view settings from {len(report.removed)} folder(s) "
            f"below {escape(str(report.root))}[/bold]"
        )
        if not report.failures:
            return

        self.console.print(f"[yellow]Could not reset {len(report.failures)} location(s):[/yellow]")
        for path, reason in report.failures:
            self.console.print(f"[yellow]  • {escape(str(path))}: {escape(reason)}[/yellow]")
