"""Table rendering for saved profiles."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tidyfinder.features.profiles import Profile


@final
class ProfilesDisplay:
    """Render saved profiles in a Rich table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_profiles(self, profiles: Sequence[Profile]) -> None:
        if not profiles:
            self.console.print("[yellow]No saved profiles.[/yellow]")
            return

        table = Table(
            title="Saved Profiles",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Name", style="bold")
        table.add_column("View")
        table.add_column("Shown", style="cyan")
        table.add_column("Created", style="dim")

        for profile in profiles:
            settings = profile.settings
            shown = [
                option.alias
                for option, enabled in settings.option_values().items()
                if enabled
            ]
            table.add_row(
                profile.name,
                settings.view_style.display_name,
                Text(", ".join(shown)) if shown else Text("none", style="dim"),
                profile.created_date.strftime("%Y-%m-%d %H:%M"),
            )

        self.console.print(table)

    def show_action(self, verb: str, profile: Profile) -> None:
        self.console.print(f"[green]{verb} profile '{escape(profile.name)}'[/green]", highlight=False)


__all__ = ["ProfilesDisplay"]
