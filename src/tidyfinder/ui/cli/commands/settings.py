"""Finder settings commands: ``show``, ``view``, ``option`` and ``relaunch``."""

from __future__ import annotations

from typing import final

from tidyfinder.application.services.finder_settings_service import FinderSettingsService
from tidyfinder.ui.cli.args.options import SettingsArgs
from tidyfinder.ui.cli.display.settings import SettingsDisplay


@final
class SettingsCommand:
    """Read or change a single Finder preference."""

    def __init__(
        self,
        args: SettingsArgs,
        *,
        service: FinderSettingsService | None = None,
        display: SettingsDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or FinderSettingsService()
        self.display = display or SettingsDisplay()

    def execute(self) -> None:
        args = self.args

        if args.command == "show":
            self.display.show_settings(self.service.load_current())
            return

        if args.command == "relaunch":
            self.service.relaunch()
            return

        if args.command == "view":
            assert args.view_style is not None
            self.service.set_view_style(args.view_style)
        else:
            assert args.option is not None and args.enabled is not None
            self.service.set_option(args.option, args.enabled)

        if args.relaunch:
            self.service.relaunch()
