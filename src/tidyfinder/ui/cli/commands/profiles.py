"""Profiles command implementation for the CLI."""

from __future__ import annotations

from typing import final

from tidyfinder.application.services.profile_service import ProfileService
from tidyfinder.features.profiles import Profile
from tidyfinder.platform.logging import logger
from tidyfinder.ui.cli.args.options import ProfilesArgs
from tidyfinder.ui.cli.display.profiles import ProfilesDisplay


@final
class ProfilesCommand:
    """Dispatch a ``profiles`` action to the profile service."""

    def __init__(
        self,
        args: ProfilesArgs,
        *,
        service: ProfileService | None = None,
        display: ProfilesDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or ProfileService(profiles_file=args.profiles_file, logger=logger)
        self.display = display or ProfilesDisplay()

    def execute(self) -> None:
        args = self.args
        action = args.action

        if action == "list":
            self.display.show_profiles(self.service.list_profiles())
            return

        if action == "import":
            assert args.path is not None
            profile = self.service.import_file(args.path)
            self._report("Imported", profile)
            return

        assert args.name is not None
        if action == "save":
            profile = self.service.save_current(args.name)
            self._report("Saved", profile)
        elif action == "rename":
            assert args.new_name is not None
            profile = self.service.rename(args.name, args.new_name)
            self._report("Renamed", profile)
        elif action == "delete":
            profile = self.service.delete(args.name)
            self._report("Deleted", profile)
        elif action == "apply":
            profile = self.service.apply(args.name, relaunch=args.relaunch)
            self._report("Applied", profile)
        else:
            assert args.path is not None
            profile = self.service.export(args.name, args.path)
            self._report("Exported", profile)

    def _report(self, verb: str, profile: Profile) -> None:
        if self.args.quiet:
            return
        self.display.show_action(verb, profile)
