"""src/tidyfinder/ui/cli/commands/reset.py
What: Remove saved per-folder view settings below a root folder.
Why: Make every folder fall back to the default Finder view after confirmation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.prompt import Confirm

from tidyfinder.application.services.finder_settings_service import FinderSettingsService
from tidyfinder.application.services.profile_service import ProfileService
from tidyfinder.features.preferences import ResetReport
from tidyfinder.platform.logging import logger
from tidyfinder.ui.cli.args.options import ResetArgs
from tidyfinder.ui.cli.display.settings import SettingsDisplay


@final
class ResetCommand:
    """Ask for confirmation, then delete every metadata file below the root.

    With a profile name the profile's settings are written to Finder first,
    so the cleared folders open with those settings.
    """

    def __init__(
        self,
        args: ResetArgs,
        *,
        service: FinderSettingsService | None = None,
        profiles: ProfileService | None = None,
        display: SettingsDisplay | None = None,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.args = args
        self.service = service or FinderSettingsService()
        self._profiles = profiles
        self.display = display or SettingsDisplay()
        self._confirm = confirm or self._ask

    def execute(self) -> ResetReport | None:
        """Return the reset report, or ``None`` when the user declined."""

        if not self.args.assume_yes:
            question = (
                f"Remove saved view settings from every folder below {self.args.root}? "
                "Folder-specific views cannot be recovered"
            )
            if not self._confirm(question):
                logger.info("Reset cancelled")
                return None

        if self.args.profile is None:
            report = self.service.reset_all_folder_views(self.args.root)
        else:
            report = self._profile_service().apply_to_all_folders(self.args.profile, self.args.root)
        self.display.show_reset(report, quiet=self.args.quiet)

        if self.args.relaunch:
            self.service.relaunch()
        return report

    def _profile_service(self) -> ProfileService:
        if self._profiles is None:
            self._profiles = ProfileService(
                profiles_file=self.args.profiles_file,
                settings_service=self.service,
                logger=logger,
            )
        return self._profiles

    @staticmethod
    def _ask(question: str) -> bool:
        return Confirm.ask(question, default=False)
