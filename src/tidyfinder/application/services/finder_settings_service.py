"""Application service for reading, writing and applying Finder settings."""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import Path
from typing import final

from tidyfinder.features.preferences import (
    FinderOption,
    FinderPreferences,
    FinderProcess,
    FinderSettings,
    PreferenceStore,
    ResetReport,
    ViewStyle,
    reset_folder_views,
)
from tidyfinder.features.preferences.adapters import DefaultsPreferenceStore, FinderController


@final
class FinderSettingsService:
    """Coordinate preference writes, folder view resets and Finder relaunches.

    Command failures surface as ``CommandFailedError`` for the caller to report.
    """

    def __init__(
        self,
        *,
        store: PreferenceStore | None = None,
        finder: FinderProcess | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or getLogger(__name__)
        self._preferences = FinderPreferences(store or DefaultsPreferenceStore(), logger=self._logger)
        self._finder = finder or FinderController()

    @property
    def preferences(self) -> FinderPreferences:
        return self._preferences

    def load_current(self) -> FinderSettings:
        return self._preferences.snapshot()

    def save(self, settings: FinderSettings) -> None:
        self._preferences.apply(settings)

    def save_and_relaunch(self, settings: FinderSettings) -> None:
        self.save(settings)
        self.relaunch()

    def apply_to_all_existing_folders(self, settings: FinderSettings, root: Path | None = None) -> ResetReport:
        """Save ``settings`` then drop per-folder view state below ``root`` (default: home)."""

        self.save(settings)
        return self.reset_all_folder_views(root)

    def reset_all_folder_views(self, root: Path | None = None) -> ResetReport:
        return reset_folder_views(root or Path.home(), logger=self._logger)

    def set_view_style(self, style: ViewStyle) -> None:
        self._preferences.set_view_style(style)

    def set_option(self, option: FinderOption, value: bool) -> None:
        self._preferences.set_option(option, value)

    def relaunch(self) -> None:
        self._finder.relaunch()


__all__ = ["FinderSettingsService"]
