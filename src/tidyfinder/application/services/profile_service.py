"""src/tidyfinder/application/services/profile_service.py
What: Name-addressed profile operations backed by the JSON profile file.
Why: Let presentation layers save, apply and exchange profiles without wiring adapters.
"""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import Path
from typing import final

from tidyfinder.config.paths import default_profiles_file
from tidyfinder.features.preferences import ResetReport
from tidyfinder.features.profiles import Profile, ProfileManager
from tidyfinder.features.profiles.adapters import JsonProfileExchange, JsonProfileStore

from .finder_settings_service import FinderSettingsService


@final
class ProfileService:
    """Façade over ``ProfileManager`` that looks profiles up by name."""

    def __init__(
        self,
        *,
        profiles_file: Path | None = None,
        settings_service: FinderSettingsService | None = None,
        manager: ProfileManager | None = None,
        logger: Logger | None = None,
    ) -> None:
        service_logger = logger or getLogger(__name__)
        if manager is None:
            path = profiles_file or default_profiles_file()
            manager = ProfileManager(
                JsonProfileStore(path, logger=service_logger),
                JsonProfileExchange(),
                logger=service_logger,
            )
        self._manager = manager
        self._settings = settings_service or FinderSettingsService(logger=service_logger)
        self._logger = service_logger

    @property
    def manager(self) -> ProfileManager:
        return self._manager

    def list_profiles(self) -> list[Profile]:
        return self._manager.list_profiles()

    def save_current(self, name: str) -> Profile:
        """Capture the live Finder settings as a new profile called ``name``."""

        return self._manager.create_from_settings(name, self._settings.load_current())

    def rename(self, old_name: str, new_name: str) -> Profile:
        return self._manager.rename(self._manager.get(old_name).id, new_name)

    def delete(self, name: str) -> Profile:
        return self._manager.delete(self._manager.get(name).id)

    def apply(self, name: str, *, relaunch: bool = False) -> Profile:
        """Write the stored settings of ``name`` to Finder, optionally relaunching it."""

        profile = self._manager.get(name)
        if relaunch:
            self._settings.save_and_relaunch(profile.settings)
        else:
            self._settings.save(profile.settings)
        self._logger.info("Applied profile '%s'", profile.name)
        return profile

    def apply_to_all_folders(self, name: str, root: Path | None = None) -> ResetReport:
        """Write the settings of ``name`` to Finder, then clear per-folder views below ``root``."""

        profile = self._manager.get(name)
        report = self._settings.apply_to_all_existing_folders(profile.settings, root)
        self._logger.info("Applied profile '%s' to every folder below %s", profile.name, report.root)
        return report

    def export(self, name: str, path: Path) -> Profile:
        profile = self._manager.get(name)
        self._manager.export_profile(profile, path)
        return profile

    def import_file(self, path: Path) -> Profile:
        return self._manager.import_profile(path)


__all__ = ["ProfileService"]
