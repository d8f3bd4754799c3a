"""Where: src/tidyfinder/features/profiles/usecases/profile_manager.py
What: Create, rename, delete, import and export saved Finder profiles.
Why: Keep profile names unique and persist the full list after every change.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from tidyfinder.features.preferences.domain.models import FinderSettings

from ..domain.models import (
    DuplicateProfileNameError,
    InvalidProfileNameError,
    Profile,
    ProfileError,
    ProfileImportError,
    ProfileNotFoundError,
)
from .ports import ProfileExchange, ProfileStore


def _now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


@final
class ProfileManager:
    """In-memory profile list backed by a ``ProfileStore``."""

    def __init__(
        self,
        store: ProfileStore,
        exchange: ProfileExchange,
        *,
        clock: Callable[[], datetime] = _now,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._exchange = exchange
        self._clock = clock
        self._id_factory = id_factory
        self._logger = logger or getLogger(__name__)
        self._profiles: list[Profile] = store.load()

    def list_profiles(self) -> list[Profile]:
        return list(self._profiles)

    def get(self, name: str) -> Profile:
        """Return the profile called ``name``."""

        for profile in self._profiles:
            if profile.name == name:
                return profile
        raise ProfileNotFoundError(f"No profile named '{name}'")

    def create_from_settings(self, name: str, settings: FinderSettings) -> Profile:
        """Store a new profile capturing ``settings``."""

        profile = Profile(
            name=self._validated_name(name),
            settings=settings,
            id=self._id_factory(),
            created_date=self._clock(),
        )
        return self.save_profile(profile)

    def save_profile(self, profile: Profile) -> Profile:
        """Add ``profile`` or replace the stored profile with the same id."""

        self._ensure_name_available(profile.name, exclude=profile.id)
        for index, existing in enumerate(self._profiles):
            if existing.id == profile.id:
                self._profiles[index] = profile
                break
        else:
            self._profiles.append(profile)
        self._persist()
        self._logger.info("Saved profile '%s'", profile.name)
        return profile

    def rename(self, profile_id: uuid.UUID, new_name: str) -> Profile:
        """Rename a profile keeping its id and creation date."""

        cleaned = self._validated_name(new_name)
        self._ensure_name_available(cleaned, exclude=profile_id)
        index = self._index_of(profile_id)
        renamed = self._profiles[index].renamed(cleaned)
        self._profiles[index] = renamed
        self._persist()
        self._logger.info("Renamed profile to '%s'", cleaned)
        return renamed

    def delete(self, profile_id: uuid.UUID) -> Profile:
        index = self._index_of(profile_id)
        removed = self._profiles.pop(index)
        self._persist()
        self._logger.info("Deleted profile '%s'", removed.name)
        return removed

    def export_profile(self, profile: Profile, path: Path) -> None:
        self._exchange.write(path, profile)
        self._logger.info("Exported profile '%s' to %s", profile.name, path)

    def import_profile(self, path: Path) -> Profile:
        """Import the profile at ``path`` under a fresh id and creation date.

        A name already in use gets a `` (1)``, `` (2)``… suffix.

        Raises:
            ProfileImportError: The file is missing, unreadable, malformed or
                names the profile with a blank string.
        """

        try:
            loaded = self._exchange.read(path)
            name = self._validated_name(loaded.name)
        except (OSError, ProfileError) as exc:
            raise ProfileImportError(f"Failed to import profile: {exc}") from exc

        imported = replace(
            loaded,
            id=self._id_factory(),
            created_date=self._clock(),
            name=self._unique_name(name),
        )
        return self.save_profile(imported)

    def _unique_name(self, base: str) -> str:
        taken = {profile.name for profile in self._profiles}
        candidate = base
        counter = 1
        while candidate in taken:
            candidate = f"{base} ({counter})"
            counter += 1
        return candidate

    def _validated_name(self, name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise InvalidProfileNameError("Profile name cannot be empty")
        return cleaned

    def _ensure_name_available(self, name: str, *, exclude: uuid.UUID) -> None:
        if any(profile.name == name and profile.id != exclude for profile in self._profiles):
            raise DuplicateProfileNameError(name)

    def _index_of(self, profile_id: uuid.UUID) -> int:
        for index, profile in enumerate(self._profiles):
            if profile.id == profile_id:
                return index
        raise ProfileNotFoundError(f"No profile with id {profile_id}")

    def _persist(self) -> None:
        self._store.save(list(self._profiles))


__all__ = ["ProfileManager"]
