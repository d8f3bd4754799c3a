"""JSON file persistence for saved profiles."""

from __future__ import annotations

import json
from logging import Logger, getLogger
from pathlib import Path
from typing import Any, final

from tidyfinder.config.file_ops import write_text_file_atomic

from ..domain.models import Profile, ProfileFormatError
from ..usecases.ports import ProfileExchange, ProfileStore


def encode_json(payload: Any) -> str:
    """Pretty-print ``payload`` with sorted keys, the on-disk profile encoding."""

    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def read_profile_file(path: Path) -> Profile:
    """Read a single exported profile object from ``path``."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ProfileFormatError(f"{path.name} is not UTF-8 text: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise ProfileFormatError(f"{path.name} is not valid JSON: {exc.msg}") from exc
    return Profile.from_dict(payload)


def write_profile_file(path: Path, profile: Profile) -> None:
    """Write ``profile`` on its own to ``path``."""

    write_text_file_atomic(path, encode_json(profile.to_dict()))


@final
class JsonProfileStore(ProfileStore):
    """Keep every profile in one JSON array file, rewritten in full on save."""

    def __init__(self, path: Path, *, logger: Logger | None = None) -> None:
        self._path = path
        self._logger = logger or getLogger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Profile]:
        if not self._path.exists():
            return []

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            self._logger.error("Failed to load profiles from %s: %s", self._path, exc)
            raise ProfileFormatError(f"{self._path} is not UTF-8 text: {exc.reason}") from exc
        except json.JSONDecodeError as exc:
            self._logger.error("Failed to load profiles from %s: %s", self._path, exc)
            raise ProfileFormatError(f"{self._path} is not valid JSON: {exc.msg}") from exc

        if not isinstance(payload, list):
            raise ProfileFormatError(f"{self._path} must contain a JSON array of profiles")

        profiles = [Profile.from_dict(entry) for entry in payload]
        self._logger.debug("Loaded %d profile(s) from %s", len(profiles), self._path)
        return profiles

    def save(self, profiles: list[Profile]) -> None:
        write_text_file_atomic(self._path, encode_json([profile.to_dict() for profile in profiles]))
        self._logger.debug("Saved %d profile(s) to %s", len(profiles), self._path)


@final
class JsonProfileExchange(ProfileExchange):
    """Single-profile JSON files used by import and export."""

    def read(self, path: Path) -> Profile:
        return read_profile_file(path)

    def write(self, path: Path, profile: Profile) -> None:
        write_profile_file(path, profile)


__all__ = [
    "JsonProfileExchange",
    "JsonProfileStore",
    "encode_json",
    "read_profile_file",
    "write_profile_file",
]
