"""Where: src/tidyfinder/features/profiles/domain/models.py
What: Named, timestamped snapshot of Finder settings and its JSON mapping.
Why: Profiles written by earlier releases must keep loading unchanged.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any

from tidyfinder.features.preferences.domain.models import FinderSettings, ViewStyle


class ProfileError(Exception):
    """Base class for profile management failures."""


class InvalidProfileNameError(ProfileError, ValueError):
    """Raised when a profile name is blank."""


class DuplicateProfileNameError(ProfileError):
    """Raised when another profile already uses the requested name."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(f"A profile with the name '{name}' already exists")


class ProfileNotFoundError(ProfileError, LookupError):
    """Raised when no stored profile matches the requested id or name."""


class ProfileFormatError(ProfileError, ValueError):
    """Raised when persisted profile data cannot be decoded."""


class ProfileImportError(ProfileError):
    """Raised when a profile file cannot be imported."""


def _utc_now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as ISO-8601 in UTC with a ``Z`` suffix."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(raw: str) -> datetime:
    parsed = datetime.fromisoformat(raw.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class Profile:
    """Saved bundle of Finder settings."""

    name: str
    settings: FinderSettings
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_date: datetime = field(default_factory=_utc_now)

    def renamed(self, new_name: str) -> "Profile":
        return replace(self, name=new_name)

    def to_dict(self) -> dict[str, Any]:
        settings = self.settings
        return {
            "id": str(self.id).upper(),
            "name": self.name,
            "createdDate": format_timestamp(self.created_date),
            "viewStyle": {"rawValue": settings.view_style.value},
            "showPathBar": settings.show_path_bar,
            "showStatusBar": settings.show_status_bar,
            "showSidebar": settings.show_sidebar,
            "showPreviewPane": settings.show_preview_pane,
            "showToolbar": settings.show_toolbar,
            "showTabBar": settings.show_tab_bar,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Profile":
        """Decode one profile object.

        Raises:
            ProfileFormatError: A required key is missing or holds the wrong type.
        """

        if not isinstance(payload, Mapping):
            raise ProfileFormatError("Profile entry must be a JSON object")

        try:
            raw_style = payload["viewStyle"]
            tag = raw_style.get("rawValue") if isinstance(raw_style, Mapping) else raw_style
            view_style = ViewStyle.from_tag(tag if isinstance(tag, str) else None)
            if view_style is None:
                raise ProfileFormatError(f"Invalid view style raw value: {tag!r}")

            settings = FinderSettings(
                view_style=view_style,
                show_path_bar=_require_bool(payload, "showPathBar"),
                show_status_bar=_require_bool(payload, "showStatusBar"),
                show_sidebar=_require_bool(payload, "showSidebar"),
                show_preview_pane=_require_bool(payload, "showPreviewPane"),
                show_toolbar=_require_bool(payload, "showToolbar", default=True),
                show_tab_bar=_require_bool(payload, "showTabBar", default=True),
            )
            name = payload["name"]
            if not isinstance(name, str):
                raise ProfileFormatError("Profile name must be a string")
            return cls(
                id=uuid.UUID(str(payload["id"])),
                name=name,
                created_date=parse_timestamp(str(payload["createdDate"])),
                settings=settings,
            )
        except KeyError as exc:
            raise ProfileFormatError(f"Profile is missing required key {exc.args[0]!r}") from exc
        except ValueError as exc:
            if isinstance(exc, ProfileFormatError):
                raise
            raise ProfileFormatError(f"Malformed profile: {exc}") from exc


def _require_bool(payload: Mapping[str, Any], key: str, *, default: bool | None = None) -> bool:
    if key not in payload and default is not None:
        return default
    value = payload[key]
    if not isinstance(value, bool):
        raise ProfileFormatError(f"Profile key {key!r} must be a boolean")
    return value


__all__ = [
    "DuplicateProfileNameError",
    "InvalidProfileNameError",
    "Profile",
    "ProfileError",
    "ProfileFormatError",
    "ProfileImportError",
    "ProfileNotFoundError",
    "format_timestamp",
    "parse_timestamp",
]
