"""Ports for the Finder preferences feature."""

from __future__ import annotations

from typing import Protocol


class PreferenceStore(Protocol):
    """Key-value store addressed by ``(domain, key)``; writes always overwrite."""

    def read(self, domain: str, key: str) -> str | None:
        """Return the stored value as text, or ``None`` when absent."""

        ...

    def write_string(self, domain: str, key: str, value: str) -> None:
        """Store a string value."""

        ...

    def write_bool(self, domain: str, key: str, value: bool) -> None:
        """Store a boolean value."""

        ...


class FinderProcess(Protocol):
    """Control over the running Finder process."""

    def relaunch(self) -> None:
        """Restart Finder so preference changes become visible."""

        ...


__all__ = ["FinderProcess", "PreferenceStore"]
