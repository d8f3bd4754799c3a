"""Ports for the profiles feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.models import Profile


class ProfileStore(Protocol):
    """Durable list of profiles; every save replaces the whole list."""

    def load(self) -> list[Profile]:
        """Return every stored profile in stored order (empty when nothing is stored)."""

        ...

    def save(self, profiles: list[Profile]) -> None:
        """Persist ``profiles`` replacing the previous content."""

        ...


class ProfileExchange(Protocol):
    """Read and write single profiles for import and export."""

    def read(self, path: Path) -> Profile:
        """Decode the profile stored at ``path``."""

        ...

    def write(self, path: Path, profile: Profile) -> None:
        """Write ``profile`` to ``path``."""

        ...


__all__ = ["ProfileExchange", "ProfileStore"]
