"""Ports for the propagation feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class MetadataFileSystem(Protocol):
    """Filesystem operations needed to copy view-state metadata between folders."""

    def is_directory(self, path: Path) -> bool:
        """Return True when ``path`` is an existing directory."""

        ...

    def is_file(self, path: Path) -> bool:
        """Return True when ``path`` is an existing regular file."""

        ...

    def read_bytes(self, path: Path) -> bytes:
        """Return the full content of ``path``."""

        ...

    def remove(self, path: Path) -> None:
        """Delete the file at ``path``."""

        ...

    def write_atomic(self, path: Path, data: bytes) -> None:
        """Replace ``path`` with ``data`` without exposing a partially written file."""

        ...

    def set_permissions(self, path: Path, mode: int) -> None:
        """Apply permission bits ``mode`` to ``path``."""

        ...

    def hide(self, path: Path) -> None:
        """Set the platform's hidden-from-listing flag on ``path``."""

        ...


__all__ = ["MetadataFileSystem"]
