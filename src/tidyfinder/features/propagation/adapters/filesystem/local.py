"""Filesystem adapter for the propagation use case."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

from tidyfinder.config.settings import CHFLAGS_COMMAND
from tidyfinder.platform.filesystem import atomic_write_bytes
from tidyfinder.platform.logging import logger
from tidyfinder.platform.shell import CommandRunner, ShellRunner

from ...usecases.ports import MetadataFileSystem

HideFunction = Callable[[Path], None]


class ChflagsHider:
    """Set the BSD ``hidden`` file flag through ``chflags``."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or ShellRunner()

    def __call__(self, path: Path) -> None:
        _ = self._runner.execute([CHFLAGS_COMMAND, "hidden", str(path)])


def _dot_prefix_only(path: Path) -> None:
    if not path.name.startswith("."):
        raise OSError(f"Cannot hide {path}: no hidden flag on this platform")
    logger.debug("No hidden flag on %s; relying on the dot-prefixed name of %s", sys.platform, path)


def default_hider() -> HideFunction:
    """Return the hiding mechanism for the running platform."""

    if sys.platform == "darwin":
        return ChflagsHider()
    return _dot_prefix_only


class LocalMetadataFileSystem(MetadataFileSystem):
    """Thin wrapper around the local filesystem."""

    def __init__(self, *, hider: HideFunction | None = None) -> None:
        self._hide = hider or default_hider()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def remove(self, path: Path) -> None:
        path.unlink()

    def write_atomic(self, path: Path, data: bytes) -> None:
        atomic_write_bytes(path, data)

    def set_permissions(self, path: Path, mode: int) -> None:
        os.chmod(path, mode)

    def hide(self, path: Path) -> None:
        self._hide(path)


__all__ = ["ChflagsHider", "HideFunction", "LocalMetadataFileSystem", "default_hider"]
