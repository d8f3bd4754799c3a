"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def default_file_mode() -> int:
    """Return the mode a plain ``open(path, "w")`` would give a new file."""

    # The umask can only be read by replacing it.
    umask = os.umask(0)
    _ = os.umask(umask)
    return 0o666 & ~umask


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` using a temp file in the same directory and a rename.

    Readers observe either the previous file or the complete new one, created
    with the umask default mode rather than the private mode of a temp file.
    The temporary file is removed when any step fails and the error re-raised.
    """

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            _ = handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, default_file_mode())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


__all__ = ["atomic_write_bytes", "default_file_mode", "ensure_directory", "ensure_parent_directory"]
