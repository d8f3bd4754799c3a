"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from pathlib import Path

from tidyfinder.platform.filesystem import atomic_write_bytes, ensure_parent_directory


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    _ = ensure_parent_directory(path)
    _ = path.write_text(content, encoding="utf-8")


def write_text_file_atomic(path: Path, content: str) -> None:
    """Persist textual content so readers never observe a partial file."""

    _ = ensure_parent_directory(path)
    atomic_write_bytes(path, content.encode("utf-8"))


__all__ = ["write_text_file", "write_text_file_atomic"]
