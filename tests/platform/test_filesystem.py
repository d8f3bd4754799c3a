"""Tests for shared filesystem helpers."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tidyfinder.config.file_ops import write_text_file_atomic
from tidyfinder.platform.filesystem import atomic_write_bytes, ensure_directory, ensure_parent_directory


def test_atomic_write_replaces_existing_content(tmp_path: Path) -> None:
    target = tmp_path / ".DS_Store"
    _ = target.write_bytes(b"old")

    atomic_write_bytes(target, b"new content")

    assert target.read_bytes() == b"new content"
    assert [p.name for p in tmp_path.iterdir()] == [".DS_Store"]


def test_atomic_write_cleans_up_temp_file_on_failure(tmp_path: Path, mocker: MockerFixture) -> None:
    target = tmp_path / ".DS_Store"
    _ = target.write_bytes(b"previous")
    _ = mocker.patch("tidyfinder.platform.filesystem.os.replace", side_effect=OSError("rename failed"))

    with pytest.raises(OSError, match="rename failed"):
        atomic_write_bytes(target, b"never visible")

    assert target.read_bytes() == b"previous"
    assert [p.name for p in tmp_path.iterdir()] == [".DS_Store"]


def test_ensure_directory_creates_parents(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"

    assert ensure_directory(nested) == nested
    assert nested.is_dir()
    assert ensure_parent_directory(nested / "file.json") == nested


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    _ = blocker.write_text("x")

    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(blocker)


def test_atomic_write_uses_umask_default_mode(tmp_path: Path) -> None:
    """The rename must not leave the private 0600 mode of the temp file behind."""

    target = tmp_path / "profiles.json"
    previous = os.umask(0o022)
    try:
        atomic_write_bytes(target, b"[]\n")
    finally:
        _ = os.umask(previous)

    assert stat.S_IMODE(target.stat().st_mode) == 0o644


def test_text_writes_create_missing_parents(tmp_path: Path) -> None:
    target = tmp_path / "Application Support" / "TidyFinder" / "profiles.json"

    write_text_file_atomic(target, "[]\n")

    assert target.read_text(encoding="utf-8") == "[]\n"


def test_text_writes_refuse_a_file_in_place_of_the_parent(tmp_path: Path) -> None:
    blocker = tmp_path / "TidyFinder"
    _ = blocker.write_text("x")

    with pytest.raises(NotADirectoryError):
        write_text_file_atomic(blocker / "profiles.json", "[]\n")
