"""Shared pytest fixtures: fakes for macOS commands and configuration isolation."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest

from tidyfinder.platform.shell import CommandFailedError


class FakeRunner:
    """Command runner that records argv and replays canned responses."""

    def __init__(self) -> None:
        self.commands: list[list[str]] = []
        self.responses: dict[tuple[str, ...], str] = {}
        self.failures: dict[tuple[str, ...], int] = {}

    def execute(self, command: Sequence[str]) -> str:
        argv = [str(part) for part in command]
        self.commands.append(argv)
        key = tuple(argv)
        if key in self.failures:
            raise CommandFailedError(argv, self.failures[key], "Error: simulated failure")
        return self.responses.get(key, "")


class InMemoryPreferenceStore:
    """Preference store keeping values as the strings ``defaults read`` prints."""

    def __init__(self, values: dict[tuple[str, str], str] | None = None) -> None:
        self.values: dict[tuple[str, str], str] = dict(values or {})
        self.writes: list[tuple[str, str, str | bool]] = []

    def read(self, domain: str, key: str) -> str | None:
        return self.values.get((domain, key))

    def write_string(self, domain: str, key: str, value: str) -> None:
        self.values[(domain, key)] = value
        self.writes.append((domain, key, value))

    def write_bool(self, domain: str, key: str, value: bool) -> None:
        self.values[(domain, key)] = "1" if value else "0"
        self.writes.append((domain, key, value))


class RecordingFinder:
    """Finder process double counting relaunches."""

    def __init__(self) -> None:
        self.relaunches = 0

    def relaunch(self) -> None:
        self.relaunches += 1


class RecordingHider:
    """Hidden-flag setter recording every path it was asked to hide."""

    def __init__(self, *, fail_for: set[str] | None = None) -> None:
        self.hidden: list[Path] = []
        self.fail_for: set[str] = fail_for or set()

    def __call__(self, path: Path) -> None:
        if path.parent.name in self.fail_for:
            raise PermissionError(f"Operation not permitted: {path}")
        self.hidden.append(path)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def preference_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def recording_finder() -> RecordingFinder:
    return RecordingFinder()


@pytest.fixture
def recording_hider() -> RecordingHider:
    return RecordingHider()


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import tidyfinder.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def fresh_config(portable_repo_root: Path) -> Iterator[Path]:
    """Reset the configuration singleton around a test run."""

    from tidyfinder.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield portable_repo_root
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def template_folder(tmp_path: Path) -> Path:
    """Folder holding a 4096-byte metadata file."""

    folder = tmp_path / "Template"
    folder.mkdir()
    _ = (folder / ".DS_Store").write_bytes(bytes(range(256)) * 16)
    return folder
