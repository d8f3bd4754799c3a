"""Tests for JSON persistence of profiles."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tidyfinder.features.preferences import FinderSettings
from tidyfinder.features.profiles import Profile, ProfileFormatError
from tidyfinder.features.profiles.adapters import JsonProfileExchange, JsonProfileStore


def test_missing_file_loads_as_empty(tmp_path: Path) -> None:
    assert JsonProfileStore(tmp_path / "profiles.json").load() == []


def test_save_creates_parent_and_pretty_prints(tmp_path: Path) -> None:
    path = tmp_path / "Application Support" / "TidyFinder" / "profiles.json"
    store = JsonProfileStore(path)
    profiles = [Profile(name="Work", settings=FinderSettings()), Profile(name="Home", settings=FinderSettings())]

    store.save(profiles)

    text = path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "createdDate"')
    assert [entry["name"] for entry in json.loads(text)] == ["Work", "Home"]
    assert store.load() == profiles


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    store = JsonProfileStore(tmp_path / "profiles.json")
    store.save([Profile(name="Old", settings=FinderSettings())])

    store.save([])

    assert store.load() == []


def test_invalid_json_raises_format_error(tmp_path: Path) -> None:
    path = tmp_path / "profiles.json"
    _ = path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ProfileFormatError):
        _ = JsonProfileStore(path).load()


def test_undecodable_file_raises_format_error(tmp_path: Path) -> None:
    path = tmp_path / "profiles.json"
    _ = path.write_bytes(b"[\xff\xfe]")

    with pytest.raises(ProfileFormatError, match="not UTF-8"):
        _ = JsonProfileStore(path).load()


def test_non_array_payload_raises_format_error(tmp_path: Path) -> None:
    path = tmp_path / "profiles.json"
    _ = path.write_text('{"name": "single"}', encoding="utf-8")

    with pytest.raises(ProfileFormatError):
        _ = JsonProfileStore(path).load()


def test_exchange_writes_a_single_object(tmp_path: Path) -> None:
    profile = Profile(name="Shared", settings=FinderSettings(show_path_bar=True))
    path = tmp_path / "shared.json"
    exchange = JsonProfileExchange()

    exchange.write(path, profile)

    assert isinstance(json.loads(path.read_text(encoding="utf-8")), dict)
    assert exchange.read(path) == profile
