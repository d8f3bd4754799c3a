"""Tests for name-addressed profile operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from tidyfinder.application.services import FinderSettingsService, ProfileService
from tidyfinder.features.preferences import FinderSettings, ViewStyle
from tidyfinder.features.profiles import ProfileNotFoundError


@pytest.fixture
def settings_service(preference_store, recording_finder) -> FinderSettingsService:
    return FinderSettingsService(store=preference_store, finder=recording_finder)


@pytest.fixture
def service(tmp_path: Path, settings_service: FinderSettingsService) -> ProfileService:
    return ProfileService(profiles_file=tmp_path / "profiles.json", settings_service=settings_service)


def test_save_current_captures_live_settings(
    service: ProfileService, settings_service: FinderSettingsService
) -> None:
    settings_service.save(FinderSettings(view_style=ViewStyle.GALLERY, show_path_bar=True))

    profile = service.save_current("Media")

    assert profile.settings.view_style is ViewStyle.GALLERY
    assert profile.settings.show_path_bar is True
    assert [p.name for p in service.list_profiles()] == ["Media"]


def test_apply_writes_settings_and_optionally_relaunches(
    service: ProfileService, settings_service: FinderSettingsService, recording_finder
) -> None:
    stored = FinderSettings(view_style=ViewStyle.COLUMN, show_status_bar=True)
    _ = service.manager.create_from_settings("Dev", stored)

    _ = service.apply("Dev")
    assert recording_finder.relaunches == 0
    assert settings_service.load_current().view_style is ViewStyle.COLUMN

    _ = service.apply("Dev", relaunch=True)
    assert recording_finder.relaunches == 1


def test_rename_delete_by_name(service: ProfileService) -> None:
    _ = service.save_current("Old")

    _ = service.rename("Old", "New")
    assert [p.name for p in service.list_profiles()] == ["New"]

    _ = service.delete("New")
    assert service.list_profiles() == []
    with pytest.raises(ProfileNotFoundError):
        _ = service.delete("New")


def test_export_then_import(service: ProfileService, tmp_path: Path) -> None:
    original = service.save_current("Share")
    path = tmp_path / "exported" / "share.json"

    _ = service.export("Share", path)
    imported = service.import_file(path)

    assert path.exists()
    assert imported.name == "Share (1)"
    assert imported.id != original.id


def test_apply_to_all_folders_saves_then_resets(
    tmp_path: Path, service: ProfileService, preference_store
) -> None:
    root = tmp_path / "Documents"
    (root / "Nested").mkdir(parents=True)
    _ = (root / "Nested" / ".DS_Store").write_bytes(b"x")
    _ = service.manager.create_from_settings("Wide", FinderSettings(view_style=ViewStyle.GALLERY))

    report = service.apply_to_all_folders("Wide", root)

    assert report.root == root
    assert report.removed == [root / "Nested" / ".DS_Store"]
    assert preference_store.values[("com.apple.finder", "FXPreferredViewStyle")] == "glyv"


def test_apply_to_all_folders_with_unknown_profile_touches_nothing(
    tmp_path: Path, service: ProfileService
) -> None:
    _ = (tmp_path / ".DS_Store").write_bytes(b"x")

    with pytest.raises(ProfileNotFoundError):
        _ = service.apply_to_all_folders("Missing", tmp_path)
    assert (tmp_path / ".DS_Store").exists()
