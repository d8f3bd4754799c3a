"""Tests for the Finder settings application service."""

from __future__ import annotations

from pathlib import Path

import pytest

from tidyfinder.application.services import FinderSettingsService
from tidyfinder.features.preferences import FinderOption, FinderSettings, ViewStyle
from tidyfinder.features.preferences.adapters import DefaultsPreferenceStore
from tidyfinder.platform.shell import CommandFailedError


@pytest.fixture
def service(preference_store, recording_finder) -> FinderSettingsService:
    return FinderSettingsService(store=preference_store, finder=recording_finder)


def test_load_current_falls_back_to_defaults(service: FinderSettingsService) -> None:
    assert service.load_current() == FinderSettings(show_sidebar=False)


def test_save_then_load(service: FinderSettingsService) -> None:
    settings = FinderSettings(view_style=ViewStyle.ICON, show_status_bar=True)

    service.save(settings)

    assert service.load_current() == settings


def test_save_and_relaunch(service: FinderSettingsService, recording_finder) -> None:
    service.save_and_relaunch(FinderSettings())

    assert recording_finder.relaunches == 1


def test_single_value_setters(service: FinderSettingsService, preference_store) -> None:
    service.set_view_style(ViewStyle.COLUMN)
    service.set_option(FinderOption.SHOW_PREVIEW_PANE, True)

    assert preference_store.values[("com.apple.finder", "FXPreferredViewStyle")] == "clmv"
    assert preference_store.values[("com.apple.finder", "ShowPreviewPane")] == "1"


def test_apply_to_all_existing_folders(
    tmp_path: Path, service: FinderSettingsService, preference_store
) -> None:
    (tmp_path / "nested").mkdir()
    _ = (tmp_path / "nested" / ".DS_Store").write_bytes(b"x")

    report = service.apply_to_all_existing_folders(FinderSettings(view_style=ViewStyle.LIST), tmp_path)

    assert report.removed == [tmp_path / "nested" / ".DS_Store"]
    assert preference_store.values[("com.apple.finder", "FXPreferredViewStyle")] == "Nlsv"


def test_command_failures_reach_the_caller(fake_runner, recording_finder) -> None:
    fake_runner.failures[
        ("defaults", "write", "com.apple.finder", "FXPreferredViewStyle", "-string", "icnv")
    ] = 1
    service = FinderSettingsService(store=DefaultsPreferenceStore(fake_runner), finder=recording_finder)

    with pytest.raises(CommandFailedError):
        service.set_view_style(ViewStyle.ICON)
