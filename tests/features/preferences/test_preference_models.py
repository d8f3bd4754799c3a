"""Tests for view style and Finder option parsing."""

from __future__ import annotations

import pytest

from tidyfinder.features.preferences import FinderOption, FinderSettings, ViewStyle


@pytest.mark.parametrize("value", ["list", "LIST", " List ", "Nlsv", "nlsv"])
def test_view_style_accepts_names_and_tags(value: str) -> None:
    assert ViewStyle.from_user_input(value) is ViewStyle.LIST


def test_view_style_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="list, icon, column, gallery"):
        _ = ViewStyle.from_user_input("cover flow")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("pathbar", FinderOption.SHOW_PATH_BAR),
        ("path-bar", FinderOption.SHOW_PATH_BAR),
        ("status_bar", FinderOption.SHOW_STATUS_BAR),
        ("ShowSidebar", FinderOption.SHOW_SIDEBAR),
        ("preview", FinderOption.SHOW_PREVIEW_PANE),
    ],
)
def test_finder_option_aliases(value: str, expected: FinderOption) -> None:
    assert FinderOption.from_user_input(value) is expected


def test_finder_option_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        _ = FinderOption.from_user_input("toolbar")


def test_default_settings() -> None:
    settings = FinderSettings()

    assert settings.view_style is ViewStyle.LIST
    assert settings.option_values() == {
        FinderOption.SHOW_PATH_BAR: False,
        FinderOption.SHOW_STATUS_BAR: False,
        FinderOption.SHOW_SIDEBAR: True,
        FinderOption.SHOW_PREVIEW_PANE: False,
    }
    assert settings.show_toolbar and settings.show_tab_bar


def test_with_option_returns_a_copy() -> None:
    settings = FinderSettings()

    changed = settings.with_option(FinderOption.SHOW_PREVIEW_PANE, True)

    assert changed.show_preview_pane is True
    assert settings.show_preview_pane is False
