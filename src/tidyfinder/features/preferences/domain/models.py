"""Closed enumerations and value objects for Finder display preferences."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Final


class ViewStyle(StrEnum):
    """Default Finder view style, valued by the tag Finder stores."""

    LIST = "Nlsv"
    ICON = "icnv"
    COLUMN = "clmv"
    GALLERY = "glyv"

    @property
    def display_name(self) -> str:
        return _VIEW_STYLE_NAMES[self]

    @staticmethod
    def from_tag(tag: str | None) -> "ViewStyle | None":
        """Map a stored preference tag to a style; unknown tags yield ``None``."""

        if tag is None:
            return None
        cleaned = tag.strip()
        for style in ViewStyle:
            if style.value == cleaned:
                return style
        return None

    @staticmethod
    def from_user_input(value: str) -> "ViewStyle":
        """Translate a display name or raw tag (any case) into a style."""

        normalized = value.strip().casefold()
        for style in ViewStyle:
            if normalized in {style.value.casefold(), style.display_name.casefold()}:
                return style
        valid: Final[str] = ", ".join(style.display_name.lower() for style in ViewStyle)
        raise ValueError(f"Unsupported view style '{value}'. Valid options: {valid}")


_VIEW_STYLE_NAMES: Final[dict[ViewStyle, str]] = {
    ViewStyle.LIST: "List",
    ViewStyle.ICON: "Icon",
    ViewStyle.COLUMN: "Column",
    ViewStyle.GALLERY: "Gallery",
}


class FinderOption(StrEnum):
    """Boolean Finder window options, valued by their preference key."""

    SHOW_PATH_BAR = "ShowPathbar"
    SHOW_STATUS_BAR = "ShowStatusBar"
    SHOW_SIDEBAR = "ShowSidebar"
    SHOW_PREVIEW_PANE = "ShowPreviewPane"

    @property
    def display_name(self) -> str:
        return _OPTION_NAMES[self][0]

    @property
    def alias(self) -> str:
        return _OPTION_NAMES[self][1]

    @staticmethod
    def from_user_input(value: str) -> "FinderOption":
        """Accept a short alias (``pathbar``) or the preference key itself."""

        normalized = value.strip().casefold().replace("-", "").replace("_", "")
        for option in FinderOption:
            if normalized in {option.alias, option.value.casefold()}:
                return option
        valid: Final[str] = ", ".join(option.alias for option in FinderOption)
        raise ValueError(f"Unsupported Finder option '{value}'. Valid options: {valid}")


_OPTION_NAMES: Final[dict[FinderOption, tuple[str, str]]] = {
    FinderOption.SHOW_PATH_BAR: ("Show Path Bar", "pathbar"),
    FinderOption.SHOW_STATUS_BAR: ("Show Status Bar", "statusbar"),
    FinderOption.SHOW_SIDEBAR: ("Show Sidebar", "sidebar"),
    FinderOption.SHOW_PREVIEW_PANE: ("Show Preview Pane", "preview"),
}


@dataclass(frozen=True, slots=True)
class FinderSettings:
    """Snapshot of every Finder display preference TidyFinder manages.

    ``show_toolbar`` and ``show_tab_bar`` are carried for profiles only; no
    Finder preference backs them, so they are never written.
    """

    view_style: ViewStyle = ViewStyle.LIST
    show_path_bar: bool = False
    show_status_bar: bool = False
    show_sidebar: bool = True
    show_preview_pane: bool = False
    show_toolbar: bool = True
    show_tab_bar: bool = True

    def option_values(self) -> dict[FinderOption, bool]:
        return {
            FinderOption.SHOW_PATH_BAR: self.show_path_bar,
            FinderOption.SHOW_STATUS_BAR: self.show_status_bar,
            FinderOption.SHOW_SIDEBAR: self.show_sidebar,
            FinderOption.SHOW_PREVIEW_PANE: self.show_preview_pane,
        }

    def with_option(self, option: FinderOption, value: bool) -> "FinderSettings":
        field_name = {
            FinderOption.SHOW_PATH_BAR: "show_path_bar",
            FinderOption.SHOW_STATUS_BAR: "show_status_bar",
            FinderOption.SHOW_SIDEBAR: "show_sidebar",
            FinderOption.SHOW_PREVIEW_PANE: "show_preview_pane",
        }[option]
        return replace(self, **{field_name: value})


__all__ = ["FinderOption", "FinderSettings", "ViewStyle"]
