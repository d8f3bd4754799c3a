"""Where: src/tidyfinder/features/preferences/usecases/finder_preferences.py
What: Read and write Finder display preferences through a preference store.
Why: The store is the single source of truth; nothing is cached here.
"""

from __future__ import annotations

from dataclasses import replace
from logging import Logger, getLogger
from typing import Final, final

from tidyfinder.config.settings import FINDER_DOMAIN, VIEW_STYLE_KEY

from ..domain.models import FinderOption, FinderSettings, ViewStyle
from .ports import PreferenceStore

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes"})


@final
class FinderPreferences:
    """Typed accessors over the ``com.apple.finder`` preference domain."""

    def __init__(
        self,
        store: PreferenceStore,
        *,
        domain: str = FINDER_DOMAIN,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._domain = domain
        self._logger = logger or getLogger(__name__)

    def get_view_style(self) -> ViewStyle | None:
        """Return the default view style, or ``None`` when unset or unrecognised."""

        return ViewStyle.from_tag(self._store.read(self._domain, VIEW_STYLE_KEY))

    def set_view_style(self, style: ViewStyle) -> None:
        self._store.write_string(self._domain, VIEW_STYLE_KEY, style.value)
        self._logger.info("Default view style set to: %s", style.display_name)

    def get_option(self, option: FinderOption) -> bool:
        """Return the option's value; an absent preference reads as ``False``."""

        raw = self._store.read(self._domain, option.value)
        if raw is None:
            return False
        return raw.strip().casefold() in _TRUTHY

    def set_option(self, option: FinderOption, value: bool) -> None:
        self._store.write_bool(self._domain, option.value, value)
        self._logger.info("%s: %s", option.display_name, "Enabled" if value else "Disabled")

    def snapshot(self, *, base: FinderSettings | None = None) -> FinderSettings:
        """Read every managed preference into a settings value.

        Values absent from the store fall back to ``base`` (or the defaults) for
        the view style; the toolbar and tab bar toggles always come from ``base``.
        """

        settings = base or FinderSettings()
        style = self.get_view_style()
        if style is not None:
            settings = replace(settings, view_style=style)
        for option in FinderOption:
            settings = settings.with_option(option, self.get_option(option))
        return settings

    def apply(self, settings: FinderSettings) -> None:
        """Write the view style and every boolean option, in a fixed order."""

        self.set_view_style(settings.view_style)
        for option, value in settings.option_values().items():
            self.set_option(option, value)


__all__ = ["FinderPreferences"]
