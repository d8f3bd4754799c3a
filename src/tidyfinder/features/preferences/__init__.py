"""Public surface for the Finder preferences feature."""

from .domain.models import FinderOption, FinderSettings, ViewStyle
from .usecases.finder_preferences import FinderPreferences
from .usecases.ports import FinderProcess, PreferenceStore
from .usecases.reset_views import ResetReport, reset_folder_views

__all__ = [
    "FinderOption",
    "FinderPreferences",
    "FinderProcess",
    "FinderSettings",
    "PreferenceStore",
    "ResetReport",
    "ViewStyle",
    "reset_folder_views",
]
