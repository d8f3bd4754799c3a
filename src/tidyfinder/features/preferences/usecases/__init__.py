"""Use cases for Finder preferences."""

from .finder_preferences import FinderPreferences
from .ports import FinderProcess, PreferenceStore
from .reset_views import ResetReport, reset_folder_views

__all__ = [
    "FinderPreferences",
    "FinderProcess",
    "PreferenceStore",
    "ResetReport",
    "reset_folder_views",
]
