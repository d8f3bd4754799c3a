"""Adapters binding Finder preferences to macOS commands."""

from .defaults_store import DefaultsPreferenceStore
from .finder_process import FinderController

__all__ = ["DefaultsPreferenceStore", "FinderController"]
