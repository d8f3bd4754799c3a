"""Domain types for Finder preferences."""

from .models import FinderOption, FinderSettings, ViewStyle

__all__ = ["FinderOption", "FinderSettings", "ViewStyle"]
