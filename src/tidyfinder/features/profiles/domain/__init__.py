"""Domain types for saved profiles."""

from .models import (
    DuplicateProfileNameError,
    InvalidProfileNameError,
    Profile,
    ProfileError,
    ProfileFormatError,
    ProfileImportError,
    ProfileNotFoundError,
)

__all__ = [
    "DuplicateProfileNameError",
    "InvalidProfileNameError",
    "Profile",
    "ProfileError",
    "ProfileFormatError",
    "ProfileImportError",
    "ProfileNotFoundError",
]
