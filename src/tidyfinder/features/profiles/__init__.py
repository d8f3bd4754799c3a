"""Public surface for the saved profiles feature."""

from .domain.models import (
    DuplicateProfileNameError,
    InvalidProfileNameError,
    Profile,
    ProfileError,
    ProfileFormatError,
    ProfileImportError,
    ProfileNotFoundError,
)
from .usecases.profile_manager import ProfileManager

__all__ = [
    "DuplicateProfileNameError",
    "InvalidProfileNameError",
    "Profile",
    "ProfileError",
    "ProfileFormatError",
    "ProfileImportError",
    "ProfileManager",
    "ProfileNotFoundError",
]
