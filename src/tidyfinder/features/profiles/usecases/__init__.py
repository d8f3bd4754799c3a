"""Use cases for saved profiles."""

from .ports import ProfileExchange, ProfileStore
from .profile_manager import ProfileManager

__all__ = ["ProfileExchange", "ProfileManager", "ProfileStore"]
