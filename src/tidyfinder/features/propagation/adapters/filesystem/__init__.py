"""Filesystem adapters for the propagation feature."""

from .local import ChflagsHider, LocalMetadataFileSystem, default_hider

__all__ = ["ChflagsHider", "LocalMetadataFileSystem", "default_hider"]
