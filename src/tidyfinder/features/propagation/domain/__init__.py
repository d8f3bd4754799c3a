"""Domain types for template propagation."""

from .models import (
    FailureKind,
    MissingMetadataError,
    OutcomeStatus,
    PropagationOutcome,
    ViewStateBlob,
)
from .targets import TargetFolderSet

__all__ = [
    "FailureKind",
    "MissingMetadataError",
    "OutcomeStatus",
    "PropagationOutcome",
    "TargetFolderSet",
    "ViewStateBlob",
]
