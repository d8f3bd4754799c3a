"""Public surface for the template propagation feature."""

from .domain.models import (
    FailureKind,
    MissingMetadataError,
    OutcomeStatus,
    PropagationOutcome,
    ViewStateBlob,
)
from .domain.targets import TargetFolderSet
from .usecases.propagate_template import PropagationEvent, TemplatePropagationEngine

__all__ = [
    "FailureKind",
    "MissingMetadataError",
    "OutcomeStatus",
    "PropagationEvent",
    "PropagationOutcome",
    "TargetFolderSet",
    "TemplatePropagationEngine",
    "ViewStateBlob",
]
