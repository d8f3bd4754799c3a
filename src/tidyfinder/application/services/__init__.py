"""Application services wiring feature use cases to their default adapters."""

from .finder_settings_service import FinderSettingsService
from .profile_service import ProfileService
from .propagation_service import (
    NoTargetsError,
    PropagationReport,
    PropagationRequest,
    RunInProgressError,
    TemplatePropagationService,
)

__all__ = [
    "FinderSettingsService",
    "NoTargetsError",
    "ProfileService",
    "PropagationReport",
    "PropagationRequest",
    "RunInProgressError",
    "TemplatePropagationService",
]
