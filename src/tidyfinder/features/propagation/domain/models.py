"""Value objects describing a template propagation run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class MissingMetadataError(Exception):
    """Raised when a template folder carries no view-state metadata file."""

    def __init__(self, folder: Path, metadata_file_name: str) -> None:
        self.folder: Path = folder
        self.metadata_file_name: str = metadata_file_name
        super().__init__(
            f"The folder '{folder.name or folder}' doesn't have any view settings "
            f"({metadata_file_name} file) to copy."
        )


@dataclass(frozen=True, slots=True)
class ViewStateBlob:
    """Opaque metadata bytes read once from a template folder."""

    data: bytes
    source: Path | None = None

    @property
    def size(self) -> int:
        return len(self.data)


class OutcomeStatus(StrEnum):
    COPIED = "copied"
    FAILED = "failed"


class FailureKind(StrEnum):
    """Why a single target did not end up ``COPIED``."""

    TARGET_MISSING = "target_missing"
    WRITE_FAILED = "write_failed"
    ATTRIBUTE_FAILED = "attribute_failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class PropagationOutcome:
    """Result of propagating the template metadata into one target folder."""

    target: Path
    status: OutcomeStatus
    failure: FailureKind | None = None
    reason: str | None = None

    @classmethod
    def copied(cls, target: Path) -> "PropagationOutcome":
        return cls(target=target, status=OutcomeStatus.COPIED)

    @classmethod
    def failed(cls, target: Path, failure: FailureKind, reason: str) -> "PropagationOutcome":
        return cls(target=target, status=OutcomeStatus.FAILED, failure=failure, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.COPIED


__all__ = [
    "FailureKind",
    "MissingMetadataError",
    "OutcomeStatus",
    "PropagationOutcome",
    "ViewStateBlob",
]
