"""Where: src/tidyfinder/features/propagation/usecases/propagate_template.py
What: Copy a template folder's view-state metadata into many target folders.
Why: One unreadable or missing target must not stop the remaining folders.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from enum import StrEnum
from logging import Logger, getLogger
from pathlib import Path
from typing import Any

from tidyfinder.config.settings import METADATA_FILE_MODE, METADATA_FILE_NAME

from ..domain.models import (
    FailureKind,
    MissingMetadataError,
    PropagationOutcome,
    ViewStateBlob,
)
from .ports import MetadataFileSystem

ProgressCallback = Callable[[int, int, Path], None]
CancelCheck = Callable[[], bool]


class PropagationEvent(StrEnum):
    """Structured event identifiers for propagation logs."""

    RUN_START = "propagation.run.start"
    RUN_COMPLETE = "propagation.run.complete"
    RUN_CANCELLED = "propagation.run.cancelled"
    TARGET_COPIED = "propagation.target.copied"
    TARGET_FAILED = "propagation.target.failed"


class _TargetStepError(Exception):
    """Internal wrapper tagging a per-target failure with its kind."""

    def __init__(self, failure: FailureKind, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.failure: FailureKind = failure
        self.cause: BaseException = cause


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class TemplatePropagationEngine:
    """Validate a template folder and propagate its metadata target by target."""

    _filesystem: MetadataFileSystem
    _metadata_file_name: str
    _file_mode: int
    _logger: Logger

    def __init__(
        self,
        filesystem: MetadataFileSystem,
        *,
        metadata_file_name: str = METADATA_FILE_NAME,
        file_mode: int = METADATA_FILE_MODE,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._metadata_file_name = metadata_file_name
        self._file_mode = file_mode
        self._logger = logger or getLogger(__name__)

    @property
    def metadata_file_name(self) -> str:
        return self._metadata_file_name

    def metadata_path(self, folder: Path) -> Path:
        """Return the metadata file location inside ``folder``."""

        return folder / self._metadata_file_name

    def validate_template(self, template: Path) -> ViewStateBlob:
        """Read the template's metadata file in full.

        Raises:
            MissingMetadataError: ``template`` is not a folder holding the metadata file.
        """

        source = self.metadata_path(template)
        if not self._filesystem.is_directory(template) or not self._filesystem.is_file(source):
            raise MissingMetadataError(template, self._metadata_file_name)
        return ViewStateBlob(data=self._filesystem.read_bytes(source), source=template)

    def propagate(
        self,
        blob: ViewStateBlob,
        targets: Sequence[Path],
        *,
        progress_callback: ProgressCallback | None = None,
        should_cancel: CancelCheck | None = None,
    ) -> list[PropagationOutcome]:
        """Write ``blob`` into every target, returning one outcome per target in order.

        ``should_cancel`` is consulted only between targets. Once it reports
        true, every remaining target is recorded as ``CANCELLED`` untouched.
        """

        total = len(targets)
        outcomes: list[PropagationOutcome] = []
        if total == 0:
            return outcomes

        started = time.perf_counter()
        self._log_event(
            logging.INFO,
            PropagationEvent.RUN_START,
            "Propagating %d bytes to %d folder(s)",
            blob.size,
            total,
            template=blob.source or "",
            total_targets=total,
            blob_size=blob.size,
        )

        cancelled = False
        for index, target in enumerate(targets, start=1):
            if not cancelled and should_cancel is not None and should_cancel():
                cancelled = True
                self._log_event(
                    logging.WARNING,
                    PropagationEvent.RUN_CANCELLED,
                    "Propagation cancelled with %d folder(s) remaining",
                    total - index + 1,
                    template=blob.source or "",
                )

            if cancelled:
                outcome = PropagationOutcome.failed(
                    target, FailureKind.CANCELLED, "Cancelled before this folder was processed"
                )
            else:
                outcome = self._propagate_one(blob, target)
                self._log_outcome(outcome, index, total)

            outcomes.append(outcome)
            if progress_callback is not None:
                progress_callback(index, total, target)

        copied = sum(1 for outcome in outcomes if outcome.succeeded)
        self._log_event(
            logging.INFO,
            PropagationEvent.RUN_COMPLETE,
            "Propagation finished: %d copied, %d failed",
            copied,
            total - copied,
            template=blob.source or "",
            copied=copied,
            failed=total - copied,
            duration_seconds=round(time.perf_counter() - started, 4),
        )
        return outcomes

    def propagate_from_template(
        self,
        template: Path,
        targets: Sequence[Path],
        *,
        progress_callback: ProgressCallback | None = None,
        should_cancel: CancelCheck | None = None,
    ) -> list[PropagationOutcome]:
        """Validate ``template`` and propagate it; validation errors are raised first."""

        blob = self.validate_template(template)
        return self.propagate(
            blob,
            targets,
            progress_callback=progress_callback,
            should_cancel=should_cancel,
        )

    def _propagate_one(self, blob: ViewStateBlob, target: Path) -> PropagationOutcome:
        if not self._filesystem.is_directory(target):
            return PropagationOutcome.failed(
                target, FailureKind.TARGET_MISSING, f"Target folder does not exist: {target}"
            )

        destination = self.metadata_path(target)
        try:
            self._write(destination, blob)
            self._normalize_attributes(destination)
        except _TargetStepError as exc:
            return PropagationOutcome.failed(target, exc.failure, _describe(exc.cause))
        return PropagationOutcome.copied(target)

    def _write(self, destination: Path, blob: ViewStateBlob) -> None:
        try:
            if self._filesystem.is_file(destination):
                self._filesystem.remove(destination)
            self._filesystem.write_atomic(destination, blob.data)
        except Exception as exc:
            raise _TargetStepError(FailureKind.WRITE_FAILED, exc) from exc

    def _normalize_attributes(self, destination: Path) -> None:
        try:
            self._filesystem.set_permissions(destination, self._file_mode)
            self._filesystem.hide(destination)
        except Exception as exc:
            raise _TargetStepError(FailureKind.ATTRIBUTE_FAILED, exc) from exc

    def _log_outcome(self, outcome: PropagationOutcome, sequence: int, total: int) -> None:
        if outcome.succeeded:
            self._log_event(
                logging.INFO,
                PropagationEvent.TARGET_COPIED,
                "Copied view settings to %s",
                outcome.target,
                target=outcome.target,
                sequence=sequence,
                total_targets=total,
            )
            return

        self._log_event(
            logging.ERROR,
            PropagationEvent.TARGET_FAILED,
            "Failed to copy view settings to %s: %s",
            outcome.target,
            outcome.reason,
            target=outcome.target,
            sequence=sequence,
            total_targets=total,
            failure=str(outcome.failure),
            reason=outcome.reason,
        )

    def _log_event(
        self,
        level: int,
        event: PropagationEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"propagation_event": event.value}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        self._logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = [
    "CancelCheck",
    "ProgressCallback",
    "PropagationEvent",
    "TemplatePropagationEngine",
]
