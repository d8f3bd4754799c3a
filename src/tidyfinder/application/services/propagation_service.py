"""Application service applying a template folder's view settings to other folders."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from tidyfinder.features.propagation import (
    PropagationOutcome,
    TargetFolderSet,
    TemplatePropagationEngine,
)
from tidyfinder.features.propagation.adapters.filesystem.local import LocalMetadataFileSystem
from tidyfinder.features.propagation.usecases.ports import MetadataFileSystem
from tidyfinder.features.propagation.usecases.propagate_template import ProgressCallback


class RunInProgressError(RuntimeError):
    """Raised when a propagation run is requested while another is still running."""


class NoTargetsError(ValueError):
    """Raised when a run is requested without any target folder."""


@dataclass(slots=True)
class PropagationRequest:
    """Template folder plus the folders that should receive its view settings."""

    template: Path
    targets: list[Path] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class PropagationReport:
    """Aggregate of every per-folder outcome of one run."""

    template: Path
    outcomes: tuple[PropagationOutcome, ...]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def copied_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failures(self) -> list[PropagationOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def all_copied(self) -> bool:
        return self.total > 0 and self.copied_count == self.total

    def summary(self) -> str:
        """Return e.g. ``Copied view settings to 4/5 folders; 1 failed``."""

        noun = "folder" if self.total == 1 else "folders"
        text = f"Copied view settings to {self.copied_count}/{self.total} {noun}"
        failed = len(self.failures)
        if failed:
            text += f"; {failed} failed"
        return text


@final
class TemplatePropagationService:
    """Façade wiring the propagation engine to the local filesystem.

    Only one run may be active per service instance. ``cancel`` stops the
    active run at the next folder boundary; a cancel requested before a run
    takes the lock applies to that run. The request is cleared when a run ends.
    """

    def __init__(
        self,
        *,
        filesystem: MetadataFileSystem | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._engine = TemplatePropagationEngine(
            filesystem or LocalMetadataFileSystem(),
            logger=logger or getLogger(__name__),
        )
        self._run_lock = threading.Lock()
        self._cancel_requested = threading.Event()

    @property
    def engine(self) -> TemplatePropagationEngine:
        return self._engine

    @property
    def is_running(self) -> bool:
        return self._run_lock.locked()

    @staticmethod
    def build_targets(template: Path, targets: Iterable[Path]) -> list[Path]:
        """De-duplicate ``targets``, drop ``template`` and sort by folder name."""

        return TargetFolderSet(targets, template=template).as_list()

    def cancel(self) -> None:
        self._cancel_requested.set()

    def run(
        self,
        request: PropagationRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> PropagationReport:
        """Validate the template and copy its metadata into every target.

        Raises:
            NoTargetsError: No target remains after normalisation.
            MissingMetadataError: The template has no metadata file.
            RunInProgressError: Another run on this service has not finished.
        """

        template = Path(request.template).expanduser().resolve()
        targets = self.build_targets(template, request.targets)
        if not targets:
            raise NoTargetsError("Please select a template folder and at least one target folder")

        if not self._run_lock.acquire(blocking=False):
            raise RunInProgressError("A template propagation run is already in progress")
        try:
            outcomes = self._engine.propagate_from_template(
                template,
                targets,
                progress_callback=progress_callback,
                should_cancel=self._cancel_requested.is_set,
            )
        finally:
            self._cancel_requested.clear()
            self._run_lock.release()

        return PropagationReport(template=template, outcomes=tuple(outcomes))


__all__ = [
    "NoTargetsError",
    "PropagationReport",
    "PropagationRequest",
    "RunInProgressError",
    "TemplatePropagationService",
]
