"""Progress display functionality for CLI."""

from pathlib import Path
from typing import Any, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from tidyfinder.application.services.propagation_service import (
    PropagationReport,
    PropagationRequest,
)
from tidyfinder.features.propagation.usecases.propagate_template import ProgressCallback
from tidyfinder.platform.logging import EventRichHandler, logger


@runtime_checkable
class PropagationServiceLike(Protocol):
    """Protocol for services that run a propagation with a progress callback."""

    def run(
        self,
        request: PropagationRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> PropagationReport:
        ...


def shared_console() -> Console | None:
    """Return the console used by the log handler so bars and log lines interleave."""

    for handler in logger.handlers:
        if isinstance(handler, EventRichHandler):
            return handler.console
    return None


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        service: PropagationServiceLike,
        request: PropagationRequest,
    ) -> PropagationReport:
        """Run a propagation through ``service`` while drawing a progress bar."""

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        console = shared_console()
        if console is not None:
            progress_kwargs["console"] = console

        columns = (
            TextColumn("[cyan]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
        )
        with Progress(*columns, **progress_kwargs) as progress:
            task_id: TaskID | None = None

            def _cb(processed: int, total: int, current: Path) -> None:
                nonlocal task_id
                if task_id is None:
                    task_id = progress.add_task("Copying view settings", total=total)
                progress.update(
                    task_id,
                    completed=processed,
                    description=f"Copying view settings ({current.name})",
                )

            return service.run(request, progress_callback=_cb)
