"""Tests for progress and result display functionality."""

from io import StringIO
from pathlib import Path

from pytest_mock import MockerFixture
from rich.console import Console

from tidyfinder.application.services import PropagationReport, PropagationRequest
from tidyfinder.features.propagation import FailureKind, PropagationOutcome
from tidyfinder.features.propagation.usecases.propagate_template import ProgressCallback
from tidyfinder.ui.cli.display import PropagationResultDisplay, ProgressDisplay


def _report() -> PropagationReport:
    return PropagationReport(
        template=Path("/t"),
        outcomes=(
            PropagationOutcome.copied(Path("/x/Music")),
            PropagationOutcome.failed(Path("/x/Locked"), FailureKind.ATTRIBUTE_FAILED, "Operation not permitted"),
        ),
    )


def test_run_with_service_progress(mocker: MockerFixture) -> None:
    """Progress advances to each reported count and the report is passed through."""
    mock_progress = mocker.patch("tidyfinder.ui.cli.display.progress.Progress")
    mock_progress_instance = mock_progress.return_value.__enter__.return_value
    expected = _report()

    class _Service:
        def run(
            self,
            request: PropagationRequest,
            *,
            progress_callback: ProgressCallback | None = None,
        ) -> PropagationReport:
            del request
            assert progress_callback is not None
            progress_callback(1, 2, Path("/x/Music"))
            progress_callback(2, 2, Path("/x/Locked"))
            return expected

    report = ProgressDisplay().run_with_service(
        _Service(), PropagationRequest(template=Path("/t"), targets=[Path("/x/Music")])
    )

    assert report is expected
    mock_progress_instance.add_task.assert_called_once_with("Copying view settings", total=2)
    completed = [call.kwargs["completed"] for call in mock_progress_instance.update.call_args_list]
    assert completed == [1, 2]


def test_result_display_lists_each_failure() -> None:
    console = Console(file=StringIO(), width=120)

    PropagationResultDisplay(console).show_results(_report())

    text = console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert "Copied view settings to 1/2 folders; 1 failed" in text
    assert "Locked: Operation not permitted" in text


def test_quiet_result_display_still_reports_failures() -> None:
    console = Console(file=StringIO(), width=120)
    success = PropagationReport(template=Path("/t"), outcomes=(PropagationOutcome.copied(Path("/x/A")),))

    display = PropagationResultDisplay(console)
    display.show_results(success, quiet=True)
    assert console.file.getvalue() == ""  # pyright: ignore[reportAttributeAccessIssue]

    display.show_results(_report(), quiet=True)
    assert "Failed: 1" in console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
