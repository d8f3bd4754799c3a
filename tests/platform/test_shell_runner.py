"""Tests for the synchronous command runner."""

from __future__ import annotations

import logging
import subprocess

import pytest
from pytest_mock import MockerFixture

from tidyfinder.platform.shell import (
    CommandFailedError,
    CommandLaunchError,
    ShellRunner,
)


@pytest.fixture
def runner() -> ShellRunner:
    return ShellRunner(timeout=10, logger=logging.getLogger("tests.shell"))


def test_returns_trimmed_stdout(runner: ShellRunner) -> None:
    assert runner.execute(["sh", "-c", "printf '  Nlsv\\n\\n'"]) == "Nlsv"


def test_non_zero_exit_combines_stdout_and_stderr(runner: ShellRunner) -> None:
    with pytest.raises(CommandFailedError) as excinfo:
        _ = runner.execute(["sh", "-c", "echo partial; echo broken >&2; exit 3"])

    error = excinfo.value
    assert error.exit_code == 3
    assert error.output == "partial\n\nError: broken\n"
    assert "exit code 3" in str(error)


def test_stderr_with_zero_exit_is_a_warning(
    runner: ShellRunner, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="tests.shell")

    assert runner.execute(["sh", "-c", "echo ok; echo careful >&2"]) == "ok"
    assert any("careful" in record.getMessage() for record in caplog.records)


def test_missing_executable_is_a_launch_error(runner: ShellRunner) -> None:
    with pytest.raises(CommandLaunchError):
        _ = runner.execute(["tidyfinder-definitely-not-installed"])


def test_empty_command_is_rejected(runner: ShellRunner) -> None:
    with pytest.raises(CommandLaunchError):
        _ = runner.execute([])


def test_timeout_is_reported_as_failure(mocker: MockerFixture, runner: ShellRunner) -> None:
    _ = mocker.patch(
        "tidyfinder.platform.shell.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd=["sleep", "60"], timeout=10),
    )

    with pytest.raises(CommandFailedError) as excinfo:
        _ = runner.execute(["sleep", "60"])

    assert excinfo.value.exit_code == -1
    assert "timed out" in excinfo.value.output


def test_arguments_are_passed_without_a_shell(mocker: MockerFixture, runner: ShellRunner) -> None:
    run = mocker.patch(
        "tidyfinder.platform.shell.subprocess.run",
        return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout="1\n", stderr=""),
    )

    assert runner.execute(["defaults", "read", "com.apple.finder", "ShowPathbar"]) == "1"
    args, kwargs = run.call_args
    assert args[0] == ["defaults", "read", "com.apple.finder", "ShowPathbar"]
    assert kwargs["capture_output"] is True
    assert kwargs["check"] is False
    assert "shell" not in kwargs
