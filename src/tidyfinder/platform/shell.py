"""Where: src/tidyfinder/platform/shell.py
What: Run external OS commands synchronously and classify their outcome.
Why: Every Finder preference write, hidden-flag change and relaunch goes through here.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from logging import Logger
from typing import Protocol, final

from tidyfinder.config.settings import COMMAND_TIMEOUT_SECONDS
from tidyfinder.platform.logging import logger as default_logger


class CommandError(RuntimeError):
    """Base class for command execution failures."""


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], exit_code: int, output: str) -> None:
        self.command: tuple[str, ...] = tuple(command)
        self.exit_code: int = exit_code
        self.output: str = output
        detail = output.strip() or "no output"
        super().__init__(f"Command '{' '.join(self.command)}' failed with exit code {exit_code}: {detail}")


class CommandLaunchError(CommandError):
    """Raised when a command cannot be started at all."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        self.command: tuple[str, ...] = tuple(command)
        self.reason: str = reason
        super().__init__(f"Could not run '{' '.join(self.command)}': {reason}")


class CommandRunner(Protocol):
    """Anything able to run an argument vector and return trimmed stdout."""

    def execute(self, command: Sequence[str]) -> str:
        ...


def _combine_output(stdout: str, stderr: str) -> str:
    if not stderr:
        return stdout
    return f"{stdout}\nError: {stderr}"


@final
class ShellRunner:
    """Run commands with captured stdout and stderr.

    A non-zero exit status is always a failure. A zero exit status with text on
    stderr succeeds, and the stderr text is logged as a warning.
    """

    def __init__(
        self,
        *,
        timeout: float | None = COMMAND_TIMEOUT_SECONDS,
        logger: Logger | None = None,
    ) -> None:
        self._timeout = timeout
        self._logger = logger or default_logger

    def execute(self, command: Sequence[str]) -> str:
        """Run ``command`` and return its stripped standard output.

        Raises:
            CommandFailedError: The command exited non-zero or timed out.
            CommandLaunchError: The executable could not be started.
        """

        argv = [str(part) for part in command]
        if not argv:
            raise CommandLaunchError(argv, "empty command")

        self._logger.debug("Running command: %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            stdout = exc.stdout if isinstance(exc.stdout, str) else ""
            stderr = exc.stderr if isinstance(exc.stderr, str) else ""
            combined = _combine_output(stdout, stderr or f"timed out after {self._timeout}s")
            raise CommandFailedError(argv, -1, combined) from exc
        except OSError as exc:
            raise CommandLaunchError(argv, exc.strerror or str(exc)) from exc

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""

        if completed.returncode != 0:
            raise CommandFailedError(argv, completed.returncode, _combine_output(stdout, stderr))

        if stderr.strip():
            self._logger.warning("Command '%s' reported: %s", " ".join(argv), stderr.strip())

        return stdout.strip()


__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandLaunchError",
    "CommandRunner",
    "ShellRunner",
]
