"""Preference store backed by the macOS ``defaults`` command."""

from __future__ import annotations

from logging import Logger, getLogger
from typing import final

from tidyfinder.config.settings import DEFAULTS_COMMAND
from tidyfinder.platform.shell import CommandFailedError, CommandRunner, ShellRunner

from ..usecases.ports import PreferenceStore


@final
class DefaultsPreferenceStore(PreferenceStore):
    """Read and write user defaults one key at a time."""

    def __init__(self, runner: CommandRunner | None = None, *, logger: Logger | None = None) -> None:
        self._runner = runner or ShellRunner()
        self._logger = logger or getLogger(__name__)

    def read(self, domain: str, key: str) -> str | None:
        try:
            return self._runner.execute([DEFAULTS_COMMAND, "read", domain, key])
        except CommandFailedError as exc:
            # ``defaults read`` exits non-zero when the key has never been set.
            self._logger.debug("No value for %s %s (exit %s)", domain, key, exc.exit_code)
            return None

    def write_string(self, domain: str, key: str, value: str) -> None:
        _ = self._runner.execute([DEFAULTS_COMMAND, "write", domain, key, "-string", value])

    def write_bool(self, domain: str, key: str, value: bool) -> None:
        _ = self._runner.execute(
            [DEFAULTS_COMMAND, "write", domain, key, "-bool", "true" if value else "false"]
        )


__all__ = ["DefaultsPreferenceStore"]
