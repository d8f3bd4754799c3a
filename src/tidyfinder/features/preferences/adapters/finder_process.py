"""Relaunch the Finder process so preference changes take effect."""

from __future__ import annotations

import logging
from logging import Logger, getLogger
from typing import final

from tidyfinder.config.settings import FINDER_PROCESS_NAME, KILLALL_COMMAND
from tidyfinder.platform.shell import CommandRunner, ShellRunner

from ..usecases.ports import FinderProcess


@final
class FinderController(FinderProcess):
    """Restart Finder with ``killall``; launchd brings it straight back."""

    def __init__(self, runner: CommandRunner | None = None, *, logger: Logger | None = None) -> None:
        self._runner = runner or ShellRunner()
        self._logger = logger or getLogger(__name__)

    def relaunch(self) -> None:
        _ = self._runner.execute([KILLALL_COMMAND, FINDER_PROCESS_NAME])
        self._logger.log(
            logging.INFO,
            "Finder relaunched",
            extra={"propagation_event": "finder.relaunch"},
        )


__all__ = ["FinderController"]
