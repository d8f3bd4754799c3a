"""Remove per-folder view state so every folder falls back to the Finder defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path

from tidyfinder.config.settings import METADATA_FILE_NAME


@dataclass(slots=True)
class ResetReport:
    """Files removed during a reset and the ones that could not be removed."""

    root: Path
    removed: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)


def reset_folder_views(
    root: Path,
    *,
    metadata_file_name: str = METADATA_FILE_NAME,
    logger: Logger | None = None,
) -> ResetReport:
    """Delete every metadata file below ``root`` without following symlinks.

    Unreadable directories and undeletable files are recorded in the report.
    """

    log = logger or getLogger(__name__)
    report = ResetReport(root=root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    log.info("Removing all %s files below %s", metadata_file_name, root)

    def _on_walk_error(error: OSError) -> None:
        where = Path(error.filename) if error.filename else root
        report.failures.append((where, error.strerror or str(error)))

    for current, _, files in os.walk(root, onerror=_on_walk_error):
        if metadata_file_name not in files:
            continue
        candidate = Path(current) / metadata_file_name
        try:
            candidate.unlink()
        except OSError as exc:
            report.failures.append((candidate, exc.strerror or str(exc)))
            log.debug("Could not remove %s: %s", candidate, exc)
            continue
        report.removed.append(candidate)

    log.log(
        logging.INFO,
        "Reset %d folder view(s) below %s (%d failure(s))",
        len(report.removed),
        root,
        len(report.failures),
        extra={
            "propagation_event": "finder.reset.complete",
        },
    )
    return report


__all__ = ["ResetReport", "reset_folder_views"]
