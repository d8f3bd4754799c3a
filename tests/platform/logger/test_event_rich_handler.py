"""Tests for the ``EventRichHandler`` structured event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from tidyfinder.platform.logging import EventRichHandler, setup_logger


def _make_handler() -> EventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return EventRichHandler(console=console)


def _build_record(msg: str = "", *args: object, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tidyfinder",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_copied_target_shows_sequence_and_short_path() -> None:
    handler = _make_handler()
    record = _build_record(
        propagation_event="propagation.target.copied",
        target="/Users/someone/Documents/Projects/Client/Invoices",
        sequence=2,
        total_targets=5,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "✅ [2/5] Copied to /…/Projects/Client/Invoices"


def test_failed_target_includes_reason() -> None:
    handler = _make_handler()
    record = _build_record(
        propagation_event="propagation.target.failed",
        target="/tmp/Gone",
        sequence=1,
        total_targets=1,
        reason="Target folder does not exist: /tmp/Gone",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert plain.startswith("⛔ [1/1] Failed /tmp/Gone")
    assert plain.endswith("(Target folder does not exist: /tmp/Gone)")


def test_run_complete_lists_counts() -> None:
    handler = _make_handler()
    record = _build_record(
        propagation_event="propagation.run.complete",
        template="/Users/someone/Template",
        copied=4,
        failed=1,
        duration_seconds=0.25,
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Template run complete [copied=4, failed=1, duration=0.25s]" in plain
    assert plain.endswith("@ /Users/someone/Template")


def test_other_events_fall_back_to_message() -> None:
    handler = _make_handler()
    record = _build_record("Finder relaunched", propagation_event="finder.relaunch")

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert plain == "🔄 Finder relaunched"


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record("hello %s", "world")

    rendered = handler.render_message(record, record.getMessage())

    assert isinstance(rendered, Text)
    assert rendered.plain == "hello world"


def test_setup_logger_adds_rotating_file_handler(tmp_path) -> None:
    log_file = tmp_path / "logs" / "tidyfinder.log"

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
    try:
        kinds = [type(handler).__name__ for handler in logger.handlers]
        assert kinds == ["EventRichHandler", "RotatingFileHandler"]
        assert logger.handlers[0].level == logging.WARNING
        assert log_file.parent.is_dir()
    finally:
        _ = setup_logger()
