"""Rich console handler rendering structured TidyFinder events.

Where: platform/logging/handlers.py
What: Render ``propagation_event`` log records as compact, coloured lines.
Why: Keep per-folder progress readable when a run touches many folders.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that renders propagation events with icons and short paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "propagation.run.start": ("🚀", "cyan"),
        "propagation.run.complete": ("🏁", "green"),
        "propagation.run.cancelled": ("⏹", "yellow"),
        "propagation.target.copied": ("✅", "green"),
        "propagation.target.failed": ("⛔", "red"),
        "finder.reset.complete": ("🧹", "magenta"),
        "finder.relaunch": ("🔄", "blue"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments."""

        pure_path: PurePath = PurePosixPath(path)
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        display = pure_path.anchor
        if truncated:
            display += "…/"
        display += "/".join(parts)
        if not display:
            display = "."

        text = Text()
        for char in display:
            if char in {"/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured events; return ``None`` for plain records."""

        event = getattr(record, "propagation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("propagation.run"):
            details: list[str] = []
            if event == "propagation.run.start":
                _ = body.append("Template run start")
                total = getattr(record, "total_targets", None)
                size = getattr(record, "blob_size", None)
                if isinstance(total, int):
                    details.append(f"targets={total}")
                if isinstance(size, int):
                    details.append(f"bytes={size}")
            elif event == "propagation.run.complete":
                _ = body.append("Template run complete")
                for name in ("copied", "failed"):
                    value = getattr(record, name, None)
                    if isinstance(value, int):
                        details.append(f"{name}={value}")
                duration = getattr(record, "duration_seconds", None)
                if isinstance(duration, (int, float)):
                    details.append(f"duration={duration:.2f}s")
            else:
                _ = body.append("Template run cancelled")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
            template = getattr(record, "template", None)
            if template:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(template)))
        elif event.startswith("propagation.target"):
            sequence = getattr(record, "sequence", None)
            total = getattr(record, "total_targets", None)
            if isinstance(sequence, int) and isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            _ = body.append("Copied to " if event == "propagation.target.copied" else "Failed ")
            target = getattr(record, "target", None)
            if target:
                _ = body.append_text(self._format_path(str(target)))
            reason = getattr(record, "reason", None)
            if reason:
                _ = body.append(f" ({reason})")
        else:
            _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for structured events."""

        event_text = self._render_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
