"""Structured run logging utilities.

Responsibilities:
- Emit one deterministic `[phase]` line per pagination event through `loguru`.
- Attach the raw stage, event, and context to each record as `loguru` extras.
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO, Union

from loguru import logger as _loguru_logger

LogSink = Union[TextIO, Callable[[str], None]]

_TOKEN_PUNCTUATION = frozenset("-_.:/")


def _token(value: object) -> str:
    """Render a context value as a single shell-safe token."""

    text = str(value).strip()
    if not text:
        return "none"
    return "".join(
        character if character.isalnum() or character in _TOKEN_PUNCTUATION else "_"
        for character in text
    )


def _render_line(level: str, stage: str, event: str, context: dict[str, object]) -> str:
    """Build the `[phase]` line with context keys in sorted order."""

    fields = [f"level={level}", f"stage={stage}", f"event={event}"]
    fields.extend(f"{key}={_token(context[key])}" for key in sorted(context))
    return "[phase] " + " ".join(fields)


class RunLogger:
    """Emit deterministic phase logs for CLI-observable pagination activity.

    Constructing a logger replaces every `loguru` handler with a single sink, so
    the most recently built `RunLogger` owns the output.
    """

    def __init__(self, sink: LogSink | None = None, level: str = "INFO") -> None:
        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = _render_line(level, stage, event, context)
        _loguru_logger.bind(stage=stage, event=event, **context).log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event carrying only the exception type name."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_event(self, stage: str, event: str, level: str = "DEBUG", **context: object) -> None:
        """Emit a free-form stage event, `DEBUG` level by default."""

        self._emit(level, event, stage, **context)
