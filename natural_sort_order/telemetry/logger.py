"""Event lines for normalization anomalies.

Responsibilities:
- Emit one `[natural-sort]` line per width clamp, full run, or truncation.
- Route all output through a single `loguru` sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


_SAFE_PUNCTUATION = frozenset("-_.:/")


def _context_token(value: object) -> str:
    """Render one context value as a single whitespace-free token.

    Requested widths come from user input, so anything outside alphanumerics and
    `-_.:/` becomes `_`; a blank value renders as `none`.
    """

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
        for character in raw
    )


def _context_suffix(context: dict[str, object]) -> str:
    """Return ` key=value ...` for an event line, keys sorted, or `""` without context."""

    pairs = " ".join(f"{key}={_context_token(context[key])}" for key in sorted(context))
    return f" {pairs}" if pairs else ""


class EventLogger:
    """Emit deterministic event lines for width and capacity anomalies."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route every event to `sink` (stderr by default), dropping those below `level`."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Format and log one event line at `level`."""

        line = f"[natural-sort] level={level} event={event}{_context_suffix(context)}"
        _loguru_logger.log(level, line)

    def log_width_clamped(self, requested: object, resolved: int) -> None:
        """Emit a debug event when a requested width falls back to the default."""

        self._emit("DEBUG", "width_clamped", requested=requested, resolved=resolved)

    def log_width_exceeded(self, offset: int, width: int) -> None:
        """Emit a warning for a digit run, starting at `offset`, that filled the width."""

        self._emit("WARNING", "width_exceeded", offset=offset, width=width)

    def log_capacity_exceeded(self, capacity: int, consumed: int, input_length: int) -> None:
        """Emit a warning when output was truncated at the capacity boundary."""

        self._emit(
            "WARNING",
            "capacity_exceeded",
            capacity=capacity,
            consumed=consumed,
            input_length=input_length,
        )
