"""Unit tests for structured event logging."""

from __future__ import annotations

import io

from natural_sort_order.telemetry.logger import EventLogger


def test_event_logger_formats_sorted_context() -> None:
    """Event lines should list context keys in sorted order."""

    sink = io.StringIO()
    logger = EventLogger(sink=sink)

    logger.log_capacity_exceeded(capacity=10, consumed=4, input_length=12)

    assert sink.getvalue().splitlines() == [
        "[natural-sort] level=WARNING event=capacity_exceeded "
        "capacity=10 consumed=4 input_length=12"
    ]


def test_event_logger_respects_level_and_sanitizes_values() -> None:
    """Debug events should be filtered at INFO and context values made shell-safe."""

    quiet_sink = io.StringIO()
    EventLogger(sink=quiet_sink).log_width_clamped("9 9", 75)
    assert quiet_sink.getvalue() == ""

    verbose_sink = io.StringIO()
    EventLogger(sink=verbose_sink, level="DEBUG").log_width_clamped("9 9", 75)
    assert verbose_sink.getvalue().splitlines() == [
        "[natural-sort] level=DEBUG event=width_clamped requested=9_9 resolved=75"
    ]


def test_event_logger_width_exceeded_line() -> None:
    """Width warnings should include the offset of the split."""

    sink = io.StringIO()
    EventLogger(sink=sink).log_width_exceeded(offset=7, width=3)

    assert sink.getvalue().splitlines() == [
        "[natural-sort] level=WARNING event=width_exceeded offset=7 width=3"
    ]
