"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from natural_sort_order.cli_rendering import (
    echo_config,
    echo_result_warnings,
    exit_with_command_error,
)
from natural_sort_order.config import NormalizerConfig
from natural_sort_order.errors import CapacityExceededError, NaturalSortError
from natural_sort_order.models.datatypes import NormalizationResult, NormalizationWarning


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = NaturalSortError(
        stage="config",
        detail="Config file not found: `missing.yaml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("normalize", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "normalize failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_capacity_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Capacity errors should render as `normalize` stage failures."""

    with pytest.raises(typer.Exit):
        exit_with_command_error(
            "normalize", CapacityExceededError(capacity=8, consumed=6, input_length=9)
        )

    captured = capsys.readouterr()
    assert "normalize failed at stage `normalize`" in captured.err
    assert "exceeds capacity of 8 bytes after consuming 6 of 9 input bytes" in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("sort", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "sort failed: unexpected failure" in captured.err


def test_echo_result_warnings_prints_one_line_per_warning(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Each warning on a result should produce one stderr line."""

    result = NormalizationResult(
        value=b"1234",
        width=2,
        warnings=(
            NormalizationWarning.WIDTH_EXCEEDED,
            NormalizationWarning.CAPACITY_EXCEEDED,
        ),
        full_runs=2,
        split_runs=1,
        consumed=5,
    )

    echo_result_warnings("12345678", result)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "Warning [12345678]: 2 digit run(s) reached width 2; "
        "ordering is not guaranteed.",
        "Warning [12345678]: output truncated after 5 input byte(s).",
    ]


def test_echo_config_prints_rows(capsys: pytest.CaptureFixture[str]) -> None:
    """Config rows should print as `key: value` lines."""

    echo_config(NormalizerConfig(strict=True))

    assert capsys.readouterr().out.splitlines() == [
        "default_width: 75",
        "max_width: 150",
        "output_capacity: 10000",
        "strict: true",
    ]
