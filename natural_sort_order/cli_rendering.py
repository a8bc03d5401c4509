"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalization warnings, and effective configuration rows.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .config import NormalizerConfig
from .errors import NaturalSortError
from .models.datatypes import NormalizationResult, NormalizationWarning


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, NaturalSortError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_result_warnings(label: str, result: NormalizationResult) -> None:
    """Print one stderr line per warning attached to a normalization result."""

    for warning in result.warnings:
        if warning is NormalizationWarning.WIDTH_EXCEEDED:
            detail = (
                f"{result.full_runs} digit run(s) reached width {result.width}; "
                "ordering is not guaranteed"
            )
        else:
            detail = f"output truncated after {result.consumed} input byte(s)"
        typer.secho(f"Warning [{label}]: {detail}.", fg=typer.colors.YELLOW, err=True)


def echo_config(config: NormalizerConfig) -> None:
    """Print effective configuration as `key: value` rows."""

    for key, value in config.as_display_rows():
        typer.echo(f"{key}: {value}")
