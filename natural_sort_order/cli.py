"""Command-line interface for natural sort normalization.

Responsibilities:
- Expose user-facing commands for normalizing and sorting values.
- Convert CLI arguments into `NormalizerConfig` and run the normalizer.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_config, echo_result_warnings, exit_with_command_error
from .config import ConfigLoader, NormalizerConfig
from .errors import NaturalSortError
from .normalizer import NaturalSortNormalizer
from .sorting import natural_sorted
from .telemetry.logger import EventLogger

app = typer.Typer(
    name="natural-sort-order",
    no_args_is_help=True,
    help="Normalize embedded numbers for natural sort ordering.",
)


def _event_logger(verbose: bool) -> EventLogger:
    """Return an event logger; without `--verbose` only errors reach stderr."""

    return EventLogger(level="DEBUG" if verbose else "ERROR")


def _load_yaml_config(config_path: Path | None, base: NormalizerConfig) -> NormalizerConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return base

    try:
        return ConfigLoader.from_yaml(config_path, base=base)
    except FileNotFoundError as exc:
        raise NaturalSortError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise NaturalSortError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise NaturalSortError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    capacity: int | None = None,
    strict: bool | None = None,
) -> NormalizerConfig:
    """Resolve effective config: CLI options > YAML file > environment > defaults."""

    try:
        env_config = ConfigLoader.from_env()
    except ValueError as exc:
        raise NaturalSortError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `NATURAL_SORT_*` environment variables.",
        ) from exc

    loaded_config = _load_yaml_config(config_file, env_config)
    resolved = NormalizerConfig(
        default_width=loaded_config.default_width,
        max_width=loaded_config.max_width,
        output_capacity=capacity if capacity is not None else loaded_config.output_capacity,
        strict=strict if strict is not None else loaded_config.strict,
    )
    try:
        resolved.validate()
    except ValueError as exc:
        raise NaturalSortError(stage="config", detail=str(exc)) from exc
    return resolved


@app.command("normalize")
def normalize_command(
    values: Annotated[
        list[str],
        typer.Argument(help="Values to normalize; one output line per value."),
    ],
    width: Annotated[
        int | None,
        typer.Option(
            "--width",
            "-w",
            help="Numeric width. Out-of-range values fall back to the default width.",
        ),
    ] = None,
    capacity: Annotated[
        int | None,
        typer.Option("--capacity", help="Output capacity in bytes (overrides config)."),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Fail instead of truncating when output exceeds capacity.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with normalizer limits."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Also emit structured event log lines."),
    ] = False,
) -> None:
    """Print each value with its numbers zero-padded to a fixed width."""

    try:
        config = _resolve_command_config(config_file, capacity=capacity, strict=strict)
        normalizer = NaturalSortNormalizer(config, run_logger=_event_logger(verbose))
        results = [normalizer.normalize(value, width) for value in values]
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    for value, result in zip(values, results):
        echo_result_warnings(value, result)
        typer.echo(result.text())


@app.command("sort")
def sort_command(
    input_file: Annotated[
        Path | None,
        typer.Argument(help="Text file with one value per line. Reads stdin when omitted."),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Numeric width used for comparison."),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Sort in descending natural order."),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with normalizer limits."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Also emit structured event log lines."),
    ] = False,
) -> None:
    """Print input lines in natural sort order."""

    try:
        config = _resolve_command_config(config_file)
        if input_file is None:
            lines = typer.get_text_stream("stdin").read().splitlines()
        else:
            try:
                lines = input_file.read_text(encoding="utf-8").splitlines()
            except OSError as exc:
                raise NaturalSortError(
                    stage="input",
                    detail=f"Failed to read input file `{input_file}`: {exc}",
                    hint="Verify the input file exists and is readable.",
                ) from exc
        normalizer = NaturalSortNormalizer(config, run_logger=_event_logger(verbose))
        ordered = natural_sorted(lines, width, reverse=reverse, normalizer=normalizer)
    except Exception as exc:
        exit_with_command_error("sort", exc)

    for line in ordered:
        typer.echo(line)


@app.command("config")
def config_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with normalizer limits."),
    ] = None,
) -> None:
    """Print the effective normalizer configuration."""

    try:
        config = _resolve_command_config(config_file)
    except Exception as exc:
        exit_with_command_error("config", exc)

    echo_config(config)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
