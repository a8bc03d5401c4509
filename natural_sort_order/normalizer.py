"""Natural sort normalization of embedded numeric runs.

Responsibilities:
- Rewrite every maximal run of ASCII digits into a zero-padded run of a fixed
  width, so byte-wise comparison of outputs follows natural ordering.
- Copy all other bytes verbatim and never write past the output capacity.
- Report width and capacity anomalies on the result instead of failing.

Key public API:
- `NaturalSortNormalizer`: configured normalizer returning `NormalizationResult`.
- `normalize`: convenience wrapper returning a value of the input's type.
- `pad_run`: the padding rule for one digit run.
"""

from __future__ import annotations

from .buffer import BoundedBuffer
from .config import NormalizerConfig
from .errors import CapacityExceededError
from .models.datatypes import NormalizationResult, NormalizationWarning
from .telemetry.logger import EventLogger

_DIGITS = frozenset(b"0123456789")
_ZERO = b"0"


def pad_run(run: bytes | bytearray, width: int) -> bytes:
    """Left-pad a digit run with `0` bytes up to `width`.

    Runs already `width` long or longer are returned unchanged.
    """

    zeros = width - len(run)
    if zeros <= 0:
        return bytes(run)
    return _ZERO * zeros + bytes(run)


class NaturalSortNormalizer:
    """Normalize byte or text values for natural sort ordering."""

    def __init__(
        self,
        config: NormalizerConfig | None = None,
        run_logger: EventLogger | None = None,
    ) -> None:
        """Validate limits and keep an optional event logger for anomalies."""

        resolved = config if config is not None else NormalizerConfig()
        resolved.validate()
        self._config = resolved
        self._run_logger = run_logger

    @property
    def config(self) -> NormalizerConfig:
        """Return the limits used by this normalizer."""

        return self._config

    def normalize(
        self,
        value: bytes | bytearray | memoryview | str | None,
        width: int | None = None,
    ) -> NormalizationResult | None:
        """Normalize one value.

        Args:
            value: Input bytes, or text encoded as UTF-8. `None` propagates.
            width: Requested numeric width. Values outside `1..max_width`
                fall back to `default_width`.

        Returns:
            The normalization result, or `None` for `None` input.

        Raises:
            CapacityExceededError: In strict mode, when output would be truncated.
            TypeError: When `value` is neither bytes-like nor text.
        """

        if value is None:
            return None

        data = self._coerce_input(value)
        resolved_width = self._config.resolve_width(width)
        if width is not None and resolved_width != width and self._run_logger is not None:
            self._run_logger.log_width_clamped(width, resolved_width)

        return self._scan(data, resolved_width)

    def _scan(self, data: bytes, width: int) -> NormalizationResult:
        """Run the single-pass scan over `data` with an already resolved width."""

        output = BoundedBuffer(self._config.output_capacity)
        run = bytearray()
        run_start = 0
        warnings: list[NormalizationWarning] = []
        full_runs = 0
        split_runs = 0
        consumed = 0

        for offset, byte in enumerate(data):
            if output.is_full:
                break
            if byte in _DIGITS and len(run) < width:
                if not run:
                    run_start = offset
                run.append(byte)
            elif run:
                if len(run) >= width:
                    full_runs += 1
                    self._flag_full_run(warnings, run_start, width)
                if not output.extend(pad_run(run, width)):
                    break
                run.clear()
                if byte in _DIGITS:
                    # Run is longer than width: the excess starts a fresh run.
                    split_runs += 1
                    run_start = offset
                    run.append(byte)
                elif not output.append(byte):
                    break
            elif not output.append(byte):
                break
            consumed = offset + 1
        else:
            if run:
                if len(run) >= width:
                    full_runs += 1
                    self._flag_full_run(warnings, run_start, width)
                output.extend(pad_run(run, width))

        if output.overflowed or consumed < len(data):
            self._record(warnings, NormalizationWarning.CAPACITY_EXCEEDED)
            if self._run_logger is not None:
                self._run_logger.log_capacity_exceeded(
                    self._config.output_capacity, consumed, len(data)
                )
            if self._config.strict:
                raise CapacityExceededError(
                    capacity=self._config.output_capacity,
                    consumed=consumed,
                    input_length=len(data),
                )

        return NormalizationResult(
            value=output.getvalue(),
            width=width,
            warnings=tuple(warnings),
            full_runs=full_runs,
            split_runs=split_runs,
            consumed=consumed,
        )

    def _flag_full_run(
        self, warnings: list[NormalizationWarning], run_start: int, width: int
    ) -> None:
        """Flag a run that filled the whole width; it may order wrongly against longer runs."""

        self._record(warnings, NormalizationWarning.WIDTH_EXCEEDED)
        if self._run_logger is not None:
            self._run_logger.log_width_exceeded(run_start, width)

    @staticmethod
    def _record(warnings: list[NormalizationWarning], warning: NormalizationWarning) -> None:
        """Append a warning once, keeping first-occurrence order."""

        if warning not in warnings:
            warnings.append(warning)

    @staticmethod
    def _coerce_input(value: bytes | bytearray | memoryview | str) -> bytes:
        """Return the input as immutable bytes."""

        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(
            f"Expected bytes or str input, got `{type(value).__name__}`."
        )


def normalize(
    value: bytes | bytearray | memoryview | str | None,
    width: int | None = None,
    *,
    config: NormalizerConfig | None = None,
) -> bytes | str | None:
    """Normalize `value` and return it as the same kind of value.

    Text input returns text, bytes-like input returns `bytes`, `None` returns `None`.
    Warnings are discarded; use `NaturalSortNormalizer` to inspect them.
    """

    result = NaturalSortNormalizer(config).normalize(value, width)
    if result is None:
        return None
    if isinstance(value, str):
        return result.text()
    return result.value
