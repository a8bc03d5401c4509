"""Core datatypes returned by the normalizer.

Responsibilities:
- Represent the outcome of one normalization call as an immutable record.
- Make non-fatal anomalies observable without raising.

Key types:
- `NormalizationWarning`, `NormalizationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NormalizationWarning(str, Enum):
    """Non-fatal anomalies detected while normalizing one value."""

    WIDTH_EXCEEDED = "width_exceeded"
    CAPACITY_EXCEEDED = "capacity_exceeded"


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Normalized output and diagnostics for one input value.

    Attributes:
        value: Normalized bytes.
        width: Effective numeric width after clamping.
        warnings: Distinct warnings in first-occurrence order.
        full_runs: Number of digit runs that filled the whole `width`.
        split_runs: Number of times an input run was longer than `width` and was split.
        consumed: Number of input bytes processed before the scan stopped.
    """

    value: bytes
    width: int
    warnings: tuple[NormalizationWarning, ...] = ()
    full_runs: int = 0
    split_runs: int = 0
    consumed: int = 0

    @property
    def truncated(self) -> bool:
        """Return whether output was cut at the capacity boundary."""

        return NormalizationWarning.CAPACITY_EXCEEDED in self.warnings

    @property
    def width_exceeded(self) -> bool:
        """Return whether any digit run filled or exceeded `width`."""

        return NormalizationWarning.WIDTH_EXCEEDED in self.warnings

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the normalized value.

        Truncation can cut a multi-byte character in half; such trailing
        fragments are dropped.
        """

        return self.value.decode(encoding, errors="ignore")
