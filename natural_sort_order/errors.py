"""Domain exceptions for normalization and CLI diagnostics."""

from __future__ import annotations


class NaturalSortError(RuntimeError):
    """Raised when a specific processing stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class CapacityExceededError(NaturalSortError):
    """Raised in strict mode when normalized output does not fit the output capacity."""

    def __init__(self, *, capacity: int, consumed: int, input_length: int) -> None:
        """Initialize a capacity error with the boundary that was hit."""

        super().__init__(
            stage="normalize",
            detail=(
                f"Normalized output exceeds capacity of {capacity} bytes "
                f"after consuming {consumed} of {input_length} input bytes."
            ),
            hint="Raise `output_capacity` or disable strict mode to accept truncated output.",
        )
        self.capacity = capacity
        self.consumed = consumed
        self.input_length = input_length
