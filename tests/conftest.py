"""Shared pytest fixtures for the natural sort test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from natural_sort_order.config import NormalizerConfig
from natural_sort_order.normalizer import NaturalSortNormalizer


@pytest.fixture
def normalizer() -> NaturalSortNormalizer:
    """Provide a normalizer with default limits."""

    return NaturalSortNormalizer()


@pytest.fixture
def make_normalizer() -> Callable[..., NaturalSortNormalizer]:
    """Provide a factory for normalizers with custom limits, e.g. tiny capacities."""

    def _make(**overrides: object) -> NaturalSortNormalizer:
        return NaturalSortNormalizer(NormalizerConfig(**overrides))

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove `NATURAL_SORT_*` variables so tests see default limits."""

    for key in (
        "NATURAL_SORT_DEFAULT_WIDTH",
        "NATURAL_SORT_MAX_WIDTH",
        "NATURAL_SORT_OUTPUT_CAPACITY",
        "NATURAL_SORT_STRICT",
    ):
        monkeypatch.delenv(key, raising=False)
