"""Basic smoke tests for project wiring."""

import natural_sort_order
from natural_sort_order import NaturalSortNormalizer, NormalizerConfig, normalize


def test_normalizer_can_be_instantiated() -> None:
    """Normalizer class should be constructible with default limits."""

    normalizer = NaturalSortNormalizer()
    assert normalizer.config == NormalizerConfig()


def test_package_exports_documented_constants() -> None:
    """Top-level constants should expose the default limits."""

    assert natural_sort_order.DEFAULT_WIDTH == 75
    assert natural_sort_order.MAX_WIDTH == 150
    assert natural_sort_order.OUTPUT_CAPACITY == 10000
    assert normalize("item2") == "item" + "0" * 74 + "2"
