"""Natural sort helpers built on the normalizer.

Sorts values the way people expect: "item2" before "item10". Each value is
normalized once and the normalized form is compared byte-wise, which is the
same ordering a database gets from `ORDER BY natural_sort_order(column, 75)`.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from .normalizer import NaturalSortNormalizer

_Sortable = TypeVar("_Sortable", str, bytes)


def natural_sort_key(
    value: str | bytes,
    width: int | None = None,
    *,
    normalizer: NaturalSortNormalizer | None = None,
) -> bytes:
    """Build a key for natural sorting of one value.

    The key is always the normalized bytes, so text and byte values produce
    comparable keys.

    Raises:
        TypeError: When `value` is `None`; use `natural_sorted` for nullable values.
    """

    if value is None:
        raise TypeError("natural_sort_key() requires a str or bytes value, got `None`.")
    resolved = normalizer if normalizer is not None else NaturalSortNormalizer()
    return resolved.normalize(value, width).value


def natural_sorted(
    values: Iterable[_Sortable | None],
    width: int | None = None,
    *,
    reverse: bool = False,
    normalizer: NaturalSortNormalizer | None = None,
) -> list[_Sortable | None]:
    """Return `values` sorted in natural order.

    `None` entries sort before every other value (after them when `reverse`).
    The sort is stable.
    """

    resolved = normalizer if normalizer is not None else NaturalSortNormalizer()

    def _key(value: _Sortable | None) -> tuple[int, bytes]:
        if value is None:
            return (0, b"")
        return (1, natural_sort_key(value, width, normalizer=resolved))

    return sorted(values, key=_key, reverse=reverse)
