"""Value parsing helpers shared by the YAML and environment config loaders.

YAML scalars arrive typed, environment values arrive as text; both pass
through these helpers so a limit reads the same from either source.
"""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as trimmed text, or `None` when nothing is left.

    An unset environment variable, a YAML null and a whitespace-only string
    all mean "not configured".
    """

    text = "" if value is None else str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Read a `strict`-style flag from a bool or an on/off token; `None` when unrecognized."""

    if isinstance(value, bool):
        return value

    token = normalize_optional_string(value)
    if token is None:
        return None
    lowered = token.lower()
    if lowered in _TRUE_BOOLEAN_TOKENS:
        return True
    if lowered in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_positive_int(value: object) -> int | None:
    """Parse a strictly positive integer token and return `None` for invalid values.

    Booleans are rejected even though they are `int` subclasses, so that a YAML
    `true` never turns into a width of `1`.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None
    try:
        parsed = int(normalized)
    except ValueError:
        return None
    return parsed if parsed > 0 else None
