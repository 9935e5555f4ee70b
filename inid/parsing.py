"""Shared token parsing helpers for field values and option values.

Field values use the strict parsers (`parse_integer`, `parse_decimal`,
`parse_strict_boolean`). Environment options use the permissive boolean
parser, which also accepts `1`/`0`, `yes`/`no` and `on`/`off`.
"""

from __future__ import annotations

import re


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_STRICT_BOOLEAN_TOKENS = {"true": True, "false": False}
_SPECIAL_FLOAT_TOKENS = frozenset(
    {"nan", "+nan", "-nan", "inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"}
)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required option boolean value from accepted textual tokens.

    Args:
        value: Text value to parse.
        field_name: Option name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_strict_boolean(value: str) -> bool:
    """Parse `true` or `false` (any letter case) into a boolean.

    Raises:
        ValueError: For every other token, including `1`/`0` and `yes`/`no`.
    """

    try:
        return _STRICT_BOOLEAN_TOKENS[value.lower()]
    except KeyError:
        raise ValueError(f"invalid boolean token: {value!r}") from None


def parse_integer(
    value: str,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Parse a base-10 integer that spans the whole string, with optional bounds.

    Unlike `int()`, underscores, inner whitespace and non-ASCII digits are
    rejected.

    Raises:
        ValueError: If the text is not an integer or falls outside the bounds.
    """

    if _INTEGER_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid integer literal: {value!r}")
    parsed = int(value)
    if minimum is not None and parsed < minimum:
        raise ValueError(f"integer {parsed} is below minimum {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"integer {parsed} is above maximum {maximum}")
    return parsed


def parse_decimal(value: str) -> float:
    """Parse decimal or exponent notation, plus `nan`/`inf`/`infinity` tokens."""

    if value.lower() in _SPECIAL_FLOAT_TOKENS:
        return float(value)
    if _DECIMAL_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid decimal literal: {value!r}")
    return float(value)
