"""Unit tests for shared token parsing helpers."""

import math

import pytest

from inid.parsing import (
    normalize_optional_string,
    parse_decimal,
    parse_integer,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_strict_boolean,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: str, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Required boolean parsing should name the option in its message."""

    with pytest.raises(
        ValueError,
        match=(
            r"`allow_duplicate_keys` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "allow_duplicate_keys")


@pytest.mark.parametrize(
    ("token", "expected"),
    [("true", True), ("TRUE", True), ("True", True), ("false", False), ("fAlSe", False)],
)
def test_parse_strict_boolean_accepts_true_false_in_any_case(
    token: str, expected: bool
) -> None:
    """Field booleans should accept only `true`/`false`, ignoring letter case."""

    assert parse_strict_boolean(token) is expected


@pytest.mark.parametrize("token", ["1", "0", "yes", "on", "t", "truth"])
def test_parse_strict_boolean_rejects_permissive_tokens(token: str) -> None:
    """Field booleans should not accept the permissive option tokens."""

    with pytest.raises(ValueError, match="invalid boolean token"):
        parse_strict_boolean(token)


def test_parse_integer_accepts_signed_base_ten() -> None:
    """Integers should parse with an optional sign and no bounds by default."""

    assert parse_integer("42") == 42
    assert parse_integer("+7") == 7
    assert parse_integer("-12") == -12
    assert parse_integer("1234567891011") == 1234567891011


@pytest.mark.parametrize("token", ["1_000", "0x10", "1.0", "4 2", "", "١٢", "12a"])
def test_parse_integer_rejects_non_decimal_literals(token: str) -> None:
    """Integers should span the whole string using ASCII digits only."""

    with pytest.raises(ValueError, match="invalid integer literal"):
        parse_integer(token)


def test_parse_integer_enforces_bounds() -> None:
    """Bounds should be inclusive on both ends."""

    assert parse_integer("65535", minimum=0, maximum=65535) == 65535
    with pytest.raises(ValueError, match="above maximum 65535"):
        parse_integer("65536", minimum=0, maximum=65535)
    with pytest.raises(ValueError, match="below minimum 0"):
        parse_integer("-1", minimum=0)


@pytest.mark.parametrize(
    ("token", "expected"),
    [("66.6", 66.6), ("1", 1.0), (".5", 0.5), ("5.", 5.0), ("-1e3", -1000.0), ("2E-2", 0.02)],
)
def test_parse_decimal_accepts_decimal_and_exponent_forms(
    token: str, expected: float
) -> None:
    """Decimals should parse plain, fractional and exponent notation."""

    assert parse_decimal(token) == expected


def test_parse_decimal_accepts_special_tokens() -> None:
    """`nan` and infinity tokens should parse case-insensitively."""

    assert math.isnan(parse_decimal("NaN"))
    assert parse_decimal("inf") == math.inf
    assert parse_decimal("-Infinity") == -math.inf


@pytest.mark.parametrize("token", ["1_0.5", "abc", "1.2.3", "e5", "0x1p3", "."])
def test_parse_decimal_rejects_invalid_literals(token: str) -> None:
    """Decimals should reject underscores, hex and other malformed text."""

    with pytest.raises(ValueError, match="invalid decimal literal"):
        parse_decimal(token)
