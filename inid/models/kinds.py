"""Scalar field kinds and their text conversions.

Key types:
- `FieldKind`: type tag carried by every field descriptor.
- `UInt`, `UInt8`..`UInt64`, `Int8`..`Int64`: `typing.Annotated` aliases used
  by dataclass schemas to declare fixed-width integer kinds.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from ..parsing import parse_decimal, parse_integer, parse_strict_boolean


class FieldKind(str, Enum):
    """Scalar kinds a field value can be converted to."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"

    @property
    def is_integer(self) -> bool:
        """Return whether values of this kind are integers."""

        return self in _INTEGER_BOUNDS

    @property
    def bounds(self) -> tuple[int | None, int | None]:
        """Return inclusive `(minimum, maximum)` bounds for integer kinds."""

        return _INTEGER_BOUNDS.get(self, (None, None))


def _signed(bits: int) -> tuple[int, int]:
    return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


def _unsigned(bits: int) -> tuple[int, int]:
    return 0, 2**bits - 1


_INTEGER_BOUNDS: dict[FieldKind, tuple[int | None, int | None]] = {
    FieldKind.INT: (None, None),
    FieldKind.INT8: _signed(8),
    FieldKind.INT16: _signed(16),
    FieldKind.INT32: _signed(32),
    FieldKind.INT64: _signed(64),
    FieldKind.UINT: (0, None),
    FieldKind.UINT8: _unsigned(8),
    FieldKind.UINT16: _unsigned(16),
    FieldKind.UINT32: _unsigned(32),
    FieldKind.UINT64: _unsigned(64),
}

Int8 = Annotated[int, FieldKind.INT8]
Int16 = Annotated[int, FieldKind.INT16]
Int32 = Annotated[int, FieldKind.INT32]
Int64 = Annotated[int, FieldKind.INT64]
UInt = Annotated[int, FieldKind.UINT]
UInt8 = Annotated[int, FieldKind.UINT8]
UInt16 = Annotated[int, FieldKind.UINT16]
UInt32 = Annotated[int, FieldKind.UINT32]
UInt64 = Annotated[int, FieldKind.UINT64]


def convert_scalar(raw: str, kind: FieldKind) -> object:
    """Convert one trimmed raw value into the Python value for `kind`.

    Raises:
        ValueError: If the text is not a valid literal for the kind.
    """

    if kind.is_integer:
        minimum, maximum = kind.bounds
        return parse_integer(raw, minimum=minimum, maximum=maximum)
    if kind is FieldKind.FLOAT:
        return parse_decimal(raw)
    if kind is FieldKind.BOOL:
        return parse_strict_boolean(raw)
    return raw


def format_scalar(value: object, kind: FieldKind) -> str:
    """Render a Python value as the raw text `convert_scalar` reads back.

    Raises:
        ValueError: If the value cannot be represented on one field line.
    """

    if kind is FieldKind.BOOL:
        if not isinstance(value, bool):
            raise ValueError(f"expected a bool, got {type(value).__name__}")
        return "true" if value else "false"
    if kind.is_integer:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected an int, got {type(value).__name__}")
        minimum, maximum = kind.bounds
        if (minimum is not None and value < minimum) or (
            maximum is not None and value > maximum
        ):
            raise ValueError(f"integer {value} does not fit kind `{kind.value}`")
        return str(value)
    if kind is FieldKind.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a float, got {type(value).__name__}")
        try:
            return repr(float(value))
        except OverflowError as exc:
            raise ValueError("integer is too large to write as a float") from exc

    if not isinstance(value, str):
        raise ValueError(f"expected a str, got {type(value).__name__}")
    if not value or value != value.strip():
        raise ValueError("string values must be non-empty without surrounding whitespace")
    if "=" in value or "\n" in value or "\r" in value:
        raise ValueError("string values must not contain `=` or line breaks")
    return value
