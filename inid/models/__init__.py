"""Schema model package exports."""

from .kinds import (
    FieldKind,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    convert_scalar,
    format_scalar,
)
from .schema import (
    ConfigSchema,
    FieldSpec,
    SectionSchema,
    ini_field,
    resolve_schema,
    schema_from_dataclass,
)

__all__ = [
    "ConfigSchema",
    "FieldKind",
    "FieldSpec",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "SectionSchema",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "convert_scalar",
    "format_scalar",
    "ini_field",
    "resolve_schema",
    "schema_from_dataclass",
]
