"""Top-level package for inid.

inid parses INI documents into records whose shape is declared up front,
either as a `ConfigSchema` or as a dataclass of section dataclasses. The main
entry points are `parse_config`, `parse_config_file` and `ConfigParser`.
"""

from loguru import logger

from .config import OptionsLoader, ParserOptions
from .errors import (
    ConfigParseError,
    ConfigReadError,
    DuplicateFieldError,
    EmptySectionError,
    ExpectedSectionHeaderError,
    FieldCountMismatchError,
    FieldTypeMismatchError,
    MalformedFieldError,
    MissingFieldError,
    MissingSectionError,
    SchemaError,
    UnexpectedSectionError,
)
from .models import (
    ConfigSchema,
    FieldKind,
    FieldSpec,
    Int8,
    Int16,
    Int32,
    Int64,
    SectionSchema,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    ini_field,
    schema_from_dataclass,
)
from .parser import ConfigParser, parse_config, parse_config_file
from .writer import render_config, write_config_file

logger.disable("inid")

__all__ = [
    "ConfigParseError",
    "ConfigParser",
    "ConfigReadError",
    "ConfigSchema",
    "DuplicateFieldError",
    "EmptySectionError",
    "ExpectedSectionHeaderError",
    "FieldCountMismatchError",
    "FieldKind",
    "FieldSpec",
    "FieldTypeMismatchError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MalformedFieldError",
    "MissingFieldError",
    "MissingSectionError",
    "OptionsLoader",
    "ParserOptions",
    "SchemaError",
    "SectionSchema",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnexpectedSectionError",
    "__version__",
    "ini_field",
    "parse_config",
    "parse_config_file",
    "render_config",
    "schema_from_dataclass",
    "write_config_file",
]

__version__ = "0.1.0"
