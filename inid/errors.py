"""Domain exceptions for config parsing and schema declaration diagnostics.

Every parse failure aborts the whole parse and surfaces as one subclass of
`ConfigParseError`. Each subclass carries a stable `code` used by the CLI and
by log events.
"""

from __future__ import annotations


class SchemaError(TypeError):
    """Raised when a schema declaration cannot describe an INI document."""


class ConfigParseError(ValueError):
    """Base class for structural and conversion failures during one parse."""

    code = "parse_error"

    def __init__(
        self,
        *,
        detail: str,
        section: str | None = None,
        field: str | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize a parse error with optional section/field/line context."""

        super().__init__(detail)
        self.detail = detail
        self.section = section
        self.field = field
        self.line = line


class MissingSectionError(ConfigParseError):
    """Input ended while a declared section was still expected."""

    code = "missing_section"


class ExpectedSectionHeaderError(ConfigParseError):
    """A line in header position is not a bracketed section header."""

    code = "expected_category"


class UnexpectedSectionError(ConfigParseError):
    """A section header names a different section than the one declared."""

    code = "unexpected_category"


class EmptySectionError(ConfigParseError):
    """A section header is followed directly by another header or the end."""

    code = "empty_category"


class FieldCountMismatchError(ConfigParseError):
    """A section body line count differs from its declared field count."""

    code = "field_count"


class MalformedFieldError(ConfigParseError):
    """A body line is not a single `key = value` pair."""

    code = "malformed_field"


class DuplicateFieldError(ConfigParseError):
    """A key appears more than once inside one section."""

    code = "duplicate_field"


class MissingFieldError(ConfigParseError):
    """A declared field has no matching key in its section."""

    code = "missing_field"


class FieldTypeMismatchError(ConfigParseError):
    """A value cannot be converted to its field's declared kind."""

    code = "field_type"


class ConfigReadError(ConfigParseError):
    """The config file could not be read or decoded."""

    code = "io_failure"

    def __init__(self, *, detail: str, path: str) -> None:
        """Initialize a read error for the given file path."""

        super().__init__(detail=detail)
        self.path = path


class SchemaReferenceError(ValueError):
    """Raised when a `module:attribute` schema reference cannot be resolved."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        """Initialize a reference error with an optional remediation hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint
