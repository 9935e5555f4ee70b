"""Structural parser that turns INI text into a typed config record.

Responsibilities:
- Walk the declared sections in order against the significant lines.
- Validate each section header and delimit its body.
- Delegate bodies to the field extractor and assemble the result record.

Key types:
- `ConfigParser`: reusable parser bound to one schema and its options.

Key public functions:
- `parse_config`: parse text against a schema.
- `parse_config_file`: read a file and parse it against a schema.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .config import ParserOptions
from .errors import (
    ConfigParseError,
    ConfigReadError,
    EmptySectionError,
    ExpectedSectionHeaderError,
    MissingSectionError,
    UnexpectedSectionError,
)
from .extractor import extract_section
from .models.schema import ConfigSchema, resolve_schema
from .telemetry.logger import ParseLogger
from .text.lines import (
    find_next_header,
    is_section_header,
    section_header_name,
    significant_lines,
)


class ConfigParser:
    """Parse INI documents into records shaped by one schema.

    Instances hold only the resolved schema and options, so a parser may be
    shared and reused; every call builds a fresh record.
    """

    def __init__(
        self,
        schema: ConfigSchema | type,
        options: ParserOptions | None = None,
    ) -> None:
        """Resolve the schema and validate options once."""

        self._schema = resolve_schema(schema)
        self._options = options if options is not None else ParserOptions()
        self._options.validate()

    @property
    def schema(self) -> ConfigSchema:
        """Return the schema this parser validates against."""

        return self._schema

    @property
    def options(self) -> ParserOptions:
        """Return the options this parser was built with."""

        return self._options

    def parse(self, text: str, *, source: str = "<string>") -> Any:
        """Parse `text` and return the populated config record.

        Raises:
            ConfigParseError: On the first structural or conversion failure.
        """

        run_logger = ParseLogger(source)
        try:
            lines = significant_lines(text)
            run_logger.log_parse_start(len(lines), len(self._schema.sections))
            record = self._parse_lines(lines, run_logger)
        except ConfigParseError as exc:
            run_logger.log_parse_failure(exc.code)
            raise
        run_logger.log_parse_complete(len(self._schema.sections))
        return record

    def parse_file(self, path: str | Path) -> Any:
        """Read the file at `path` fully and parse its contents.

        Raises:
            ConfigReadError: If the file cannot be read or decoded.
            ConfigParseError: On the first structural or conversion failure.
        """

        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self._options.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            ParseLogger(str(file_path)).log_parse_failure(ConfigReadError.code)
            raise ConfigReadError(
                detail=f"Failed to read config file `{file_path}`: {exc}",
                path=str(file_path),
            ) from exc
        return self.parse(text, source=str(file_path))

    def _parse_lines(self, lines: Sequence[str], run_logger: ParseLogger) -> Any:
        """Match declared sections positionally and build the result record."""

        records: dict[str, object] = {}
        cursor = 0
        for section in self._schema.sections:
            if cursor >= len(lines):
                raise MissingSectionError(
                    detail=f"Expected section [{section.name}], reached end of input",
                    section=section.name,
                )

            header = lines[cursor]
            if not is_section_header(header):
                raise ExpectedSectionHeaderError(
                    detail=f"Expected section [{section.name}], got: {header}",
                    section=section.name,
                    line=header,
                )

            found = section_header_name(header)
            if found.lower() != section.name.lower():
                raise UnexpectedSectionError(
                    detail=f"Expected section [{section.name}], got [{found}]",
                    section=section.name,
                    line=header,
                )

            body_end = find_next_header(lines, cursor + 1)
            if body_end == cursor + 1:
                raise EmptySectionError(
                    detail=f"Section [{section.name}] is empty",
                    section=section.name,
                    line=header,
                )

            run_logger.log_section_start(section.name)
            records[section.attribute] = extract_section(
                lines[cursor + 1 : body_end],
                section,
                allow_duplicate_keys=self._options.allow_duplicate_keys,
            )
            run_logger.log_section_complete(section.name, len(section.fields))
            cursor = body_end

        return self._schema.build(records)


def parse_config(
    text: str,
    schema: ConfigSchema | type,
    options: ParserOptions | None = None,
) -> Any:
    """Parse INI `text` against `schema` and return the config record."""

    return ConfigParser(schema, options).parse(text)


def parse_config_file(
    path: str | Path,
    schema: ConfigSchema | type,
    options: ParserOptions | None = None,
) -> Any:
    """Read the INI file at `path` and parse it against `schema`."""

    return ConfigParser(schema, options).parse_file(path)
