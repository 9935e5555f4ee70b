"""Field extraction for one section body.

Turns the body lines of a section into a lowercase key/value map and then
into a typed section record.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .errors import (
    DuplicateFieldError,
    FieldCountMismatchError,
    FieldTypeMismatchError,
    MalformedFieldError,
    MissingFieldError,
)
from .models.kinds import convert_scalar
from .models.schema import SectionSchema

FIELD_DELIMITER = "="


def split_field_line(line: str, section_name: str) -> tuple[str, str]:
    """Split one `key = value` line into its trimmed key and value.

    Raises:
        MalformedFieldError: Unless the line holds exactly one `=` with text
            on both sides.
    """

    parts = line.split(FIELD_DELIMITER)
    if len(parts) == 2:
        key, value = parts[0].strip(), parts[1].strip()
        if key and value:
            return key, value
    raise MalformedFieldError(
        detail=f'[{section_name}] Fields must be "key = value" pairs, got: {line}',
        section=section_name,
        line=line,
    )


def build_field_map(
    lines: Sequence[str],
    section_name: str,
    *,
    allow_duplicate_keys: bool = False,
) -> dict[str, str]:
    """Map lowercased keys to trimmed raw values for one section body.

    Every line is split before duplicates are checked, so a malformed line
    is reported ahead of a repeated key.
    """

    pairs = [(line, split_field_line(line, section_name)) for line in lines]
    field_map: dict[str, str] = {}
    for line, (key, value) in pairs:
        lowered = key.lower()
        if lowered in field_map and not allow_duplicate_keys:
            raise DuplicateFieldError(
                detail=f"[{section_name}] Duplicate field: {lowered}",
                section=section_name,
                field=lowered,
                line=line,
            )
        field_map[lowered] = value
    return field_map


def extract_section(
    lines: Sequence[str],
    section: SectionSchema,
    *,
    allow_duplicate_keys: bool = False,
) -> Any:
    """Build the typed record for `section` from its body lines.

    Raises:
        FieldCountMismatchError: If the line count differs from the field count.
        MalformedFieldError: If a line is not a `key = value` pair.
        DuplicateFieldError: If a key repeats and duplicates are not allowed.
        MissingFieldError: If a declared field has no key.
        FieldTypeMismatchError: If a value does not convert to its kind.
    """

    expected = len(section.fields)
    if len(lines) != expected:
        raise FieldCountMismatchError(
            detail=f"[{section.name}] Expected {expected} fields, got {len(lines)}",
            section=section.name,
        )

    field_map = build_field_map(
        lines, section.name, allow_duplicate_keys=allow_duplicate_keys
    )

    values: dict[str, object] = {}
    for spec in section.fields:
        key = spec.name.lower()
        if key not in field_map:
            raise MissingFieldError(
                detail=f"[{section.name}] Expected field: {key}",
                section=section.name,
                field=spec.name,
            )
        raw = field_map[key]
        try:
            values[spec.attribute] = convert_scalar(raw, spec.kind)
        except ValueError as exc:
            raise FieldTypeMismatchError(
                detail=f"[{section.name}] Field {key} must be of type {spec.kind.value}",
                section=section.name,
                field=spec.name,
            ) from exc
    return section.build(values)
