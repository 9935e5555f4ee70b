"""Declaration-time description of the expected configuration shape.

Responsibilities:
- Hold ordered section and field descriptors (INI name, record attribute,
  kind) that drive the parser and the writer.
- Validate declarations once, when the schema is built.
- Derive descriptors from dataclass declarations.

Key types:
- `FieldSpec`, `SectionSchema`, `ConfigSchema`.

Key public functions:
- `ini_field`: dataclass field with an explicit INI name.
- `schema_from_dataclass`: build a `ConfigSchema` from a dataclass type.
- `resolve_schema`: accept a `ConfigSchema` or a dataclass type.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
import re
from types import SimpleNamespace
from typing import Annotated, Any, Callable, get_args, get_origin, get_type_hints

from ..errors import SchemaError
from .kinds import FieldKind


INI_NAME_METADATA_KEY = "inid.ini_name"

_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")
_PLAIN_KINDS: dict[type, FieldKind] = {
    bool: FieldKind.BOOL,
    int: FieldKind.INT,
    float: FieldKind.FLOAT,
    str: FieldKind.STRING,
}

RecordFactory = Callable[..., Any]


def ini_field(name: str, **kwargs: Any) -> Any:
    """Return a dataclass field whose INI section or key name is `name`.

    Extra keyword arguments are forwarded to `dataclasses.field`.
    """

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[INI_NAME_METADATA_KEY] = name
    return field(metadata=metadata, **kwargs)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One typed field inside a section.

    Attributes:
        name: Key as written in the INI body, matched case-insensitively.
        kind: Scalar kind the raw value is converted to.
        attribute: Attribute name on the section record. Defaults to `name`.
    """

    name: str
    kind: FieldKind
    attribute: str = ""

    def __post_init__(self) -> None:
        """Default the attribute to the INI name and validate both."""

        try:
            object.__setattr__(self, "kind", FieldKind(self.kind))
        except ValueError as exc:
            raise SchemaError(f"Field `{self.name}` has unknown kind {self.kind!r}.") from exc
        if _KEY_PATTERN.fullmatch(self.name or "") is None:
            raise SchemaError(f"Field name `{self.name}` cannot be written as an INI key.")
        if not self.attribute:
            object.__setattr__(self, "attribute", self.name)
        if not self.attribute.isidentifier():
            raise SchemaError(f"Field attribute `{self.attribute}` is not a valid identifier.")


@dataclass(frozen=True, slots=True)
class SectionSchema:
    """One named section and its ordered fields.

    Attributes:
        name: Header text expected between the brackets.
        fields: Declared fields; the body must hold exactly this many lines.
        attribute: Attribute name on the config record. Defaults to `name`.
        factory: Called with `attribute=value` keywords to build the record.
    """

    name: str
    fields: tuple[FieldSpec, ...]
    attribute: str = ""
    factory: RecordFactory = SimpleNamespace

    def __post_init__(self) -> None:
        """Validate the section name and field uniqueness."""

        object.__setattr__(self, "fields", tuple(self.fields))
        _validate_header_name(self.name)
        if not self.attribute:
            object.__setattr__(self, "attribute", self.name)
        if not self.attribute.isidentifier():
            raise SchemaError(f"Section attribute `{self.attribute}` is not a valid identifier.")
        if not self.fields:
            raise SchemaError(f"Section `{self.name}` must declare at least one field.")
        _ensure_unique([spec.name.lower() for spec in self.fields], f"[{self.name}] field name")
        _ensure_unique([spec.attribute for spec in self.fields], f"[{self.name}] field attribute")

    def build(self, values: dict[str, object]) -> Any:
        """Build the section record from converted values keyed by attribute."""

        return self.factory(**values)


@dataclass(frozen=True, slots=True)
class ConfigSchema:
    """Ordered sections that make up one configuration document.

    Attributes:
        sections: Declared sections, matched positionally against the input.
        factory: Called with `attribute=record` keywords to build the result.
    """

    sections: tuple[SectionSchema, ...]
    factory: RecordFactory = SimpleNamespace

    def __post_init__(self) -> None:
        """Validate that sections exist and have distinct names and attributes."""

        object.__setattr__(self, "sections", tuple(self.sections))
        if not self.sections:
            raise SchemaError("A config schema must declare at least one section.")
        _ensure_unique([section.name.lower() for section in self.sections], "section name")
        _ensure_unique([section.attribute for section in self.sections], "section attribute")

    def build(self, values: dict[str, object]) -> Any:
        """Build the result record from section records keyed by attribute."""

        return self.factory(**values)

    def section_names(self) -> list[str]:
        """Return declared section names in order."""

        return [section.name for section in self.sections]


def schema_from_dataclass(config_type: type) -> ConfigSchema:
    """Derive a `ConfigSchema` from a dataclass of section dataclasses.

    Each field of `config_type` must be annotated with a dataclass whose own
    fields are scalars (`int`, `float`, `bool`, `str`, or an `Annotated`
    alias such as `UInt16`). INI names default to the attribute names; use
    `ini_field("Name")` to declare a different one.

    Raises:
        SchemaError: If the declaration cannot be mapped onto INI sections.
    """

    if not _is_dataclass_type(config_type):
        raise SchemaError(f"`{config_type!r}` is not a dataclass type.")

    hints = _type_hints(config_type)
    sections: list[SectionSchema] = []
    for declared in dataclasses.fields(config_type):
        section_type = hints[declared.name]
        if not _is_dataclass_type(section_type):
            raise SchemaError(
                f"`{config_type.__name__}.{declared.name}` must be annotated with a "
                "dataclass describing one section."
            )
        sections.append(
            SectionSchema(
                name=_ini_name(declared),
                fields=tuple(_field_specs(section_type)),
                attribute=declared.name,
                factory=section_type,
            )
        )
    return ConfigSchema(sections=tuple(sections), factory=config_type)


def resolve_schema(schema: ConfigSchema | type) -> ConfigSchema:
    """Return `schema` itself or the schema derived from a dataclass type."""

    if isinstance(schema, ConfigSchema):
        return schema
    if isinstance(schema, type):
        return schema_from_dataclass(schema)
    raise SchemaError(f"Expected a ConfigSchema or a dataclass type, got {schema!r}.")


def _field_specs(section_type: type) -> list[FieldSpec]:
    hints = _type_hints(section_type)
    specs = []
    for declared in dataclasses.fields(section_type):
        kind = _kind_for_annotation(hints[declared.name])
        if kind is None:
            raise SchemaError(
                f"`{section_type.__name__}.{declared.name}` has unsupported type "
                f"{hints[declared.name]!r}; nested sections and collections are not supported."
            )
        specs.append(FieldSpec(name=_ini_name(declared), kind=kind, attribute=declared.name))
    return specs


def _kind_for_annotation(annotation: Any) -> FieldKind | None:
    if get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        for extra in extras:
            if isinstance(extra, FieldKind):
                return extra
        return _kind_for_annotation(base)
    if isinstance(annotation, type):
        return _PLAIN_KINDS.get(annotation)
    return None


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except NameError as exc:
        raise SchemaError(f"Cannot resolve annotations of `{cls.__name__}`: {exc}") from exc


def _ini_name(declared: dataclasses.Field) -> str:
    return declared.metadata.get(INI_NAME_METADATA_KEY, declared.name)


def _is_dataclass_type(value: object) -> bool:
    return isinstance(value, type) and dataclasses.is_dataclass(value)


def _validate_header_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise SchemaError("Section names must be non-empty strings.")
    if name != name.strip() or any(char in name for char in "[]\n\r"):
        raise SchemaError(f"Section name `{name}` cannot be written as an INI header.")


def _ensure_unique(values: list[str], label: str) -> None:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise SchemaError(f"Duplicate {label}: `{value}`.")
        seen.add(value)
