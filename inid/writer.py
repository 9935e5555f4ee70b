"""Render config records back to the INI text form the parser accepts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import ParserOptions
from .models.kinds import format_scalar
from .models.schema import ConfigSchema, resolve_schema


def render_config(record: Any, schema: ConfigSchema | type) -> str:
    """Return INI text for `record`, with sections and fields in declared order.

    Raises:
        ValueError: If a value cannot be written so that it parses back equal.
    """

    resolved = resolve_schema(schema)
    blocks: list[str] = []
    for section in resolved.sections:
        section_record = getattr(record, section.attribute)
        lines = [f"[{section.name}]"]
        for spec in section.fields:
            value = getattr(section_record, spec.attribute)
            try:
                text = format_scalar(value, spec.kind)
            except ValueError as exc:
                raise ValueError(f"[{section.name}] Field {spec.name}: {exc}") from exc
            lines.append(f"{spec.name} = {text}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def write_config_file(
    path: str | Path,
    record: Any,
    schema: ConfigSchema | type,
    options: ParserOptions | None = None,
) -> Path:
    """Render `record` and write it to `path`, returning the written path."""

    resolved_options = options if options is not None else ParserOptions()
    resolved_options.validate()
    output_path = Path(path)
    output_path.write_text(render_config(record, schema), encoding=resolved_options.encoding)
    return output_path
