"""CLI runtime resolution helpers.

This module isolates schema reference loading and option resolution from the
command wiring layer.
"""

from __future__ import annotations

import importlib
import os
import sys

from .config import OptionsLoader, ParserOptions
from .errors import SchemaError, SchemaReferenceError
from .models.schema import ConfigSchema, resolve_schema
from .parsing import normalize_optional_string


def load_schema_reference(reference: str) -> ConfigSchema:
    """Import `module:attribute` and resolve it into a `ConfigSchema`.

    The attribute may be a `ConfigSchema` instance or a dataclass type, and
    may be a dotted path inside the module. Modules in the current working
    directory are importable, as they are for `python -m`.
    """

    normalized = normalize_optional_string(reference)
    if normalized is None or normalized.count(":") != 1:
        raise SchemaReferenceError(
            detail=f"Invalid schema reference `{reference}`.",
            hint="Use the form `package.module:Attribute`.",
        )

    module_name, attribute_path = (part.strip() for part in normalized.split(":"))
    if not module_name or not attribute_path:
        raise SchemaReferenceError(
            detail=f"Invalid schema reference `{reference}`.",
            hint="Use the form `package.module:Attribute`.",
        )

    _ensure_working_dir_importable()
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaReferenceError(
            detail=f"Cannot import schema module `{module_name}`: {exc}",
            hint="Check the module path; the current directory is searched first.",
        ) from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise SchemaReferenceError(
                detail=f"Module `{module_name}` has no attribute `{attribute_path}`.",
            ) from exc

    try:
        return resolve_schema(target)  # type: ignore[arg-type]
    except SchemaError as exc:
        raise SchemaReferenceError(
            detail=f"`{normalized}` is not a usable schema: {exc}",
            hint="Point at a ConfigSchema instance or a dataclass of section dataclasses.",
        ) from exc


def resolve_parser_options(encoding: str | None) -> ParserOptions:
    """Resolve options from the environment, then apply CLI overrides."""

    return OptionsLoader.with_overrides(OptionsLoader.from_env(), encoding=encoding)


def _ensure_working_dir_importable() -> None:
    """Put the current working directory first on `sys.path` when missing."""

    working_dir = os.getcwd()
    if working_dir not in sys.path:
        sys.path.insert(0, working_dir)
        importlib.invalidate_caches()
