"""Unit tests for CLI schema reference and option resolution."""

from __future__ import annotations

import os
from pathlib import Path
import sys

import pytest

from inid.cli_runtime import load_schema_reference, resolve_parser_options
from inid.config import ParserOptions
from inid.errors import SchemaReferenceError
from inid.models.schema import schema_from_dataclass
from tests.schemas import SERVER_SCHEMA, ServerConfig


def test_load_schema_reference_resolves_dataclass_and_schema_objects() -> None:
    """References may name dataclass types or schema instances."""

    assert load_schema_reference("tests.schemas:ServerConfig") == schema_from_dataclass(
        ServerConfig
    )
    assert load_schema_reference(" tests.schemas:SERVER_SCHEMA ") is SERVER_SCHEMA


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("tests.schemas", "Invalid schema reference"),
        ("tests.schemas:", "Invalid schema reference"),
        ("a:b:c", "Invalid schema reference"),
        ("tests.no_such_module:Config", "Cannot import schema module"),
        ("tests.schemas:Missing", "has no attribute `Missing`"),
        ("tests.schemas:NOT_A_SCHEMA", "is not a usable schema"),
    ],
)
def test_load_schema_reference_reports_unusable_references(
    reference: str, message: str
) -> None:
    """Every failure mode should raise a reference error with a clear detail."""

    with pytest.raises(SchemaReferenceError, match=message):
        load_schema_reference(reference)


def test_load_schema_reference_follows_dotted_attributes() -> None:
    """Attribute paths may walk into module-level objects."""

    assert load_schema_reference("tests.schemas:SchemaCatalog.server") is SERVER_SCHEMA
    with pytest.raises(SchemaReferenceError, match="is not a usable schema"):
        load_schema_reference("tests.schemas:SchemaCatalog")


def test_resolve_parser_options_applies_cli_encoding_over_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """CLI encoding should win over `INID_ENCODING`; env booleans still apply."""

    monkeypatch.setenv("INID_ENCODING", "latin-1")
    monkeypatch.setenv("INID_ALLOW_DUPLICATE_KEYS", "on")

    assert resolve_parser_options(None) == ParserOptions(
        encoding="latin-1", allow_duplicate_keys=True
    )
    assert resolve_parser_options("utf-8").encoding == "utf-8"


def test_load_schema_reference_imports_modules_from_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A schema module beside the caller should import even when cwd is off `sys.path`."""

    module_name = "inid_cwd_reference_schema"
    (tmp_path / f"{module_name}.py").write_text(
        "from dataclasses import dataclass\n"
        "\n"
        "\n"
        "@dataclass\n"
        "class Limits:\n"
        "    retries: int\n"
        "\n"
        "\n"
        "@dataclass\n"
        "class Config:\n"
        "    limits: Limits\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "path", [entry for entry in sys.path if entry not in ("", ".")])
    monkeypatch.delitem(sys.modules, module_name, raising=False)

    schema = load_schema_reference(f"{module_name}:Config")

    assert schema.section_names() == ["limits"]
    assert sys.path[0] == os.getcwd()
    monkeypatch.delitem(sys.modules, module_name, raising=False)
