"""Unit tests for rendering records back to INI text."""

from __future__ import annotations

from pathlib import Path

import pytest

from inid import parse_config, parse_config_file, render_config, write_config_file
from tests.schemas import (
    SERVER_SCHEMA,
    Entry,
    EntryConfig,
    MixedConfig,
    MixedValues,
    Route,
    Server,
    ServerConfig,
)


def test_render_config_writes_sections_and_fields_in_declared_order() -> None:
    """Rendering should use INI names, declared order and canonical scalars."""

    config = MixedConfig(
        mixed_values=MixedValues(integer=42, decimal=66.6, flag=True, text="This is some text")
    )

    assert render_config(config, MixedConfig) == (
        "[MixedValues]\n"
        "integer = 42\n"
        "decimal = 66.6\n"
        "flag = true\n"
        "text = This is some text\n"
    )


@pytest.mark.parametrize(
    "config",
    [
        EntryConfig(entry=Entry(key=1234567891011, value="the value")),
        ServerConfig(
            server=Server(address="::1", port=65535),
            route=Route(url="/a;b", path="p [x]", response_code=0),
        ),
        MixedConfig(
            mixed_values=MixedValues(integer=0, decimal=-1e-300, flag=False, text="x")
        ),
        MixedConfig(
            mixed_values=MixedValues(integer=7, decimal=0.1 + 0.2, flag=True, text="a  b")
        ),
    ],
)
def test_rendered_config_parses_back_equal(config: object) -> None:
    """Hand-built records should survive render then parse unchanged."""

    schema = type(config)

    assert parse_config(render_config(config, schema), schema) == config


def test_render_config_supports_hand_built_schemas() -> None:
    """Namespace records from explicit schemas should render and round-trip."""

    text = "[server]\naddress = h\nport = 1\n[route]\nurl = u\npath = p\nresponse_code = 2\n"
    record = parse_config(text, SERVER_SCHEMA)

    rendered = render_config(record, SERVER_SCHEMA)

    assert rendered.startswith("[Server]\naddress = h\nport = 1\n\n[Route]\n")
    assert parse_config(rendered, SERVER_SCHEMA) == record


@pytest.mark.parametrize("text", ["", " padded ", "a=b", "two\nlines"])
def test_render_config_rejects_strings_that_cannot_round_trip(text: str) -> None:
    """Values that would parse back differently should fail with context."""

    config = EntryConfig(entry=Entry(key=1, value=text))

    with pytest.raises(ValueError, match=r"\[entry\] Field value:"):
        render_config(config, EntryConfig)


def test_render_config_reports_float_overflow_with_field_context() -> None:
    """An integer too large for a float field should fail like other unwritable values."""

    config = MixedConfig(
        mixed_values=MixedValues(integer=1, decimal=10**400, flag=True, text="ok")
    )

    with pytest.raises(ValueError, match=r"\[MixedValues\] Field decimal: integer is too large"):
        render_config(config, MixedConfig)


def test_write_config_file_writes_rendered_text(tmp_path: Path) -> None:
    """Written files should parse back through the file entry point."""

    config = ServerConfig(
        server=Server(address="127.0.0.1", port=8080),
        route=Route(url="/", path="index.html", response_code=200),
    )

    written = write_config_file(tmp_path / "server.ini", config, ServerConfig)

    assert written == tmp_path / "server.ini"
    assert parse_config_file(written, ServerConfig) == config
