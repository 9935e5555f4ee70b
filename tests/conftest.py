"""Shared pytest fixtures for the full inid test suite."""

from __future__ import annotations

from collections.abc import Iterator
import io
from pathlib import Path

from loguru import logger
import pytest

from tests.fixture_paths import (
    broken_server_config_fixture_path as resolve_broken_server_config_fixture_path,
    server_config_fixture_path as resolve_server_config_fixture_path,
)


@pytest.fixture
def server_config_fixture_path() -> Path:
    """Provide the well-formed `[Server]`/`[Route]` fixture path."""

    return resolve_server_config_fixture_path()


@pytest.fixture
def broken_server_config_fixture_path() -> Path:
    """Provide the fixture path with a non-numeric port."""

    return resolve_broken_server_config_fixture_path()


@pytest.fixture
def log_sink() -> Iterator[io.StringIO]:
    """Capture `inid` parse events and restore the disabled default afterwards."""

    from inid.telemetry import configure_log_sink, remove_log_sink

    sink = io.StringIO()
    handler_id = configure_log_sink(sink, level="DEBUG")
    yield sink
    remove_log_sink(handler_id)
    logger.disable("inid")


@pytest.fixture(autouse=True)
def _reset_inid_logging() -> Iterator[None]:
    """Keep the `inid` namespace disabled between tests, as on import."""

    yield
    logger.disable("inid")
