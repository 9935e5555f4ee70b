"""Structured parse logging utilities.

Responsibilities:
- Emit concise, deterministic parse events through `loguru`.
- Keep values out of log lines; only names, counts and error codes appear.

The package disables its `loguru` namespace on import. Call
`configure_log_sink` (the CLI does so for `--verbose`) to see events.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Any

from loguru import logger


_sink_handler_ids: list[int] = []


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_log_sink(
    sink: Any, level: str = "DEBUG", *, replace_handlers: bool = False
) -> int:
    """Route parse events to `sink` with a bare message format.

    Removes sinks added by earlier calls, enables the `inid` namespace and
    returns the new handler id. Handlers configured elsewhere in the process
    stay in place unless `replace_handlers` is set, which removes every
    `loguru` handler first (the CLI uses this for `--verbose`).
    """

    if replace_handlers:
        logger.remove()
        _sink_handler_ids.clear()
    while _sink_handler_ids:
        remove_log_sink(_sink_handler_ids[-1])
    handler_id = logger.add(sink, format="{message}", level=level, colorize=False)
    _sink_handler_ids.append(handler_id)
    logger.enable("inid")
    return handler_id


def remove_log_sink(handler_id: int) -> None:
    """Remove the sink `handler_id`; ids that are already gone are ignored."""

    if handler_id in _sink_handler_ids:
        _sink_handler_ids.remove(handler_id)
    with suppress(ValueError):
        logger.remove(handler_id)


class ParseLogger:
    """Emit deterministic events for one parse of one source."""

    def __init__(self, source: str = "<string>") -> None:
        """Bind the logger to a source label (a path or `<string>`)."""

        self._source = source

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured parse log line."""

        line = (
            f"[parse] level={level} stage={stage} event={event}"
            f"{_format_context({'source': self._source, **context})}"
        )
        logger.log(level, line)

    def log_parse_start(self, line_count: int, section_count: int) -> None:
        """Emit a parse-start event with input and schema sizes."""

        self._emit("DEBUG", "start", "document", lines=line_count, sections=section_count)

    def log_section_start(self, name: str) -> None:
        """Emit a section-start event."""

        self._emit("DEBUG", "start", "section", name=name)

    def log_section_complete(self, name: str, field_count: int) -> None:
        """Emit a section-complete event."""

        self._emit("DEBUG", "complete", "section", name=name, fields=field_count)

    def log_parse_complete(self, section_count: int) -> None:
        """Emit a parse-complete event."""

        self._emit("INFO", "complete", "document", sections=section_count)

    def log_parse_failure(self, error_code: str) -> None:
        """Emit a parse-failure event without the offending values."""

        self._emit("ERROR", "failure", "document", error_code=error_code)
