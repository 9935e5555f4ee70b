"""Parse event logging."""

from .logger import ParseLogger, configure_log_sink, remove_log_sink

__all__ = ["ParseLogger", "configure_log_sink", "remove_log_sink"]
