"""In-memory logging adapter for testing.

Leaves lib_log_rich uninitialised; registry and CLI loggers still emit through
the standard library, which pytest's ``caplog`` captures.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


__all__ = ["init_logging_in_memory"]
