"""Logging adapter.

``init_logging`` starts lib_log_rich from the ``[lib_log_rich]`` table and
routes stdlib loggers (registry construction, parameter updates, CLI events)
into it. ``LoggingConfigModel`` is the validated shape of that table.
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
