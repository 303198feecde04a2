"""Constants shared by the root group and the registry commands.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h`` alias for every command.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` -
      character budgets handed to lib_cli_exit_tools.
    * :data:`DEFAULT_TARGET` - type name ``get``/``set`` print values as.
    * :data:`DEMO_DATABASE_OVERRIDES` / :data:`DEMO_CLUSTER_OVERRIDES` -
      fixed override mappings used by ``demo``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Values print in their canonical text form unless ``--as`` says otherwise.
DEFAULT_TARGET: Final[str] = "text"

DEMO_DATABASE_OVERRIDES: Final[Mapping[str, str]] = MappingProxyType({"MAX_ROWS_PER_ROWGROUP": "512"})
DEMO_CLUSTER_OVERRIDES: Final[Mapping[str, str]] = MappingProxyType({"INSERT_FLUSH": "false"})

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "DEFAULT_TARGET",
    "DEMO_CLUSTER_OVERRIDES",
    "DEMO_DATABASE_OVERRIDES",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
