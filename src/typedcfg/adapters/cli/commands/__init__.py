"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Registry commands from :mod:`.registry`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .registry import cli_demo, cli_get, cli_params, cli_set

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_get",
    "cli_info",
    "cli_params",
    "cli_set",
]
