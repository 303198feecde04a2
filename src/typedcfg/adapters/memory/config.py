"""In-memory configuration adapters for testing.

Provide functions that satisfy the same Protocols as the production adapters
but never touch the filesystem or print anything.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...application.registry import ParameterInfo
from ...domain.enums import CatalogName, OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "typedcfg" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def display_parameters_in_memory(
    catalog: str,
    infos: Sequence[ParameterInfo],
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
) -> None:
    """No-op display -- satisfies the DisplayParameters protocol."""


def load_catalog_overrides_in_memory(config: Config, catalog: CatalogName) -> dict[str, str]:
    """Return no overrides, so every registry starts from its hard-coded defaults."""
    return {}


__all__ = [
    "display_config_in_memory",
    "display_parameters_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "load_catalog_overrides_in_memory",
]
