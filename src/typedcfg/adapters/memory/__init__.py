"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that operate entirely
in memory -- no filesystem, no console output, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration, override and display adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    display_parameters_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_catalog_overrides_in_memory,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from typedcfg.application.ports import (
        DisplayConfig,
        DisplayParameters,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadCatalogOverrides,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_display_parameters: DisplayParameters = display_parameters_in_memory
    _assert_load_catalog_overrides: LoadCatalogOverrides = load_catalog_overrides_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "display_parameters_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_catalog_overrides_in_memory",
]
