"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.display import display_config, display_parameters
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.overrides import load_catalog_overrides
from ..adapters.logging.setup import init_logging
from ..application.registry import ConfigRegistry
from ..catalogs import template_for
from ..domain.enums import CatalogName

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..application.ports import (
        DisplayConfig,
        DisplayParameters,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadCatalogOverrides,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_display_parameters: DisplayParameters = display_parameters
    _assert_load_catalog_overrides: LoadCatalogOverrides = load_catalog_overrides
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    display_parameters: DisplayParameters
    load_catalog_overrides: LoadCatalogOverrides
    init_logging: InitLogging

    def build_registry(self, config: Config, catalog: CatalogName) -> ConfigRegistry[Any]:
        """Build the registry for ``catalog`` using the overrides found in ``config``.

        Raises:
            ConfigurationError: If the catalog's override table is malformed.
            ParseError: If an integer override is not an integer literal.
        """
        return ConfigRegistry(template_for(catalog), self.load_catalog_overrides(config, catalog))


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        display_parameters=display_parameters,
        load_catalog_overrides=load_catalog_overrides,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Returns:
        AppServices container with in-memory adapters: empty configuration,
        no overrides, no display output, no logging initialisation.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        display_parameters_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_catalog_overrides_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        display_parameters=display_parameters_in_memory,
        load_catalog_overrides=load_catalog_overrides_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    "display_parameters",
    "load_catalog_overrides",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
