"""Application layer - the typed registry and port definitions.

Contents:
    * :mod:`.registry` - ConfigTemplate, ConfigRegistry and ParameterInfo
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    DisplayParameters,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadCatalogOverrides,
)
from .registry import ConfigRegistry, ConfigTemplate, ParameterInfo

__all__ = [
    "ConfigRegistry",
    "ConfigTemplate",
    "DisplayConfig",
    "DisplayParameters",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadCatalogOverrides",
    "ParameterInfo",
]
