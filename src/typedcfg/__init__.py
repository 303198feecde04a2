"""Public package surface for the typed configuration registry.

Routes imports through the architectural layers:

- Domain exports: value variants, integer types, errors
- Application exports: templates and registries
- Catalogs: the bundled database and cluster parameter sets
- Composition exports: wired configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.registry import ConfigRegistry, ConfigTemplate, ParameterInfo

# Catalogs
from .catalogs import (
    CLUSTER_TEMPLATE,
    DATABASE_TEMPLATE,
    ClusterConfig,
    ClusterConfigParm,
    DatabaseConfig,
    DatabaseConfigParm,
    cluster_config,
    database_config,
)

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    ConfigurationError,
    IntType,
    Parameter,
    ParseError,
    ReadOnlyError,
    RegistryError,
    StorageKind,
    UnknownParameterError,
    read_only_bool,
    read_only_int,
    read_only_text,
    updatable_int,
)

__all__ = [
    "CLUSTER_TEMPLATE",
    "ClusterConfig",
    "ClusterConfigParm",
    "ConfigRegistry",
    "ConfigTemplate",
    "ConfigurationError",
    "DATABASE_TEMPLATE",
    "DatabaseConfig",
    "DatabaseConfigParm",
    "INT16",
    "INT32",
    "INT64",
    "INT8",
    "IntType",
    "Parameter",
    "ParameterInfo",
    "ParseError",
    "ReadOnlyError",
    "RegistryError",
    "StorageKind",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT8",
    "UnknownParameterError",
    "cluster_config",
    "database_config",
    "get_config",
    "print_info",
    "read_only_bool",
    "read_only_int",
    "read_only_text",
    "updatable_int",
]
