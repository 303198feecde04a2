"""Bundled parameter catalogs.

Each catalog is an enumeration of parameter identities plus the template that
declares name, storage kind, default and help text for every member.

Contents:
    * :class:`DatabaseConfigParm` / :data:`DATABASE_TEMPLATE` - storage engine settings.
    * :class:`ClusterConfigParm` / :data:`CLUSTER_TEMPLATE` - cluster topology settings.
    * :func:`database_config` / :func:`cluster_config` - registry constructors.
    * :func:`template_for` - look up a template by :class:`CatalogName`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from typing import Any, TypeAlias

from .application.registry import ConfigRegistry, ConfigTemplate
from .domain.enums import CatalogName
from .domain.inttypes import INT8, INT16, INT32, INT64
from .domain.parameters import read_only_bool, read_only_int, read_only_text, updatable_int


class DatabaseConfigParm(Enum):
    """Database configuration parameters."""

    MAX_ROWS_PER_ROWGROUP = auto()
    STRIDESIZE = auto()
    SHARED_FS_TYPE = auto()
    CACHE_MEM_SZ = auto()


DATABASE_TEMPLATE: ConfigTemplate[DatabaseConfigParm] = ConfigTemplate(
    DatabaseConfigParm,
    {
        DatabaseConfigParm.MAX_ROWS_PER_ROWGROUP: read_only_int(
            "MAX_ROWS_PER_ROWGROUP", 10000, "Maximum number of rows per row group.", INT32
        ),
        DatabaseConfigParm.STRIDESIZE: read_only_int("STRIDE_SIZE", 512, "Maximum stride size of a table", INT16),
        DatabaseConfigParm.SHARED_FS_TYPE: read_only_text("SHARED_FS", "alluxio", "The file system type"),
        DatabaseConfigParm.CACHE_MEM_SZ: updatable_int("CACHE_MEM_SZ", 0, "Memory size of cache", INT64),
    },
)


class ClusterConfigParm(Enum):
    """Cluster configuration parameters."""

    NUM_NODES = auto()
    ZK_TIMEOUT = auto()
    QUORUM_WRITE = auto()
    INSERT_FLUSH = auto()


CLUSTER_TEMPLATE: ConfigTemplate[ClusterConfigParm] = ConfigTemplate(
    ClusterConfigParm,
    {
        ClusterConfigParm.NUM_NODES: read_only_int("NUM_NODES", 3, "Number of nodes in the cluster.", INT8),
        ClusterConfigParm.ZK_TIMEOUT: read_only_int("ZK_TIMEOUT", 10000, "Zookeeper timeout in milliseconds", INT64),
        ClusterConfigParm.QUORUM_WRITE: read_only_text("QUORUM_WRITE", "true", "Is quorum write set"),
        ClusterConfigParm.INSERT_FLUSH: read_only_bool("INSERT_FLUSH", True, "Does each insert flush?"),
    },
)

DatabaseConfig: TypeAlias = ConfigRegistry[DatabaseConfigParm]
ClusterConfig: TypeAlias = ConfigRegistry[ClusterConfigParm]

_TEMPLATES: dict[CatalogName, ConfigTemplate[Any]] = {
    CatalogName.DATABASE: DATABASE_TEMPLATE,
    CatalogName.CLUSTER: CLUSTER_TEMPLATE,
}


def database_config(overrides: Mapping[str, str] | None = None) -> DatabaseConfig:
    """Build the database registry.

    Example:
        >>> cfg = database_config({"MAX_ROWS_PER_ROWGROUP": "512"})
        >>> cfg.get(DatabaseConfigParm.MAX_ROWS_PER_ROWGROUP)
        '512'
        >>> cfg.get(DatabaseConfigParm.STRIDESIZE)
        '512'
    """
    return ConfigRegistry(DATABASE_TEMPLATE, overrides)


def cluster_config(overrides: Mapping[str, str] | None = None) -> ClusterConfig:
    """Build the cluster registry.

    Example:
        >>> cfg = cluster_config({"INSERT_FLUSH": "false"})
        >>> cfg.get(ClusterConfigParm.INSERT_FLUSH, bool)
        False
    """
    return ConfigRegistry(CLUSTER_TEMPLATE, overrides)


def template_for(catalog: CatalogName) -> ConfigTemplate[Any]:
    """Return the template registered for ``catalog``."""
    return _TEMPLATES[catalog]


def parameter_by_name(catalog: CatalogName, name: str) -> Enum:
    """Resolve a parameter given its enumeration member name or declared name.

    Matching is case-insensitive, so ``stridesize`` and ``STRIDE_SIZE`` both
    resolve to :attr:`DatabaseConfigParm.STRIDESIZE`.

    Raises:
        KeyError: If no parameter of ``catalog`` matches ``name``.

    Example:
        >>> parameter_by_name(CatalogName.DATABASE, "stride_size")
        <DatabaseConfigParm.STRIDESIZE: 2>
    """
    wanted = name.upper()
    for parm, parameter in template_for(catalog).items():
        if wanted in (parm.name, parameter.name.upper()):
            return parm
    raise KeyError(f"{catalog.value} has no parameter named {name!r}")


__all__ = [
    "CLUSTER_TEMPLATE",
    "ClusterConfig",
    "ClusterConfigParm",
    "DATABASE_TEMPLATE",
    "DatabaseConfig",
    "DatabaseConfigParm",
    "cluster_config",
    "database_config",
    "parameter_by_name",
    "template_for",
]
