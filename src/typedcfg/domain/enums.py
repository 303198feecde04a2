"""Type-safe domain enums for storage kinds, catalogs, and output formats."""

from __future__ import annotations

from enum import Enum


class StorageKind(str, Enum):
    """Storage kind and mutability policy of a configuration value.

    Each member names one variant of :mod:`typedcfg.domain.values`. Inherits
    from str so members print cleanly in tables and JSON output.

    Attributes:
        READ_ONLY_INT: Read-only value stored as a signed 64-bit integer.
        READ_ONLY_BOOL: Read-only value stored as a boolean.
        READ_ONLY_TEXT: Read-only value stored as text.
        UPDATABLE_INT: Runtime-updatable value stored as a signed 64-bit integer.

    Example:
        >>> StorageKind.UPDATABLE_INT.value
        'updatable-int'
        >>> StorageKind.READ_ONLY_BOOL == "read-only-bool"
        True
    """

    READ_ONLY_INT = "read-only-int"
    READ_ONLY_BOOL = "read-only-bool"
    READ_ONLY_TEXT = "read-only-text"
    UPDATABLE_INT = "updatable-int"

    @property
    def updatable(self) -> bool:
        """Whether values of this kind accept runtime mutation.

        Example:
            >>> StorageKind.UPDATABLE_INT.updatable
            True
            >>> StorageKind.READ_ONLY_TEXT.updatable
            False
        """
        return self is StorageKind.UPDATABLE_INT


class CatalogName(str, Enum):
    """Names of the bundled parameter catalogs.

    The value doubles as the subsection under ``[overrides]`` in the layered
    configuration.

    Example:
        >>> CatalogName.DATABASE.value
        'database'
        >>> CatalogName("cluster") is CatalogName.CLUSTER
        True
    """

    DATABASE = "database"
    CLUSTER = "cluster"


class OutputFormat(str, Enum):
    """Output format options for configuration and parameter display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "CatalogName",
    "OutputFormat",
    "StorageKind",
]
