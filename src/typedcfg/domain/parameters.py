"""Declarative parameter records and the helpers that build them.

A :class:`Parameter` is pure data: name, storage kind, hard-coded default and
help text. Templates are assembled from these records, one per enumeration
member, and handed to the registry.

Example:
    >>> p = read_only_int("MAX_ROWS_PER_ROWGROUP", 10000, "Maximum number of rows per row group.")
    >>> p.kind.value, p.default
    ('read-only-int', 10000)
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import StorageKind
from .inttypes import INT64, IntType

DefaultValue = int | bool | str
"""Python types a hard-coded default may take."""


@dataclass(frozen=True, slots=True)
class Parameter:
    """Declaration of one configuration parameter.

    Attributes:
        name: Declared name; also the key looked up in override mappings.
        kind: Storage kind and mutability.
        default: Hard-coded default, used as-is when no override is present.
        help: Description of the parameter.
        int_type: Declared integer width for integer kinds (display only).
    """

    name: str
    kind: StorageKind
    default: DefaultValue
    help: str = ""
    int_type: IntType = INT64


def read_only_int(name: str, default: int, help: str, int_type: IntType = INT64) -> Parameter:
    """Declare a read-only integer parameter."""
    return Parameter(name, StorageKind.READ_ONLY_INT, default, help, int_type)


def read_only_bool(name: str, default: bool, help: str) -> Parameter:
    """Declare a read-only boolean parameter."""
    return Parameter(name, StorageKind.READ_ONLY_BOOL, default, help)


def read_only_text(name: str, default: str, help: str) -> Parameter:
    """Declare a read-only text parameter."""
    return Parameter(name, StorageKind.READ_ONLY_TEXT, default, help)


def updatable_int(name: str, default: int, help: str, int_type: IntType = INT64) -> Parameter:
    """Declare a runtime-updatable integer parameter."""
    return Parameter(name, StorageKind.UPDATABLE_INT, default, help, int_type)


__all__ = [
    "DefaultValue",
    "Parameter",
    "read_only_bool",
    "read_only_int",
    "read_only_text",
    "updatable_int",
]
