"""Domain layer - pure configuration-value logic with no I/O or framework dependencies.

Contents:
    * :mod:`.values` - ReadOnlyInt, ReadOnlyBool, ReadOnlyText, UpdatableInt variants
    * :mod:`.factory` - ValueFactory resolving defaults against overrides
    * :mod:`.coercion` - ``coerce(value, as_type)`` projection with width truncation
    * :mod:`.inttypes` - Sized integer descriptors (INT8 … UINT64)
    * :mod:`.parameters` - Declarative Parameter records
    * :mod:`.parsing` - Integer literal and boolean text rules
    * :mod:`.enums` - StorageKind, CatalogName, OutputFormat
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .coercion import CoercionTarget, coerce, parse_target
from .enums import CatalogName, OutputFormat, StorageKind
from .errors import ConfigurationError, ParseError, ReadOnlyError, RegistryError, UnknownParameterError
from .factory import ValueFactory
from .inttypes import INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64, IntType
from .parameters import Parameter, read_only_bool, read_only_int, read_only_text, updatable_int
from .parsing import parse_bool, parse_int
from .values import ConfigValue, ReadOnlyBool, ReadOnlyInt, ReadOnlyText, UpdatableInt

__all__ = [
    # Values
    "ConfigValue",
    "ReadOnlyBool",
    "ReadOnlyInt",
    "ReadOnlyText",
    "UpdatableInt",
    # Construction
    "Parameter",
    "ValueFactory",
    "read_only_bool",
    "read_only_int",
    "read_only_text",
    "updatable_int",
    # Coercion
    "CoercionTarget",
    "coerce",
    "parse_target",
    "parse_bool",
    "parse_int",
    "IntType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Enums
    "CatalogName",
    "OutputFormat",
    "StorageKind",
    # Errors
    "ConfigurationError",
    "ParseError",
    "ReadOnlyError",
    "RegistryError",
    "UnknownParameterError",
]
