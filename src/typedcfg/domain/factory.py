"""Factory that resolves initial values and builds configuration values.

The factory picks each parameter's starting value from the hard-coded default
or, when present, the override text keyed by the parameter's name. It holds
a read-only view of the override mapping and nothing else.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import StorageKind
from .inttypes import INT64, IntType
from .parameters import Parameter
from .parsing import parse_bool, parse_int
from .values import ConfigValue, ReadOnlyBool, ReadOnlyInt, ReadOnlyText, UpdatableInt


class ValueFactory:
    """Build configuration values from defaults and an override mapping.

    Args:
        overrides: Parameter name to override text. Missing names fall back to
            the hard-coded default.

    Example:
        >>> factory = ValueFactory({"MAX_ROWS_PER_ROWGROUP": "512"})
        >>> factory.read_only_int("MAX_ROWS_PER_ROWGROUP", 10000, "").as_text()
        '512'
        >>> factory.read_only_text("SHARED_FS", "alluxio", "").as_text()
        'alluxio'
    """

    def __init__(self, overrides: Mapping[str, str]) -> None:
        self._overrides: Mapping[str, str] = MappingProxyType(dict(overrides))

    def resolve_int(self, key: str, default: int) -> int:
        """Return the override for ``key`` parsed as an integer, else ``default``.

        Raises:
            ParseError: If the override text is not an integer literal.
        """
        text = self._overrides.get(key)
        if text is None:
            return default
        return parse_int(text, name=key)

    def resolve_bool(self, key: str, default: bool) -> bool:
        """Return the override for ``key`` under the boolean text rule, else ``default``."""
        text = self._overrides.get(key)
        if text is None:
            return default
        return parse_bool(text)

    def resolve_text(self, key: str, default: str) -> str:
        """Return the override for ``key`` verbatim, else ``default``."""
        return self._overrides.get(key, default)

    def read_only_int(self, key: str, default: int, help: str, int_type: IntType = INT64) -> ReadOnlyInt:
        return ReadOnlyInt(key, help, self.resolve_int(key, default), int_type)

    def read_only_bool(self, key: str, default: bool, help: str) -> ReadOnlyBool:
        return ReadOnlyBool(key, help, self.resolve_bool(key, default))

    def read_only_text(self, key: str, default: str, help: str) -> ReadOnlyText:
        return ReadOnlyText(key, help, self.resolve_text(key, default))

    def updatable_int(self, key: str, default: int, help: str, int_type: IntType = INT64) -> UpdatableInt:
        return UpdatableInt(key, help, self.resolve_int(key, default), int_type)

    def build(self, parameter: Parameter) -> ConfigValue:
        """Build the value variant matching ``parameter.kind``.

        Raises:
            ParseError: If an integer override is not an integer literal.
            TypeError: If the declared default does not match the kind.
        """
        name, default, help = parameter.name, parameter.default, parameter.help
        match parameter.kind:
            case StorageKind.READ_ONLY_INT:
                return self.read_only_int(name, _int_default(parameter), help, parameter.int_type)
            case StorageKind.UPDATABLE_INT:
                return self.updatable_int(name, _int_default(parameter), help, parameter.int_type)
            case StorageKind.READ_ONLY_BOOL:
                if not isinstance(default, bool):
                    raise TypeError(f"{name}: boolean parameter needs a bool default, got {default!r}")
                return self.read_only_bool(name, default, help)
            case StorageKind.READ_ONLY_TEXT:
                if not isinstance(default, str):
                    raise TypeError(f"{name}: text parameter needs a str default, got {default!r}")
                return self.read_only_text(name, default, help)
        raise TypeError(f"{name}: unsupported storage kind {parameter.kind!r}")

    @property
    def overrides(self) -> Mapping[str, str]:
        """Read-only view of the override mapping."""
        return self._overrides


def _int_default(parameter: Parameter) -> int:
    default = parameter.default
    if isinstance(default, bool) or not isinstance(default, int):
        raise TypeError(f"{parameter.name}: integer parameter needs an int default, got {default!r}")
    return default


__all__ = ["ValueFactory"]
