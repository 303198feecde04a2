"""Projection of a configuration value into a caller-requested type.

Supported targets:

* ``str`` - :meth:`as_text`.
* ``bool`` - :meth:`as_bool`.
* ``int`` - :meth:`as_int`, the signed 64-bit canonical integer.
* an :class:`~typedcfg.domain.inttypes.IntType` such as ``UINT8`` -
  :meth:`as_int` wrapped to that width by two's-complement truncation. No range
  check is made; ``131072`` requested as ``UINT8`` yields ``0``.

Any other target raises :class:`TypeError` immediately.
"""

from __future__ import annotations

from typing import TypeAlias, overload

from .inttypes import IntType
from .values import ConfigValue

CoercionTarget: TypeAlias = "type[str] | type[bool] | type[int] | IntType"
"""Every value :func:`coerce` accepts as ``as_type``."""


@overload
def coerce(value: ConfigValue, as_type: type[str]) -> str: ...
@overload
def coerce(value: ConfigValue, as_type: type[bool]) -> bool: ...
@overload
def coerce(value: ConfigValue, as_type: type[int] | IntType) -> int: ...


def coerce(value: ConfigValue, as_type: CoercionTarget) -> str | bool | int:
    """Project ``value`` into ``as_type``.

    Args:
        value: Configuration value to read.
        as_type: ``str``, ``bool``, ``int`` or a sized :class:`IntType`.

    Returns:
        The projected value.

    Raises:
        TypeError: If ``as_type`` is not a supported target.
        ParseError: If an integer is requested from text that is not an
            integer literal.

    Example:
        >>> from typedcfg.domain.inttypes import INT16, UINT8, UINT64
        >>> from typedcfg.domain.values import UpdatableInt
        >>> v = UpdatableInt("CACHE_MEM_SZ", "", 131072)
        >>> coerce(v, UINT8), coerce(v, INT16), coerce(v, UINT64)
        (0, 0, 131072)
        >>> coerce(v, str)
        '131072'
        >>> coerce(v, float)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        TypeError: Unsupported coercion target: float
    """
    # bool is a subclass of int, so it is matched by identity before int.
    if as_type is str:
        return value.as_text()
    if as_type is bool:
        return value.as_bool()
    if as_type is int:
        return value.as_int()
    if isinstance(as_type, IntType):
        return as_type.truncate(value.as_int())
    raise TypeError(f"Unsupported coercion target: {getattr(as_type, '__name__', as_type)!s}")


def parse_target(name: str) -> CoercionTarget:
    """Map a target name such as ``'text'`` or ``'uint8'`` to a coercion target.

    Accepted names: ``text``/``str``, ``bool``, ``int`` and the sized integer
    names ``int8`` … ``uint64``.

    Raises:
        ValueError: If ``name`` is not recognised.

    Example:
        >>> parse_target("text") is str
        True
        >>> parse_target("uint16")
        IntType(bits=16, signed=False)
    """
    lowered = name.lower()
    if lowered in ("text", "str"):
        return str
    if lowered == "bool":
        return bool
    if lowered == "int":
        return int
    return IntType.parse_name(lowered)


#: Target names accepted by :func:`parse_target`, in display order.
TARGET_NAMES: tuple[str, ...] = (
    "text",
    "bool",
    "int",
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
)


__all__ = [
    "CoercionTarget",
    "TARGET_NAMES",
    "coerce",
    "parse_target",
]
