"""Sized integer descriptors and two's-complement truncation.

Python integers are unbounded, so narrowing to a fixed width has to be spelled
out instead of relying on the host's conversion rules. :class:`IntType`
describes one width/signedness pair and knows how to wrap an arbitrary integer
into it.

Contents:
    * :class:`IntType` - width/signedness descriptor with :meth:`IntType.truncate`.
    * ``INT8`` … ``UINT64`` - the eight standard descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class IntType:
    """A fixed-width integer type.

    Attributes:
        bits: Width in bits (8, 16, 32 or 64).
        signed: Whether the top bit is a sign bit.

    Example:
        >>> UINT8.truncate(131072)
        0
        >>> INT8.truncate(200)
        -56
        >>> UINT8.truncate(-1)
        255
    """

    bits: int
    signed: bool

    @property
    def name(self) -> str:
        """Conventional lower-case name, e.g. ``'int16'`` or ``'uint64'``."""
        return f"{'' if self.signed else 'u'}int{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def truncate(self, value: int) -> int:
        """Wrap ``value`` into this type by keeping its low ``bits`` bits.

        No range check is made; out-of-range values wrap silently, exactly as
        a two's-complement cast would.

        Example:
            >>> INT16.truncate(131072)
            0
            >>> INT16.truncate(32768)
            -32768
            >>> UINT64.truncate(-1) == 2**64 - 1
            True
        """
        low = value & ((1 << self.bits) - 1)
        if self.signed and low >> (self.bits - 1):
            return low - (1 << self.bits)
        return low

    @classmethod
    def parse_name(cls, name: str) -> IntType:
        """Look up a standard descriptor by name (case-insensitive).

        Raises:
            ValueError: If ``name`` is not one of ``int8`` … ``uint64``.

        Example:
            >>> IntType.parse_name("UInt32") is UINT32
            True
        """
        try:
            return INT_TYPES[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown integer type {name!r}; expected one of {', '.join(INT_TYPES)}") from None

    def __str__(self) -> str:
        return self.name


INT8: Final = IntType(8, signed=True)
UINT8: Final = IntType(8, signed=False)
INT16: Final = IntType(16, signed=True)
UINT16: Final = IntType(16, signed=False)
INT32: Final = IntType(32, signed=True)
UINT32: Final = IntType(32, signed=False)
INT64: Final = IntType(64, signed=True)
UINT64: Final = IntType(64, signed=False)

#: Standard descriptors keyed by their conventional name.
INT_TYPES: Final[dict[str, IntType]] = {
    t.name: t for t in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64)
}


__all__ = [
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT_TYPES",
    "IntType",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
]
