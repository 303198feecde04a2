"""Configuration value variants.

A configuration value is one of four closed variants. Each commits to a single
canonical storage type at construction and projects it to text, integer and
boolean on demand:

    * :class:`ReadOnlyInt` - int, read-only.
    * :class:`ReadOnlyBool` - bool, read-only.
    * :class:`ReadOnlyText` - str, read-only.
    * :class:`UpdatableInt` - int, mutable through :meth:`UpdatableInt.mutate`.

Integer storage is always signed 64-bit; the :class:`IntType` carried by the
integer variants records the declared width for display only.

System Role:
    Pure domain objects. The registry owns every instance exclusively; nothing
    here performs I/O or logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import StorageKind
from .errors import ReadOnlyError
from .inttypes import INT64, IntType
from .parsing import format_bool, parse_bool, parse_int


@dataclass(frozen=True, slots=True)
class ReadOnlyInt:
    """Read-only integer value.

    Example:
        >>> v = ReadOnlyInt("NUM_NODES", "Number of nodes in the cluster.", 3)
        >>> v.as_text(), v.as_int(), v.as_bool()
        ('3', 3, True)
        >>> v.mutate("5")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        typedcfg.domain.errors.ReadOnlyError: Read-only config value.  Set is not supported: NUM_NODES
    """

    kind: ClassVar[StorageKind] = StorageKind.READ_ONLY_INT

    name: str
    help: str
    value: int
    int_type: IntType = INT64

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", INT64.truncate(self.value))

    @property
    def updatable(self) -> bool:
        return False

    def as_text(self) -> str:
        return str(self.value)

    def as_int(self) -> int:
        return self.value

    def as_bool(self) -> bool:
        return self.value != 0

    def mutate(self, text: str) -> None:
        raise ReadOnlyError(self.name)


@dataclass(frozen=True, slots=True)
class ReadOnlyBool:
    """Read-only boolean value.

    Example:
        >>> v = ReadOnlyBool("INSERT_FLUSH", "Does each insert flush?", True)
        >>> v.as_text(), v.as_int(), v.as_bool()
        ('true', 1, True)
    """

    kind: ClassVar[StorageKind] = StorageKind.READ_ONLY_BOOL

    name: str
    help: str
    value: bool

    @property
    def updatable(self) -> bool:
        return False

    def as_text(self) -> str:
        return format_bool(self.value)

    def as_int(self) -> int:
        return int(self.value)

    def as_bool(self) -> bool:
        return self.value

    def mutate(self, text: str) -> None:
        raise ReadOnlyError(self.name)


@dataclass(frozen=True, slots=True)
class ReadOnlyText:
    """Read-only text value.

    Integer projection parses the stored text and fails with
    :class:`~typedcfg.domain.errors.ParseError` when it is not an integer
    literal. Boolean projection applies the boolean text rule.

    Example:
        >>> v = ReadOnlyText("QUORUM_WRITE", "Is quorum write set", "true")
        >>> v.as_text(), v.as_bool()
        ('true', True)
        >>> ReadOnlyText("PORT", "", "8080").as_int()
        8080
    """

    kind: ClassVar[StorageKind] = StorageKind.READ_ONLY_TEXT

    name: str
    help: str
    value: str

    @property
    def updatable(self) -> bool:
        return False

    def as_text(self) -> str:
        return self.value

    def as_int(self) -> int:
        return parse_int(self.value, name=self.name)

    def as_bool(self) -> bool:
        return parse_bool(self.value)

    def mutate(self, text: str) -> None:
        raise ReadOnlyError(self.name)


class UpdatableInt:
    """Runtime-updatable integer value.

    The current value lives in a single attribute. :meth:`mutate` parses the
    new text completely before replacing that attribute with one store, and
    every projection reads it with one load, so readers see either the old or
    the new value and never block.

    Example:
        >>> v = UpdatableInt("CACHE_MEM_SZ", "Memory size of cache", 0)
        >>> v.mutate("4096000")
        >>> v.as_int()
        4096000
    """

    __slots__ = ("_value", "help", "int_type", "name")

    kind: ClassVar[StorageKind] = StorageKind.UPDATABLE_INT

    def __init__(self, name: str, help: str, value: int, int_type: IntType = INT64) -> None:
        self.name = name
        self.help = help
        self.int_type = int_type
        self._value = INT64.truncate(value)

    def __repr__(self) -> str:
        return f"UpdatableInt(name={self.name!r}, value={self._value!r}, int_type={self.int_type})"

    @property
    def updatable(self) -> bool:
        return True

    @property
    def value(self) -> int:
        return self._value

    def as_text(self) -> str:
        return str(self._value)

    def as_int(self) -> int:
        return self._value

    def as_bool(self) -> bool:
        return self._value != 0

    def mutate(self, text: str) -> None:
        """Replace the stored value with the integer parsed from ``text``.

        Raises:
            ParseError: If ``text`` is not an integer literal; the stored value
                is unchanged.
        """
        self._value = parse_int(text, name=self.name)


ConfigValue = ReadOnlyInt | ReadOnlyBool | ReadOnlyText | UpdatableInt
"""Union of every configuration value variant."""


__all__ = [
    "ConfigValue",
    "ReadOnlyBool",
    "ReadOnlyInt",
    "ReadOnlyText",
    "UpdatableInt",
]
