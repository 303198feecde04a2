"""Parameter templates and the typed configuration registry.

A :class:`ConfigTemplate` binds an enumeration of parameter identities to one
:class:`~typedcfg.domain.parameters.Parameter` declaration per member. A
:class:`ConfigRegistry` instantiates that template once against an override
mapping and then serves typed reads and string-based writes.

Contents:
    * :class:`ConfigTemplate` - validated enumeration-to-declaration mapping.
    * :class:`ConfigRegistry` - typed ``get``/``set`` over exclusively owned values.
    * :class:`ParameterInfo` - immutable snapshot used for display.

System Role:
    Application layer. Orchestrates the pure domain objects (factory, values,
    coercion) and logs through the standard library logger, which the CLI
    bridges to lib_log_rich.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, overload

from ..domain.coercion import CoercionTarget, coerce
from ..domain.enums import StorageKind
from ..domain.errors import ConfigurationError, ReadOnlyError, UnknownParameterError
from ..domain.factory import ValueFactory
from ..domain.inttypes import IntType
from ..domain.parameters import Parameter
from ..domain.values import ConfigValue

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Enum)


class ConfigTemplate(Generic[P]):
    """Declarations for every member of one parameter enumeration.

    Args:
        enum_type: The enumeration whose members identify the parameters.
        declarations: One :class:`Parameter` per member of ``enum_type``.

    Raises:
        ConfigurationError: If a member lacks a declaration, a key is not a
            member of ``enum_type``, or two declarations share a name.

    Example:
        >>> from enum import Enum, auto
        >>> from typedcfg.domain.parameters import read_only_int
        >>> class Parm(Enum):
        ...     NUM_NODES = auto()
        >>> template = ConfigTemplate(Parm, {Parm.NUM_NODES: read_only_int("NUM_NODES", 3, "Nodes")})
        >>> template[Parm.NUM_NODES].default
        3
    """

    def __init__(self, enum_type: type[P], declarations: Mapping[P, Parameter]) -> None:
        foreign = [key for key in declarations if not isinstance(key, enum_type)]
        if foreign:
            raise ConfigurationError(f"{enum_type.__name__} template has foreign keys: {foreign!r}")

        missing = [member.name for member in enum_type if member not in declarations]
        if missing:
            raise ConfigurationError(f"{enum_type.__name__} template has no declaration for: {', '.join(missing)}")

        names = [declarations[member].name for member in enum_type]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(f"{enum_type.__name__} template repeats names: {', '.join(duplicates)}")

        self._enum_type = enum_type
        # Declaration order of the enumeration, regardless of mapping order.
        self._declarations: dict[P, Parameter] = {member: declarations[member] for member in enum_type}

    @property
    def enum_type(self) -> type[P]:
        return self._enum_type

    def __getitem__(self, parm: P) -> Parameter:
        return self._declarations[parm]

    def items(self) -> Iterator[tuple[P, Parameter]]:
        return iter(self._declarations.items())

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"ConfigTemplate({self._enum_type.__name__}, {len(self)} parameters)"


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Snapshot of one parameter's declaration and current value.

    Attributes:
        parm: Enumeration member identifying the parameter.
        name: Declared name.
        kind: Storage kind.
        int_type: Declared integer width for integer kinds, else ``None``.
        value: Current value as canonical text.
        help: Description.
    """

    parm: Enum
    name: str
    kind: StorageKind
    int_type: IntType | None
    value: str
    help: str

    @property
    def updatable(self) -> bool:
        return self.kind.updatable

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this snapshot."""
        return {
            "parameter": self.parm.name,
            "name": self.name,
            "kind": self.kind.value,
            "int_type": self.int_type.name if self.int_type is not None else None,
            "updatable": self.updatable,
            "value": self.value,
            "help": self.help,
        }


class ConfigRegistry(Generic[P]):
    """Typed registry holding one configuration value per template member.

    Construction resolves every parameter exactly once: an override keyed by
    the parameter's declared name wins over its hard-coded default. The
    override mapping is not retained. A :class:`ParseError` during
    construction propagates and no registry is produced.

    The registry exclusively owns its values. After construction completes,
    concurrent ``get`` calls are safe, and ``set`` on an updatable parameter
    is visible to every subsequent ``get``.

    Args:
        template: Declarations for every member of the enumeration.
        overrides: Optional parameter name to override text mapping.

    Raises:
        ParseError: If an integer override is not an integer literal.

    Example:
        >>> from typedcfg.catalogs import DATABASE_TEMPLATE, DatabaseConfigParm
        >>> registry = ConfigRegistry(DATABASE_TEMPLATE, {"MAX_ROWS_PER_ROWGROUP": "512"})
        >>> registry.get(DatabaseConfigParm.MAX_ROWS_PER_ROWGROUP, str)
        '512'
        >>> registry.set(DatabaseConfigParm.CACHE_MEM_SZ, "4096000")
        >>> registry.get(DatabaseConfigParm.CACHE_MEM_SZ, int)
        4096000
    """

    def __init__(self, template: ConfigTemplate[P], overrides: Mapping[str, str] | None = None) -> None:
        factory = ValueFactory(overrides or {})
        self._enum_type = template.enum_type
        self._values: dict[P, ConfigValue] = {parm: factory.build(parameter) for parm, parameter in template.items()}

        declared = {value.name for value in self._values.values()}
        applied = sorted(declared & factory.overrides.keys())
        unused = sorted(factory.overrides.keys() - declared)
        logger.debug(
            "Built config registry",
            extra={
                "enum": self._enum_type.__name__,
                "parameters": len(self._values),
                "overridden": applied,
            },
        )
        if unused:
            logger.debug(
                "Ignoring overrides that match no declared parameter",
                extra={"enum": self._enum_type.__name__, "unused": unused},
            )

    @property
    def enum_type(self) -> type[P]:
        return self._enum_type

    def _lookup(self, parm: P) -> ConfigValue:
        if not isinstance(parm, self._enum_type):
            raise UnknownParameterError(f"{parm!r} is not a {self._enum_type.__name__} parameter")
        return self._values[parm]

    @overload
    def get(self, parm: P) -> str: ...
    @overload
    def get(self, parm: P, as_type: type[str]) -> str: ...
    @overload
    def get(self, parm: P, as_type: type[bool]) -> bool: ...
    @overload
    def get(self, parm: P, as_type: type[int] | IntType) -> int: ...

    def get(self, parm: P, as_type: CoercionTarget = str) -> str | bool | int:
        """Return the value of ``parm`` coerced to ``as_type``.

        Args:
            parm: Parameter identity.
            as_type: ``str`` (default), ``bool``, ``int`` or a sized
                :class:`~typedcfg.domain.inttypes.IntType`.

        Raises:
            UnknownParameterError: If ``parm`` does not belong to this registry.
            ParseError: If an integer is requested from non-numeric text.
            TypeError: If ``as_type`` is unsupported.
        """
        return coerce(self._lookup(parm), as_type)

    def set(self, parm: P, text: str) -> None:
        """Replace the value of ``parm`` with ``text`` parsed for its kind.

        Raises:
            UnknownParameterError: If ``parm`` does not belong to this registry.
            ReadOnlyError: If ``parm`` is read-only; the value is unchanged.
            ParseError: If ``text`` cannot be parsed; the value is unchanged.
        """
        value = self._lookup(parm)
        try:
            value.mutate(text)
        except ReadOnlyError:
            logger.warning("Rejected update of read-only parameter", extra={"parameter": value.name})
            raise
        logger.info("Updated config parameter", extra={"parameter": value.name, "value": value.as_text()})

    def describe(self, parm: P) -> ParameterInfo:
        """Return a snapshot of ``parm``'s declaration and current value."""
        value = self._lookup(parm)
        return ParameterInfo(
            parm=parm,
            name=value.name,
            kind=value.kind,
            int_type=getattr(value, "int_type", None),
            value=value.as_text(),
            help=value.help,
        )

    def describe_all(self) -> list[ParameterInfo]:
        """Return snapshots of every parameter in declaration order."""
        return [self.describe(parm) for parm in self._values]

    def __contains__(self, parm: object) -> bool:
        return isinstance(parm, self._enum_type) and parm in self._values

    def __iter__(self) -> Iterator[P]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigRegistry({self._enum_type.__name__}, {len(self)} parameters)"


__all__ = [
    "ConfigRegistry",
    "ConfigTemplate",
    "ParameterInfo",
]
