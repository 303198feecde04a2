"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for failures raised by configuration values and registries."""


class ReadOnlyError(RegistryError):
    """Mutation attempted on a read-only configuration value.

    Raised by ``mutate``/``set`` on every read-only variant. The stored value
    is left untouched.

    Attributes:
        name: Declared name of the offending parameter.

    Example:
        >>> from typedcfg.domain.errors import ReadOnlyError
        >>> err = ReadOnlyError("INSERT_FLUSH")
        >>> str(err)
        'Read-only config value.  Set is not supported: INSERT_FLUSH'
        >>> err.name
        'INSERT_FLUSH'
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Read-only config value.  Set is not supported: {name}")
        self.name = name


class ParseError(RegistryError, ValueError):
    """Text could not be parsed into the destination storage kind.

    Raised for override text at registry construction and for mutation text
    at runtime. Inherits from ValueError so generic ``except ValueError``
    handlers at CLI boundaries keep working.

    Attributes:
        text: The offending input text.
        target: Human-readable name of the destination kind (e.g. ``"integer"``).
        name: Parameter name when known, otherwise ``None``.

    Example:
        >>> from typedcfg.domain.errors import ParseError
        >>> err = ParseError("abc", "integer", name="STRIDE_SIZE")
        >>> str(err)
        "STRIDE_SIZE: cannot parse 'abc' as integer"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, text: str, target: str, *, name: str | None = None) -> None:
        prefix = f"{name}: " if name else ""
        super().__init__(f"{prefix}cannot parse {text!r} as {target}")
        self.text = text
        self.target = target
        self.name = name

    def with_name(self, name: str) -> ParseError:
        """Return a copy of this error attributed to parameter ``name``."""
        return ParseError(self.text, self.target, name=name)


class UnknownParameterError(RegistryError, LookupError):
    """Lookup of a parameter the registry does not hold.

    Templates cover every member of their enumeration, so this only fires when
    a member of a *different* enumeration is passed in. Treat it as a
    programming error, not a recoverable condition.
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a parameter template does not cover its enumeration, or when
    an override section holds values that cannot be rendered as text.

    Example:
        >>> from typedcfg.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No declaration for NUM_NODES")
        >>> str(err)
        'No declaration for NUM_NODES'
    """


__all__ = [
    "ConfigurationError",
    "ParseError",
    "ReadOnlyError",
    "RegistryError",
    "UnknownParameterError",
]
