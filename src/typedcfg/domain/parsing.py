"""Text rules shared by override resolution and runtime mutation."""

from __future__ import annotations

import re
from typing import Final

from .errors import ParseError
from .inttypes import INT64

_INT_LITERAL: Final = re.compile(r"\s*[+-]?[0-9]+\s*")

#: Upper-cased spellings that the boolean text rule maps to ``False``.
FALSE_LITERALS: Final = frozenset({"0", "FALSE", "OFF"})


def parse_int(text: str, *, name: str | None = None) -> int:
    """Parse a decimal integer literal into a signed 64-bit value.

    Accepts an optional sign and decimal digits, optionally surrounded by
    whitespace. Values outside the signed 64-bit range wrap.

    Args:
        text: Literal to parse.
        name: Parameter name used in the error message.

    Raises:
        ParseError: If ``text`` is not an integer literal.

    Example:
        >>> parse_int(" -42 ")
        -42
        >>> parse_int("4096000")
        4096000
        >>> parse_int("12abc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        typedcfg.domain.errors.ParseError: cannot parse '12abc' as integer
    """
    if not _INT_LITERAL.fullmatch(text):
        raise ParseError(text, "integer", name=name)
    return INT64.truncate(int(text))


def parse_bool(text: str) -> bool:
    """Apply the boolean text rule.

    ``"0"``, ``"FALSE"`` and ``"OFF"`` in any ASCII case are false; every other
    string, including the empty string and non-ASCII look-alikes, is true.
    Never fails.

    Example:
        >>> [parse_bool(s) for s in ("true", "yes", "1", "")]
        [True, True, True, True]
        >>> [parse_bool(s) for s in ("0", "false", "Off", "fal\\u017fe")]
        [False, False, False, True]
    """
    return not (text.isascii() and text.upper() in FALSE_LITERALS)


def format_bool(value: bool) -> str:
    """Render a boolean as its canonical text, ``'true'`` or ``'false'``."""
    return "true" if value else "false"


__all__ = [
    "FALSE_LITERALS",
    "format_bool",
    "parse_bool",
    "parse_int",
]
