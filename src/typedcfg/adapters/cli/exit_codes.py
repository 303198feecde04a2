"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a CLI command carries one of these values
instead of a bare ``1``, so scripts can tell a rejected update from a typo.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 13: EACCES, update of a read-only parameter
    * 22: EINVAL, unknown catalog parameter
    * 65: EX_DATAERR, text that does not parse for the parameter's kind
    * 78: EX_CONFIG, malformed configuration or override table

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.READ_ONLY)
        13
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    READ_ONLY = 13
    INVALID_ARGUMENT = 22
    PARSE_ERROR = 65
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
