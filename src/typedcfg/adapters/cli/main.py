"""Run the ``typedcfg`` command group and turn every outcome into an exit code.

Commands report registry failures themselves (``SystemExit`` with an
:class:`~.exit_codes.ExitCode`); this module only decides how anything that
escapes a command is printed and which status the process ends with.

Contents:
    * :func:`main` - entry used by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from typedcfg import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from typedcfg.composition import AppServices


def _report_escaped(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit status.

    ``SystemExit(ExitCode.READ_ONLY)`` keeps its code; other exceptions are
    mapped by lib_cli_exit_tools. The traceback is full only with ``--traceback``.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        # Usage errors: unknown catalog, unknown --as target, malformed --set.
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_escaped(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return the process exit code.

    Click runs in non-standalone mode so the services factory can travel as
    ``ctx.obj``; lib_cli_exit_tools.run_cli offers no way to pass it.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: ``build_production`` or ``build_testing``.

    Returns:
        ``0`` on success, an :class:`~.exit_codes.ExitCode` for registry
        failures, ``2`` for usage errors.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from typedcfg.composition import build_testing
        >>> main(["get", "cluster", "NUM_NODES"], services_factory=build_testing)  # doctest: +SKIP
        3
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous_state = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # lib_log_rich is process-wide; a worker thread must not tear it down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
