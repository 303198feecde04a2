"""Per-invocation CLI state and the process-wide traceback switches.

Contents:
    * :class:`CLIContext` - what the root group hands to every subcommand.
    * :func:`store_cli_context` / :func:`get_cli_context`
    * :class:`TracebackState` and the snapshot/apply/restore helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from typedcfg.application.registry import ConfigRegistry
from typedcfg.domain.enums import CatalogName

if TYPE_CHECKING:
    from typedcfg.composition import AppServices


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags ``--traceback`` toggles together."""

    enabled: bool
    force_color: bool


def _empty_registries() -> dict[CatalogName, ConfigRegistry[Any]]:
    return {}


@dataclass(slots=True)
class CLIContext:
    """Configuration, services and registries shared by one CLI run.

    ``set`` on a registry only changes the copy cached here, so a mutation is
    visible to later reads in the same run and gone afterwards.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    registries: dict[CatalogName, ConfigRegistry[Any]] = field(default_factory=_empty_registries)

    def registry(self, catalog: CatalogName) -> ConfigRegistry[Any]:
        """Return the registry for ``catalog``, building it on first use.

        A failed build is not cached.

        Raises:
            ConfigurationError: If the catalog's override table is malformed.
            ParseError: If an integer override is not an integer literal.
        """
        cached = self.registries.get(catalog)
        if cached is None:
            cached = self.services.build_registry(self.config, catalog)
            self.registries[catalog] = cached
        return cached


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Attach a fresh :class:`CLIContext` to ``ctx.obj``.

    ``set_overrides`` is kept so ``config --profile`` can reapply it after
    reloading.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from typedcfg.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=build_testing(), profile="test")
        >>> ctx.obj.profile
        'test'
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the root group has not run for ``ctx``.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn verbose, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
