"""The ``typedcfg`` command group.

Global options decide *which* configuration the registries are built from:
``--profile`` selects a layered-config profile and ``--set`` patches single
keys, typically ``overrides.<catalog>.<PARAM>``. Subcommands receive the
result through :class:`~.context.CLIContext`.

Contents:
    * :func:`cli` - root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from typedcfg import __init__conf__
from typedcfg.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from typedcfg.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click types obj as Any


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read the layered configuration and merge ``--set`` on top.

    Raises:
        click.UsageError: If a ``--set`` string is malformed or descends into
            a key that holds a scalar.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Configuration profile whose [overrides.*] tables apply (e.g. 'production')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. overrides.database.STRIDE_SIZE=1024.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Inspect and update the typed configuration registries.

    The configuration is read once per invocation. Logging starts before any
    subcommand runs so registry construction is logged too. Without a
    subcommand the help text is printed.
    """
    services = _services_from(ctx)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Command modules import this package, so they attach after ``cli`` is defined.
def _register_commands() -> None:
    from .commands import cli_config, cli_demo, cli_get, cli_info, cli_params, cli_set

    for command in (cli_info, cli_config, cli_params, cli_get, cli_set, cli_demo):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
