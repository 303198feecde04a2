"""``config`` command: show the layered configuration registries are built from.

Contents:
    * :func:`cli_config` - Display merged configuration.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from typedcfg.adapters.config.overrides import OVERRIDES_SECTION, apply_overrides
from typedcfg.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


class _ConfigView(NamedTuple):
    config: Config
    profile: str | None


def _view_for(cli_ctx: CLIContext, profile: str | None) -> _ConfigView:
    """Pick the configuration to show.

    Without ``profile`` the root group's configuration is reused. With one,
    the configuration is read again for that profile and the root ``--set``
    strings are merged on top, so both flags combine the same way they do for
    the registry commands.
    """
    if not profile:
        return _ConfigView(cli_ctx.config, cli_ctx.profile)
    reloaded = cli_ctx.services.get_config(profile=profile)
    return _ConfigView(apply_overrides(reloaded, cli_ctx.set_overrides), profile)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help=f"Show only one top-level section (e.g. '{OVERRIDES_SECTION}' or 'lib_log_rich')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Read this profile instead of the one given to the root command",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration with the source of every value.

    Catalog overrides live in the ``[overrides.database]`` and
    ``[overrides.cluster]`` tables. Layers apply in the order
    defaults -> app -> host -> user -> dotenv -> env, later ones winning.
    An unknown ``--section`` exits with status 22.
    """
    cli_ctx = get_cli_context(ctx)
    view = _view_for(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config", extra={"command": "config", "format": fmt.value, "profile": view.profile}
    ):
        logger.info("Displaying configuration", extra={"section": section, "profile": view.profile})
        click.echo()
        try:
            cli_ctx.services.display_config(view.config, output_format=fmt, section=section, profile=view.profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
