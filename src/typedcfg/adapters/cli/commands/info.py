"""``info`` command: package metadata plus the catalogs this build ships.

Contents:
    * :func:`cli_info` - Display package metadata and catalog sizes.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from typedcfg import __init__conf__
from typedcfg.catalogs import template_for
from typedcfg.domain.enums import CatalogName

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def _catalog_summary() -> str:
    parts = [f"{catalog.value} ({len(template_for(catalog))} parameters)" for catalog in CatalogName]
    return "    catalogs      = " + ", ".join(parts)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show installation metadata and the bundled parameter catalogs.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_info)
        >>> "database (4 parameters)" in result.output
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo(_catalog_summary())


__all__ = ["cli_info"]
