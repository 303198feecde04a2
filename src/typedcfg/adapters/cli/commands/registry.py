"""Registry inspection and mutation CLI commands.

Registries are built per invocation from the ``[overrides.<catalog>]``
section of the layered configuration, so ``set`` only affects the running
process.

Contents:
    * :func:`cli_params` - List every parameter of a catalog.
    * :func:`cli_get` - Read one parameter as a requested type.
    * :func:`cli_set` - Update an updatable parameter and print the new value.
    * :func:`cli_demo` - Walk through both catalogs with fixed overrides.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from typedcfg.application.registry import ConfigRegistry
from typedcfg.catalogs import ClusterConfigParm, DatabaseConfigParm, cluster_config, database_config, parameter_by_name
from typedcfg.domain.coercion import TARGET_NAMES, CoercionTarget, parse_target
from typedcfg.domain.enums import CatalogName, OutputFormat
from typedcfg.domain.errors import ConfigurationError, ParseError, ReadOnlyError
from typedcfg.domain.inttypes import INT32, INT64, UINT8, UINT64
from typedcfg.domain.parsing import format_bool

from ..constants import CLICK_CONTEXT_SETTINGS, DEFAULT_TARGET, DEMO_CLUSTER_OVERRIDES, DEMO_DATABASE_OVERRIDES
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_CATALOG_CHOICE = click.Choice([c.value for c in CatalogName], case_sensitive=False)
_TARGET_CHOICE = click.Choice(list(TARGET_NAMES), case_sensitive=False)


def _load_registry(cli_ctx: CLIContext, catalog: CatalogName) -> ConfigRegistry[Any]:
    """Build the catalog registry, exiting with CONFIG_ERROR on bad overrides."""
    try:
        return cli_ctx.registry(catalog)
    except (ConfigurationError, ParseError) as exc:
        logger.error("Invalid catalog overrides", extra={"catalog": catalog.value, "error": str(exc)})
        click.echo(f"Error: invalid overrides for {catalog.value}: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _resolve_parameter(catalog: CatalogName, name: str) -> Enum:
    try:
        return parameter_by_name(catalog, name)
    except KeyError as exc:
        click.echo(f"Error: {catalog.value} has no parameter named {name!r}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _format_value(value: str | bool | int) -> str:
    if isinstance(value, bool):
        return format_bool(value)
    return str(value)


def _read(registry: ConfigRegistry[Any], parm: Enum, target: CoercionTarget) -> str:
    """Read ``parm`` as ``target``, exiting with PARSE_ERROR when text is not numeric."""
    try:
        return _format_value(registry.get(parm, target))
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.PARSE_ERROR) from exc


@click.command("params", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalog", type=_CATALOG_CHOICE)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_params(ctx: click.Context, catalog: str, output_format: str) -> None:
    """List every parameter of CATALOG with its kind, value and help text.

    Values reflect the defaults merged with ``[overrides.CATALOG]`` from the
    layered configuration and any ``--set`` overrides.
    """
    cli_ctx = get_cli_context(ctx)
    catalog_name = CatalogName(catalog.lower())
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "params", "catalog": catalog_name.value, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-params", extra=extra):
        registry = _load_registry(cli_ctx, catalog_name)
        logger.info("Listing parameters", extra={"catalog": catalog_name.value, "count": len(registry)})
        cli_ctx.services.display_parameters(catalog_name.value, registry.describe_all(), output_format=fmt)


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalog", type=_CATALOG_CHOICE)
@click.argument("parameter")
@click.option(
    "--as",
    "as_type",
    type=_TARGET_CHOICE,
    default=DEFAULT_TARGET,
    show_default=True,
    help="Type to read the value as",
)
@click.pass_context
def cli_get(ctx: click.Context, catalog: str, parameter: str, as_type: str) -> None:
    """Print PARAMETER of CATALOG coerced to the requested type.

    PARAMETER is matched case-insensitively against both the enumeration
    member name (``STRIDESIZE``) and the declared name (``STRIDE_SIZE``).
    Sized integer types truncate like a two's-complement cast.
    """
    cli_ctx = get_cli_context(ctx)
    catalog_name = CatalogName(catalog.lower())
    target = parse_target(as_type)

    extra = {"command": "get", "catalog": catalog_name.value, "parameter": parameter, "as": as_type}
    with lib_log_rich.runtime.bind(job_id="cli-get", extra=extra):
        parm = _resolve_parameter(catalog_name, parameter)
        registry = _load_registry(cli_ctx, catalog_name)
        logger.debug("Reading parameter", extra={"parameter": parm.name, "as": as_type})
        click.echo(_read(registry, parm, target))


@click.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("catalog", type=_CATALOG_CHOICE)
@click.argument("parameter")
@click.argument("value")
@click.option(
    "--as",
    "as_type",
    type=_TARGET_CHOICE,
    default=DEFAULT_TARGET,
    show_default=True,
    help="Type to print the updated value as",
)
@click.pass_context
def cli_set(ctx: click.Context, catalog: str, parameter: str, value: str, as_type: str) -> None:
    """Update PARAMETER of CATALOG to VALUE and print the new value.

    Only updatable parameters accept a new value; read-only parameters exit
    with status 13. The change lasts for this invocation only.
    """
    cli_ctx = get_cli_context(ctx)
    catalog_name = CatalogName(catalog.lower())
    target = parse_target(as_type)

    extra = {"command": "set", "catalog": catalog_name.value, "parameter": parameter}
    with lib_log_rich.runtime.bind(job_id="cli-set", extra=extra):
        parm = _resolve_parameter(catalog_name, parameter)
        registry = _load_registry(cli_ctx, catalog_name)
        try:
            registry.set(parm, value)
        except ReadOnlyError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.READ_ONLY) from exc
        except ParseError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.PARSE_ERROR) from exc
        click.echo(_read(registry, parm, target))


def _sized(value: str | bool | int, size: int) -> str:
    return f"{_format_value(value)} ({size})"


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_demo() -> None:
    """Build both catalogs with fixed overrides and print a sample of reads.

    The database catalog overrides ``MAX_ROWS_PER_ROWGROUP`` to 512 and the
    cluster catalog overrides ``INSERT_FLUSH`` to false. Numbers in
    parentheses are the byte width of the requested type.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_demo)
        >>> print(result.output.splitlines()[-1])
        Cache mem size = 0 (1)
    """
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        logger.info("Running registry demonstration")
        db = database_config(DEMO_DATABASE_OVERRIDES)
        cluster = cluster_config(DEMO_CLUSTER_OVERRIDES)

        lines = [
            f"Max Rows Per Row Group = {db.get(DatabaseConfigParm.MAX_ROWS_PER_ROWGROUP)}",
            f"Stridesize = {db.get(DatabaseConfigParm.STRIDESIZE)}",
            f"Num nodes = {cluster.get(ClusterConfigParm.NUM_NODES)}",
            f"ZK Timeout = {cluster.get(ClusterConfigParm.ZK_TIMEOUT)}",
            f"Shared FS Type = {db.get(DatabaseConfigParm.SHARED_FS_TYPE)}",
            f"Stridesize = {_sized(db.get(DatabaseConfigParm.STRIDESIZE, INT32), 4)}",
            f"Stridesize = {_sized(db.get(DatabaseConfigParm.STRIDESIZE, INT64), 8)}",
            f"Num nodes = {_sized(cluster.get(ClusterConfigParm.NUM_NODES, UINT8), 1)}",
            f"Quorum Write = {_sized(cluster.get(ClusterConfigParm.QUORUM_WRITE, bool), 1)}",
        ]
        db.set(DatabaseConfigParm.CACHE_MEM_SZ, str(4096 * 1000))
        lines += [
            f"Cache mem size = {db.get(DatabaseConfigParm.CACHE_MEM_SZ, UINT64)}",
            f"Insert flush = {_sized(cluster.get(ClusterConfigParm.INSERT_FLUSH, bool), 1)}",
            f"Num nodes = {_sized(cluster.get(ClusterConfigParm.NUM_NODES, UINT64), 8)}",
            f"Cache mem size = {_sized(db.get(DatabaseConfigParm.CACHE_MEM_SZ, UINT8), 1)}",
        ]
        for line in lines:
            click.echo(line)


__all__ = ["cli_demo", "cli_get", "cli_params", "cli_set"]
