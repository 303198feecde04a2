"""CLI context helpers: storing state on the Click context and lazy registries."""

from __future__ import annotations

import pytest
import rich_click as click
from lib_layered_config import Config

from typedcfg.adapters.cli.context import CLIContext, get_cli_context, store_cli_context
from typedcfg.catalogs import ClusterConfigParm, DatabaseConfigParm
from typedcfg.composition import build_production, build_testing
from typedcfg.domain.enums import CatalogName
from typedcfg.domain.errors import ConfigurationError


def _context(config: Config) -> CLIContext:
    return CLIContext(traceback=False, config=config, services=build_production())


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    ctx = click.Context(click.Command("test"))

    store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=build_testing(),
        profile="staging",
        set_overrides=("overrides.cluster.NUM_NODES=5",),
    )
    result = get_cli_context(ctx)

    assert result.traceback is True
    assert result.profile == "staging"
    assert result.set_overrides == ("overrides.cluster.NUM_NODES=5",)
    assert result.registries == {}


@pytest.mark.os_agnostic
def test_registry_is_built_once_per_catalog() -> None:
    cli_ctx = _context(Config({"overrides": {"cluster": {"NUM_NODES": 5}}}, {}))

    first = cli_ctx.registry(CatalogName.CLUSTER)
    second = cli_ctx.registry(CatalogName.CLUSTER)

    assert first is second
    assert first.get(ClusterConfigParm.NUM_NODES) == "5"
    assert list(cli_ctx.registries) == [CatalogName.CLUSTER]


@pytest.mark.os_agnostic
def test_registry_mutation_is_visible_to_later_lookups_in_the_same_run() -> None:
    cli_ctx = _context(Config({}, {}))

    cli_ctx.registry(CatalogName.DATABASE).set(DatabaseConfigParm.CACHE_MEM_SZ, "2048")

    assert cli_ctx.registry(CatalogName.DATABASE).get(DatabaseConfigParm.CACHE_MEM_SZ) == "2048"


@pytest.mark.os_agnostic
def test_registry_failure_is_not_cached() -> None:
    cli_ctx = _context(Config({"overrides": {"database": ["not", "a", "table"]}}, {}))

    with pytest.raises(ConfigurationError):
        cli_ctx.registry(CatalogName.DATABASE)

    assert cli_ctx.registries == {}


@pytest.mark.os_agnostic
def test_testing_services_ignore_configured_overrides() -> None:
    cli_ctx = CLIContext(
        traceback=False,
        config=Config({"overrides": {"cluster": {"NUM_NODES": 5}}}, {}),
        services=build_testing(),
    )

    assert cli_ctx.registry(CatalogName.CLUSTER).get(ClusterConfigParm.NUM_NODES) == "3"
