"""CLI stories for the registry commands: params, get, set and demo."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result

from typedcfg.adapters import cli as cli_mod

# ======================== params ========================


@pytest.mark.os_agnostic
def test_params_lists_database_defaults(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    strip_ansi: Callable[[str], str],
) -> None:
    factory = config_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["params", "database"], obj=factory)

    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert "[database]" in output
    assert "STRIDE_SIZE = 512" in output
    assert 'SHARED_FS = "alluxio"' in output


@pytest.mark.os_agnostic
def test_params_reflects_configured_overrides(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"overrides": {"cluster": {"NUM_NODES": 7, "INSERT_FLUSH": False}}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["params", "cluster", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    entries = {entry["name"]: entry for entry in orjson.loads(result.stdout)["cluster"]}
    assert entries["NUM_NODES"]["value"] == "7"
    assert entries["INSERT_FLUSH"]["value"] == "false"
    assert entries["ZK_TIMEOUT"]["value"] == "10000"


@pytest.mark.os_agnostic
def test_params_accepts_catalog_in_any_case(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["params", "CLUSTER", "--format", "json"], obj=config_cli_context({})
    )

    assert result.exit_code == 0
    assert "cluster" in orjson.loads(result.stdout)


@pytest.mark.os_agnostic
def test_params_rejects_unknown_catalog(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["params", "network"], obj=config_cli_context({}))

    assert result.exit_code == 2


# ======================== get ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["get", "database", "MAX_ROWS_PER_ROWGROUP"], "10000"),
        (["get", "database", "stridesize", "--as", "int64"], "512"),
        (["get", "database", "SHARED_FS"], "alluxio"),
        (["get", "cluster", "QUORUM_WRITE", "--as", "bool"], "true"),
        (["get", "cluster", "INSERT_FLUSH", "--as", "int"], "1"),
        (["get", "cluster", "NUM_NODES", "--as", "uint8"], "3"),
    ],
)
def test_get_prints_coerced_defaults(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    args: list[str],
    expected: str,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, args, obj=config_cli_context({}))

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


@pytest.mark.os_agnostic
def test_get_reads_override_from_configuration(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"overrides": {"database": {"MAX_ROWS_PER_ROWGROUP": 512}}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["get", "database", "MAX_ROWS_PER_ROWGROUP"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == "512"


@pytest.mark.os_agnostic
def test_get_narrows_to_requested_width(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"overrides": {"database": {"CACHE_MEM_SZ": 131072}}})

    narrow: Result = cli_runner.invoke(cli_mod.cli, ["get", "database", "CACHE_MEM_SZ", "--as", "uint8"], obj=factory)
    wide: Result = cli_runner.invoke(cli_mod.cli, ["get", "database", "CACHE_MEM_SZ", "--as", "uint64"], obj=factory)

    assert narrow.stdout.strip() == "0"
    assert wide.stdout.strip() == "131072"


@pytest.mark.os_agnostic
def test_get_text_as_int_exits_with_parse_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["get", "database", "SHARED_FS", "--as", "int"], obj=config_cli_context({})
    )

    assert result.exit_code == 65
    assert "cannot parse 'alluxio' as integer" in result.stderr


@pytest.mark.os_agnostic
def test_get_unknown_parameter_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["get", "cluster", "CACHE_MEM_SZ"], obj=config_cli_context({}))

    assert result.exit_code == 22
    assert "cluster has no parameter named 'CACHE_MEM_SZ'" in result.stderr


@pytest.mark.os_agnostic
def test_get_rejects_unknown_target_type(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["get", "cluster", "NUM_NODES", "--as", "float"], obj=config_cli_context({})
    )

    assert result.exit_code == 2


# ======================== set ========================


@pytest.mark.os_agnostic
def test_set_updates_updatable_parameter(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["set", "database", "CACHE_MEM_SZ", "4096000", "--as", "uint64"],
        obj=config_cli_context({}),
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "4096000"


@pytest.mark.os_agnostic
def test_set_prints_value_in_requested_width(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["set", "database", "CACHE_MEM_SZ", "4096000", "--as", "uint8"],
        obj=config_cli_context({}),
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "0"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("catalog", "parameter"),
    [("database", "MAX_ROWS_PER_ROWGROUP"), ("database", "SHARED_FS"), ("cluster", "INSERT_FLUSH")],
)
def test_set_read_only_exits_with_read_only(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    catalog: str,
    parameter: str,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["set", catalog, parameter, "1"], obj=config_cli_context({}))

    assert result.exit_code == 13
    assert f"Read-only config value.  Set is not supported: {parameter}" in result.stderr


@pytest.mark.os_agnostic
def test_set_non_integer_exits_with_parse_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["set", "database", "CACHE_MEM_SZ", "lots"], obj=config_cli_context({})
    )

    assert result.exit_code == 65
    assert "CACHE_MEM_SZ: cannot parse 'lots' as integer" in result.stderr


# ======================== demo ========================


@pytest.mark.os_agnostic
def test_demo_prints_reference_sequence(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["demo"], obj=config_cli_context({}))

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Max Rows Per Row Group = 512",
        "Stridesize = 512",
        "Num nodes = 3",
        "ZK Timeout = 10000",
        "Shared FS Type = alluxio",
        "Stridesize = 512 (4)",
        "Stridesize = 512 (8)",
        "Num nodes = 3 (1)",
        "Quorum Write = true (1)",
        "Cache mem size = 4096000",
        "Insert flush = false (1)",
        "Num nodes = 3 (8)",
        "Cache mem size = 0 (1)",
    ]


@pytest.mark.os_agnostic
def test_demo_ignores_configured_overrides(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """The demonstration always uses its own fixed override mappings."""
    factory = config_cli_context({"overrides": {"cluster": {"NUM_NODES": 9}}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["demo"], obj=factory)

    assert result.exit_code == 0
    assert "Num nodes = 3" in result.stdout.splitlines()
