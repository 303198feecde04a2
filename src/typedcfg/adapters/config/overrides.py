"""Override sources: ``--set`` CLI overrides and per-catalog override tables.

Two concerns meet here:

* ``--set SECTION.KEY=VALUE`` strings are parsed and deep-merged into the
  layered :class:`~lib_layered_config.Config`, exactly like any other layer.
* The ``[overrides.<catalog>]`` table of the merged Config is flattened into
  the ``name -> text`` mapping a registry consumes at construction.

Contents:
    * :func:`parse_override` / :func:`coerce_value` / :func:`apply_overrides`
    * :func:`render_override` / :func:`load_catalog_overrides`
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, cast

import orjson
from lib_layered_config import Config

from typedcfg.domain.enums import CatalogName
from typedcfg.domain.errors import ConfigurationError
from typedcfg.domain.parsing import format_bool

#: Top-level config section whose sub-tables hold per-catalog overrides.
OVERRIDES_SECTION: Final[str] = "overrides"

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed ``--set`` override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first dot separates the top-level section from the key path and the
    first ``=`` separates the dotted path from the value. Values under the
    ``overrides`` section stay verbatim text, since the registry parses them
    for each parameter's kind; other values are coerced via :func:`coerce_value`.

    Raises:
        ValueError: If the string lacks ``=``, has no dot in the key, or has
            empty section/key components.

    Examples:
        >>> override = parse_override("overrides.database.MAX_ROWS_PER_ROWGROUP=512")
        >>> override.section
        'overrides'
        >>> override.key_path
        ('database', 'MAX_ROWS_PER_ROWGROUP')
        >>> override.value
        '512'
        >>> parse_override("lib_log_rich.queue_enabled=false").value
        False
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    value = value_str if section == OVERRIDES_SECTION else coerce_value(value_str)
    return ConfigOverride(section=section, key_path=tuple(key_parts), value=value)


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw ``--set`` value using JSON parsing with string fallback.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("4096000")
        4096000
        >>> coerce_value("alluxio")
        'alluxio'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into a nested dict, creating intermediate tables.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="overrides", key_path=("cluster", "NUM_NODES"), value=5))
        >>> d["overrides"]["cluster"]["NUM_NODES"]
        5
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into a Config instance.

    Returns:
        New Config with overrides applied, or ``config`` itself when
        ``raw_overrides`` is empty.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"overrides": {"cluster": {"NUM_NODES": 3}}}, {})
        >>> apply_overrides(cfg, ("overrides.cluster.NUM_NODES=5",))["overrides"]["cluster"]["NUM_NODES"]
        '5'
        >>> apply_overrides(cfg, ("overrides.database.SHARED_FS=1.10",))["overrides"]["database"]["SHARED_FS"]
        '1.10'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


def render_override(key: str, value: object) -> str:
    """Render a scalar config value as override text.

    Booleans become ``true``/``false``; integers and strings use their plain
    text form. Floats are refused because their TOML spelling is already lost
    (``1.10`` arrives as ``1.1``); quote such values to keep them as text.

    Raises:
        ConfigurationError: If ``value`` is a float, table, array or null.

    Examples:
        >>> render_override("INSERT_FLUSH", False)
        'false'
        >>> render_override("NUM_NODES", 5)
        '5'
        >>> render_override("SHARED_FS", "hdfs")
        'hdfs'
    """
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, str)):
        return str(value)
    raise ConfigurationError(f"Override {key!r} must be a string, integer or boolean, got {type(value).__name__}")


def load_catalog_overrides(config: Config, catalog: CatalogName) -> dict[str, str]:
    """Flatten ``[overrides.<catalog>]`` into a ``name -> text`` mapping.

    Returns:
        The override mapping; empty when the table is absent.

    Raises:
        ConfigurationError: If the table is not a table or holds non-scalars.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"overrides": {"cluster": {"INSERT_FLUSH": False, "NUM_NODES": 5}}}, {})
        >>> load_catalog_overrides(cfg, CatalogName.CLUSTER)
        {'INSERT_FLUSH': 'false', 'NUM_NODES': '5'}
        >>> load_catalog_overrides(cfg, CatalogName.DATABASE)
        {}
    """
    table: object = config.get(f"{OVERRIDES_SECTION}.{catalog.value}", default={})
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"[{OVERRIDES_SECTION}.{catalog.value}] must be a table")
    entries = cast("Mapping[str, object]", table)
    return {str(key): render_override(str(key), value) for key, value in entries.items()}


__all__ = [
    "OVERRIDES_SECTION",
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "load_catalog_overrides",
    "parse_override",
    "render_override",
]
