"""Display layered configuration and registry parameters.

Contents:
    * :func:`display_config` - thin wrapper over lib_layered_config's Rich display.
    * :func:`display_parameters` - TOML-like or JSON listing of a registry's parameters.
"""

from __future__ import annotations

from collections.abc import Sequence

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console
from rich.text import Text

from typedcfg.application.registry import ParameterInfo
from typedcfg.domain.enums import OutputFormat, StorageKind


def _flush_logs() -> None:
    # Keep pending log lines from interleaving with the listing.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: TOML-like human output or JSON.
        section: Optional section name to display only that section.
        console: Optional Rich Console for output.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    _flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


def _render_value(info: ParameterInfo) -> Text:
    if info.kind is StorageKind.READ_ONLY_TEXT:
        return Text(orjson.dumps(info.value).decode(), style="green")
    return Text(info.value, style="cyan")


def _render_human(catalog: str, infos: Sequence[ParameterInfo], console: Console) -> None:
    console.print(Text(f"[{catalog}]", style="bold"), soft_wrap=True)
    for info in infos:
        if info.help:
            console.print(Text(f"# {info.help}", style="dim"), soft_wrap=True)
        kind = info.kind.value if info.int_type is None else f"{info.kind.value} ({info.int_type.name})"
        line = Text.assemble(
            Text(info.name, style="bold"),
            " = ",
            _render_value(info),
            Text(f"  # {kind}", style="dim"),
        )
        console.print(line, soft_wrap=True)


def display_parameters(
    catalog: str,
    infos: Sequence[ParameterInfo],
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    console: Console | None = None,
) -> None:
    """Print every parameter of one catalog.

    Human output is TOML-like, one ``NAME = value  # kind`` line per parameter
    preceded by its help text. JSON output is an object keyed by catalog name
    holding a list of :meth:`ParameterInfo.as_dict` records.

    Args:
        catalog: Catalog name used as the section header / JSON key.
        infos: Parameter snapshots in display order.
        output_format: Human or JSON.
        console: Optional Rich Console for output.
    """
    _flush_logs()
    out = console if console is not None else Console()
    if output_format is OutputFormat.JSON:
        payload = {catalog: [info.as_dict() for info in infos]}
        rendered = orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()
        out.print(rendered, soft_wrap=True, markup=False, highlight=False, emoji=False)
        return
    _render_human(catalog, infos, out)


__all__ = ["display_config", "display_parameters"]
