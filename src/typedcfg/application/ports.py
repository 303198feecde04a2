"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so plain module-level functions satisfy them
structurally (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``Console``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import CatalogName, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .registry import ParameterInfo


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class DisplayParameters(Protocol):
    """Display the parameters of one catalog in the requested format."""

    def __call__(
        self, catalog: str, infos: Sequence[ParameterInfo], *, output_format: OutputFormat = ...
    ) -> None: ...


class LoadCatalogOverrides(Protocol):
    """Extract the ``name -> text`` override mapping for one catalog."""

    def __call__(self, config: Config, catalog: CatalogName) -> dict[str, str]: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "DisplayParameters",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadCatalogOverrides",
]
