"""Configuration adapter - layered loading, override sources, and display.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.overrides` - ``--set`` parsing and per-catalog override tables
    * :mod:`.display` - Configuration and parameter display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config, display_parameters
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides, load_catalog_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "display_parameters",
    "get_config",
    "get_default_config_path",
    "load_catalog_overrides",
]
