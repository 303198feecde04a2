"""Adapters layer - infrastructure and framework integrations.

Connects the registry to the outside world: layered configuration files,
logging, and the command line.

Contents:
    * :mod:`.config` - Layered configuration loading, override sources, display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - rich-click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
