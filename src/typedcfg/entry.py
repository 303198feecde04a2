"""Console script for the ``typedcfg`` command.

``pyproject.toml`` points ``[project.scripts]`` here. Wiring the production
adapters at package level keeps the ``adapters`` layer free of imports from
``composition``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the registry CLI against the real layered configuration.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.

    Returns:
        Process exit code, e.g. ``13`` after a write to a read-only parameter.
    """
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
