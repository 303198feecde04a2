"""Centralized logging initialization for all entry points.

Every module logs through ``logging.getLogger(__name__)``; this module turns
on lib_log_rich once per process and bridges the standard library loggers
into it, so registry construction and parameter updates show up in the
same stream as CLI events.

Contents:
    * :class:`LoggingConfigModel` - boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent logging initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from typedcfg import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through untouched to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> model = LoggingConfigModel(service="typedcfg", environment="staging")
        >>> model.environment
        'staging'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name; unspecified settings use
    lib_log_rich's built-in defaults.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime from ``config`` exactly once.

    Loads ``.env`` files so ``LOG_*`` variables are visible, initializes the
    runtime, and attaches the standard library logging bridge. Later calls
    return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
