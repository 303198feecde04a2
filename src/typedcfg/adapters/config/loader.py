"""Read the layered configuration that supplies registry overrides.

``[overrides.<catalog>]`` tables and the ``[lib_log_rich]`` table are the
only sections this package reads; everything else passes through untouched
for ``typedcfg config``.

Contents:
    * :func:`get_config` - cached, profile-aware layered read.
    * :func:`get_default_config_path` - bundled ``defaultconfig.toml``.
    * :func:`validate_profile` - profile name check.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from typedcfg import __init__conf__

_DEFAULT_CONFIG_NAME = "defaultconfig.toml"


class ConfigLoaderProtocol(Protocol):
    """Shape of :func:`get_config`: a keyword-only loader with a cache to reset."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names lib_layered_config would refuse to map onto paths.

    Raises:
        ValueError: For empty, overlong, reserved or path-escaping names.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Locate the ``defaultconfig.toml`` installed next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(_DEFAULT_CONFIG_NAME)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Layers, lowest first: bundled defaults, app, host, user, ``.env``,
    environment. Each ``(profile, start_dir)`` pair is read once per process.

    Args:
        profile: Adds ``profile/<name>/`` to every configuration path.
        start_dir: Where ``.env`` discovery begins; defaults to the working directory.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("overrides.nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "ConfigLoaderProtocol",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
