"""Static package metadata and layered-configuration identifiers.

Values here must stay in sync with ``pyproject.toml``; ``tests/test_metadata_sync.py``
guards against drift.

Contents:
    * Package metadata: :data:`name`, :data:`title`, :data:`version`, ...
    * Layered configuration identifiers: ``LAYEREDCONF_VENDOR``, ``LAYEREDCONF_APP``,
      ``LAYEREDCONF_SLUG`` used by lib_layered_config to locate config files.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name.
name = "typedcfg"
#: One-line description shown in ``--help``.
title = "Typed configuration-value registry with layered overrides"
#: Distribution version.
version = "1.0.0"
#: Project homepage.
homepage = "https://github.com/typedcfg/typedcfg"
#: Author name.
author = "typedcfg maintainers"
#: Author e-mail.
author_email = "maintainers@typedcfg.invalid"
#: Console script name.
shell_command = "typedcfg"

#: Vendor directory used on macOS/Windows config paths.
LAYEREDCONF_VENDOR: str = "typedcfg"
#: Application directory used on macOS/Windows config paths.
LAYEREDCONF_APP: str = "typedcfg"
#: Slug used for Linux XDG config paths and environment variable prefixes.
LAYEREDCONF_SLUG: str = "typedcfg"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for typedcfg:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
