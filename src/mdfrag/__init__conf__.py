"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers select the platform-specific configuration directories used by
lib_layered_config.
"""

from __future__ import annotations

name = "mdfrag"
title = "Composable Markdown fragment builders"
version = "1.0.0"
shell_command = "mdfrag"

# Configuration identifiers for lib_layered_config path resolution.
LAYEREDCONF_VENDOR: str = "mdfrag"
LAYEREDCONF_APP: str = "Mdfrag"
LAYEREDCONF_SLUG: str = "mdfrag"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mdfrag:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
