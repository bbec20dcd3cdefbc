"""CLI command implementations.

Contents:
    * Metadata command from :mod:`.info`
    * Fragment commands from :mod:`.fragments`
    * Config command from :mod:`.config`
    * Logging demo from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .fragments import cli_demo, cli_escape, cli_format
from .info import cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_escape",
    "cli_format",
    "cli_info",
    "cli_logdemo",
]
