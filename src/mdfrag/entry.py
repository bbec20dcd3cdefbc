"""Console script entry point for the ``mdfrag`` command.

Wires the production services before handing control to the CLI, so the
adapters layer never imports the composition root itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``mdfrag`` with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
