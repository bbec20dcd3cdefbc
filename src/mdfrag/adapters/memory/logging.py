"""In-memory logging adapter for testing.

Starts a quiet lib_log_rich runtime so commands can bind logging context
without writing anything to the console.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from mdfrag import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Initialize a silent runtime once; events only reach the ring buffer.

    Example:
        >>> init_logging_in_memory(Config({}, {}))  # doctest: +SKIP
        >>> lib_log_rich.runtime.is_initialised()  # doctest: +SKIP
        True
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_stream="none",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
