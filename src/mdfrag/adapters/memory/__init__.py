"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory: no filesystem access and no console logging.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.render` - In-memory render settings adapters (RenderConfigSpy)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .render import RenderConfigSpy, load_render_config_from_dict_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from mdfrag.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRenderConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_render_config: LoadRenderConfigFromDict = load_render_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "RenderConfigSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_render_config_from_dict_in_memory",
]
