"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Render settings
from ..adapters.render.config import load_render_config_from_dict

# Static conformance assertions checked by pyright.
if TYPE_CHECKING:
    from ..adapters.memory.render import RenderConfigSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRenderConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_render_config_from_dict: LoadRenderConfigFromDict = load_render_config_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_render_config_from_dict: LoadRenderConfigFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_render_config_from_dict=load_render_config_from_dict,
        init_logging=init_logging,
    )


def build_testing(*, spy: RenderConfigSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional RenderConfigSpy capturing settings loads. When None,
            settings are parsed directly with the real Pydantic model. Pass a
            spy to assert on the captured calls or to pin the returned settings.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_render_config_from_dict_in_memory,
    )

    load_render_config = spy.load if spy is not None else load_render_config_from_dict_in_memory

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_render_config_from_dict=load_render_config,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "get_default_config_path",
    # Render settings
    "load_render_config_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
