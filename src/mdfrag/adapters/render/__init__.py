"""Render settings adapter - typed ``[mdfrag]`` configuration.

Contents:
    * :class:`.config.RenderConfig` - Validated render settings model.
    * :func:`.config.load_render_config_from_dict` - Config dict loader.
"""

from __future__ import annotations

from .config import RenderConfig, load_render_config_from_dict

__all__ = [
    "RenderConfig",
    "load_render_config_from_dict",
]
