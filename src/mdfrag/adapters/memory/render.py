"""In-memory render settings adapter for testing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..render.config import RenderConfig, load_render_config_from_dict


def _empty_call_list() -> list[Mapping[str, Any]]:
    return []


@dataclass
class RenderConfigSpy:
    """Records every settings load and can pin the returned RenderConfig.

    Attributes:
        calls: Configuration dictionaries passed to :meth:`load`.
        fixed: When set, returned instead of parsing the dictionary.

    Example:
        >>> spy = RenderConfigSpy(fixed=RenderConfig(code_language="go"))
        >>> spy.load({"mdfrag": {"code_language": "rust"}}).code_language
        'go'
        >>> len(spy.calls)
        1
    """

    calls: list[Mapping[str, Any]] = field(default_factory=_empty_call_list)
    fixed: RenderConfig | None = None

    def load(self, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Record the call, then return the pinned or parsed settings."""
        self.calls.append(config_dict)
        if self.fixed is not None:
            return self.fixed
        return load_render_config_from_dict(config_dict)


def load_render_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> RenderConfig:
    """Parse render settings with the real Pydantic model."""
    return load_render_config_from_dict(config_dict)


__all__ = [
    "RenderConfigSpy",
    "load_render_config_from_dict_in_memory",
]
