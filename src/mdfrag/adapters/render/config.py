"""Render settings model and loader for the ``[mdfrag]`` config section.

Validates the section once at the boundary with Pydantic and hands the CLI
an immutable, typed settings object.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from mdfrag.domain.behaviors import DEMO_TITLE
from mdfrag.domain.errors import ConfigurationError


class RenderConfig(BaseModel):
    """Validated, immutable render settings.

    Attributes:
        code_language: Fence language used for code blocks in the demo document.
        escape_input: Escape text arguments of ``format`` before formatting.
        demo_title: Title of the demo document.
        show_roadmap: Include the task list section in the demo document.

    Example:
        >>> config = RenderConfig(code_language="go")
        >>> config.code_language
        'go'
        >>> config.escape_input
        False
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    code_language: str = "python"
    escape_input: bool = False
    demo_title: str = DEMO_TITLE
    show_roadmap: bool = True

    @field_validator("code_language", mode="after")
    @classmethod
    def _reject_multiline_language(cls, v: str) -> str:
        """Refuse fence languages that would break out of the info string.

        Examples:
            >>> RenderConfig._reject_multiline_language(" go ")
            'go'
        """
        if "\n" in v or "`" in v:
            raise ValueError(f"code_language must be a single word, got {v!r}")
        return v.strip()


def load_render_config_from_dict(config_dict: Mapping[str, Any]) -> RenderConfig:
    """Load RenderConfig from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Settings are read from its ``mdfrag`` section.

    Returns:
        Render settings with defaults for missing values.

    Raises:
        ConfigurationError: When the section is not a table or holds invalid values.

    Example:
        >>> load_render_config_from_dict({"mdfrag": {"code_language": "rust"}}).code_language
        'rust'
        >>> load_render_config_from_dict({}).show_roadmap
        True
    """
    section: Any = config_dict.get("mdfrag", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[mdfrag] must be a table, got {type(section).__name__}")

    try:
        return RenderConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [mdfrag] settings: {exc}") from exc


__all__ = [
    "RenderConfig",
    "load_render_config_from_dict",
]
