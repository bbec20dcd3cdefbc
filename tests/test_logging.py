"""Tests for the logging configuration model.

LoggingConfigModel validation is tested here. The init_logging function
is tested via CLI integration tests in test_cli_core.py.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from mdfrag.adapters.logging.setup import LoggingConfigModel


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A missing service name is replaced by the package name."""
    from mdfrag.adapters.logging.setup import _build_runtime_config

    runtime_config = _build_runtime_config(config_factory({}))

    assert runtime_config.service == "mdfrag"
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Values from the [lib_log_rich] section reach the runtime config."""
    from mdfrag.adapters.logging.setup import _build_runtime_config

    runtime_config = _build_runtime_config(
        config_factory({"lib_log_rich": {"service": "docs-builder", "environment": "dev"}})
    )

    assert runtime_config.service == "docs-builder"
    assert runtime_config.environment == "dev"
