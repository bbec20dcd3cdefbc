"""Shared pytest fixtures for CLI and module-entry tests.

Fixtures replace only the configuration I/O boundary; logging and display
stay on the production adapters so CLI stories run the real wiring.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from mdfrag.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when comparing rendered Markdown exactly, so log
    records written to stderr cannot leak into the assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config discovery and logging)."""
    from mdfrag.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a monkeypatched loader may lack ``cache_clear``.
    """
    from mdfrag.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


def _services_with_config(config: Config, **replacements: Any) -> AppServices:
    """Build production services whose ``get_config`` always returns ``config``."""
    from mdfrag.composition import AppServices, build_production

    def _fake_get_config(**_kwargs: Any) -> Config:
        return config

    prod = build_production()
    wiring: dict[str, Any] = {
        "get_config": _fake_get_config,
        "get_default_config_path": prod.get_default_config_path,
        "display_config": prod.display_config,
        "load_render_config_from_dict": prod.load_render_config_from_dict,
        "init_logging": prod.init_logging,
    }
    wiring.update(replacements)
    return AppServices(**wiring)


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides services with an injected Config.

    Example:
        def test_demo(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"mdfrag": {"code_language": "go"}}))
            result = cli_runner.invoke(cli, ["demo"], obj=factory)
            assert "```go" in result.stdout
    """

    def _inject(config: Config) -> Callable[[], AppServices]:
        services = _services_with_config(config)
        return lambda: services

    return _inject


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict straight into a services factory."""

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        services = _services_with_config(Config(config_data, {}))
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every requested profile."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with_config(config, get_config=_capturing_get_config)
        return lambda: services

    return _inject
