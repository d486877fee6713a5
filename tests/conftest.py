"""Shared pytest fixtures for CLI, rendering, and render-loop tests.

Fixture names read as plain English; tests receive them through pytest's
conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from markdown_echarts.adapters.memory import RenderSpy
    from markdown_echarts.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


@pytest.fixture(autouse=True)
def shutdown_logging_runtime() -> Iterator[None]:
    """Tear down any lib_log_rich runtime a test started so tests stay independent."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Fresh CliRunner; use ``result.stdout`` to keep log lines out of parsed output."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """The ``build_production`` services factory."""
    from markdown_echarts.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Helper removing ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from clean ``lib_cli_exit_tools`` traceback flags and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}
    try:
        yield
    finally:
        for name, value in snapshot.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Drop cached layered configuration before the test."""
    from markdown_echarts.adapters.config import loader

    loader.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class ChartCliContext:
    """Services factory plus the spy capturing Markdown renders."""

    factory: Callable[[], Any]
    spy: RenderSpy


@pytest.fixture
def chart_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], ChartCliContext]:
    """Wire in-memory services around a given configuration dict.

    Markdown rendering goes through :class:`RenderSpy`, which uses the real
    plugin with sequential element ids.

    Example:
        def test_render(cli_runner, chart_cli_context, tmp_path):
            ctx = chart_cli_context({"echarts": {"defaults": {"title": {"left": "center"}}}})
            result = cli_runner.invoke(cli, ["render", str(source)], obj=ctx.factory)
    """
    from markdown_echarts.adapters.memory import RenderSpy
    from markdown_echarts.composition import build_testing

    def _create(config_data: dict[str, Any]) -> ChartCliContext:
        spy = RenderSpy()
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_testing(spy=spy), get_config=_fake_get_config)
        return ChartCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Production services except for ``get_config``, which returns the given data."""
    from markdown_echarts.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), get_config=_fake_get_config)
        return lambda: services

    return _create


@pytest.fixture
def write_markdown(tmp_path: Path) -> Callable[[str], Path]:
    """Write a Markdown document into ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "doc.md") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
