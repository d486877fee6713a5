"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_echarts_settings_from_dict
from ..adapters.logging.setup import init_logging
from ..adapters.markdown.plugin import render_markdown

if TYPE_CHECKING:
    from ..adapters.memory import RenderSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadEchartsSettingsFromDict,
        RenderMarkdown,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_settings: LoadEchartsSettingsFromDict = load_echarts_settings_from_dict
    _assert_render_markdown: RenderMarkdown = render_markdown
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding the port implementations the CLI uses."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_echarts_settings_from_dict: LoadEchartsSettingsFromDict
    render_markdown: RenderMarkdown
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the real adapters."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_echarts_settings_from_dict=load_echarts_settings_from_dict,
        render_markdown=render_markdown,
        init_logging=init_logging,
    )


def build_testing(*, spy: RenderSpy | None = None) -> AppServices:
    """Wire in-memory adapters.

    Args:
        spy: RenderSpy to capture Markdown renders; a fresh one when None.
    """
    from ..adapters.memory import (
        RenderSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    render_spy = spy if spy is not None else RenderSpy()
    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_echarts_settings_from_dict=load_echarts_settings_from_dict,
        render_markdown=render_spy.render_markdown,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "display_config",
    "load_echarts_settings_from_dict",
    "render_markdown",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
