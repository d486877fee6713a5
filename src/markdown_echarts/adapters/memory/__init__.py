"""In-memory adapter implementations for testing.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.markdown` - ``RenderSpy`` recording Markdown renders
    * :mod:`.scheduling` - Virtual clock, color-scheme probe, consumer spy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .markdown import RenderSpy
from .scheduling import ConsumerSpy, ManualScheduler, ScheduledCall, StaticColorScheme

if TYPE_CHECKING:
    from markdown_echarts.application.ports import (
        ChartConsumer,
        ColorSchemeProbe,
        DisplayConfig,
        GetConfig,
        InitLogging,
        RenderMarkdown,
        Scheduler,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_render_markdown: RenderMarkdown = RenderSpy().render_markdown
    _assert_scheduler: Scheduler = ManualScheduler()
    _assert_probe: ColorSchemeProbe = StaticColorScheme()
    _assert_consumer: ChartConsumer = ConsumerSpy()

__all__ = [
    "ConsumerSpy",
    "ManualScheduler",
    "RenderSpy",
    "ScheduledCall",
    "StaticColorScheme",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
