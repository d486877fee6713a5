"""Application layer - the re-render loop and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions and event sources
    * :mod:`.render_loop` - Debounced, color-scheme aware chart re-render loop
"""

from __future__ import annotations

from .ports import (
    Cancellable,
    ChartConsumer,
    ColorSchemeProbe,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadEchartsSettingsFromDict,
    RenderMarkdown,
    Scheduler,
)
from .render_loop import DEFAULT_DEBOUNCE_MILLIS, ChartRenderLoop, Debouncer, RenderState, debounce_millis_from

__all__ = [
    # Ports
    "Cancellable",
    "ChartConsumer",
    "ColorSchemeProbe",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadEchartsSettingsFromDict",
    "RenderMarkdown",
    "Scheduler",
    # Render loop
    "DEFAULT_DEBOUNCE_MILLIS",
    "ChartRenderLoop",
    "Debouncer",
    "RenderState",
    "debounce_millis_from",
]
