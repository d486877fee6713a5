"""Render ``echarts`` fences in Markdown into responsive chart figures.

Public surface, routed through the architectural layers:

- Domain: configuration merging and color-scheme aware resolution
- Application: the debounced re-render loop
- Adapters: plugin settings, the markdown-it-py plugin, fragment rendering
- Composition: the wired configuration loader
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.settings import EchartsSettings, load_echarts_settings_from_dict
from .adapters.markdown import echarts_plugin, render_markdown
from .adapters.markup import ChartRenderer
from .application.render_loop import ChartRenderLoop, RenderState
from .composition import get_config
from .domain import (
    ChartError,
    ChartFrame,
    ColorScheme,
    StructuralMergeError,
    UserConfigEvaluationError,
    deep_merge,
    resolve_config,
    split_render_options,
)

__all__ = [
    "ChartError",
    "ChartFrame",
    "ChartRenderLoop",
    "ChartRenderer",
    "ColorScheme",
    "EchartsSettings",
    "RenderState",
    "StructuralMergeError",
    "UserConfigEvaluationError",
    "deep_merge",
    "echarts_plugin",
    "get_config",
    "load_echarts_settings_from_dict",
    "print_info",
    "render_markdown",
    "resolve_config",
    "split_render_options",
]
