"""Application ports: Protocol definitions for adapter functions and event sources.

Each callable Protocol defines a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy it by
structural subtyping (PEP 544). The render-loop ports describe what the host
environment injects into :class:`~markdown_echarts.application.render_loop.ChartRenderLoop`.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``EchartsSettings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import ColorScheme, OutputFormat
from ..domain.resolver import ChartFrame

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import EchartsSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadEchartsSettingsFromDict(Protocol):
    """Build plugin settings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> EchartsSettings: ...


class RenderMarkdown(Protocol):
    """Render a Markdown document, turning ``echarts`` fences into chart figures."""

    def __call__(self, text: str, *, settings: EchartsSettings) -> str: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class Cancellable(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Host timer queue used for debouncing."""

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> Cancellable: ...


class ColorSchemeProbe(Protocol):
    """Sample the color scheme currently preferred by the viewing environment."""

    def __call__(self) -> ColorScheme: ...


class ChartConsumer(Protocol):
    """Opaque drawing engine receiving resolved configurations."""

    def resize(self) -> None: ...

    def draw(self, frame: ChartFrame) -> None: ...


__all__ = [
    "Cancellable",
    "ChartConsumer",
    "ColorSchemeProbe",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadEchartsSettingsFromDict",
    "RenderMarkdown",
    "Scheduler",
]
