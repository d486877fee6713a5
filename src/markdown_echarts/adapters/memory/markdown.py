"""Recording stand-in for the Markdown rendering port.

Renders through the real plugin but with sequential element ids, so
output is deterministic and every call can be asserted on.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

from markdown_it import MarkdownIt

from ..config.settings import EchartsSettings
from ..markdown.plugin import echarts_plugin
from ..markup.fragment import ChartRenderer


def _empty_calls() -> list[dict[str, Any]]:
    return []


@dataclass
class RenderSpy:
    """Captures ``render_markdown`` calls.

    Attributes:
        calls: One record per call with the source text and settings.
        raise_exception: When set, every call raises it.

    Example:
        >>> spy = RenderSpy()
        >>> spy.render_markdown("*hi*", settings=EchartsSettings())
        '<p><em>hi</em></p>\\n'
        >>> spy.calls[0]["text"]
        '*hi*'
    """

    calls: list[dict[str, Any]] = field(default_factory=_empty_calls)
    raise_exception: Exception | None = None
    _ids: itertools.count[int] = field(default_factory=lambda: itertools.count(1), repr=False)

    def next_id(self) -> str:
        return f"echarts-{next(self._ids):012d}"

    def render_markdown(self, text: str, *, settings: EchartsSettings) -> str:
        self.calls.append({"text": text, "settings": settings})
        if self.raise_exception is not None:
            raise self.raise_exception
        renderer = ChartRenderer(settings, id_factory=self.next_id)
        md = MarkdownIt("commonmark").enable("table").use(echarts_plugin, renderer=renderer)
        return md.render(text)


__all__ = ["RenderSpy"]
