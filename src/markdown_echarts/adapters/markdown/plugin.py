"""markdown-it-py plugin rendering ``echarts`` fences as chart fragments.

Usage::

    md = MarkdownIt("commonmark").use(echarts_plugin, settings)
    html = md.render(source)

Fences whose info string is ``echarts`` (any case) go through a
:class:`~markdown_echarts.adapters.markup.ChartRenderer`; every other fence
is handed to the rule that was installed before the plugin.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Final

from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token

from markdown_echarts.adapters.config.settings import EchartsSettings
from markdown_echarts.adapters.markup import ChartRenderer

logger = logging.getLogger(__name__)

FENCE_NAME: Final[str] = "echarts"


def is_chart_fence(token: Token) -> bool:
    """Return True for fences tagged ``echarts``.

    Example:
        >>> token = Token("fence", "code", 0)
        >>> token.info = " ECharts "
        >>> is_chart_fence(token)
        True
    """
    return token.info.strip().lower() == FENCE_NAME


def echarts_plugin(
    md: MarkdownIt,
    settings: EchartsSettings | None = None,
    *,
    renderer: ChartRenderer | None = None,
) -> None:
    """Install the ``echarts`` fence rule on *md*.

    Args:
        md: Parser to extend.
        settings: Plugin options; the built-in defaults when ``None``.
        renderer: Pre-built renderer, mainly for injecting an id factory.
    """
    chart_renderer = renderer if renderer is not None else ChartRenderer(settings or EchartsSettings())
    if chart_renderer.settings.verbose:
        logger.info("echarts plugin installed", extra={"settings": chart_renderer.settings.model_dump()})
    previous_rule = md.renderer.rules.get("fence")

    def render_fence(
        self: RendererHTML, tokens: Sequence[Token], idx: int, options: Any, env: Any
    ) -> str:
        token = tokens[idx]
        if is_chart_fence(token):
            return chart_renderer.render(token.content.strip())
        if previous_rule is None:
            return self.renderToken(tokens, idx, options, env)
        return previous_rule(tokens, idx, options, env)

    md.add_render_rule("fence", render_fence)


def build_markdown(settings: EchartsSettings) -> MarkdownIt:
    """Return a CommonMark parser with tables and the chart plugin."""
    return MarkdownIt("commonmark").enable("table").use(echarts_plugin, settings)


def render_markdown(text: str, *, settings: EchartsSettings) -> str:
    """Render a Markdown document to HTML with chart fences expanded.

    Example:
        >>> html = render_markdown("# Report", settings=EchartsSettings())
        >>> html
        '<h1>Report</h1>\\n'
    """
    return build_markdown(settings).render(text)


__all__ = [
    "FENCE_NAME",
    "build_markdown",
    "echarts_plugin",
    "is_chart_fence",
    "render_markdown",
]
