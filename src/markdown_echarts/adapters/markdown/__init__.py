"""Markdown adapter - markdown-it-py integration."""

from __future__ import annotations

from .plugin import build_markdown, echarts_plugin, render_markdown

__all__ = ["build_markdown", "echarts_plugin", "render_markdown"]
