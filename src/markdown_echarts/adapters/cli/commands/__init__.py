"""CLI subcommands registered on the root group.

Contents:
    * :mod:`.info` - package metadata
    * :mod:`.config` - merged configuration display
    * :mod:`.render_cmd` - Markdown to HTML rendering
    * :mod:`.resolve_cmd` - chart configuration resolution
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .render_cmd import cli_render
from .resolve_cmd import cli_resolve

__all__ = ["cli_config", "cli_info", "cli_render", "cli_resolve"]
