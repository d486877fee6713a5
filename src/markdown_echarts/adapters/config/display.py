"""Rich display of the merged configuration via lib_layered_config."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredOutputFormat
from lib_layered_config import display_config as render_layered_config
from rich.console import Console

from markdown_echarts.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print *config*, or one *section* of it, with per-key provenance.

    Buffered log records are flushed first so they do not interleave with
    the listing.

    Raises:
        ValueError: If *section* does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_layered_config(
        config,
        output_format=LayeredOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
