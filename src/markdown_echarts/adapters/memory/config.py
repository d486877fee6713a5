"""In-memory configuration adapters - no filesystem, no layered discovery."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a Config holding only an empty ``[echarts]`` section."""
    return Config({"echarts": {}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the call and print nothing."""


__all__ = ["display_config_in_memory", "get_config_in_memory"]
