"""In-memory logging adapter.

Starts a quiet lib_log_rich runtime so that ``runtime.bind`` works inside
commands, without bridging stdlib ``logging`` (pytest's ``caplog`` keeps
seeing module loggers) and without a background queue.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from markdown_echarts import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a console-quiet runtime unless one is already running; *config* is ignored."""
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
            backend_level="CRITICAL",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
