"""Host timer queue backed by a running asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from markdown_echarts.application.ports import Cancellable


class AsyncioScheduler:
    """Schedule debounce callbacks with ``loop.call_later``.

    Delays arrive in milliseconds and are converted to seconds. When no loop
    is given, the running loop at scheduling time is used.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> Cancellable:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)


__all__ = ["AsyncioScheduler"]
