"""Runtime adapters - host event sources for the re-render loop."""

from __future__ import annotations

from .asyncio_scheduler import AsyncioScheduler

__all__ = ["AsyncioScheduler"]
