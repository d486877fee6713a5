"""Deterministic event sources for driving :class:`ChartRenderLoop` in tests.

Contents:
    * :class:`ManualScheduler` - virtual clock advanced explicitly.
    * :class:`StaticColorScheme` - color-scheme probe tests can flip.
    * :class:`ConsumerSpy` - records resize and draw calls.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass, field

from ...domain.enums import ColorScheme
from ...domain.resolver import ChartFrame


@dataclass
class ScheduledCall:
    """Handle returned by :meth:`ManualScheduler.schedule`."""

    due_ms: float
    sequence: int
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Timer queue on a virtual millisecond clock.

    Callbacks only run inside :meth:`advance`, in due order, with the clock
    set to their due time.

    Example:
        >>> scheduler, fired = ManualScheduler(), []
        >>> handle = scheduler.schedule(10, lambda: fired.append(scheduler.now_ms))
        >>> scheduler.advance(9); fired
        []
        >>> scheduler.advance(1); fired
        [10.0]
    """

    now_ms: float = 0.0
    _queue: list[ScheduledCall] = field(default_factory=list, repr=False)
    _sequence: itertools.count[int] = field(default_factory=itertools.count, repr=False)

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self.now_ms + delay_ms, next(self._sequence), callback)
        self._queue.append(call)
        return call

    @property
    def pending(self) -> list[ScheduledCall]:
        """Outstanding, non-cancelled calls in due order."""
        return sorted((c for c in self._queue if not c.cancelled), key=lambda c: (c.due_ms, c.sequence))

    def advance(self, delta_ms: float) -> None:
        """Move the clock forward, running every call that falls due."""
        deadline = self.now_ms + delta_ms
        while True:
            due = [c for c in self.pending if c.due_ms <= deadline]
            if not due:
                break
            call = due[0]
            self._queue.remove(call)
            self.now_ms = float(call.due_ms)
            call.callback()
        self._queue = [c for c in self._queue if not c.cancelled]
        self.now_ms = float(deadline)


@dataclass
class StaticColorScheme:
    """Color-scheme probe returning :attr:`scheme` and counting samples."""

    scheme: ColorScheme = ColorScheme.LIGHT
    samples: int = 0

    def __call__(self) -> ColorScheme:
        self.samples += 1
        return self.scheme


def _empty_frames() -> list[ChartFrame]:
    return []


@dataclass
class ConsumerSpy:
    """Chart consumer that records what it is asked to do.

    Attributes:
        frames: Every frame passed to :meth:`draw`.
        resize_count: Number of :meth:`resize` calls.
        raise_exception: When set, :meth:`draw` raises it.
    """

    frames: list[ChartFrame] = field(default_factory=_empty_frames)
    resize_count: int = 0
    raise_exception: Exception | None = None

    def resize(self) -> None:
        self.resize_count += 1

    def draw(self, frame: ChartFrame) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.frames.append(frame)


__all__ = ["ConsumerSpy", "ManualScheduler", "ScheduledCall", "StaticColorScheme"]
