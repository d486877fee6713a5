"""Reactive re-render loop for a single chart instance.

Models the behaviour the generated browser runtime implements: every
viewport resize and every color-scheme change requests a render; requests
are coalesced by a trailing-edge debounce; a render re-samples the color
scheme and resolves the chart configuration from scratch.

State machine::

    IDLE --(resize | scheme change)--> PENDING_RENDER
    PENDING_RENDER --(further event)--> PENDING_RENDER   (timer restarted)
    PENDING_RENDER --(debounce elapsed)--> RENDERING --> IDLE

The timer queue, the color-scheme probe, and the drawing consumer are
injected, so tests drive the loop deterministically with a virtual clock.
Instances share no state with each other.

Contents:
    * :class:`RenderState` - loop states.
    * :class:`Debouncer` - trailing-edge debounce on an injected scheduler.
    * :class:`ChartRenderLoop` - the per-chart loop.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Final

from ..domain.merge import copy_tree
from ..domain.resolver import ChartFrame, resolve_config, split_render_options
from .ports import Cancellable, ChartConsumer, ColorSchemeProbe, Scheduler

logger = logging.getLogger(__name__)

#: Debounce window used when ``renderOptions.debounceMillis`` is not set.
DEFAULT_DEBOUNCE_MILLIS: Final[float] = 16


class RenderState(str, Enum):
    """Lifecycle state of a :class:`ChartRenderLoop`."""

    IDLE = "idle"
    PENDING_RENDER = "pending_render"
    RENDERING = "rendering"


def debounce_millis_from(render_options: Mapping[str, Any]) -> float:
    """Return the debounce window configured in ``renderOptions``.

    Missing, non-positive, non-finite and non-numeric values fall back to
    :data:`DEFAULT_DEBOUNCE_MILLIS`.

    Examples:
        >>> debounce_millis_from({"debounceMillis": 250})
        250.0
        >>> debounce_millis_from({})
        16.0
        >>> debounce_millis_from({"debounceMillis": 0})
        16.0
        >>> debounce_millis_from({"debounceMillis": float("inf")})
        16.0
    """
    value = render_options.get("debounceMillis")
    if isinstance(value, (int, float)) and not isinstance(value, bool) and 0 < value < math.inf:
        return float(value)
    return float(DEFAULT_DEBOUNCE_MILLIS)


class Debouncer:
    """Trailing-edge debounce of *callback* on an injected scheduler.

    Each :meth:`trigger` cancels the outstanding timer and starts a new one,
    so only the last trigger of a burst runs the callback.
    """

    __slots__ = ("_scheduler", "_delay_ms", "_callback", "_handle")

    def __init__(self, scheduler: Scheduler, delay_ms: float, callback: Callable[[], None]) -> None:
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._callback = callback
        self._handle: Cancellable | None = None

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        """Whether a timer is outstanding."""
        return self._handle is not None

    def trigger(self) -> None:
        """Restart the debounce window."""
        self.cancel()
        self._handle = self._scheduler.schedule(self._delay_ms, self._fire)

    def cancel(self) -> None:
        """Drop the outstanding timer, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._callback()


class ChartRenderLoop:
    """Resolve and redraw one chart whenever its environment changes.

    The defaults and the chart configuration are captured once at
    construction and never change for the lifetime of the loop.

    Args:
        defaults: Plugin-wide defaults.
        user_config: The chart's own configuration.
        consumer: Drawing engine receiving each :class:`ChartFrame`.
        color_scheme_probe: Samples the current color scheme.
        scheduler: Timer queue used for the debounce.
        debounce_millis: Explicit debounce window; when ``None`` the window is
            read from ``renderOptions.debounceMillis`` of the initial render.

    Example:
        >>> from markdown_echarts.adapters.memory import ConsumerSpy, ManualScheduler, StaticColorScheme
        >>> scheduler, consumer = ManualScheduler(), ConsumerSpy()
        >>> loop = ChartRenderLoop(
        ...     {"title": {"left": "center"}},
        ...     {"title": {"text": "Sales"}},
        ...     consumer=consumer,
        ...     color_scheme_probe=StaticColorScheme(),
        ...     scheduler=scheduler,
        ... )
        >>> loop.start().option
        {'title': {'left': 'center', 'text': 'Sales'}}
        >>> loop.on_resize(); loop.on_resize(); scheduler.advance(16)
        >>> len(consumer.frames)
        2
    """

    def __init__(
        self,
        defaults: Mapping[str, Any],
        user_config: Mapping[str, Any],
        *,
        consumer: ChartConsumer,
        color_scheme_probe: ColorSchemeProbe,
        scheduler: Scheduler,
        debounce_millis: float | None = None,
    ) -> None:
        self._defaults: Mapping[str, Any] = copy_tree(defaults)
        self._user_config: Mapping[str, Any] = copy_tree(user_config)
        self._consumer = consumer
        self._probe = color_scheme_probe
        self._scheduler = scheduler
        self._explicit_debounce = debounce_millis
        self._debouncer: Debouncer | None = None
        self._state = RenderState.IDLE
        self._last_frame: ChartFrame | None = None

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def last_frame(self) -> ChartFrame | None:
        """Frame handed to the consumer by the most recent successful render."""
        return self._last_frame

    @property
    def debounce_millis(self) -> float | None:
        """Active debounce window, known once :meth:`start` has run."""
        return self._debouncer.delay_ms if self._debouncer is not None else None

    def start(self) -> ChartFrame | None:
        """Perform the initial render and arm the debounce.

        Errors while resolving the initial configuration propagate to the
        caller; a failing consumer is logged like any later render.

        Returns:
            The frame drawn, or ``None`` when drawing failed.
        """
        frame = self._resolve_frame()
        delay = self._explicit_debounce
        if delay is None:
            delay = debounce_millis_from(frame.render_options)
        if self._debouncer is not None:
            self._debouncer.cancel()
        self._debouncer = Debouncer(self._scheduler, delay, self._render)
        return self._draw(frame)

    def on_resize(self) -> None:
        """Handle a container resize observation."""
        self._request_render("resize")

    def on_color_scheme_change(self) -> None:
        """Handle a system color-scheme change notification."""
        self._request_render("color-scheme")

    def stop(self) -> None:
        """Drop any pending render; events after this still re-arm the timer."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        if self._state is RenderState.PENDING_RENDER:
            self._state = RenderState.IDLE

    def _request_render(self, reason: str) -> None:
        if self._debouncer is None:
            raise RuntimeError("ChartRenderLoop.start() must run before events are delivered")
        logger.debug("Render requested", extra={"reason": reason, "state": self._state.value})
        self._state = RenderState.PENDING_RENDER
        self._debouncer.trigger()

    def _resolve_frame(self) -> ChartFrame:
        resolved = resolve_config(self._defaults, self._user_config, self._probe())
        return split_render_options(resolved)

    def _render(self) -> None:
        self._state = RenderState.RENDERING
        try:
            self._consumer.resize()
            frame = self._resolve_frame()
        except Exception as exc:
            logger.error("Chart re-render failed", extra={"error": str(exc), "error_type": type(exc).__name__})
            self._settle()
            return
        self._draw(frame)

    def _draw(self, frame: ChartFrame) -> ChartFrame | None:
        self._state = RenderState.RENDERING
        try:
            self._consumer.draw(frame)
        except Exception as exc:
            logger.error("Chart drawing failed", extra={"error": str(exc), "error_type": type(exc).__name__})
            return None
        finally:
            self._settle()
        self._last_frame = frame
        return frame

    def _settle(self) -> None:
        pending = self._debouncer is not None and self._debouncer.pending
        self._state = RenderState.PENDING_RENDER if pending else RenderState.IDLE


__all__ = [
    "DEFAULT_DEBOUNCE_MILLIS",
    "ChartRenderLoop",
    "Debouncer",
    "RenderState",
    "debounce_millis_from",
]
