"""UpdateLoop - periodic tick source, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from glide.clock import Clock
from glide.types import TickContext, UpdateListener

logger = logging.getLogger(__name__)


class UpdateLoop:
    """Delivers millisecond deltas to update listeners, one tick at a time.

    Listeners may add or remove listeners (including themselves) while a tick
    is being dispatched; changes take effect from the next tick.
    """

    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._listeners: list[UpdateListener] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def listeners(self) -> tuple[UpdateListener, ...]:
        return tuple(self._listeners)

    def add_listener(self, listener: UpdateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: UpdateListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def has_listener(self, listener: UpdateListener) -> bool:
        return listener in self._listeners

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt_ms: int | None) -> None:
        self._clock.advance(dt_ms)
        ctx = self._clock.context(self._request_stop)
        for listener in list(self._listeners):
            listener(ctx)
            if self._stop_requested:
                break

    def step(self, dt_ms: int | None = None) -> None:
        """Run one tick. ``dt_ms`` defaults to the clock's nominal step."""
        self._stop_requested = False
        self._tick(dt_ms)

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(ctx)

        for _ in range(n):
            self._tick(None)
            if self._stop_requested:
                break

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(ctx)

    def run_forever(self) -> None:
        """Tick at the nominal rate until a listener requests a stop.

        Each tick carries the measured wall-clock delta since the previous
        one, so slow frames are caught up by a larger delta.
        """
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(ctx)

        period = self._clock.nominal_dt_ms / 1000.0
        last = time.monotonic()
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(round((start - last) * 1000))
            last = start
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = period - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.debug("update loop stopped at tick %d", self._clock.tick_number)
        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(ctx)
