"""Clock and TickContext for the update loop.

The clock has a nominal step derived from the ticks-per-second rate, but a
host may advance it by any measured delta (e.g. a frame timer).
"""

from typing import Callable

from glide.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._nominal_dt_ms = round(1000 / tps)
        self._dt_ms = self._nominal_dt_ms
        self._tick_number = 0
        self._elapsed_ms = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def nominal_dt_ms(self) -> int:
        return self._nominal_dt_ms

    @property
    def dt_ms(self) -> int:
        """Delta of the most recent tick."""
        return self._dt_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    def advance(self, dt_ms: int | None = None) -> int:
        if dt_ms is None:
            dt_ms = self._nominal_dt_ms
        elif dt_ms < 0:
            raise ValueError("dt_ms must not be negative")
        self._dt_ms = dt_ms
        self._elapsed_ms += dt_ms
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt_ms=self._dt_ms,
            elapsed_ms=self._elapsed_ms,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._elapsed_ms = tick_number * self._nominal_dt_ms
        self._dt_ms = self._nominal_dt_ms
