"""Shared types for the glide update loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt_ms: int
    elapsed_ms: int
    request_stop: Callable[[], None]


UpdateListener = Callable[[TickContext], None]
