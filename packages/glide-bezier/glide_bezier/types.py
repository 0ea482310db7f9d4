"""Shared value types and errors for Bezier easing curves."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    x: float = 0.0
    y: float = 0.0


class InvalidArgumentError(ValueError):
    """Raised on bad curve input (smoothness, time fraction, control points)."""
