"""glide-bezier - Sampled cubic-bezier easing curves."""
from __future__ import annotations

from glide_bezier.curve import DEFAULT_SMOOTHNESS, BezierCurve
from glide_bezier.presets import (
    PRESETS,
    EasingPreset,
    get_preset,
    parse_cubic_bezier,
    resolve_preset,
)
from glide_bezier.types import InvalidArgumentError, Point

__all__ = [
    "BezierCurve",
    "DEFAULT_SMOOTHNESS",
    "EasingPreset",
    "InvalidArgumentError",
    "PRESETS",
    "Point",
    "get_preset",
    "parse_cubic_bezier",
    "resolve_preset",
]
