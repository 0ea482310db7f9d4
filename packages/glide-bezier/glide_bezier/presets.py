"""Named cubic-bezier easing presets.

Each preset holds the two interior control points of a curve whose endpoints
are fixed at (0, 0) and (1, 1). Values follow the usual CSS easing tables.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from glide_bezier.types import InvalidArgumentError

_PREFIX = "cubic-bezier("


@dataclass(frozen=True)
class EasingPreset:
    name: str
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        # x must stay in [0, 1] or the sampled curve folds back on itself.
        for label, value in (("x1", self.x1), ("x2", self.x2)):
            if not 0.0 <= value <= 1.0:
                raise InvalidArgumentError(
                    f"{label} must be within [0, 1] for preset {self.name!r}, got {value!r}"
                )

    @property
    def controls(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


EASE_IN_SINE = EasingPreset("ease_in_sine", 0.47, 0.0, 0.745, 0.715)
EASE_OUT_SINE = EasingPreset("ease_out_sine", 0.39, 0.575, 0.565, 1.0)
EASE_IN_OUT_SINE = EasingPreset("ease_in_out_sine", 0.445, 0.05, 0.55, 0.95)
EASE_IN_QUAD = EasingPreset("ease_in_quad", 0.55, 0.085, 0.68, 0.53)
EASE_OUT_QUAD = EasingPreset("ease_out_quad", 0.25, 0.46, 0.45, 0.94)
EASE_IN_OUT_QUAD = EasingPreset("ease_in_out_quad", 0.455, 0.03, 0.515, 0.955)
EASE_IN_CUBIC = EasingPreset("ease_in_cubic", 0.55, 0.055, 0.675, 0.19)
EASE_OUT_CUBIC = EasingPreset("ease_out_cubic", 0.215, 0.61, 0.355, 1.0)
EASE_IN_QUART = EasingPreset("ease_in_quart", 0.895, 0.03, 0.685, 0.22)
EASE_OUT_QUART = EasingPreset("ease_out_quart", 0.165, 0.84, 0.44, 1.0)
EASE_IN_QUINT = EasingPreset("ease_in_quint", 0.755, 0.05, 0.855, 0.06)
EASE_OUT_QUINT = EasingPreset("ease_out_quint", 0.23, 1.0, 0.32, 1.0)
EASE_IN_EXPO = EasingPreset("ease_in_expo", 0.95, 0.05, 0.795, 0.035)
EASE_OUT_EXPO = EasingPreset("ease_out_expo", 0.19, 1.0, 0.22, 1.0)
EASE_IN_OUT_EXPO = EasingPreset("ease_in_out_expo", 1.0, 0.0, 0.0, 1.0)
EASE_IN_CIRC = EasingPreset("ease_in_circ", 0.6, 0.04, 0.98, 0.335)
EASE_IN_OUT_CIRC = EasingPreset("ease_in_out_circ", 0.785, 0.135, 0.15, 0.86)
EASE_IN_BACK = EasingPreset("ease_in_back", 0.6, -0.28, 0.735, 0.045)
EASE_OUT_BACK = EasingPreset("ease_out_back", 0.175, 0.885, 0.32, 1.275)
EASE_IN_OUT_BACK = EasingPreset("ease_in_out_back", 0.68, -0.55, 0.265, 1.55)

PRESETS: dict[str, EasingPreset] = {
    p.name: p
    for p in (
        EASE_IN_SINE,
        EASE_OUT_SINE,
        EASE_IN_OUT_SINE,
        EASE_IN_QUAD,
        EASE_OUT_QUAD,
        EASE_IN_OUT_QUAD,
        EASE_IN_CUBIC,
        EASE_OUT_CUBIC,
        EASE_IN_QUART,
        EASE_OUT_QUART,
        EASE_IN_QUINT,
        EASE_OUT_QUINT,
        EASE_IN_EXPO,
        EASE_OUT_EXPO,
        EASE_IN_OUT_EXPO,
        EASE_IN_CIRC,
        EASE_IN_OUT_CIRC,
        EASE_IN_BACK,
        EASE_OUT_BACK,
        EASE_IN_OUT_BACK,
    )
}

PresetLike = Union[EasingPreset, str, tuple[float, float, float, float]]


def get_preset(name: str) -> EasingPreset:
    """Look up a preset by name. Raises KeyError if unknown."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown easing preset: {name!r}") from None


def parse_cubic_bezier(text: str, name: str = "custom") -> EasingPreset:
    """Parse ``'cubic-bezier(x1, y1, x2, y2)'`` into a preset."""
    s = text.strip().lower()
    if not s.startswith(_PREFIX) or not s.endswith(")"):
        raise InvalidArgumentError(f"Invalid cubic-bezier format: {text}")
    parts = [p.strip() for p in s[len(_PREFIX):-1].split(",")]
    if len(parts) != 4:
        raise InvalidArgumentError(
            f"cubic-bezier requires 4 components, got {len(parts)}: {text}"
        )
    try:
        x1, y1, x2, y2 = (float(p) for p in parts)
    except ValueError as e:
        raise InvalidArgumentError(f"Non-numeric cubic-bezier value in {text}") from e
    return EasingPreset(name, x1, y1, x2, y2)


def resolve_preset(value: PresetLike) -> EasingPreset:
    """Accept a preset, a preset name, a cubic-bezier string or a 4-tuple."""
    if isinstance(value, EasingPreset):
        return value
    if isinstance(value, str):
        if value.strip().lower().startswith(_PREFIX):
            return parse_cubic_bezier(value)
        return get_preset(value)
    if len(value) != 4:
        raise InvalidArgumentError(
            f"easing tuple requires 4 components, got {len(value)}"
        )
    x1, y1, x2, y2 = value
    return EasingPreset("custom", float(x1), float(y1), float(x2), float(y2))
