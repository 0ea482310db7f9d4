"""Carousel configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from glide_bezier import DEFAULT_SMOOTHNESS, InvalidArgumentError


@dataclass(frozen=True)
class CarouselConfig:
    """Immutable settings for a Carousel.

    Attributes:
        animation_time: Duration of one slide transition in milliseconds.
        time_to_rotate: Idle time in milliseconds before auto-rotation
            advances to the next panel.
        auto: Start with auto-rotation enabled.
        show_indicators: Whether the host should draw the indicator row.
        show_buttons: Whether the host should draw the chevron buttons.
        easing: Preset name, ``cubic-bezier(...)`` string or 4-tuple.
        smoothness: Sampling step for the easing curve, in (0, 1).
        edge_fraction: Share of the width on each side that counts as a
            backward/forward tap.
    """

    animation_time: int = 500
    time_to_rotate: int = 5000
    auto: bool = False
    show_indicators: bool = True
    show_buttons: bool = True
    easing: str | tuple[float, float, float, float] = "ease_in_out_back"
    smoothness: float = DEFAULT_SMOOTHNESS
    edge_fraction: float = 0.25

    def __post_init__(self) -> None:
        if self.animation_time <= 0:
            raise InvalidArgumentError("animation_time must be positive")
        if self.time_to_rotate <= 0:
            raise InvalidArgumentError("time_to_rotate must be positive")
        if not 0.0 < self.edge_fraction <= 0.5:
            raise InvalidArgumentError("edge_fraction must be within (0, 0.5]")
