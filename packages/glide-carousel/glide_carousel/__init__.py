"""glide-carousel - A panel carousel with eased slide transitions."""
from __future__ import annotations

from glide_carousel.adapter import Adapter, ButtonLayout, IndicatorLayout
from glide_carousel.carousel import Carousel
from glide_carousel.config import CarouselConfig
from glide_carousel.transition import Participant, TransitionController
from glide_carousel.types import (
    CarouselEvent,
    Direction,
    Panel,
    PanelHost,
    PenEvent,
    Rect,
    Role,
)

__all__ = [
    "Adapter",
    "ButtonLayout",
    "Carousel",
    "CarouselConfig",
    "CarouselEvent",
    "Direction",
    "IndicatorLayout",
    "Panel",
    "PanelHost",
    "Participant",
    "PenEvent",
    "Rect",
    "Role",
    "TransitionController",
]
