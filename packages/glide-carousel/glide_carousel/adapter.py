"""Indicator and button layout for a carousel.

The adapter only computes where things go; the host draws them. Subclass it
to change the look (sizes, spacing, colours) without touching the carousel.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glide_carousel.carousel import Carousel

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class IndicatorLayout:
    y: int
    size: int
    xs: tuple[int, ...]
    active_x: int


@dataclass(frozen=True)
class ButtonLayout:
    left: tuple[int, int]
    right: tuple[int, int]


class Adapter:
    def __init__(
        self,
        carousel: Carousel,
        size: int = 8,
        space: int = 8,
        bottom_offset: int = 35,
        margin: int = 8,
        alpha: float = 0.5,
    ) -> None:
        self.carousel = carousel
        self.size = size
        self.space = space
        self.bottom_offset = bottom_offset
        self.margin = margin
        self.alpha = alpha
        self.button_color: Color = WHITE
        self.indicator_color: Color = WHITE

    def set_button_color(self, color: Color) -> None:
        self.button_color = color

    def set_indicator_color(self, color: Color) -> None:
        self.indicator_color = color

    @property
    def indicator_y(self) -> int:
        return self.carousel.height - self.bottom_offset

    def indicator_layout(self) -> IndicatorLayout:
        """One dot per panel, centred horizontally, with the active one marked."""
        count = len(self.carousel.panels)
        pitch = self.size + self.space
        total = count * pitch - self.space if count else 0
        left = (self.carousel.width - total) // 2
        xs = tuple(left + i * pitch for i in range(count))
        return IndicatorLayout(
            y=self.indicator_y,
            size=self.size,
            xs=xs,
            active_x=left + self.carousel.active_index * pitch,
        )

    def button_layout(self, glyph_width: int, glyph_height: int) -> ButtonLayout:
        """Top-left anchors for the left and right chevrons."""
        centre = (self.indicator_y - glyph_height) // 2
        top = centre - glyph_height // 2
        return ButtonLayout(
            left=(self.margin, top),
            right=(self.carousel.width - glyph_width - self.margin, top),
        )
