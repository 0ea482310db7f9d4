"""Carousel renderer: panels, indicators and chevron buttons."""
from __future__ import annotations

import pygame

from glide_carousel import Carousel

from ui.constants import CAROUSEL_H, CAROUSEL_W


def draw_carousel(surface: pygame.Surface, carousel: Carousel, font: pygame.font.Font) -> None:
    """Draw every panel at its current offset, clipped to the carousel."""
    surface.set_clip(pygame.Rect(0, 0, CAROUSEL_W, CAROUSEL_H))
    for panel in carousel.panels:
        rect = panel.rect
        if rect.x >= carousel.width or rect.x + rect.width <= 0:
            continue
        title, bg, fg = panel.payload
        pygame.draw.rect(surface, bg, (rect.x, rect.y, rect.width, rect.height))
        label = font.render(title, True, fg)
        surface.blit(
            label,
            (
                rect.x + (rect.width - label.get_width()) // 2,
                rect.y + (rect.height - label.get_height()) // 2,
            ),
        )

    if carousel.show_indicators:
        _draw_indicators(surface, carousel)
    if carousel.show_buttons:
        _draw_buttons(surface, carousel, font)
    surface.set_clip(None)


def _draw_indicators(surface: pygame.Surface, carousel: Carousel) -> None:
    adapter = carousel.adapter
    layout = adapter.indicator_layout()
    r = layout.size // 2
    dim = tuple(int(c * adapter.alpha) for c in adapter.indicator_color)
    for x in layout.xs:
        pygame.draw.circle(surface, dim, (x + r, layout.y + r), r, 1)
    pygame.draw.circle(surface, adapter.indicator_color, (layout.active_x + r, layout.y + r), r)


def _draw_buttons(surface: pygame.Surface, carousel: Carousel, font: pygame.font.Font) -> None:
    adapter = carousel.adapter
    left = font.render("<", True, adapter.button_color)
    right = font.render(">", True, adapter.button_color)
    layout = adapter.button_layout(right.get_width(), right.get_height())
    surface.blit(left, layout.left)
    surface.blit(right, layout.right)
