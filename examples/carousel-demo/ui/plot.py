"""Easing curve plot and status bar."""
from __future__ import annotations

import pygame

from glide_carousel import TransitionController

from ui.constants import (
    CAROUSEL_H,
    CAROUSEL_W,
    CURVE_COLOR,
    PLOT_BG,
    PLOT_W,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_curve_plot(
    surface: pygame.Surface, transition: TransitionController, font: pygame.font.Font
) -> None:
    """Draw the sampled easing curve with a dot tracking the running transition."""
    x, y, w, h = CAROUSEL_W, 0, PLOT_W, CAROUSEL_H
    pad = 20
    plot_x = x + pad
    plot_w = w - 2 * pad
    # Leave head- and legroom for overshooting curves.
    plot_y = y + h // 4
    plot_h = h // 2

    pygame.draw.rect(surface, PLOT_BG, (x, y, w, h))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h))
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y), (plot_x + plot_w, plot_y))

    def to_screen(px: float, py: float) -> tuple[int, int]:
        return int(plot_x + px * plot_w), int(plot_y + plot_h - py * plot_h)

    points = [to_screen(p.x, p.y) for p in transition.curve.samples]
    if len(points) > 1:
        pygame.draw.lines(surface, CURVE_COLOR, False, points, 2)

    if transition.is_animating:
        t = transition.elapsed_time / transition.animation_time
        pygame.draw.circle(surface, (255, 255, 255), to_screen(t, transition.curve(t)), 4)

    name = font.render(transition.preset.name, True, TEXT_COLOR)
    surface.blit(name, (x + pad, y + 10))
    dur = font.render(f"{transition.animation_time} ms", True, TEXT_DIM)
    surface.blit(dur, (x + pad, y + h - 30))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, auto: bool) -> None:
    y = CAROUSEL_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))
    auto_str = "ON" if auto else "OFF"
    text = (
        f"[Click edge / Arrows] Slide  [E/Q] Easing  [+/-] Duration  "
        f"[A] Auto:{auto_str}  [I] Indicators  [B] Buttons  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
