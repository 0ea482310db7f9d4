"""Carousel Demo — slide transitions with cubic-bezier easing.

Exercises glide, glide-bezier, and glide-carousel.

Controls:
  Click   Left/right quarter slides backward/forward
  Arrows  Slide backward/forward
  E / Q   Next / previous easing preset
  +/-     Adjust transition duration
  A       Toggle auto-rotation
  I / B   Toggle indicators / buttons
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from glide import UpdateLoop
from glide_bezier import PRESETS
from glide_carousel import Carousel, CarouselConfig, Direction, Panel

from ui.constants import (
    BG_COLOR,
    CAROUSEL_H,
    CAROUSEL_W,
    FPS,
    SCREEN_H,
    SCREEN_W,
    SLIDES,
    TPS,
)
from ui.plot import draw_curve_plot, draw_status_bar
from ui.slides import draw_carousel

EASING_NAMES = list(PRESETS)


class DemoState:
    """Holds the loop, the carousel and the demo's own settings."""

    def __init__(self, tps: int, easing: str, duration: int, auto: bool) -> None:
        self.loop = UpdateLoop(tps=tps)
        self.carousel = Carousel(
            CAROUSEL_W,
            CAROUSEL_H,
            config=CarouselConfig(
                animation_time=duration, easing=easing, auto=auto, time_to_rotate=3000
            ),
            loop=self.loop,
        )
        self.carousel.add(*[Panel(title, payload=(title, bg, fg)) for title, bg, fg in SLIDES])
        self.easing_index = EASING_NAMES.index(easing)

    def cycle_easing(self, step: int) -> None:
        self.easing_index = (self.easing_index + step) % len(EASING_NAMES)
        self.carousel.set_animation_type(EASING_NAMES[self.easing_index])

    def adjust_duration(self, delta: int) -> None:
        current = self.carousel.transition.animation_time
        self.carousel.set_animation_time(max(100, min(current + delta, 3000)))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="glide carousel demo")
    parser.add_argument("--tps", type=int, default=TPS, help="update loop ticks per second")
    parser.add_argument(
        "--easing", choices=EASING_NAMES, default="ease_in_out_back", help="initial easing preset"
    )
    parser.add_argument("--duration", type=int, default=500, help="transition time in ms")
    parser.add_argument("--auto", action="store_true", help="start with auto-rotation")
    parser.add_argument("--verbose", action="store_true", help="log transitions to stderr")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Carousel Demo — glide-carousel")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    title_font = pygame.font.SysFont("sans", 40)

    state = DemoState(args.tps, args.easing, args.duration, args.auto)
    carousel = state.carousel

    tick_interval = 1000 // args.tps
    accumulator = 0
    running = True

    while running:
        accumulator += clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT:
                    carousel.post(Direction.FORWARD)
                elif event.key == pygame.K_LEFT:
                    carousel.post(Direction.BACKWARD)
                elif event.key == pygame.K_e:
                    state.cycle_easing(1)
                elif event.key == pygame.K_q:
                    state.cycle_easing(-1)
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.adjust_duration(100)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.adjust_duration(-100)
                elif event.key == pygame.K_a:
                    carousel.set_auto(not carousel.auto)
                elif event.key == pygame.K_i:
                    carousel.show_indicators = not carousel.show_indicators
                elif event.key == pygame.K_b:
                    carousel.show_buttons = not carousel.show_buttons

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                mx, my = event.pos
                if mx < CAROUSEL_W and my < CAROUSEL_H:
                    carousel.on_pen_up(mx, my)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.loop.step(tick_interval)
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_carousel(screen, carousel, title_font)
        draw_curve_plot(screen, carousel.transition, font)
        draw_status_bar(screen, font, carousel.auto)
        carousel.consume_repaint()

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
