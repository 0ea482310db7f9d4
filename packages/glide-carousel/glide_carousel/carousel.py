"""Carousel - ordered panels, tap handling, and auto-rotation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from glide import EventQueue, make_flush_listener
from glide_carousel.adapter import Adapter, Color
from glide_carousel.config import CarouselConfig
from glide_carousel.transition import TransitionController
from glide_carousel.types import CarouselEvent, Direction, Panel, PenEvent

if TYPE_CHECKING:
    from glide import TickContext, UpdateLoop
    from glide_bezier.presets import PresetLike

logger = logging.getLogger(__name__)


class Carousel:
    """Shows one panel at a time and slides between them.

    Every panel is sized to the carousel. The first panel added starts in
    view; later ones wait just past the right edge.

    Taps are fed in through :meth:`on_pen_up` (or by posting a
    :class:`PenEvent` on the queue). A tap in the right edge band requests a
    forward transition, one in the left band a backward one. Transitions
    start when the queue is flushed; a queued pen event starts its
    transition in the same flush. When the carousel creates
    its own queue and has a loop, it flushes the queue every tick.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: CarouselConfig | None = None,
        loop: UpdateLoop | None = None,
        queue: EventQueue | None = None,
    ) -> None:
        if config is None:
            config = CarouselConfig()
        self._width = width
        self._height = height
        self._config = config
        self._loop = loop
        self._panels: list[Panel] = []
        self._needs_paint = False

        self.show_indicators = config.show_indicators
        self.show_buttons = config.show_buttons
        self.time_to_rotate = config.time_to_rotate
        self._edge_fraction = config.edge_fraction
        self._auto = False
        self._elapsed_to_rotate = 0

        self._transition = TransitionController(
            self,
            loop=loop,
            preset=config.easing,
            animation_time=config.animation_time,
            smoothness=config.smoothness,
        )
        self._adapter = Adapter(self)

        if queue is None:
            queue = EventQueue()
            if loop is not None:
                loop.add_listener(make_flush_listener(queue))
        self._queue = queue
        queue.subscribe(PenEvent, self.handle_event)
        queue.subscribe(CarouselEvent, self.handle_event)

        if config.auto:
            self.set_auto(True)

    # -- Geometry / host protocol --

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def panels(self) -> tuple[Panel, ...]:
        return tuple(self._panels)

    def request_repaint(self) -> None:
        self._needs_paint = True

    @property
    def needs_paint(self) -> bool:
        return self._needs_paint

    def consume_repaint(self) -> bool:
        """Return whether a repaint was requested, clearing the request."""
        needed = self._needs_paint
        self._needs_paint = False
        return needed

    # -- Collaborators --

    @property
    def transition(self) -> TransitionController:
        return self._transition

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    @adapter.setter
    def adapter(self, adapter: Adapter) -> None:
        self._adapter = adapter

    @property
    def queue(self) -> EventQueue:
        return self._queue

    @property
    def config(self) -> CarouselConfig:
        return self._config

    # -- Children --

    def _place(self, panel: Panel) -> None:
        x = 0 if not self._panels else self._width
        panel.set_rect(x, 0, self._width, self._height)

    def add(self, *panels: Panel) -> None:
        for panel in panels:
            self._place(panel)
            self._panels.append(panel)
        self.request_repaint()

    def insert(self, index: int, panel: Panel) -> None:
        """Insert ``panel`` at ``index``; the panel in view stays in view.

        A panel that is already a child is moved instead of duplicated.
        """
        if panel in self._panels:
            self.set_element(index, panel)
            return
        self._place(panel)
        had_panels = bool(self._panels)
        self._panels.insert(index, panel)
        position = self._panels.index(panel)
        if had_panels and position <= self._transition.active_index:
            self._transition.active_index += 1
        self.request_repaint()

    def remove(self, panel: Panel) -> None:
        index = self._panels.index(panel)
        moving = [p.panel for p in self._transition.participants]
        aborted = panel in moving
        if aborted:
            self._transition.abort()
        del self._panels[index]

        active = self._transition.active_index
        removed_active = index == active
        if index < active:
            active -= 1
        active = max(0, min(active, len(self._panels) - 1))
        self._transition.active_index = active
        if self._panels and (removed_active or aborted):
            target = self._panels[active]
            target.set_rect(0, 0, self._width, self._height)
            if aborted:
                for other in moving:
                    if other is not target and other is not panel:
                        other.set_x(self._width)
        self.request_repaint()

    def set_element(self, index: int, panel: Panel) -> None:
        """Put ``panel`` at ``index``, inserting it or moving it there."""
        if panel not in self._panels:
            self.insert(index, panel)
            return
        active = self._transition.active_index
        viewed = self._panels[active] if 0 <= active < len(self._panels) else None
        self._panels.remove(panel)
        self._panels.insert(index, panel)
        if viewed is not None:
            self._transition.active_index = self._panels.index(viewed)
        self.request_repaint()

    # -- Active panel --

    @property
    def active_index(self) -> int:
        return self._transition.active_index

    @property
    def is_animating(self) -> bool:
        return self._transition.is_animating

    def set_active_index(self, index: int) -> None:
        """Jump to ``index`` without animating."""
        target = self._panels[index]
        self._transition.abort()
        for panel in self._panels:
            if panel is not target:
                panel.set_x(self._width)
        target.set_rect(0, 0, self._width, self._height)
        self._transition.active_index = self._panels.index(target)
        self.request_repaint()

    # -- Appearance / timing --

    def set_animation_type(self, preset: PresetLike) -> None:
        self._transition.set_animation_type(preset)

    def set_animation_time(self, animation_time: int) -> None:
        self._transition.set_animation_time(animation_time)

    def set_button_color(self, color: Color) -> None:
        self._adapter.set_button_color(color)

    def set_indicator_color(self, color: Color) -> None:
        self._adapter.set_indicator_color(color)

    # -- Auto rotation --

    @property
    def auto(self) -> bool:
        return self._auto

    def set_auto(self, auto: bool) -> None:
        """Toggle auto-rotation. Needs a loop to have any effect."""
        if auto and not self._auto:
            self._elapsed_to_rotate = 0
            if self._loop is not None:
                self._loop.add_listener(self._rotate_listener)
        if not auto and self._loop is not None:
            self._loop.remove_listener(self._rotate_listener)
        self._auto = auto

    def _rotate_listener(self, ctx: TickContext) -> None:
        if self.active_index >= len(self._panels) - 1:
            return
        self._elapsed_to_rotate += ctx.dt_ms
        if self._elapsed_to_rotate >= self.time_to_rotate:
            self._elapsed_to_rotate = 0
            logger.debug("auto-rotating from panel %d", self.active_index)
            self._queue.post(PenEvent(x=self._width))

    # -- Events --

    def post(self, direction: Direction) -> None:
        """Queue a transition request."""
        self._queue.post(CarouselEvent(direction))

    def _classify_tap(self, x: int) -> Direction:
        """Map a tap to a direction; an edge tap resets the rotate timer."""
        if x >= self._width * (1.0 - self._edge_fraction):
            self._elapsed_to_rotate = 0
            if self.active_index + 1 < len(self._panels):
                return Direction.FORWARD
        elif x <= self._width * self._edge_fraction:
            self._elapsed_to_rotate = 0
            if self.active_index > 0:
                return Direction.BACKWARD
        return Direction.NONE

    def on_pen_up(self, x: int, y: int = 0) -> None:
        """Queue a transition request for a tap at ``x``."""
        direction = self._classify_tap(x)
        if direction is not Direction.NONE:
            self.post(direction)

    def handle_event(self, event: Any) -> None:
        # Pen events are already on the queue: begin in this flush.
        if isinstance(event, CarouselEvent):
            self._transition.begin(event.direction)
        elif isinstance(event, PenEvent):
            self._transition.begin(self._classify_tap(event.x))
