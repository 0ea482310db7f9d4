"""Tests for the Carousel container."""
from __future__ import annotations

import pytest

from glide import EventQueue, UpdateLoop
from glide_carousel import (
    Carousel,
    CarouselConfig,
    CarouselEvent,
    Direction,
    Panel,
    PenEvent,
    Rect,
)


def _panels(n: int) -> list[Panel]:
    return [Panel(f"p{i}") for i in range(n)]


def _carousel(n: int = 3, **kwargs) -> tuple[Carousel, list[Panel]]:
    carousel = Carousel(100, 60, **kwargs)
    panels = _panels(n)
    carousel.add(*panels)
    return carousel, panels


class TestChildren:
    """Adding, inserting, removing and reordering panels."""

    def test_first_panel_in_view_others_off_right(self):
        carousel, panels = _carousel(3)
        assert panels[0].rect == Rect(0, 0, 100, 60)
        assert [p.x for p in panels] == [0, 100, 100]
        assert all(p.width == 100 and p.height == 60 for p in panels)
        assert carousel.panels == tuple(panels)

    def test_panels_view_is_immutable(self):
        carousel, panels = _carousel(2)
        assert isinstance(carousel.panels, tuple)

    def test_insert_before_active_keeps_view(self):
        carousel, panels = _carousel(2)
        carousel.set_active_index(1)
        extra = Panel("extra")
        carousel.insert(0, extra)
        assert carousel.panels[0] is extra
        assert carousel.active_index == 2
        assert carousel.panels[carousel.active_index] is panels[1]
        assert extra.x == 100

    def test_insert_into_empty_carousel(self):
        carousel = Carousel(100, 60)
        panel = Panel()
        carousel.insert(0, panel)
        assert panel.x == 0
        assert carousel.active_index == 0

    def test_remove_panel_after_active(self):
        carousel, panels = _carousel(3)
        carousel.remove(panels[2])
        assert carousel.panels == (panels[0], panels[1])
        assert carousel.active_index == 0

    def test_remove_panel_before_active(self):
        carousel, panels = _carousel(3)
        carousel.set_active_index(2)
        carousel.remove(panels[0])
        assert carousel.active_index == 1
        assert carousel.panels[1] is panels[2]

    def test_remove_active_brings_neighbour_into_view(self):
        carousel, panels = _carousel(3)
        carousel.set_active_index(2)
        carousel.remove(panels[2])
        assert carousel.active_index == 1
        assert panels[1].x == 0

    def test_remove_unknown_panel_raises(self):
        carousel, _ = _carousel(2)
        with pytest.raises(ValueError):
            carousel.remove(Panel("stranger"))

    def test_remove_participant_aborts_transition(self):
        carousel, panels = _carousel(3)
        carousel.transition.begin(Direction.FORWARD)
        carousel.remove(panels[1])
        assert not carousel.is_animating
        assert panels[2].x == 0
        assert panels[0].x == 100

    def test_remove_outgoing_mid_transition_snaps_target(self):
        carousel, panels = _carousel(3)
        carousel.transition.begin(Direction.FORWARD)
        carousel.transition.tick(200)
        carousel.remove(panels[0])
        assert not carousel.is_animating
        assert carousel.active_index == 0
        assert panels[1].rect == Rect(0, 0, 100, 60)
        assert panels[2].x == 100

    def test_set_element_inserts_new_panel(self):
        carousel, panels = _carousel(2)
        extra = Panel("extra")
        carousel.set_element(1, extra)
        assert carousel.panels == (panels[0], extra, panels[1])

    def test_set_element_moves_existing_panel(self):
        carousel, panels = _carousel(3)
        carousel.set_element(0, panels[2])
        assert carousel.panels == (panels[2], panels[0], panels[1])
        assert len(carousel.panels) == 3
        assert carousel.panels[carousel.active_index] is panels[0]

    def test_set_element_keeps_viewed_panel_active(self):
        carousel, panels = _carousel(3)
        carousel.set_element(2, panels[0])
        assert carousel.panels == (panels[1], panels[2], panels[0])
        assert carousel.active_index == 2
        assert carousel.panels[carousel.active_index] is panels[0]

    def test_insert_existing_panel_moves_it(self):
        carousel, panels = _carousel(3)
        carousel.insert(0, panels[2])
        assert carousel.panels == (panels[2], panels[0], panels[1])
        assert carousel.panels[carousel.active_index] is panels[0]


class TestActiveIndex:
    def test_set_active_index(self):
        carousel, panels = _carousel(3)
        carousel.consume_repaint()
        carousel.set_active_index(2)
        assert carousel.active_index == 2
        assert panels[2].x == 0
        assert panels[0].x == 100
        assert carousel.needs_paint

    def test_set_active_index_out_of_range_raises(self):
        carousel, _ = _carousel(2)
        with pytest.raises(IndexError):
            carousel.set_active_index(5)

    def test_set_active_index_aborts_transition(self):
        carousel, _ = _carousel(3)
        carousel.transition.begin(Direction.FORWARD)
        carousel.set_active_index(0)
        assert not carousel.is_animating
        assert carousel.active_index == 0


class TestTaps:
    """Tap classification into transition requests."""

    def test_right_edge_posts_forward(self):
        carousel, _ = _carousel(3)
        carousel.on_pen_up(90)
        assert carousel.queue.pending == 1
        carousel.queue.flush()
        assert carousel.active_index == 1
        assert carousel.is_animating

    def test_left_edge_posts_backward(self):
        carousel, _ = _carousel(3)
        carousel.set_active_index(2)
        carousel.on_pen_up(10)
        carousel.queue.flush()
        assert carousel.active_index == 1
        assert carousel.transition.direction is Direction.BACKWARD

    def test_edge_thresholds_are_inclusive(self):
        carousel, _ = _carousel(3)
        carousel.on_pen_up(75)
        assert carousel.queue.pending == 1
        carousel.queue.clear()
        carousel.set_active_index(1)
        carousel.on_pen_up(25)
        assert carousel.queue.pending == 1

    def test_middle_tap_does_nothing(self):
        carousel, _ = _carousel(3)
        carousel.on_pen_up(50)
        assert carousel.queue.pending == 0

    def test_no_request_past_the_ends(self):
        carousel, _ = _carousel(2)
        carousel.on_pen_up(5)
        assert carousel.queue.pending == 0
        carousel.set_active_index(1)
        carousel.on_pen_up(95)
        assert carousel.queue.pending == 0

    def test_custom_edge_fraction(self):
        carousel, _ = _carousel(3, config=CarouselConfig(edge_fraction=0.5))
        carousel.on_pen_up(50)
        assert carousel.queue.pending == 1

    def test_pen_event_via_queue(self):
        carousel, _ = _carousel(3)
        carousel.queue.post(PenEvent(x=99))
        carousel.queue.flush()
        assert carousel.active_index == 1
        assert carousel.is_animating
        assert carousel.queue.pending == 0

    def test_carousel_event_via_queue(self):
        carousel, _ = _carousel(3)
        carousel.post(Direction.FORWARD)
        carousel.queue.flush()
        assert carousel.active_index == 1

    def test_tap_during_transition_is_ignored(self):
        carousel, _ = _carousel(3)
        carousel.post(Direction.FORWARD)
        carousel.queue.flush()
        carousel.on_pen_up(95)
        carousel.queue.flush()
        assert carousel.active_index == 1

    def test_external_queue(self):
        queue = EventQueue()
        carousel, _ = _carousel(3, queue=queue)
        queue.post(CarouselEvent(Direction.FORWARD))
        queue.flush()
        assert carousel.active_index == 1


class TestLoop:
    """Carousel wired to an UpdateLoop."""

    def test_tap_to_finished_transition(self):
        loop = UpdateLoop(tps=50)
        carousel, panels = _carousel(3, loop=loop)
        carousel.on_pen_up(95)
        loop.run(40)
        assert not carousel.is_animating
        assert panels[0].x == -100
        assert panels[1].x == 0

    def test_repaint_requested_while_animating(self):
        loop = UpdateLoop(tps=50)
        carousel, _ = _carousel(3, loop=loop)
        carousel.consume_repaint()
        carousel.post(Direction.FORWARD)
        loop.step()
        loop.step()
        assert carousel.consume_repaint()
        assert not carousel.needs_paint


class TestAutoRotation:
    def test_auto_rotation_advances(self):
        loop = UpdateLoop()
        config = CarouselConfig(auto=True, time_to_rotate=1000)
        carousel, _ = _carousel(3, loop=loop, config=config)
        assert carousel.auto

        for _ in range(3):
            loop.step(500)
        assert carousel.active_index == 1
        assert carousel.is_animating

    def test_auto_rotation_stops_at_last_panel(self):
        loop = UpdateLoop()
        config = CarouselConfig(auto=True, time_to_rotate=1000)
        carousel, _ = _carousel(2, loop=loop, config=config)
        for _ in range(40):
            loop.step(500)
        assert carousel.active_index == 1
        assert carousel.queue.pending == 0

    def test_tap_resets_rotation_timer(self):
        loop = UpdateLoop()
        config = CarouselConfig(auto=True, time_to_rotate=1000)
        carousel, _ = _carousel(3, loop=loop, config=config)
        loop.step(900)
        carousel.on_pen_up(5)
        loop.step(900)
        assert carousel.active_index == 0
        assert carousel.queue.pending == 0

    def test_disable_auto(self):
        loop = UpdateLoop()
        carousel, _ = _carousel(3, loop=loop)
        listeners = len(loop.listeners)
        carousel.set_auto(True)
        assert len(loop.listeners) == listeners + 1
        carousel.set_auto(False)
        assert len(loop.listeners) == listeners
        assert not carousel.auto


class TestAppearance:
    def test_flags_from_config(self):
        config = CarouselConfig(show_indicators=False, show_buttons=False)
        carousel = Carousel(100, 60, config=config)
        assert not carousel.show_indicators
        assert not carousel.show_buttons
        carousel.show_buttons = True
        assert carousel.show_buttons

    def test_easing_from_config(self):
        carousel = Carousel(100, 60, config=CarouselConfig(easing="ease_out_quad"))
        assert carousel.transition.preset.name == "ease_out_quad"

    def test_set_animation_type(self):
        carousel, _ = _carousel(2)
        carousel.set_animation_type("ease_in_sine")
        assert carousel.transition.preset.name == "ease_in_sine"

    def test_set_animation_time(self):
        carousel, _ = _carousel(2)
        carousel.set_animation_time(250)
        assert carousel.transition.animation_time == 250

    def test_colors(self):
        carousel, _ = _carousel(2)
        carousel.set_button_color((10, 20, 30))
        carousel.set_indicator_color((1, 2, 3))
        assert carousel.adapter.button_color == (10, 20, 30)
        assert carousel.adapter.indicator_color == (1, 2, 3)
