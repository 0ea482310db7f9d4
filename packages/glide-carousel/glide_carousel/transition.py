"""Slide transition state machine.

A transition moves up to three panels horizontally: the outgoing panel, the
incoming panel, and a secondary incoming panel chained behind it so that
overshooting easings (the ``back`` family) show the next-but-one panel
instead of a gap. Offsets are recomputed from scratch on every tick from the
eased progress, so a late or oversized tick never accumulates error.

``active_index`` is updated when a transition *begins*: while animating it
names the target panel, not the one currently filling the view.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from glide_bezier import (
    DEFAULT_SMOOTHNESS,
    BezierCurve,
    InvalidArgumentError,
    resolve_preset,
)
from glide_carousel.types import Direction, Panel, PanelHost, Role

if TYPE_CHECKING:
    from glide import TickContext, UpdateLoop
    from glide_bezier import EasingPreset
    from glide_bezier.presets import PresetLike

logger = logging.getLogger(__name__)

# (incoming_x, incoming_panel, panel) -> x for the panel in that role.
_OffsetRule = Callable[[int, Panel, Panel], int]

_RULES: dict[tuple[Direction, Role], _OffsetRule] = {
    (Direction.FORWARD, Role.INCOMING): lambda x, incoming, panel: x,
    (Direction.FORWARD, Role.OUTGOING): lambda x, incoming, panel: x - panel.width,
    (Direction.FORWARD, Role.SECONDARY): lambda x, incoming, panel: x + incoming.width,
    (Direction.BACKWARD, Role.INCOMING): lambda x, incoming, panel: x,
    (Direction.BACKWARD, Role.OUTGOING): lambda x, incoming, panel: x + incoming.width,
    (Direction.BACKWARD, Role.SECONDARY): lambda x, incoming, panel: x - panel.width,
}


@dataclass(frozen=True)
class Participant:
    panel: Panel
    role: Role


class TransitionController:
    """Drives slide transitions for a panel host.

    When given an ``UpdateLoop`` the controller subscribes to it for the
    duration of each transition; otherwise the owner calls :meth:`tick`.
    """

    def __init__(
        self,
        host: PanelHost,
        loop: UpdateLoop | None = None,
        preset: PresetLike = "ease_in_out_back",
        animation_time: int = 500,
        smoothness: float = DEFAULT_SMOOTHNESS,
        on_finish: Callable[[Direction, int], None] | None = None,
    ) -> None:
        self._host = host
        self._loop = loop
        self._smoothness = smoothness
        self._on_finish = on_finish
        self._preset = resolve_preset(preset)
        self._curve = BezierCurve.from_preset(self._preset, smoothness=smoothness)
        self._animation_time = 0
        self.set_animation_time(animation_time)

        self._is_animating = False
        self._direction = Direction.NONE
        self._elapsed = 0
        self._active_index = 0
        self._participants: tuple[Participant, ...] = ()

    # -- State --

    @property
    def is_animating(self) -> bool:
        return self._is_animating

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def elapsed_time(self) -> int:
        return self._elapsed

    @property
    def animation_time(self) -> int:
        return self._animation_time

    @property
    def active_index(self) -> int:
        """Index of the target panel (already updated while animating)."""
        return self._active_index

    @active_index.setter
    def active_index(self, index: int) -> None:
        self._active_index = index

    @property
    def participants(self) -> tuple[Participant, ...]:
        return self._participants

    @property
    def curve(self) -> BezierCurve:
        return self._curve

    @property
    def preset(self) -> EasingPreset:
        return self._preset

    # -- Configuration --

    def set_animation_time(self, animation_time: int) -> None:
        if animation_time <= 0:
            raise InvalidArgumentError(
                f"animation_time must be positive, got {animation_time!r}"
            )
        self._animation_time = animation_time

    def set_animation_type(self, preset: PresetLike) -> None:
        """Swap the easing curve. Takes effect immediately, even mid-transition."""
        self._preset = resolve_preset(preset)
        self._curve = BezierCurve.from_preset(self._preset, smoothness=self._smoothness)
        logger.debug("easing set to %s %s", self._preset.name, self._preset.controls)

    # -- Transition lifecycle --

    def begin(self, direction: Direction) -> bool:
        """Start a transition. Returns False (and changes nothing) when it cannot."""
        panels = self._host.panels
        if len(panels) < 2 or self._is_animating:
            return False
        if not 0 <= self._active_index < len(panels):
            return False
        if direction is Direction.FORWARD:
            step = 1
        elif direction is Direction.BACKWARD:
            step = -1
        else:
            return False

        first = self._active_index + step
        if not 0 <= first < len(panels):
            return False

        outgoing = panels[self._active_index]
        incoming = panels[first]
        if step > 0:
            incoming.set_x(-incoming.width)
        else:
            incoming.set_x(incoming.width + self._host.width)
        participants = [
            Participant(outgoing, Role.OUTGOING),
            Participant(incoming, Role.INCOMING),
        ]

        second = first + step
        if 0 <= second < len(panels):
            secondary = panels[second]
            if step > 0:
                secondary.set_x(-incoming.x - secondary.width)
            else:
                secondary.set_x(incoming.x + incoming.width)
            participants.append(Participant(secondary, Role.SECONDARY))

        self._participants = tuple(participants)
        self._direction = direction
        self._active_index = first
        self._elapsed = 0
        self._is_animating = True
        if self._loop is not None:
            self._loop.add_listener(self._on_tick)
        logger.debug(
            "transition %s to panel %d (%d participants)",
            direction.value, first, len(participants),
        )
        return True

    def _on_tick(self, ctx: TickContext) -> None:
        self.tick(ctx.dt_ms)

    def tick(self, delta_ms: int) -> None:
        if not self._is_animating:
            return
        self._elapsed += delta_ms
        if self._elapsed >= self._animation_time:
            self._elapsed = self._animation_time
            self.single_step(self._animation_time)
            self._finish()
            return
        self.single_step(self._elapsed)

    def abort(self) -> None:
        """Stop the running transition, leaving panels where they are."""
        if self._is_animating:
            logger.debug("transition %s aborted", self._direction.value)
            self._finish()

    def _finish(self) -> None:
        direction = self._direction
        self._is_animating = False
        self._direction = Direction.NONE
        self._participants = ()
        if self._loop is not None:
            self._loop.remove_listener(self._on_tick)
        logger.debug("transition %s finished at panel %d", direction.value, self._active_index)
        if self._on_finish is not None:
            self._on_finish(direction, self._active_index)

    # -- Positioning --

    def progression(self, time: float) -> float:
        """Eased progress at ``time`` ms into the transition."""
        return self._curve.progress_at(time / self._animation_time)

    def single_step(self, time: float) -> None:
        """Position every participant for ``time`` ms into the transition."""
        if self._direction is Direction.NONE or not self._participants:
            return
        width = self._host.width
        shift = int(self.progression(time) * width - width)
        incoming_x = shift if self._direction is Direction.BACKWARD else -shift

        incoming = next(p.panel for p in self._participants if p.role is Role.INCOMING)
        for participant in self._participants:
            rule = _RULES[(self._direction, participant.role)]
            participant.panel.set_x(rule(incoming_x, incoming, participant.panel))
        self._host.request_repaint()
