"""Shared types and protocols for glide-carousel."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol, Sequence


class Direction(Enum):
    """Which way a transition moves through the panel list."""

    NONE = "none"
    FORWARD = "forward"
    BACKWARD = "backward"


class Role(Enum):
    """Part a panel plays in a running transition."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def moved_to(self, x: int) -> Rect:
        return replace(self, x=x)


class Panel:
    """A child view handle. Only its geometry matters to the carousel."""

    def __init__(self, name: str = "", payload: Any = None) -> None:
        self.name = name
        self.payload = payload
        self._rect = Rect()

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def x(self) -> int:
        return self._rect.x

    @property
    def width(self) -> int:
        return self._rect.width

    @property
    def height(self) -> int:
        return self._rect.height

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._rect = Rect(x, y, width, height)

    def set_x(self, x: int) -> None:
        """Move horizontally, keeping y and size."""
        self._rect = self._rect.moved_to(x)

    def __repr__(self) -> str:
        return f"Panel({self.name!r}, {self._rect})"


class PanelHost(Protocol):
    """What a TransitionController needs from its container."""

    @property
    def panels(self) -> Sequence[Panel]: ...

    @property
    def width(self) -> int: ...

    def request_repaint(self) -> None: ...


@dataclass(frozen=True)
class PenEvent:
    """Pen-up (tap release) at a position inside the carousel."""

    x: int
    y: int = 0


@dataclass(frozen=True)
class CarouselEvent:
    """Request to move the carousel one panel in ``direction``."""

    direction: Direction
