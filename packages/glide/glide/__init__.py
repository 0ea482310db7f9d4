"""glide - A small periodic update loop and event queue for animated widgets."""

from glide.clock import Clock
from glide.events import EventQueue, make_flush_listener
from glide.loop import UpdateLoop
from glide.types import TickContext, UpdateListener

__all__ = [
    "UpdateLoop",
    "Clock",
    "TickContext",
    "UpdateListener",
    "EventQueue",
    "make_flush_listener",
]
