"""In-memory event queue with per-tick flush semantics.

Events are plain objects dispatched to handlers subscribed to their exact
type. Events posted while a flush is running wait for the next flush.
"""

from __future__ import annotations

from typing import Any, Callable

from glide.types import TickContext, UpdateListener

_Handler = Callable[[Any], None]


class EventQueue:
    """Typed pub/sub queue; handlers are keyed by the event's exact class.

    ``post`` only queues. ``flush`` drains a snapshot of the queue, so
    handlers that post land in the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[_Handler]] = {}
        self._queue: list[Any] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, event_type: type, handler: _Handler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def post(self, event: Any) -> None:
        self._queue.append(event)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for event in snapshot:
            for handler in list(self._subscribers.get(type(event), ())):
                handler(event)

    def clear(self) -> None:
        self._queue.clear()


def make_flush_listener(queue: EventQueue) -> UpdateListener:
    """Return an update listener that flushes ``queue`` every tick."""

    def flush_listener(ctx: TickContext) -> None:
        queue.flush()

    return flush_listener
