"""Input events and the queue they travel through.

A producer (keyboard poller, resize signal handler) runs elsewhere and puts
events on an :class:`EventQueue`. The session drains it without blocking once
per frame.
"""

import queue
from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[KeyPress, Resize]


class EventQueue:
    """Thread-safe FIFO of input events."""

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[Event]" = queue.SimpleQueue()

    def put(self, event: Event) -> None:
        self._queue.put(event)

    def drain(self) -> List[Event]:
        """Return every pending event in arrival order without blocking."""
        events: List[Event] = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def empty(self) -> bool:
        return self._queue.empty()
