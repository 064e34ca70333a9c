"""Window event queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    """Kinds of events a window produces."""

    MOUSE_CLICK = auto()
    MOUSE_DRAG = auto()
    MOUSE_MOVE = auto()


@dataclass(frozen=True)
class Event:
    """A single window event; button and state only matter for clicks."""

    type: EventType
    x: int = 0
    y: int = 0
    button: int = 0
    state: int = 0


class EventManager:
    """First-in, first-out queue of window events."""

    def __init__(self) -> None:
        self._queue: deque[Event] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def has_event(self) -> bool:
        return bool(self._queue)

    def push_event(self, event: Event) -> None:
        self._queue.append(event)

    def pull_event(self) -> Event:
        """Remove and return the oldest event."""
        if not self._queue:
            raise IndexError("no pending event")
        return self._queue.popleft()

    def clear_events(self) -> None:
        self._queue.clear()