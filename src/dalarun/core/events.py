"""
Event bus for the game.

Carries input actions and frame ticks from the window to the session,
and lets the session announce score and screen changes.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable
from enum import Enum, auto
from collections import defaultdict
import asyncio
import inspect
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input
    ACTION = auto()  # Space bar: start the game or jump

    # Game
    STATE_CHANGED = auto()
    SCORE_CHANGED = auto()
    JUMPED = auto()

    # System
    TICK = auto()
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: Monotonic time the event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


SyncHandler = Callable[[Event], None]
AsyncHandler = Callable[[Event], Awaitable[None]]
Handler = SyncHandler | AsyncHandler


class EventBus:
    """
    Routes game events between the window, the session and listeners.

    Keyboard input is queued as it is polled and drained at the start of
    the next frame, so an action always lands before that frame's tick.
    Session notifications are emitted immediately.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._pending: asyncio.Queue[Event] = asyncio.Queue()
        self._history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Register a handler for one event type.

        Returns:
            Function that removes the handler again
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type.name}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Deliver an event now. Coroutine handlers only see queued events."""
        self._record(event)
        for handler in list(self._handlers[event.type]):
            if inspect.iscoroutinefunction(handler):
                continue
            self._call(handler, event)

    def queue_event(self, event: Event) -> None:
        """Hold an event until the next ``process_queue``."""
        self._pending.put_nowait(event)

    @property
    def pending(self) -> int:
        return self._pending.qsize()

    async def process_queue(self) -> None:
        """Deliver every queued event, awaiting coroutine handlers."""
        while not self._pending.empty():
            event = self._pending.get_nowait()
            self._record(event)

            tasks = []
            for handler in list(self._handlers[event.type]):
                if inspect.iscoroutinefunction(handler):
                    tasks.append(asyncio.create_task(handler(event)))
                else:
                    self._call(handler, event)

            for result in await asyncio.gather(*tasks, return_exceptions=True):
                if isinstance(result, Exception):
                    logger.error(f"Error in {event.type.name} handler: {result}")

    def _call(self, handler: Handler, event: Event) -> None:
        try:
            handler(event)
        except Exception as e:
            logger.error(f"Error in {event.type.name} handler: {e}")

    def _record(self, event: Event) -> None:
        self._history.append(event)
        if len(self._history) > self._history_limit:
            del self._history[0]

    def get_history(self, event_type: EventType | None = None, limit: int = 10) -> list[Event]:
        """Most recent events, optionally of one type."""
        history = self._history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]


def action_event(source: str = "keyboard") -> Event:
    """Create an action (space bar) event."""
    return Event(EventType.ACTION, source=source)


def tick_event(delta: float, frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"delta": delta, "frame": frame})
