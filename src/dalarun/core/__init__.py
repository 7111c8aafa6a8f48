"""Core state and event plumbing."""

from dalarun.core.state import ScreenState, ScreenStateMachine
from dalarun.core.events import EventBus, Event, EventType, action_event, tick_event

__all__ = [
    "ScreenState",
    "ScreenStateMachine",
    "EventBus",
    "Event",
    "EventType",
    "action_event",
    "tick_event",
]
