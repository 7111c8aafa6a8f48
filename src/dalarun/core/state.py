"""
Screen state machine for the game flow.

States:
    START: Title card, waiting for the action button
    PLAYING: Full simulation running
    GAME_OVER: Horse hit a meatball (terminal)
    WIN: Score threshold reached (terminal)
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class ScreenState(Enum):
    """Game screens."""
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    WIN = auto()


StateListener = Callable[[ScreenState, ScreenState], None]


class ScreenStateMachine:
    """
    Manages the current screen and its transitions.

    GAME_OVER and WIN have no outgoing transitions: a new run needs a
    fresh session.
    """

    VALID_TRANSITIONS: list[tuple[ScreenState, ScreenState]] = [
        (ScreenState.START, ScreenState.PLAYING),
        (ScreenState.PLAYING, ScreenState.GAME_OVER),
        (ScreenState.PLAYING, ScreenState.WIN),
    ]

    def __init__(self, initial_state: ScreenState = ScreenState.START) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"ScreenStateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> ScreenState:
        """Get current state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state in (ScreenState.GAME_OVER, ScreenState.WIN)

    def can_transition(self, to_state: ScreenState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: ScreenState) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)
