"""Desktop host for the game."""

from dalarun.simulator.window import GameWindow, WindowConfig

__all__ = ["GameWindow", "WindowConfig"]
