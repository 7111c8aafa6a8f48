"""
Audio for Run, Dala Run!

Synthesized chiptune music and a jump sound effect.
"""

from .engine import AudioEngine

__all__ = ["AudioEngine"]
