"""Configuration for Run, Dala Run!"""

from dalarun.config.settings import (
    AudioSettings,
    BackgroundLayerConfig,
    DisplaySettings,
    GameSettings,
    Settings,
    default_layers,
    get_settings,
)

__all__ = [
    "AudioSettings",
    "BackgroundLayerConfig",
    "DisplaySettings",
    "GameSettings",
    "Settings",
    "default_layers",
    "get_settings",
]
