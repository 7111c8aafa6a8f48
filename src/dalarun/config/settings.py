"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Every gameplay constant lives here so the core never hard-codes tuning.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackgroundLayerConfig(BaseModel):
    """How sprites are generated for one parallax layer."""

    name: str
    horizontal_spacing: tuple[float, float]
    vertical_variance: float = 0.0
    speed: float = 0.0  # Ignored when follows_scroll is set
    y: float = 0.5  # Baseline relative to canvas height
    follows_scroll: bool = False  # Floor scrolls with the world, not at a fixed speed


def default_layers() -> list[BackgroundLayerConfig]:
    """Mountains, trees, flowers and the floor, back to front."""
    return [
        BackgroundLayerConfig(
            name="mountains", horizontal_spacing=(120, 250),
            vertical_variance=5, speed=0.5, y=0.4,
        ),
        BackgroundLayerConfig(
            name="trees", horizontal_spacing=(40, 100),
            vertical_variance=10, speed=1.0, y=0.45,
        ),
        BackgroundLayerConfig(
            name="flowers", horizontal_spacing=(60, 200),
            vertical_variance=12, speed=1.5, y=0.64,
        ),
        BackgroundLayerConfig(
            name="floor", horizontal_spacing=(33, 33),
            vertical_variance=0, y=0.9, follows_scroll=True,
        ),
    ]


class GameSettings(BaseSettings):
    """Gameplay tuning."""

    model_config = SettingsConfigDict(env_prefix="DALARUN_GAME_")

    canvas_width: int = 700
    canvas_height: int = 400

    # Physics (pixels per tick)
    running_speed: float = 6.0
    gravity: float = 0.45
    jump_velocity: float = -10.0
    relative_floor_y: float = Field(default=0.9, gt=0.0, le=1.0)

    # Obstacles
    obstacle_distance_range: tuple[float, float] = (120.0, 1000.0)
    starting_obstacle_offset: float = 200.0
    obstacle_floor_clearance: float = 10.0
    collision_margin: float = 10.0

    # Scoring
    win_score: int = 240
    speed_score_step: float = 250.0
    speed_per_step: float = 5.0

    # Horse
    horse_relative_x: float = 0.2
    horse_relative_y: float = 0.5
    animation_frame_gap: int = Field(default=8, ge=1)

    # Snow
    snowflake_count: int = 300
    snow_angular_speed: float = 15.0  # degrees per second

    layers: list[BackgroundLayerConfig] = Field(default_factory=default_layers)

    @property
    def floor_y(self) -> float:
        """Height of the floor in pixels."""
        return self.canvas_height * self.relative_floor_y


class DisplaySettings(BaseSettings):
    """Display-related settings."""

    model_config = SettingsConfigDict(env_prefix="DALARUN_DISPLAY_", validate_assignment=True)

    fps: int = Field(default=60, ge=1)
    scale: int = Field(default=1, ge=1, le=4)
    title: str = "Run, Dala Run!"
    fullscreen: bool = False


class AudioSettings(BaseSettings):
    """Music and sound effect settings."""

    model_config = SettingsConfigDict(env_prefix="DALARUN_AUDIO_", validate_assignment=True)

    enabled: bool = True
    music_volume: float = Field(default=0.6, ge=0.0, le=1.0)
    sfx_volume: float = Field(default=1.0, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DALARUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    env: Literal["desktop", "headless"] = "desktop"
    debug: bool = False
    seed: int | None = None

    # Paths
    base_path: Path = Field(default_factory=lambda: Path(__file__).parent.parent)
    assets_path: Path = Field(default_factory=lambda: Path.cwd() / "assets")
    log_file: Path | None = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @property
    def is_headless(self) -> bool:
        """Check if running without a window."""
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
