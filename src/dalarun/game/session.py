"""One play-through of Run, Dala Run!

The session owns every piece of mutable game state and advances it with
``tick()``. The caller owns the frame loop and calls ``handle_action()``
when the player presses the action button.
"""

import logging
import random
from typing import Optional, Protocol

from dalarun.config.settings import GameSettings
from dalarun.core.events import Event, EventBus, EventType
from dalarun.core.state import ScreenState, ScreenStateMachine
from dalarun.game.assets import GameAssets
from dalarun.game.background import BackgroundLayer
from dalarun.game.obstacles import ObstacleField
from dalarun.game.player import HorseController
from dalarun.game.snow import Snowfall
from dalarun.game.speed import scroll_speed
from dalarun.game.sprites import ObstacleKind, ObstacleSprite

logger = logging.getLogger(__name__)

NOMINAL_FRAME_MS = 1000.0 / 60


class SoundPlayer(Protocol):
    """What the session needs from the audio engine."""

    def update_music(self, state: ScreenState) -> None: ...

    def play_jump(self) -> None: ...


class GameSession:
    """Score, screen state and every entity for a single run."""

    def __init__(
        self,
        settings: GameSettings,
        assets: GameAssets,
        rng: Optional[random.Random] = None,
        audio: Optional[SoundPlayer] = None,
        event_bus: Optional[EventBus] = None,
    ):
        if len(assets.layers) != len(settings.layers):
            raise ValueError(
                f"{len(settings.layers)} background layers configured "
                f"but images given for {len(assets.layers)}"
            )

        self.settings = settings
        self.assets = assets
        self.rng = rng or random.Random()
        self.audio = audio
        self.event_bus = event_bus

        self.state_machine = ScreenStateMachine()
        self.state_machine.add_listener(self._on_state_changed)
        self.score = 0
        self.frame_count = 0
        self.elapsed_s = 0.0

        width, height = settings.canvas_width, settings.canvas_height

        self.horse = HorseController(
            frames=assets.horse_frames,
            center_x=width * settings.horse_relative_x,
            center_y=height * settings.horse_relative_y,
            floor_y=self.floor_y,
            canvas_height=height,
            gravity=settings.gravity,
            jump_velocity=settings.jump_velocity,
            frame_gap=settings.animation_frame_gap,
        )

        self.obstacles = ObstacleField(
            images=assets.obstacles,
            canvas_width=width,
            distance_range=settings.obstacle_distance_range,
            collision_margin=settings.collision_margin,
            rng=self.rng,
        )
        self.obstacles.add(self._starting_obstacle())

        self.layers = [
            BackgroundLayer(config, images, width, height, rng=self.rng)
            for config, images in zip(settings.layers, assets.layers)
        ]
        for layer in self.layers:
            layer.fill()

        self.snow = Snowfall(
            width,
            height,
            count=settings.snowflake_count,
            angular_speed=settings.snow_angular_speed,
            rng=self.rng,
        )

        logger.info(f"GameSession created ({width}x{height}, win at {settings.win_score})")

    @property
    def state(self) -> ScreenState:
        return self.state_machine.state

    @property
    def floor_y(self) -> float:
        return self.settings.floor_y

    @property
    def scroll_speed(self) -> float:
        s = self.settings
        return scroll_speed(self.score, s.running_speed, s.speed_per_step, s.speed_score_step)

    def _starting_obstacle(self) -> ObstacleSprite:
        """A meatball waiting just off the right edge of the canvas."""
        s = self.settings
        image = self.assets.obstacles[ObstacleKind.MEATBALL]
        return self.obstacles.make(
            ObstacleKind.MEATBALL,
            s.canvas_width + s.starting_obstacle_offset,
            self.floor_y - image.height / 2 - s.obstacle_floor_clearance,
        )

    # ----- input -----

    def handle_action(self) -> bool:
        """Space bar: start the game from the title screen, jump while playing.

        Returns:
            True if the action changed anything
        """
        state = self.state
        if state is ScreenState.START:
            return self.state_machine.transition(ScreenState.PLAYING)

        if state is ScreenState.PLAYING and self.horse.jump():
            if self.audio is not None:
                self.audio.play_jump()
            self._emit(EventType.JUMPED)
            return True

        return False

    # ----- frame update -----

    def tick(self, delta_ms: float = NOMINAL_FRAME_MS) -> None:
        """Advance the whole game by one frame.

        Movement is per tick; ``delta_ms`` only drives the snow clock.
        """
        self.frame_count += 1
        self.elapsed_s += delta_ms / 1000.0

        if self.audio is not None:
            self.audio.update_music(self.state)

        state = self.state
        if state in (ScreenState.PLAYING, ScreenState.GAME_OVER):
            self.horse.advance(allow_landing=state is not ScreenState.GAME_OVER)
            if state is ScreenState.PLAYING:
                self._update_world()

        self.snow.update(self.elapsed_s)

    def _update_world(self) -> None:
        speed = self.scroll_speed

        for layer in self.layers:
            layer.update(speed if layer.config.follows_scroll else layer.config.speed)

        self.obstacles.scroll(speed)
        self._resolve_collisions()
        self.obstacles.remove_offscreen()
        self.obstacles.spawn_if_needed()

    def _resolve_collisions(self) -> None:
        hits = self.obstacles.colliding(self.horse.sprite)
        if not hits:
            return

        # A meatball ends the run even if a reward is touched on the same tick
        hazard = next((obstacle for obstacle in hits if obstacle.kind.is_hazard), None)
        if hazard is not None:
            self._crash(hazard)
            return

        for obstacle in hits:
            self._consume(obstacle)

    def _crash(self, obstacle: ObstacleSprite) -> None:
        logger.info(f"Horse hit a {obstacle.kind.name.lower()} at score {self.score}")
        self.state_machine.transition(ScreenState.GAME_OVER)
        self.horse.kick(self.settings.jump_velocity)

    def _consume(self, obstacle: ObstacleSprite) -> None:
        obstacle.is_consumed = True
        self.add_score(obstacle.kind.score_value)

    def add_score(self, points: int) -> None:
        """Add points and check for the win."""
        if points <= 0:
            return

        self.score += points
        logger.debug(f"Score +{points} -> {self.score}")
        self._emit(EventType.SCORE_CHANGED, {"score": self.score, "points": points})

        if self.score >= self.settings.win_score and self.state is ScreenState.PLAYING:
            self.state_machine.transition(ScreenState.WIN)

    # ----- notifications -----

    def _on_state_changed(self, old: ScreenState, new: ScreenState) -> None:
        self._emit(EventType.STATE_CHANGED, {"from": old, "to": new, "score": self.score})

    def _emit(self, event_type: EventType, data: Optional[dict] = None) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data or {}, source="session"))
