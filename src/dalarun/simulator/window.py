"""
Desktop game window using pygame.

Keyboard Mapping:
    SPACE: Action (start the game / jump)
    S: Capture screenshot
    ESC / Q: Exit
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from dalarun.core.events import EventBus, EventType, Event, action_event, tick_event
from dalarun.game.session import GameSession
from dalarun.graphics.renderer import GameRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Game window configuration."""
    title: str = "Run, Dala Run!"
    scale: int = 1
    fullscreen: bool = False
    fps: int = 60


class GameWindow:
    """
    Hosts a game session: polls input, drives ticks and shows frames.

    Input and ticks travel over the event bus so other listeners (audio,
    logging, tests) can observe them.
    """

    def __init__(
        self,
        session: GameSession,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.session = session
        self.config = config or WindowConfig()
        self.event_bus = event_bus or session.event_bus or EventBus()
        self.renderer = GameRenderer(session)

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0

        self.event_bus.subscribe(EventType.ACTION, self._on_action)
        self.event_bus.subscribe(EventType.TICK, self._on_tick)
        self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

        logger.info("GameWindow created")

    @property
    def size(self) -> tuple[int, int]:
        return (
            self.renderer.width * self.config.scale,
            self.renderer.height * self.config.scale,
        )

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN | pygame.SCALED

        self._screen = pygame.display.set_mode(self.size, flags)
        self._clock = pygame.time.Clock()

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")

    # ----- event handling -----

    def _handle_events(self) -> None:
        """Translate pygame events into bus events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.event_bus.queue_event(Event(EventType.SHUTDOWN, source="keyboard"))
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key == pygame.K_SPACE:
            # KEYDOWN fires once per press, so the action is edge-triggered
            self.event_bus.queue_event(action_event(source="keyboard"))

    def _on_action(self, event: Event) -> None:
        self.session.handle_action()

    def _on_tick(self, event: Event) -> None:
        self.session.tick(event.data.get("delta", 1 / 60) * 1000)

    def _on_shutdown(self, event: Event) -> None:
        self._running = False

    # ----- rendering -----

    def _render(self) -> None:
        if not self._screen:
            return

        buffer = self.renderer.render()
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self.size)

        self._screen.blit(surface, (0, 0))
        pygame.display.flip()

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # ----- main loop -----

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game loop started")

        while self._running:
            self._handle_events()

            # Input first, then the tick it applies to
            await self.event_bus.process_queue()
            if not self._running:
                break

            if self._clock:
                delta = self._clock.get_time() / 1000.0 or 1 / self.config.fps
                self.event_bus.emit(tick_event(delta, self._frame_count))

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        pygame.quit()
        logger.info(f"Game loop stopped after {self._frame_count} frames (score {self.session.score})")

    def stop(self) -> None:
        self._running = False
