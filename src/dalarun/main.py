"""
Main entry point for Run, Dala Run!

Opens the game window, or with ``--headless`` runs the simulation
without a display for a fixed number of frames.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from dalarun.audio.engine import AudioEngine
from dalarun.config.settings import Settings, get_settings
from dalarun.core.events import EventBus
from dalarun.game.session import GameSession
from dalarun.graphics.loader import load_game_assets

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure console logging, plus a file that is truncated each run."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")

    # Per-obstacle spawn logs are noisy even when debugging
    logging.getLogger("dalarun.game.obstacles").setLevel(logging.INFO)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dalarun", description="Run, Dala Run! - a winter runner game")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--fps", type=int, help="frames per second")
    parser.add_argument("--scale", type=int, help="window pixel scale")
    parser.add_argument("--mute", action="store_true", help="disable music and sound")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible run")
    parser.add_argument("--assets", type=Path, help="directory with image files")
    parser.add_argument("--headless", action="store_true", help="simulate without a window")
    parser.add_argument("--frames", type=int, default=600, help="frames to simulate when headless")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags override environment settings.

    Assignments are validated, so an out of range flag raises ValidationError.
    """
    if args.debug:
        settings.debug = True
    if args.fps is not None:
        settings.display.fps = args.fps
    if args.scale is not None:
        settings.display.scale = args.scale
    if args.mute:
        settings.audio.enabled = False
    if args.seed is not None:
        settings.seed = args.seed
    if args.assets:
        settings.assets_path = args.assets
    if args.headless:
        settings.env = "headless"
    return settings


def create_session(settings: Settings, audio: AudioEngine | None = None) -> GameSession:
    assets = load_game_assets(settings.game, settings.assets_path)
    return GameSession(
        settings.game,
        assets,
        rng=random.Random(settings.seed),
        audio=audio,
        event_bus=EventBus(),
    )


def run_headless(settings: Settings, frames: int) -> GameSession:
    """Start a run and let the horse gallop without input."""
    session = create_session(settings)
    frame_ms = 1000.0 / settings.display.fps
    session.handle_action()
    for _ in range(frames):
        session.tick(frame_ms)
    logger.info(f"Headless run finished: state={session.state.name} score={session.score}")
    return session


async def run_window(settings: Settings) -> None:
    from dalarun.simulator.window import GameWindow, WindowConfig

    audio = None
    if settings.audio.enabled:
        audio = AudioEngine(settings.audio.music_volume, settings.audio.sfx_volume)
        if not audio.init():
            logger.warning("Continuing without sound")

    session = create_session(settings, audio)
    window = GameWindow(
        session,
        config=WindowConfig(
            title=settings.display.title,
            scale=settings.display.scale,
            fullscreen=settings.display.fullscreen,
            fps=settings.display.fps,
        ),
    )

    try:
        await window.run()
    finally:
        if audio is not None:
            audio.cleanup()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    try:
        settings = apply_args(get_settings(), args)
    except ValidationError as e:
        sys.exit(f"Invalid option: {e}")
    setup_logging(settings.debug, settings.log_file)

    logger.info("Run, Dala Run! starting")
    logger.info("Controls: SPACE - start / jump, S - screenshot, ESC/Q - quit")

    try:
        if settings.is_headless:
            run_headless(settings, args.frames)
        else:
            asyncio.run(run_window(settings))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.exception(f"Game error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
