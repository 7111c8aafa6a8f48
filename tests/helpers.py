"""Shared builders for the test suite.

Sessions are built from blank images of known sizes so that geometry in
the tests can be worked out by hand.
"""

import random

from dalarun.config.settings import GameSettings
from dalarun.core.events import EventBus
from dalarun.core.state import ScreenState
from dalarun.game.assets import GameAssets
from dalarun.game.session import GameSession
from dalarun.game.sprites import ObstacleKind
from dalarun.graphics.image import ImageAsset

HORSE_SIZE = (60, 50)
OBSTACLE_SIZE = (40, 40)


def blank_assets(settings=None):
    """GameAssets made of transparent images: horse 60x50, obstacles 40x40."""
    settings = settings or GameSettings()
    w, h = settings.canvas_width, settings.canvas_height
    return GameAssets(
        horse_frames=[ImageAsset.blank(*HORSE_SIZE, name=f"horse{i}") for i in (1, 2)],
        obstacles={kind: ImageAsset.blank(*OBSTACLE_SIZE, name=kind.name) for kind in ObstacleKind},
        layers=[
            [ImageAsset.blank(80, 60, name="mount1"), ImageAsset.blank(100, 70, name="mount2")],
            [ImageAsset.blank(30, 50, name="tree1")],
            [ImageAsset.blank(12, 12, name="flower1")],
            [ImageAsset.blank(33, 24, name="floor")],
        ],
        backdrop=ImageAsset.blank(w, h, name="bg"),
        start_card=ImageAsset.blank(w, h, name="start"),
        win_card=ImageAsset.blank(w, h, name="success"),
    )


class FakeAudio:
    """Records what the session asks of the audio engine."""

    def __init__(self):
        self.music_states = []
        self.jumps = 0

    def update_music(self, state: ScreenState) -> None:
        self.music_states.append(state)

    def play_jump(self) -> None:
        self.jumps += 1


def make_session(seed=1, audio=None, with_bus=True, **overrides):
    settings = GameSettings(**overrides)
    return GameSession(
        settings,
        blank_assets(settings),
        rng=random.Random(seed),
        audio=audio,
        event_bus=EventBus() if with_bus else None,
    )


def settle(session, limit=200):
    """Tick until the horse rests on the floor."""
    for _ in range(limit):
        if not session.horse.sprite.is_jumping and not session.horse.is_airborne \
                and session.horse.sprite.velocity_y == 0:
            return
        session.tick()
    raise AssertionError("horse never landed")
