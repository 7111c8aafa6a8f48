"""
Chiptune audio for Run, Dala Run!

Two looping tracks (title and gameplay) and a jump blip, synthesized at
startup so the game needs no sound files.
"""

import pygame
import array
import math
import logging
from typing import Dict, List, Optional

from dalarun.core.state import ScreenState

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def triangle(t: float, freq: float) -> float:
    """Triangle wave oscillator."""
    p = (t * freq) % 1
    return 4 * abs(p - 0.5) - 1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def render_melody(
    notes: List[float],
    bpm: float,
    lead: str = "square",
    bass: Optional[List[float]] = None,
    volume: float = 0.5,
) -> array.array:
    """Render eighth-note melody (0 = rest) over a quarter-note bass line."""
    samples = array.array('h')
    eighth = 60.0 / bpm / 2
    duration = eighth * len(notes)
    oscillator = square if lead == "square" else triangle

    for i in range(int(SAMPLE_RATE * duration)):
        t = i / SAMPLE_RATE
        step = int(t / eighth)
        phase = (t % eighth) / eighth
        val = 0.0

        note = notes[step % len(notes)]
        if note > 0:
            env = max(0.0, 1 - phase * 1.2)
            val += oscillator(t, note) * 0.25 * env

        if bass:
            bass_note = bass[(step // 2) % len(bass)]
            val += triangle(t, bass_note) * 0.3

        samples.append(int(max(-1.0, min(1.0, val)) * 32767 * volume))

    return samples


# Title screen: slow and festive
START_MELODY = [
    392, 0, 330, 0, 392, 0, 523, 0,
    494, 0, 440, 0, 392, 0, 0, 0,
    349, 0, 294, 0, 349, 0, 440, 0,
    392, 0, 330, 0, 262, 0, 0, 0,
]
START_BASS = [131, 131, 98, 98, 87, 87, 98, 98]

# Gameplay: fast galloping arpeggios
GAME_MELODY = [
    523, 659, 784, 659, 523, 659, 784, 1047,
    587, 698, 880, 698, 587, 698, 880, 1175,
    494, 587, 784, 587, 494, 587, 784, 988,
    523, 659, 784, 1047, 784, 659, 523, 0,
]
GAME_BASS = [131, 131, 147, 147, 123, 123, 131, 131]


class AudioEngine:
    """
    Music ducking and sound effects.

    Exactly one of the two music tracks plays at a time, chosen from the
    current screen. Every method is a no-op when the mixer is unavailable.
    """

    MUSIC_FOR_STATE = {
        ScreenState.START: "music_start",
    }
    DEFAULT_MUSIC = "music_game"

    def __init__(self, music_volume: float = 0.6, sfx_volume: float = 1.0):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._channels: Dict[str, pygame.mixer.Channel] = {}
        self._volume_music = music_volume
        self._volume_sfx = sfx_volume

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and synthesize all sounds."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 1024)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(8)
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        self._initialized = True
        self._generate_all_sounds()
        logger.info(f"Audio engine initialized with {len(self._sounds)} sounds")
        return True

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _generate_all_sounds(self) -> None:
        self._sounds["music_start"] = self._create_sound(
            render_melody(START_MELODY, bpm=100, lead="triangle", bass=START_BASS)
        )
        self._sounds["music_game"] = self._create_sound(
            render_melody(GAME_MELODY, bpm=150, lead="square", bass=GAME_BASS, volume=0.4)
        )
        self._gen_jump()

    def _gen_jump(self) -> None:
        """Rising square blip."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.15)):
            t = i / SAMPLE_RATE
            freq = 300 + 900 * (t / 0.15)
            env = max(0, 1 - t / 0.15)
            samples.append(int(square(t, freq) * 0.3 * env * 32767))
        self._sounds["jump"] = self._create_sound(samples)

    # ===== PLAYBACK API =====

    def play(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect once."""
        if not self._initialized:
            return None

        sound = self._sounds.get(sound_name)
        if not sound:
            logger.warning(f"Sound not found: {sound_name}")
            return None

        sound.set_volume(self._volume_sfx)
        return sound.play()

    def play_jump(self) -> None:
        self.play("jump")

    def is_playing(self, track_name: str) -> bool:
        channel = self._channels.get(track_name)
        return bool(channel is not None and channel.get_busy())

    def start_loop(self, track_name: str) -> None:
        """Loop a music track unless it is already playing."""
        if not self._initialized or self.is_playing(track_name):
            return

        sound = self._sounds.get(track_name)
        if not sound:
            logger.warning(f"Music track not found: {track_name}")
            return

        sound.set_volume(self._volume_music)
        self._channels[track_name] = sound.play(loops=-1)
        logger.info(f"Playing music: {track_name}")

    def stop_loop(self, track_name: str) -> None:
        if self.is_playing(track_name):
            self._channels[track_name].stop()
            logger.info(f"Stopped music: {track_name}")
        self._channels.pop(track_name, None)

    def music_for(self, state: ScreenState) -> str:
        return self.MUSIC_FOR_STATE.get(state, self.DEFAULT_MUSIC)

    def update_music(self, state: ScreenState) -> None:
        """Keep exactly the track for ``state`` playing. Safe to call every frame."""
        if not self._initialized:
            return

        wanted = self.music_for(state)
        for track_name in ("music_start", "music_game"):
            if track_name != wanted:
                self.stop_loop(track_name)
        self.start_loop(wanted)

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            self._channels.clear()
            logger.info("Audio engine cleaned up")
