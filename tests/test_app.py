"""Tests for settings, the audio engine and the command line entry point."""

import os
import unittest
from unittest import mock

from pydantic import ValidationError

from dalarun.audio.engine import SAMPLE_RATE, AudioEngine, render_melody
from dalarun.config.settings import GameSettings, Settings
from dalarun.core.state import ScreenState
from dalarun.main import apply_args, main, parse_args, run_headless


class TestSettings(unittest.TestCase):

    def test_game_defaults(self):
        game = GameSettings()
        self.assertEqual((game.canvas_width, game.canvas_height), (700, 400))
        self.assertAlmostEqual(game.floor_y, 360)
        self.assertEqual(game.win_score, 240)
        self.assertEqual(game.snowflake_count, 300)
        self.assertEqual(len(game.layers), 4)

    def test_environment_override(self):
        with mock.patch.dict(os.environ, {"DALARUN_GAME_WIN_SCORE": "100"}):
            self.assertEqual(GameSettings().win_score, 100)

    def test_headless_mode(self):
        with mock.patch.dict(os.environ, {"DALARUN_ENV": "headless"}):
            self.assertTrue(Settings(_env_file=None).is_headless)
        self.assertFalse(Settings(_env_file=None).is_headless)

    def test_command_line_overrides(self):
        settings = Settings(_env_file=None)
        args = parse_args(["--seed", "5", "--mute", "--scale", "2", "--headless"])
        apply_args(settings, args)
        self.assertEqual(settings.seed, 5)
        self.assertFalse(settings.audio.enabled)
        self.assertEqual(settings.display.scale, 2)
        self.assertTrue(settings.is_headless)

    def test_out_of_range_flags_rejected(self):
        for argv in (["--scale", "-1"], ["--scale", "0"], ["--scale", "5"], ["--fps", "0"]):
            settings = Settings(_env_file=None)
            with self.assertRaises(ValidationError):
                apply_args(settings, parse_args(argv))
            self.assertEqual(settings.display.scale, 1)
            self.assertEqual(settings.display.fps, 60)

    def test_main_exits_on_bad_flag(self):
        with mock.patch("dalarun.main.get_settings", return_value=Settings(_env_file=None)):
            with self.assertRaises(SystemExit) as ctx:
                main(["--scale", "-1"])
        self.assertIn("Invalid option", str(ctx.exception.code))


class TestAudioEngine(unittest.TestCase):

    def test_music_choice(self):
        audio = AudioEngine()
        self.assertEqual(audio.music_for(ScreenState.START), "music_start")
        for state in (ScreenState.PLAYING, ScreenState.GAME_OVER, ScreenState.WIN):
            self.assertEqual(audio.music_for(state), "music_game")

    def test_uninitialized_engine_is_silent(self):
        audio = AudioEngine()
        self.assertFalse(audio.is_initialized)
        audio.update_music(ScreenState.PLAYING)
        audio.play_jump()
        self.assertIsNone(audio.play("jump"))
        self.assertFalse(audio.is_playing("music_game"))
        audio.cleanup()

    def test_melody_length(self):
        samples = render_melody([440, 0, 440, 0], bpm=120)
        # Four eighth notes at 120 bpm last one second
        self.assertEqual(len(samples), SAMPLE_RATE)
        self.assertTrue(all(-32768 <= s <= 32767 for s in samples))


class TestHeadlessRun(unittest.TestCase):

    def test_headless_run_is_reproducible(self):
        scores = []
        for _ in range(2):
            settings = Settings(_env_file=None)
            settings.seed = 4
            session = run_headless(settings, frames=300)
            scores.append((session.state, session.score, session.frame_count))

        self.assertEqual(scores[0], scores[1])
        self.assertEqual(scores[0][2], 300)
        self.assertIsNot(scores[0][0], ScreenState.START)


if __name__ == "__main__":
    unittest.main()
