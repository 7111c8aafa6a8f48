"""Tests for horse physics, jumping and the running animation."""

import unittest

from dalarun.game.player import HorseController
from dalarun.game.speed import scroll_speed
from dalarun.graphics.image import ImageAsset


def make_horse(center_y=200.0):
    frames = [ImageAsset.blank(60, 50, name="horse1"), ImageAsset.blank(60, 50, name="horse2")]
    return HorseController(
        frames, center_x=140, center_y=center_y, floor_y=360, canvas_height=400,
    )


class TestScrollSpeed(unittest.TestCase):

    def test_base_speed_at_zero(self):
        self.assertEqual(scroll_speed(0), 6.0)

    def test_speeds_up_by_five_every_250_points(self):
        self.assertAlmostEqual(scroll_speed(250), 11.0)
        self.assertAlmostEqual(scroll_speed(500), 16.0)

    def test_strictly_increasing(self):
        speeds = [scroll_speed(score) for score in range(0, 300, 10)]
        for slower, faster in zip(speeds, speeds[1:]):
            self.assertLess(slower, faster)

    def test_no_jump_around_step_boundary(self):
        self.assertAlmostEqual(scroll_speed(249), scroll_speed(251), delta=0.05)


class TestGravity(unittest.TestCase):

    def test_requires_frames(self):
        with self.assertRaises(ValueError):
            HorseController([], 140, 200, 360, 400)

    def test_falls_from_spawn_point(self):
        horse = make_horse()
        horse.advance()
        self.assertEqual(horse.sprite.center_y, 200)
        self.assertAlmostEqual(horse.sprite.velocity_y, 0.45)
        horse.advance()
        self.assertAlmostEqual(horse.sprite.center_y, 200.45)

    def test_lands_and_snaps_to_floor(self):
        horse = make_horse(center_y=330)
        horse.sprite.velocity_y = 10
        horse.sprite.is_jumping = True

        horse.advance()

        self.assertEqual(horse.sprite.center_y, 335)
        self.assertEqual(horse.sprite.velocity_y, 0)
        self.assertFalse(horse.sprite.is_jumping)
        self.assertFalse(horse.is_airborne)

    def test_resting_horse_stays_put(self):
        horse = make_horse()
        horse.land()
        for _ in range(10):
            horse.advance()
        self.assertEqual(horse.sprite.center_y, 335)

    def test_falls_through_floor_when_landing_disabled(self):
        horse = make_horse()
        horse.land()
        horse.kick(-10)

        for _ in range(200):
            horse.advance(allow_landing=False)

        # Integration stops a full sprite height below the canvas
        resting = horse.sprite.center_y
        self.assertGreaterEqual(resting, 400 + 50)
        horse.advance(allow_landing=False)
        self.assertEqual(horse.sprite.center_y, resting)


class TestJump(unittest.TestCase):

    def test_jump_from_floor(self):
        horse = make_horse()
        horse.land()

        self.assertTrue(horse.jump())
        self.assertEqual(horse.sprite.velocity_y, -10)
        self.assertTrue(horse.sprite.is_jumping)

        horse.advance()
        self.assertEqual(horse.sprite.center_y, 325)

    def test_no_double_jump(self):
        horse = make_horse()
        horse.land()
        horse.jump()
        horse.advance()

        self.assertFalse(horse.jump())
        self.assertAlmostEqual(horse.sprite.velocity_y, -9.55)

    def test_jump_returns_to_floor(self):
        horse = make_horse()
        horse.land()
        horse.jump()
        for _ in range(100):
            horse.advance()
        self.assertEqual(horse.sprite.center_y, 335)
        self.assertTrue(horse.jump())


class TestAnimation(unittest.TestCase):

    def test_frame_changes_every_eight_ticks(self):
        horse = make_horse()
        horse.land()

        for _ in range(7):
            horse.advance()
        self.assertEqual(horse.sprite.current_frame, 0)

        horse.advance()
        self.assertEqual(horse.sprite.current_frame, 1)

        for _ in range(8):
            horse.advance()
        self.assertEqual(horse.sprite.current_frame, 0)

    def test_airborne_horse_shows_first_frame(self):
        horse = make_horse()
        horse.land()
        horse.sprite.current_frame = 1
        self.assertIs(horse.sprite.display_image, horse.sprite.frames[1])

        horse.jump()
        self.assertIs(horse.sprite.display_image, horse.sprite.frames[0])


if __name__ == "__main__":
    unittest.main()
