"""Tests for the parallax layers and the snowfall."""

import math
import random
import unittest

from dalarun.config.settings import BackgroundLayerConfig, default_layers
from dalarun.game.background import BackgroundLayer
from dalarun.game.snow import Snowfall, Snowflake
from dalarun.graphics.image import ImageAsset


def floor_layer(seed=0):
    config = BackgroundLayerConfig(
        name="floor", horizontal_spacing=(33, 33), speed=6, y=0.9, follows_scroll=True,
    )
    return BackgroundLayer(config, [ImageAsset.blank(33, 24)], 700, 400, rng=random.Random(seed))


def mountain_layer(seed=0):
    config = default_layers()[0]
    images = [ImageAsset.blank(80, 60), ImageAsset.blank(120, 90)]
    return BackgroundLayer(config, images, 700, 400, rng=random.Random(seed))


class TestBackgroundLayer(unittest.TestCase):

    def test_requires_images(self):
        with self.assertRaises(ValueError):
            BackgroundLayer(default_layers()[0], [], 700, 400)

    def test_first_sprite_anchored_at_zero(self):
        layer = mountain_layer()
        layer.fill()
        self.assertEqual(layer.sprites[0].center_x, 0)

    def test_fill_covers_canvas(self):
        for seed in range(5):
            layer = mountain_layer(seed)
            layer.fill()
            self.assertGreaterEqual(layer.sprites[-1].left_edge, 700)
            self.assertLessEqual(layer.sprites[0].left_edge, 0)

    def test_vertical_variance(self):
        layer = mountain_layer()
        layer.fill()
        for sprite in layer.sprites:
            self.assertGreaterEqual(sprite.center_y, 160 - 5)
            self.assertLessEqual(sprite.center_y, 160 + 5)

    def test_floor_tiles_are_seamless(self):
        layer = floor_layer()
        layer.fill()
        for left, right in zip(layer.sprites, layer.sprites[1:]):
            self.assertAlmostEqual(right.left_edge - left.left_edge, 33)
            self.assertAlmostEqual(right.center_y, 360)

    def test_update_recycles_head(self):
        layer = floor_layer()
        layer.fill()
        first = layer.sprites[0]

        # First tile spans [-16.5, 16.5]; gone once its right edge passes 0
        layer.update(6)
        layer.update(6)
        self.assertIs(layer.sprites[0], first)
        layer.update(6)
        self.assertIsNot(layer.sprites[0], first)

    def test_update_keeps_layer_spanning_canvas(self):
        layer = mountain_layer(seed=7)
        layer.fill()
        for _ in range(2000):
            layer.update(layer.config.speed)
            self.assertGreaterEqual(layer.sprites[-1].right_edge, 700)

    def test_floor_keeps_up_with_fast_scroll(self):
        layer = floor_layer()
        layer.fill()
        for _ in range(500):
            layer.update(16)
        self.assertLessEqual(layer.sprites[0].left_edge, 0)
        self.assertGreaterEqual(layer.sprites[-1].right_edge, 700)

    def test_default_layer_order(self):
        names = [config.name for config in default_layers()]
        self.assertEqual(names, ["mountains", "trees", "flowers", "floor"])
        self.assertEqual([c.follows_scroll for c in default_layers()], [False, False, False, True])


class TestSnowflake(unittest.TestCase):

    def test_sways_around_center(self):
        flake = Snowflake(radius=10, initial_angle=90, size=3, color=(255, 255, 255))
        flake.update(0.0, center_x=350, canvas_height=400)
        self.assertAlmostEqual(flake.pos_x, 360)

        # 15 degrees per second: six seconds later the angle is 180
        flake.update(6.0, center_x=350, canvas_height=400)
        self.assertAlmostEqual(flake.pos_x, 350)

    def test_smaller_flakes_fall_faster(self):
        small = Snowflake(radius=0, initial_angle=0, size=2, color=(255, 255, 255))
        large = Snowflake(radius=0, initial_angle=0, size=5, color=(255, 255, 255))
        small.update(0, 350, 400)
        large.update(0, 350, 400)
        self.assertAlmostEqual(small.pos_y, 1.5)
        self.assertAlmostEqual(large.pos_y, 0.6)

    def test_wraps_above_canvas(self):
        flake = Snowflake(radius=0, initial_angle=0, size=3, color=(255, 255, 255), pos_y=399.5)
        flake.update(0, 350, 400)
        self.assertEqual(flake.pos_y, -50)


class TestSnowfall(unittest.TestCase):

    def test_pool_size(self):
        self.assertEqual(len(Snowfall(700, 400, rng=random.Random(1)).flakes), 300)
        self.assertEqual(len(Snowfall(700, 400, count=12).flakes), 12)

    def test_flake_attributes_in_range(self):
        snow = Snowfall(700, 400, rng=random.Random(1))
        for flake in snow.flakes:
            self.assertLessEqual(flake.radius, 350)
            self.assertTrue(2 <= flake.size <= 5)
            self.assertTrue(0 <= flake.initial_angle <= 360)
            self.assertTrue(all(200 <= c <= 255 for c in flake.color))

    def test_flakes_stay_in_band(self):
        snow = Snowfall(700, 400, rng=random.Random(2))
        for frame in range(1000):
            snow.update(frame / 60)
        for flake in snow.flakes:
            self.assertTrue(-50 <= flake.pos_y <= 400)
            self.assertLessEqual(abs(flake.pos_x - 350), flake.radius + 1e-9)

    def test_position_matches_clock(self):
        snow = Snowfall(700, 400, count=1, rng=random.Random(3))
        flake = snow.flakes[0]
        snow.update(2.0)
        expected = 350 + flake.radius * math.sin(math.radians(flake.initial_angle + 30))
        self.assertAlmostEqual(flake.pos_x, expected)


if __name__ == "__main__":
    unittest.main()
