import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from ascii_art_renderer.brightness import brightness_map, pixel_brightness, weighted_luma
from ascii_art_renderer.pixels import PixelBuffer


class BrightnessTests(unittest.TestCase):
    def test_grayscale_extremes(self):
        self.assertEqual(pixel_brightness(0), 0.0)
        self.assertEqual(pixel_brightness(255), 1.0)

    def test_grayscale_is_sample_over_255(self):
        self.assertAlmostEqual(pixel_brightness(51), 51 / 255)

    def test_rgb_uses_luma_weights(self):
        self.assertAlmostEqual(pixel_brightness((255, 0, 0)), 0.2126)
        self.assertAlmostEqual(pixel_brightness((0, 255, 0)), 0.7152)
        self.assertAlmostEqual(pixel_brightness((0, 0, 255)), 0.0722)
        self.assertEqual(pixel_brightness((255, 255, 255)), 1.0)

    def test_gray_rgb_matches_grayscale(self):
        self.assertEqual(pixel_brightness((128, 128, 128)), pixel_brightness(128))

    def test_buffer_map_matches_per_pixel(self):
        data = bytes([255, 0, 0, 0, 255, 0, 10, 20, 30, 200, 200, 200])
        buf = PixelBuffer(width=2, height=2, channels=3, data=data)
        bmap = brightness_map(buf)
        self.assertEqual(bmap.shape, (2, 2))
        for y in range(2):
            for x in range(2):
                self.assertEqual(bmap[y, x], pixel_brightness(buf.pixel(x, y)))

    def test_weighted_luma_is_integer(self):
        buf = PixelBuffer(width=1, height=1, channels=1, data=bytes([7]))
        self.assertEqual(int(weighted_luma(buf)[0, 0]), 70000)


if __name__ == "__main__":
    unittest.main()
