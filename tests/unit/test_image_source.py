import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import numpy as np
from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from ascii_art_renderer.errors import DecodeFailure, ResourceNotFound
from ascii_art_renderer.image_source import load_pixels, resolve_resource


class ResolveResourceTests(unittest.TestCase):
    def test_existing_path_returned(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "a.png"
            path.write_bytes(b"x")
            self.assertEqual(resolve_resource(path), path)

    def test_found_in_search_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            assets = Path(tmp) / "assets"
            assets.mkdir()
            (assets / "logo.png").write_bytes(b"x")
            found = resolve_resource("logo.png", [Path(tmp) / "images", assets])
            self.assertEqual(found, assets / "logo.png")

    def test_missing_lists_attempts(self):
        with tempfile.TemporaryDirectory() as tmp:
            dirs = [Path(tmp) / "one", Path(tmp) / "two"]
            with self.assertRaises(ResourceNotFound) as ctx:
                resolve_resource("missing.png", dirs)
            err = ctx.exception
            self.assertEqual(err.name, "missing.png")
            self.assertIn(dirs[0] / "missing.png", err.attempted)
            self.assertIn(dirs[1] / "missing.png", err.attempted)
            self.assertIsInstance(err, FileNotFoundError)


class LoadPixelsTests(unittest.TestCase):
    def test_load_rgb_and_gray(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "img.png"
            Image.new("RGB", (3, 2), (255, 0, 0)).save(path)
            rgb = load_pixels(path, channels=3)
            self.assertEqual((rgb.width, rgb.height, rgb.channels), (3, 2, 3))
            self.assertEqual(rgb.pixel(0, 0), (255, 0, 0))
            gray = load_pixels(path, channels=1)
            self.assertEqual(gray.channels, 1)
            self.assertEqual(len(gray.data), 6)

    def test_not_an_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.png"
            path.write_text("definitely not a png", encoding="utf-8")
            with self.assertRaises(DecodeFailure) as ctx:
                load_pixels(path)
            self.assertEqual(ctx.exception.path, path)

    def test_missing_file(self):
        with self.assertRaises(ResourceNotFound):
            load_pixels("/nonexistent/dir/img.png")

    def test_sixteen_bit_grayscale_is_rescaled(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mid16.png"
            Image.fromarray(np.full((4, 4), 32768, dtype=np.uint16)).save(path)
            gray = load_pixels(path, channels=1)
            self.assertEqual(gray.pixel(0, 0), 128)
            rgb = load_pixels(path, channels=3)
            self.assertEqual(rgb.pixel(3, 3), (128, 128, 128))

    def test_oversized_image_is_decode_failure(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "big.png"
            Image.new("L", (100, 100), 0).save(path)
            with patch.object(Image, "MAX_IMAGE_PIXELS", 1000):
                with self.assertRaises(DecodeFailure):
                    load_pixels(path)

    def test_alpha_channel_rejected(self):
        with self.assertRaises(ValueError):
            load_pixels("whatever.png", channels=4)


if __name__ == "__main__":
    unittest.main()
