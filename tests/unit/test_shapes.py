import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from ascii_art_renderer.shapes import HEART, draw_circle, draw_square, stamp_pattern


class SquareTests(unittest.TestCase):
    def test_filled(self):
        self.assertEqual(draw_square(3), ["###", "###", "###"])

    def test_outline(self):
        self.assertEqual(draw_square(4, "*", filled=False), ["****", "*  *", "*  *", "****"])

    def test_non_positive(self):
        self.assertEqual(draw_square(0), [])


class CircleTests(unittest.TestCase):
    def test_dimensions(self):
        lines = draw_circle(8, "*")
        self.assertEqual(len(lines), 17)
        self.assertTrue(all(len(line) == 33 for line in lines))

    def test_filled_center_and_corners(self):
        lines = draw_circle(3, "#", filled=True)
        self.assertEqual(lines[3][6], "#")
        self.assertEqual(lines[0][0], " ")

    def test_outline_center_empty(self):
        lines = draw_circle(6, "o")
        self.assertEqual(lines[6][12], " ")
        self.assertEqual(lines[0][12], "o")

    def test_non_positive(self):
        self.assertEqual(draw_circle(-1), [])


class StampTests(unittest.TestCase):
    def test_scaled(self):
        self.assertEqual(stamp_pattern(["* ", " *"], 2, 2, "@", "."),
                         ["@@..", "@@..", "..@@", "..@@"])

    def test_ragged_rows_padded(self):
        self.assertEqual(stamp_pattern(["***", "*"]), ["###", "#  "])

    def test_heart_shape(self):
        lines = stamp_pattern(HEART, 1, 1, "@", " ")
        self.assertEqual(len(lines), len(HEART))
        self.assertEqual(lines[2], "@" * 11)

    def test_invalid(self):
        self.assertEqual(stamp_pattern([]), [])
        self.assertEqual(stamp_pattern(["*"], 0, 1), [])


if __name__ == "__main__":
    unittest.main()
