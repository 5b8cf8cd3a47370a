import sys
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "display_protocol"))

from unicornhd_display.framebuffer import FrameBuffer
from unicornhd_display.models import Pixel
from unicornhd_display.preview import PATTERNS, build_test_pattern, load_image, render_ansi, to_image


class PreviewTests(unittest.TestCase):
    def test_pattern_dimensions(self):
        for name in PATTERNS:
            self.assertEqual(build_test_pattern(name).size, (16, 16))

    def test_unknown_pattern(self):
        with self.assertRaises(ValueError):
            build_test_pattern("plaid")

    def test_load_image_quadrants(self):
        fb = FrameBuffer()
        load_image(fb, build_test_pattern("quadrants"))
        self.assertEqual(fb.get_pixel(0, 0), Pixel(255, 0, 0))
        self.assertEqual(fb.get_pixel(15, 0), Pixel(0, 255, 0))
        self.assertEqual(fb.get_pixel(0, 15), Pixel(0, 0, 255))
        self.assertEqual(fb.get_pixel(15, 15), Pixel(255, 255, 255))

    def test_load_image_resizes(self):
        fb = FrameBuffer()
        load_image(fb, Image.new("RGB", (64, 32), (10, 20, 30)))
        self.assertEqual(fb.get_pixel(8, 8), Pixel(10, 20, 30))

    def test_to_image_follows_rotation(self):
        fb = FrameBuffer()
        fb.set_pixel(0, 0, (255, 0, 0))
        fb.set_rotation(90)
        img = to_image(fb)
        self.assertEqual(img.getpixel((15, 0)), (255, 0, 0))
        self.assertEqual(to_image(fb, scale=4).size, (64, 64))

    def test_render_ansi(self):
        fb = FrameBuffer()
        fb.set_pixel(0, 0, (1, 2, 3))
        lines = render_ansi(fb).splitlines()
        self.assertEqual(len(lines), 16)
        self.assertTrue(lines[0].startswith("\x1b[38;2;1;2;3m*"))
        self.assertEqual(lines[0].count("*"), 16)


if __name__ == "__main__":
    unittest.main()
