import os
import tempfile
import unittest
import numpy as np
from PIL import Image as PIM
from tuples import color
from canvas import Canvas
from example_scenes import SCENES, BasicSceneExample
import cli


class TestCanvas(unittest.TestCase):

    def test_new_canvas_is_black(self):
        c = Canvas(10, 20)
        self.assertEqual((c.width, c.height), (10, 20))
        np.testing.assert_allclose(c.pixels, 0)

    def test_write_pixel(self):
        c = Canvas(10, 20)
        red = color(1, 0, 0)
        c.write_pixel(2, 3, red)
        np.testing.assert_allclose(c.pixel_at(2, 3), red)
        np.testing.assert_allclose(c.pixel_at(3, 2), color(0, 0, 0))

    def test_ppm_header_and_pixels(self):
        c = Canvas(5, 3)
        c.write_pixel(0, 0, color(1.5, 0, 0))
        c.write_pixel(2, 1, color(0, 0.5, 0))
        c.write_pixel(4, 2, color(-0.5, 0, 1))
        lines = c.to_ppm().split("\n")
        self.assertEqual(lines[:3], ["P3", "5 3", "255"])
        self.assertEqual(lines[3], "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0")
        self.assertEqual(lines[4], "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0")
        self.assertEqual(lines[5], "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255")

    def test_ppm_wraps_long_lines(self):
        c = Canvas(10, 2)
        c.pixels[:] = color(1, 0.8, 0.6)
        lines = c.to_ppm().split("\n")
        self.assertEqual(lines[3], "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204")
        self.assertEqual(lines[4], "153 255 204 153 255 204 153 255 204 153 255 204 153")
        self.assertEqual(lines[5], lines[3])
        self.assertEqual(lines[6], lines[4])
        for line in lines:
            self.assertLessEqual(len(line), 70)

    def test_ppm_ends_with_newline(self):
        self.assertTrue(Canvas(5, 3).to_ppm().endswith("\n"))

    def test_save(self):
        c = Canvas(4, 2)
        c.write_pixel(1, 1, color(0.2, 0.4, 0.6))
        with tempfile.TemporaryDirectory() as d:
            ppm_path = os.path.join(d, 'out.ppm')
            c.save(ppm_path)
            with open(ppm_path) as f:
                self.assertEqual(f.read(), c.to_ppm())

            png_path = os.path.join(d, 'out.png')
            c.save(png_path)
            pixels = np.array(PIM.open(png_path))
            self.assertEqual(pixels.shape, (2, 4, 3))
            np.testing.assert_array_equal(pixels[1, 1], [51, 102, 153])


class TestExampleScenes(unittest.TestCase):

    def test_every_scene_renders(self):
        for name, build in SCENES.items():
            example = build(8, 4)
            canvas = example.render()
            self.assertEqual((canvas.width, canvas.height), (8, 4), name)
            self.assertTrue(np.all(np.isfinite(canvas.pixels)), name)

    def test_cli_writes_image(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'basic.ppm')
            self.assertEqual(cli.main(['basic', '--width', '6', '--height', '3',
                                       '--output', path, '--quiet']), 0)
            with open(path) as f:
                self.assertTrue(f.read().startswith("P3\n6 3\n255\n"))

    def test_basic_scene_sees_the_floor(self):
        canvas = BasicSceneExample(10, 5).render()
        # the bottom row looks down at the lit floor
        self.assertTrue(np.all(canvas.pixels[-1].sum(axis=1) > 0))


if __name__ == '__main__':
    unittest.main()
