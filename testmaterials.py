import unittest
import numpy as np
from tuples import point, vector, color, WHITE, BLACK
from transforms import translation, scaling
from materials import Material
from patterns import Pattern, Solid, Stripe, Gradient, Ring, Checker, TestPattern
from geometry import Sphere
from tracer import PointLight

H = np.sqrt(2) / 2


class TestMaterial(unittest.TestCase):

    def test_default_material(self):
        m = Material()
        np.testing.assert_allclose(m.pattern.color_at(Sphere(), point(3, -2, 7)), WHITE)
        self.assertEqual(m.ambient, 0.1)
        self.assertEqual(m.diffuse, 0.9)
        self.assertEqual(m.specular, 0.9)
        self.assertEqual(m.shininess, 200.0)
        self.assertEqual(m.reflective, 0.0)
        self.assertEqual(m.transparency, 0.0)
        self.assertEqual(m.refractive_index, 1.0)

    def test_color_shorthand(self):
        m = Material(color=color(0.8, 1.0, 0.6))
        self.assertIsInstance(m.pattern, Solid)
        np.testing.assert_allclose(m.pattern.color, color(0.8, 1.0, 0.6))


class TestLighting(unittest.TestCase):

    def shading_test(self, eyev, normalv, light_position, in_shadow=False):
        # default material at the origin, white light
        light = PointLight(light_position, color(1, 1, 1))
        return Material().lighting(Sphere(), light, point(0, 0, 0), eyev, normalv, in_shadow)

    def test_eye_between_light_and_surface(self):
        result = self.shading_test(vector(0, 0, -1), vector(0, 0, -1), point(0, 0, -10))
        np.testing.assert_allclose(result, color(1.9, 1.9, 1.9))

    def test_eye_offset_45_degrees(self):
        result = self.shading_test(vector(0, H, -H), vector(0, 0, -1), point(0, 0, -10))
        np.testing.assert_allclose(result, color(1.0, 1.0, 1.0))

    def test_light_offset_45_degrees(self):
        result = self.shading_test(vector(0, 0, -1), vector(0, 0, -1), point(0, 10, -10))
        np.testing.assert_allclose(result, color(0.7364, 0.7364, 0.7364), atol=1e-4)

    def test_eye_in_reflection_path(self):
        result = self.shading_test(vector(0, -H, -H), vector(0, 0, -1), point(0, 10, -10))
        np.testing.assert_allclose(result, color(1.6364, 1.6364, 1.6364), atol=1e-4)

    def test_light_behind_surface(self):
        result = self.shading_test(vector(0, 0, -1), vector(0, 0, -1), point(0, 0, 10))
        np.testing.assert_allclose(result, color(0.1, 0.1, 0.1))

    def test_surface_in_shadow(self):
        result = self.shading_test(vector(0, 0, -1), vector(0, 0, -1), point(0, 0, -10),
                                   in_shadow=True)
        np.testing.assert_allclose(result, color(0.1, 0.1, 0.1))

    def test_lighting_with_pattern(self):
        m = Material(pattern=Stripe(WHITE, BLACK), ambient=1, diffuse=0, specular=0)
        light = PointLight(point(0, 0, -10), color(1, 1, 1))
        eyev, normalv = vector(0, 0, -1), vector(0, 0, -1)
        c1 = m.lighting(Sphere(), light, point(0.9, 0, 0), eyev, normalv, False)
        c2 = m.lighting(Sphere(), light, point(1.1, 0, 0), eyev, normalv, False)
        np.testing.assert_allclose(c1, WHITE)
        np.testing.assert_allclose(c2, BLACK)

    def test_colored_light(self):
        light = PointLight(point(0, 0, -10), color(0.5, 0.25, 1))
        m = Material(color=color(1, 0.5, 0.2), specular=0)
        result = m.lighting(Sphere(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        np.testing.assert_allclose(result, color(0.5, 0.125, 0.2))


class TestPatterns(unittest.TestCase):

    def test_stripe_constant_in_y_and_z(self):
        p = Stripe(WHITE, BLACK)
        for q in (point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)):
            np.testing.assert_allclose(p.local_color_at(q), WHITE)

    def test_stripe_alternates_in_x(self):
        p = Stripe(WHITE, BLACK)
        cases = [(0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE)]
        for x, expected in cases:
            np.testing.assert_allclose(p.local_color_at(point(x, 0, 0)), expected)

    def test_stripe_with_object_transform(self):
        shape = Sphere(scaling(2, 2, 2))
        np.testing.assert_allclose(Stripe(WHITE, BLACK).color_at(shape, point(1.5, 0, 0)), WHITE)

    def test_stripe_with_pattern_transform(self):
        p = Stripe(WHITE, BLACK, scaling(2, 2, 2))
        np.testing.assert_allclose(p.color_at(Sphere(), point(1.5, 0, 0)), WHITE)

    def test_stripe_with_both_transforms(self):
        shape = Sphere(scaling(2, 2, 2))
        p = Stripe(WHITE, BLACK, translation(0.5, 0, 0))
        np.testing.assert_allclose(p.color_at(shape, point(2.5, 0, 0)), WHITE)

    def test_transform_chain_with_test_pattern(self):
        shape = Sphere(scaling(2, 2, 2))
        np.testing.assert_allclose(TestPattern().color_at(shape, point(2, 3, 4)),
                                   color(1, 1.5, 2))
        p = TestPattern(scaling(2, 2, 2))
        np.testing.assert_allclose(p.color_at(Sphere(), point(2, 3, 4)), color(1, 1.5, 2))
        p = TestPattern(translation(0.5, 1, 1.5))
        np.testing.assert_allclose(p.color_at(shape, point(2.5, 3, 3.5)),
                                   color(0.75, 0.5, 0.25))

    def test_gradient(self):
        p = Gradient(WHITE, BLACK)
        cases = [(0, 1.0), (0.25, 0.75), (0.5, 0.5), (0.75, 0.25)]
        for x, level in cases:
            np.testing.assert_allclose(p.local_color_at(point(x, 0, 0)), color(level, level, level))

    def test_ring(self):
        p = Ring(WHITE, BLACK)
        np.testing.assert_allclose(p.local_color_at(point(0, 0, 0)), WHITE)
        np.testing.assert_allclose(p.local_color_at(point(1, 0, 0)), BLACK)
        np.testing.assert_allclose(p.local_color_at(point(0, 0, 1)), BLACK)
        np.testing.assert_allclose(p.local_color_at(point(0.708, 0, 0.708)), BLACK)
        np.testing.assert_allclose(p.local_color_at(point(2, 0, 0.5)), WHITE)

    def test_checker_repeats_on_every_axis(self):
        p = Checker(WHITE, BLACK)
        for axis in range(3):
            for offset, expected in [(0, WHITE), (0.99, WHITE), (1.01, BLACK)]:
                coords = [0, 0, 0]
                coords[axis] = offset
                np.testing.assert_allclose(p.local_color_at(point(*coords)), expected)

    def test_solid_ignores_position(self):
        p = Solid(color(0.2, 0.3, 0.4))
        np.testing.assert_allclose(p.color_at(Sphere(), point(-7, 3, 100)), color(0.2, 0.3, 0.4))

    def test_base_pattern_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            Pattern().color_at(Sphere(), point(0, 0, 0))

    def test_singular_pattern_transform(self):
        with self.assertRaises(ValueError):
            Stripe(WHITE, BLACK, scaling(1, 0, 1))


if __name__ == '__main__':
    unittest.main()
