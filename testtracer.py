import unittest
import numpy as np
from tuples import point, vector, color, normalize, BLACK
from transforms import translation, scaling, rotation_y, view_transform, identity
from materials import Material
from patterns import TestPattern
from geometry import Sphere, Plane
from intersections import Intersection, Intersections, Precompute
from tracer import *

H = np.sqrt(2) / 2


def assert_direction_matches(v, w):
    np.testing.assert_almost_equal(normalize(v), normalize(w))


def with_objects(world, objects):
    return World(objects, world.light)


class TestRay(unittest.TestCase):

    def test_position(self):
        r = Ray(point(2, 3, 4), vector(1, 0, 0))
        np.testing.assert_allclose(r.position(0), point(2, 3, 4))
        np.testing.assert_allclose(r.position(1), point(3, 3, 4))
        np.testing.assert_allclose(r.position(-1), point(1, 3, 4))
        np.testing.assert_allclose(r.position(2.5), point(4.5, 3, 4))

    def test_transform(self):
        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(translation(3, 4, 5))
        np.testing.assert_allclose(r2.origin, point(4, 6, 8))
        np.testing.assert_allclose(r2.direction, vector(0, 1, 0))
        r3 = r.transform(scaling(2, 3, 4))
        np.testing.assert_allclose(r3.origin, point(2, 6, 12))
        np.testing.assert_allclose(r3.direction, vector(0, 3, 0))
        # the original is untouched
        np.testing.assert_allclose(r.origin, point(1, 2, 3))

    def test_wrong_tuple_kinds(self):
        with self.assertRaises(ValueError):
            Ray(vector(0, 0, 0), vector(0, 0, 1))
        with self.assertRaises(ValueError):
            Ray(point(0, 0, 0), point(0, 0, 1))


class TestCamera(unittest.TestCase):

    def test_construction(self):
        c = Camera(160, 120, np.pi / 2)
        self.assertEqual((c.hsize, c.vsize), (160, 120))
        self.assertEqual(c.field_of_view, np.pi / 2)
        np.testing.assert_allclose(c.transform, identity())

    def test_pixel_size(self):
        self.assertAlmostEqual(Camera(200, 125, np.pi / 2).pixel_size, 0.01)
        self.assertAlmostEqual(Camera(125, 200, np.pi / 2).pixel_size, 0.01)

    def test_ray_through_center(self):
        r = Camera(201, 101, np.pi / 2).ray_for_pixel(100, 50)
        np.testing.assert_allclose(r.origin, point(0, 0, 0), atol=1e-10)
        np.testing.assert_allclose(r.direction, vector(0, 0, -1), atol=1e-10)

    def test_ray_through_corner(self):
        r = Camera(201, 101, np.pi / 2).ray_for_pixel(0, 0)
        np.testing.assert_allclose(r.origin, point(0, 0, 0), atol=1e-10)
        np.testing.assert_allclose(r.direction, vector(0.66519, 0.33259, -0.66851), atol=1e-5)

    def test_ray_with_transformed_camera(self):
        c = Camera(201, 101, np.pi / 2, rotation_y(np.pi / 4) @ translation(0, -2, 5))
        r = c.ray_for_pixel(100, 50)
        np.testing.assert_allclose(r.origin, point(0, 2, -5), atol=1e-10)
        np.testing.assert_allclose(r.direction, vector(H, 0, -H), atol=1e-10)

    def test_arbitrary_frame(self):
        # a camera that lines up with nothing in particular
        eye = point(3, 4, 5)
        target = point(6, 7, 8)
        c = Camera(101, 101, 0.8, view_transform(eye, target, vector(1, 2, 3)))
        ray = c.ray_for_pixel(50, 50)
        np.testing.assert_allclose(ray.origin, eye, atol=1e-10)
        assert_direction_matches(ray.direction, target - eye)

    def test_singular_camera_transform(self):
        with self.assertRaises(ValueError):
            Camera(10, 10, np.pi / 2, scaling(1, 1, 0))

    def test_render_default_world(self):
        w = default_world()
        c = Camera(11, 11, np.pi / 2,
                   view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))
        image = c.render(w)
        self.assertEqual((image.width, image.height), (11, 11))
        np.testing.assert_allclose(image.pixel_at(5, 5), color(0.38066, 0.47583, 0.2855),
                                   atol=1e-4)
        # corners miss everything
        np.testing.assert_allclose(image.pixel_at(0, 0), BLACK)

    def test_render_from_above(self):
        w = default_world()
        c = Camera(11, 11, np.pi / 3,
                   view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)))
        image = c.render(w)
        # the center ray grazes the top of the outer sphere at (0, 1, 0)
        np.testing.assert_allclose(image.pixel_at(5, 5), color(0.38066, 0.47583, 0.28550),
                                   atol=1e-4)
        np.testing.assert_allclose(image.pixel_at(5, 8), color(0.29519, 0.36899, 0.22140),
                                   atol=1e-4)
        np.testing.assert_allclose(image.pixel_at(0, 0), BLACK)

        pixels = image.to_uint8()
        np.testing.assert_array_equal(pixels[5, 5], [97, 121, 73])
        np.testing.assert_array_equal(pixels[8, 5], [75, 94, 56])
        lines = image.to_ppm().split("\n")
        self.assertEqual(lines[:3], ["P3", "11 11", "255"])
        # nothing in the top row reaches the spheres
        self.assertEqual(lines[3], " ".join(["0"] * 33))

        again = c.render(w)
        self.assertEqual(again.to_ppm(), image.to_ppm())


class TestPointLight(unittest.TestCase):

    def test_fields(self):
        light = PointLight(point(0, 0, 0), color(1, 1, 1))
        np.testing.assert_allclose(light.position, point(0, 0, 0))
        np.testing.assert_allclose(light.intensity, color(1, 1, 1))


class TestWorld(unittest.TestCase):

    def test_empty_world(self):
        w = World()
        self.assertEqual(len(w.objects), 0)
        self.assertIsNone(w.light)

    def test_default_world(self):
        w = default_world()
        outer, inner = w.objects
        np.testing.assert_allclose(w.light.position, point(-10, 10, -10))
        np.testing.assert_allclose(outer.material.pattern.color, color(0.8, 1.0, 0.6))
        self.assertEqual(outer.material.diffuse, 0.7)
        self.assertEqual(outer.material.specular, 0.2)
        np.testing.assert_allclose(inner.transform, scaling(0.5, 0.5, 0.5))

    def test_intersect(self):
        xs = default_world().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        self.assertIsInstance(xs, Intersections)
        np.testing.assert_allclose([i.t for i in xs], [4, 4.5, 5.5, 6])

    def test_shade_intersection(self):
        w = default_world()
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Precompute(Intersection(4, w.objects[0]), r)
        np.testing.assert_allclose(w.shade_hit(comps), color(0.38066, 0.47583, 0.2855), atol=1e-5)

    def test_shade_intersection_from_inside(self):
        w = default_world()
        w = World(w.objects, PointLight(point(0, 0.25, 0), color(1, 1, 1)))
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Precompute(Intersection(0.5, w.objects[1]), r)
        np.testing.assert_allclose(w.shade_hit(comps), color(0.90498, 0.90498, 0.90498),
                                   atol=1e-5)

    def test_shade_intersection_in_shadow(self):
        s2 = Sphere(translation(0, 0, 10))
        w = World([Sphere(), s2], PointLight(point(0, 0, -10), color(1, 1, 1)))
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = Precompute(Intersection(4, s2), r)
        np.testing.assert_allclose(w.shade_hit(comps), color(0.1, 0.1, 0.1))

    def test_color_when_ray_misses(self):
        c = default_world().color_at(Ray(point(0, 0, -5), vector(0, 1, 0)))
        np.testing.assert_allclose(c, BLACK)

    def test_color_when_ray_hits(self):
        c = default_world().color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        np.testing.assert_allclose(c, color(0.38066, 0.47583, 0.2855), atol=1e-5)

    def test_color_with_intersection_behind_ray(self):
        outer = Sphere(material=Material(color=color(0.8, 1.0, 0.6), ambient=1,
                                         diffuse=0.7, specular=0.2))
        inner = Sphere(scaling(0.5, 0.5, 0.5), Material(color=color(0.3, 0.6, 0.9), ambient=1))
        w = with_objects(default_world(), [outer, inner])
        c = w.color_at(Ray(point(0, 0, 0.75), vector(0, 0, -1)))
        np.testing.assert_allclose(c, color(0.3, 0.6, 0.9))

    def test_shadows(self):
        w = default_world()
        # nothing is collinear with point and light
        self.assertFalse(w.is_shadowed(point(0, 10, 0)))
        # an object is between the point and the light
        self.assertTrue(w.is_shadowed(point(10, -10, 10)))
        # the light is between the point and the object
        self.assertFalse(w.is_shadowed(point(-20, 20, -20)))
        # the object is behind the point
        self.assertFalse(w.is_shadowed(point(-2, 2, -2)))

    def test_hit_offsets_point_for_shadow(self):
        s = Sphere(translation(0, 0, 1))
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Precompute(Intersection(5, s), r)
        self.assertLess(comps.over_point[2], comps.point[2])


class TestReflection(unittest.TestCase):

    def test_nonreflective_material(self):
        w = default_world()
        inner = Sphere(scaling(0.5, 0.5, 0.5), Material(ambient=1))
        w = with_objects(w, [w.objects[0], inner])
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Precompute(Intersection(1, inner), r)
        np.testing.assert_allclose(w.reflected_color(comps), BLACK)

    def reflective_world(self):
        w = default_world()
        plane = Plane(translation(0, -1, 0), Material(reflective=0.5))
        return with_objects(w, w.objects + (plane,)), plane

    def test_reflective_material(self):
        w, plane = self.reflective_world()
        r = Ray(point(0, 0, -3), vector(0, -H, H))
        comps = Precompute(Intersection(np.sqrt(2), plane), r)
        np.testing.assert_allclose(w.reflected_color(comps), color(0.19032, 0.2379, 0.14274),
                                   atol=1e-3)

    def test_shade_hit_with_reflective_material(self):
        w, plane = self.reflective_world()
        r = Ray(point(0, 0, -3), vector(0, -H, H))
        comps = Precompute(Intersection(np.sqrt(2), plane), r)
        np.testing.assert_allclose(w.shade_hit(comps), color(0.87677, 0.92436, 0.82918),
                                   atol=1e-3)

    def test_mutually_reflective_surfaces_terminate(self):
        lower = Plane(translation(0, -1, 0), Material(reflective=1))
        upper = Plane(translation(0, 1, 0), Material(reflective=1))
        w = World([lower, upper], PointLight(point(0, 0, 0), color(1, 1, 1)))
        c = w.color_at(Ray(point(0, 0, 0), vector(0, 1, 0)))
        self.assertTrue(np.all(np.isfinite(c)))

    def test_reflected_color_at_max_depth(self):
        w, plane = self.reflective_world()
        r = Ray(point(0, 0, -3), vector(0, -H, H))
        comps = Precompute(Intersection(np.sqrt(2), plane), r)
        np.testing.assert_allclose(w.reflected_color(comps, 0), BLACK)


class TestRefraction(unittest.TestCase):

    def test_opaque_surface(self):
        w = default_world()
        shape = w.objects[0]
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = Precompute(xs[0], r, xs)
        np.testing.assert_allclose(w.refracted_color(comps, 5), BLACK)

    def test_maximum_recursive_depth(self):
        shape = Sphere(material=Material(transparency=1.0, refractive_index=1.5))
        w = with_objects(default_world(), [shape])
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = Precompute(xs[0], r, xs)
        np.testing.assert_allclose(w.refracted_color(comps, 0), BLACK)

    def test_total_internal_reflection(self):
        shape = Sphere(material=Material(transparency=1.0, refractive_index=1.5))
        w = with_objects(default_world(), [shape])
        r = Ray(point(0, 0, H), vector(0, 1, 0))
        xs = Intersections([Intersection(-H, shape), Intersection(H, shape)])
        # inside the sphere, so look at the second intersection
        comps = Precompute(xs[1], r, xs)
        np.testing.assert_allclose(w.refracted_color(comps, 5), BLACK)

    def test_refracted_color(self):
        a = Sphere(material=Material(pattern=TestPattern(), ambient=1.0))
        b = Sphere(scaling(0.5, 0.5, 0.5), Material(transparency=1.0, refractive_index=1.5))
        w = with_objects(default_world(), [a, b])
        r = Ray(point(0, 0, 0.1), vector(0, 1, 0))
        xs = Intersections([Intersection(-0.9899, a), Intersection(-0.4899, b),
                            Intersection(0.4899, b), Intersection(0.9899, a)])
        comps = Precompute(xs[2], r, xs)
        np.testing.assert_allclose(w.refracted_color(comps, 5), color(0, 0.99888, 0.04725),
                                   atol=1e-3)

    def transparent_floor_world(self, reflective=0.0):
        floor = Plane(translation(0, -1, 0),
                      Material(transparency=0.5, reflective=reflective, refractive_index=1.5))
        ball = Sphere(translation(0, -3.5, -0.5), Material(color=color(1, 0, 0), ambient=0.5))
        w = default_world()
        return with_objects(w, w.objects + (floor, ball)), floor

    def test_shade_hit_with_transparent_material(self):
        w, floor = self.transparent_floor_world()
        r = Ray(point(0, 0, -3), vector(0, -H, H))
        xs = Intersections([Intersection(np.sqrt(2), floor)])
        comps = Precompute(xs[0], r, xs)
        np.testing.assert_allclose(w.shade_hit(comps, 5), color(0.93642, 0.68642, 0.68642),
                                   atol=1e-3)

    def test_shade_hit_blends_with_schlick(self):
        w, floor = self.transparent_floor_world(reflective=0.5)
        r = Ray(point(0, 0, -3), vector(0, -H, H))
        xs = Intersections([Intersection(np.sqrt(2), floor)])
        comps = Precompute(xs[0], r, xs)
        np.testing.assert_allclose(w.shade_hit(comps, 5), color(0.93391, 0.69643, 0.69243),
                                   atol=1e-3)


if __name__ == '__main__':
    unittest.main()
