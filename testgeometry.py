import unittest
import numpy as np
from tuples import point, vector, EPSILON
from transforms import translation, scaling, rotation_y, rotation_z, identity
from materials import Material
from geometry import Shape, Sphere, Plane, Cube, Cylinder, Group, TestShape, glass_sphere
from intersections import Intersection, Intersections, Precompute
from tracer import Ray

H = np.sqrt(2) / 2


def ts(xs):
    return [i.t for i in xs]


class TestSphereIntersect(unittest.TestCase):

    def test_through_center(self):
        s = Sphere()
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        np.testing.assert_allclose(ts(xs), [4.0, 6.0])
        for i in xs:
            self.assertIs(i.shape, s)

    def test_tangent(self):
        xs = Sphere().intersect(Ray(point(0, 1, -5), vector(0, 0, 1)))
        np.testing.assert_allclose(ts(xs), [5.0, 5.0])

    def test_miss(self):
        xs = Sphere().intersect(Ray(point(0, 2, -5), vector(0, 0, 1)))
        self.assertEqual(len(xs), 0)
        self.assertIsNone(xs.hit())

    def test_origin_inside(self):
        xs = Sphere().intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        np.testing.assert_allclose(ts(xs), [-1.0, 1.0])

    def test_sphere_behind_ray(self):
        xs = Sphere().intersect(Ray(point(0, 0, 5), vector(0, 0, 1)))
        np.testing.assert_allclose(ts(xs), [-6.0, -4.0])

    def test_scaled_sphere(self):
        xs = Sphere(scaling(2, 2, 2)).intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        np.testing.assert_allclose(ts(xs), [3.0, 7.0])

    def test_translated_sphere(self):
        xs = Sphere(translation(5, 0, 0)).intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        self.assertEqual(len(xs), 0)


class TestShapeTransforms(unittest.TestCase):

    def test_defaults(self):
        s = TestShape()
        np.testing.assert_allclose(s.transform, identity())
        self.assertAlmostEqual(s.material.ambient, 0.1)
        self.assertIsNone(s.parent)

    def test_ray_carried_into_object_space(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        s = TestShape(scaling(2, 2, 2))
        s.intersect(r)
        np.testing.assert_allclose(s.saved_ray.origin, point(0, 0, -2.5))
        np.testing.assert_allclose(s.saved_ray.direction, vector(0, 0, 0.5))

        s = TestShape(translation(5, 0, 0))
        s.intersect(r)
        np.testing.assert_allclose(s.saved_ray.origin, point(-5, 0, -5))
        np.testing.assert_allclose(s.saved_ray.direction, vector(0, 0, 1))

    def test_normal_on_translated_shape(self):
        s = TestShape(translation(0, 1, 0))
        n = s.normal_at(point(0, 1.70711, -0.70711))
        np.testing.assert_allclose(n, vector(0, 0.70711, -0.70711), atol=1e-5)

    def test_normal_on_transformed_shape(self):
        s = TestShape(scaling(1, 0.5, 1) @ rotation_z(np.pi / 5))
        n = s.normal_at(point(0, H, -H))
        np.testing.assert_allclose(n, vector(0, 0.97014, -0.24254), atol=1e-5)

    def test_singular_transform_is_rejected(self):
        with self.assertRaises(ValueError):
            Sphere(scaling(0, 1, 1))

    def test_base_shape_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            Shape().intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))


class TestSphereNormal(unittest.TestCase):

    def test_axis_normals(self):
        s = Sphere()
        np.testing.assert_allclose(s.normal_at(point(1, 0, 0)), vector(1, 0, 0))
        np.testing.assert_allclose(s.normal_at(point(0, 1, 0)), vector(0, 1, 0))
        np.testing.assert_allclose(s.normal_at(point(0, 0, 1)), vector(0, 0, 1))

    def test_nonaxial_normal_is_unit(self):
        k = np.sqrt(3) / 3
        n = Sphere().normal_at(point(k, k, k))
        np.testing.assert_allclose(n, vector(k, k, k))
        np.testing.assert_allclose(n, n / np.linalg.norm(n))

    def test_scaled_rotated_sphere(self):
        s = Sphere(scaling(1, 0.5, 1) @ rotation_z(0.628318))
        n = s.normal_at(point(0, H, -H))
        np.testing.assert_allclose(n, vector(0, 0.97014, -0.24254), atol=1e-5)
        self.assertEqual(n[3], 0.0)


class TestPlane(unittest.TestCase):

    def test_normal_is_constant(self):
        p = Plane()
        for q in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150)):
            np.testing.assert_allclose(p.normal_at(q), vector(0, 1, 0))

    def test_parallel_and_coplanar_rays_miss(self):
        p = Plane()
        self.assertEqual(len(p.intersect(Ray(point(0, 10, 0), vector(0, 0, 1)))), 0)
        self.assertEqual(len(p.intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))), 0)

    def test_hits_from_above_and_below(self):
        p = Plane()
        xs = p.intersect(Ray(point(0, 1, 0), vector(0, -1, 0)))
        np.testing.assert_allclose(ts(xs), [1.0])
        self.assertIs(xs[0].shape, p)
        xs = p.intersect(Ray(point(0, -1, 0), vector(0, 1, 0)))
        np.testing.assert_allclose(ts(xs), [1.0])


class TestCube(unittest.TestCase):

    def test_hits_each_face(self):
        c = Cube()
        cases = [
            (point(5, 0.5, 0), vector(-1, 0, 0), 4, 6),
            (point(-5, 0.5, 0), vector(1, 0, 0), 4, 6),
            (point(0.5, 5, 0), vector(0, -1, 0), 4, 6),
            (point(0.5, -5, 0), vector(0, 1, 0), 4, 6),
            (point(0.5, 0, 5), vector(0, 0, -1), 4, 6),
            (point(0.5, 0, -5), vector(0, 0, 1), 4, 6),
            (point(0, 0.5, 0), vector(0, 0, 1), -1, 1),
        ]
        for origin, direction, t1, t2 in cases:
            np.testing.assert_allclose(ts(c.intersect(Ray(origin, direction))), [t1, t2])

    def test_misses(self):
        c = Cube()
        cases = [
            (point(-2, 0, 0), vector(0.2673, 0.5345, 0.8018)),
            (point(0, -2, 0), vector(0.8018, 0.2673, 0.5345)),
            (point(0, 0, -2), vector(0.5345, 0.8018, 0.2673)),
            (point(2, 0, 2), vector(0, 0, -1)),
            (point(0, 2, 2), vector(0, -1, 0)),
            (point(2, 2, 0), vector(-1, 0, 0)),
        ]
        for origin, direction in cases:
            self.assertEqual(len(c.intersect(Ray(origin, direction))), 0)

    def test_normals(self):
        c = Cube()
        cases = [
            (point(1, 0.5, -0.8), vector(1, 0, 0)),
            (point(-1, -0.2, 0.9), vector(-1, 0, 0)),
            (point(-0.4, 1, -0.1), vector(0, 1, 0)),
            (point(0.3, -1, -0.7), vector(0, -1, 0)),
            (point(-0.6, 0.3, 1), vector(0, 0, 1)),
            (point(0.4, 0.4, -1), vector(0, 0, -1)),
            (point(1, 1, 1), vector(1, 0, 0)),
            (point(-1, -1, -1), vector(-1, 0, 0)),
        ]
        for p, n in cases:
            np.testing.assert_allclose(c.normal_at(p), n)


class TestCylinder(unittest.TestCase):

    def test_misses(self):
        cyl = Cylinder()
        for origin, direction in [(point(1, 0, 0), vector(0, 1, 0)),
                                  (point(0, 0, 0), vector(0, 1, 0)),
                                  (point(0, 0, -5), vector(1, 1, 1))]:
            self.assertEqual(len(cyl.intersect(Ray(origin, direction))), 0)

    def test_hits(self):
        cyl = Cylinder()
        cases = [
            (point(1, 0, -5), vector(0, 0, 1), 5, 5),
            (point(0, 0, -5), vector(0, 0, 1), 4, 6),
            (point(0.5, 0, -5), vector(0.1, 1, 1), 6.80798, 7.08872),
        ]
        for origin, direction, t0, t1 in cases:
            direction = direction / np.linalg.norm(direction)
            np.testing.assert_allclose(ts(cyl.intersect(Ray(origin, direction))), [t0, t1],
                                       atol=1e-4)

    def test_side_normals(self):
        cyl = Cylinder()
        np.testing.assert_allclose(cyl.normal_at(point(1, 0, 0)), vector(1, 0, 0))
        np.testing.assert_allclose(cyl.normal_at(point(0, 5, -1)), vector(0, 0, -1))
        np.testing.assert_allclose(cyl.normal_at(point(-1, 1, 0)), vector(-1, 0, 0))

    def test_truncated(self):
        cyl = Cylinder(minimum=1, maximum=2)
        cases = [
            (point(0, 1.5, 0), vector(0.1, 1, 0), 0),
            (point(0, 3, -5), vector(0, 0, 1), 0),
            (point(0, 0, -5), vector(0, 0, 1), 0),
            (point(0, 2, -5), vector(0, 0, 1), 0),
            (point(0, 1, -5), vector(0, 0, 1), 0),
            (point(0, 1.5, -2), vector(0, 0, 1), 2),
        ]
        for origin, direction, count in cases:
            direction = direction / np.linalg.norm(direction)
            self.assertEqual(len(cyl.intersect(Ray(origin, direction))), count)

    def test_closed_caps(self):
        cyl = Cylinder(minimum=1, maximum=2, closed=True)
        cases = [
            (point(0, 3, 0), vector(0, -1, 0)),
            (point(0, 3, -2), vector(0, -1, 2)),
            (point(0, 4, -2), vector(0, -1, 1)),
            (point(0, 0, -2), vector(0, 1, 2)),
            (point(0, -1, -2), vector(0, 1, 1)),
        ]
        for origin, direction in cases:
            direction = direction / np.linalg.norm(direction)
            self.assertEqual(len(cyl.intersect(Ray(origin, direction))), 2)

    def test_side_and_cap_hits_sorted(self):
        # enters through the top cap, leaves through the side
        cyl = Cylinder(minimum=1, maximum=2, closed=True)
        direction = vector(0, -1, 2) / np.sqrt(5)
        xs = cyl.intersect(Ray(point(0, 3, -2), direction))
        np.testing.assert_allclose(ts(xs), [np.sqrt(5), 1.5 * np.sqrt(5)])

    def test_cap_normals(self):
        cyl = Cylinder(minimum=1, maximum=2, closed=True)
        cases = [
            (point(0, 1, 0), vector(0, -1, 0)),
            (point(0.5, 1, 0), vector(0, -1, 0)),
            (point(0, 1, 0.5), vector(0, -1, 0)),
            (point(0, 2, 0), vector(0, 1, 0)),
            (point(0.5, 2, 0), vector(0, 1, 0)),
            (point(0, 2, 0.5), vector(0, 1, 0)),
        ]
        for p, n in cases:
            np.testing.assert_allclose(cyl.normal_at(p), n)


class TestGroup(unittest.TestCase):

    def test_add_child(self):
        g = Group()
        s = TestShape()
        g.add_child(s)
        self.assertIn(s, g.children)
        self.assertIs(s.parent, g)

    def test_empty_group(self):
        self.assertEqual(len(Group().intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))), 0)

    def test_intersections_sorted_across_children(self):
        s1 = Sphere()
        s2 = Sphere(translation(0, 0, -3))
        s3 = Sphere(translation(5, 0, 0))
        g = Group(children=[s1, s2, s3])
        xs = g.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        self.assertEqual(len(xs), 4)
        self.assertEqual([i.shape for i in xs], [s2, s2, s1, s1])

    def test_group_transform_applies_to_children(self):
        g = Group(scaling(2, 2, 2), [Sphere(translation(5, 0, 0))])
        xs = g.intersect(Ray(point(10, 0, -10), vector(0, 0, 1)))
        self.assertEqual(len(xs), 2)

    def test_world_to_object_through_parents(self):
        s = Sphere(translation(5, 0, 0))
        g2 = Group(scaling(2, 2, 2), [s])
        Group(rotation_y(np.pi / 2), [g2])
        np.testing.assert_allclose(s.world_to_object(point(-2, 0, -10)), point(0, 0, -1),
                                   atol=1e-10)

    def test_normal_to_world_through_parents(self):
        s = Sphere(translation(5, 0, 0))
        g2 = Group(scaling(1, 2, 3), [s])
        Group(rotation_y(np.pi / 2), [g2])
        k = np.sqrt(3) / 3
        np.testing.assert_allclose(s.normal_to_world(vector(k, k, k)),
                                   vector(0.2857, 0.4286, -0.8571), atol=1e-4)
        np.testing.assert_allclose(s.normal_at(point(1.7321, 1.1547, -5.5774)),
                                   vector(0.2857, 0.4286, -0.8571), atol=1e-4)

    def test_group_has_no_normal(self):
        with self.assertRaises(ValueError):
            Group().normal_at(point(0, 0, 0))


class TestIntersections(unittest.TestCase):

    def test_intersection_fields(self):
        s = Sphere()
        i = Intersection(3.5, s)
        self.assertEqual(i.t, 3.5)
        self.assertIs(i.shape, s)

    def test_ordering_by_t(self):
        s = Sphere()
        self.assertEqual(Intersection(2, s), Intersection(2, Plane()))
        self.assertLess(Intersection(1, s), Intersection(2, s))

    def test_hit_all_positive(self):
        s = Sphere()
        i1, i2 = Intersection(1, s), Intersection(2, s)
        self.assertIs(Intersections([i2, i1]).hit(), i1)

    def test_hit_some_negative(self):
        s = Sphere()
        i1, i2 = Intersection(-1, s), Intersection(1, s)
        self.assertIs(Intersections([i2, i1]).hit(), i2)

    def test_hit_all_negative(self):
        s = Sphere()
        xs = Intersections([Intersection(-2, s), Intersection(-1, s)])
        self.assertIsNone(xs.hit())

    def test_hit_is_lowest_nonnegative(self):
        s = Sphere()
        i1, i2, i3, i4 = (Intersection(t, s) for t in (5, 7, -3, 2))
        xs = Intersections([i1, i2, i3, i4])
        self.assertIs(xs.hit(), i4)
        # insertion order is untouched
        self.assertEqual(ts(xs), [5, 7, -3, 2])

    def test_hit_zero_counts(self):
        s = Sphere()
        i = Intersection(0, s)
        self.assertIs(Intersections([Intersection(-0.5, s), i]).hit(), i)

    def test_hit_ties_go_to_first(self):
        a, b = Sphere(), Sphere()
        first, second = Intersection(3, a), Intersection(3, b)
        self.assertIs(Intersections([first, second]).hit(), first)


class TestPrecompute(unittest.TestCase):

    def test_outside_hit(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        s = Sphere()
        comps = Precompute(Intersection(4, s), r)
        self.assertEqual(comps.t, 4)
        self.assertIs(comps.shape, s)
        np.testing.assert_allclose(comps.point, point(0, 0, -1))
        np.testing.assert_allclose(comps.eyev, vector(0, 0, -1))
        np.testing.assert_allclose(comps.normalv, vector(0, 0, -1))
        self.assertFalse(comps.inside)

    def test_inside_hit(self):
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Precompute(Intersection(1, Sphere()), r)
        np.testing.assert_allclose(comps.point, point(0, 0, 1))
        np.testing.assert_allclose(comps.eyev, vector(0, 0, -1))
        self.assertTrue(comps.inside)
        # flipped to face the eye
        np.testing.assert_allclose(comps.normalv, vector(0, 0, -1))

    def test_over_point(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Precompute(Intersection(5, Sphere(translation(0, 0, 1))), r)
        self.assertLess(comps.over_point[2], -EPSILON / 2)
        self.assertGreater(comps.point[2], comps.over_point[2])

    def test_under_point(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        s = glass_sphere(translation(0, 0, 1))
        i = Intersection(5, s)
        comps = Precompute(i, r, Intersections([i]))
        self.assertGreater(comps.under_point[2], EPSILON / 2)
        self.assertLess(comps.point[2], comps.under_point[2])

    def test_reflectv(self):
        p = Plane()
        r = Ray(point(0, 1, -1), vector(0, -H, H))
        comps = Precompute(Intersection(np.sqrt(2), p), r)
        np.testing.assert_allclose(comps.reflectv, vector(0, H, H), atol=1e-10)

    def test_refractive_indices(self):
        a = Sphere(scaling(2, 2, 2), Material(transparency=1.0, refractive_index=1.5))
        b = Sphere(translation(0, 0, -0.25), Material(transparency=1.0, refractive_index=2.0))
        c = Sphere(translation(0, 0, 0.25), Material(transparency=1.0, refractive_index=2.5))
        r = Ray(point(0, 0, -4), vector(0, 0, 1))
        xs = Intersections([Intersection(2, a), Intersection(2.75, b), Intersection(3.25, c),
                            Intersection(4.75, b), Intersection(5.25, c), Intersection(6, a)])
        expected = [(1.0, 1.5), (1.5, 2.0), (2.0, 2.5), (2.5, 2.5), (2.5, 1.5), (1.5, 1.0)]
        for i, (n1, n2) in zip(xs, expected):
            comps = Precompute(i, r, xs)
            self.assertEqual((comps.n1, comps.n2), (n1, n2))

    def test_indices_default_to_vacuum_and_hit_material(self):
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = Precompute(Intersection(4, glass_sphere()), r)
        self.assertEqual((comps.n1, comps.n2), (1.0, 1.5))

    def test_schlick_total_internal_reflection(self):
        s = glass_sphere()
        r = Ray(point(0, 0, H), vector(0, 1, 0))
        xs = Intersections([Intersection(-H, s), Intersection(H, s)])
        self.assertEqual(Precompute(xs[1], r, xs).schlick(), 1.0)

    def test_schlick_perpendicular(self):
        s = glass_sphere()
        r = Ray(point(0, 0, 0), vector(0, 1, 0))
        xs = Intersections([Intersection(-1, s), Intersection(1, s)])
        self.assertAlmostEqual(Precompute(xs[1], r, xs).schlick(), 0.04)

    def test_schlick_small_angle(self):
        s = glass_sphere()
        r = Ray(point(0, 0.99, -2), vector(0, 0, 1))
        xs = Intersections([Intersection(1.8589, s)])
        self.assertAlmostEqual(Precompute(xs[0], r, xs).schlick(), 0.48873, places=4)


if __name__ == '__main__':
    unittest.main()
