import unittest
import numpy as np
from tuples import point, vector, cross, normalize, reflect, is_point, is_vector, magnitude
from transforms import *

H = np.sqrt(2) / 2


class TestTuples(unittest.TestCase):

    def test_point_and_vector_tags(self):
        self.assertTrue(is_point(point(4, -4, 3)))
        self.assertFalse(is_vector(point(4, -4, 3)))
        self.assertTrue(is_vector(vector(4, -4, 3)))
        self.assertTrue(is_vector(point(3, 2, 1) - point(5, 6, 7)))
        self.assertTrue(is_point(point(3, 2, 1) + vector(5, 6, 7)))

    def test_normalize_and_cross(self):
        self.assertAlmostEqual(magnitude(normalize(vector(1, 2, 3))), 1.0)
        np.testing.assert_allclose(cross(vector(1, 2, 3), vector(2, 3, 4)), vector(-1, 2, -1))
        np.testing.assert_allclose(cross(vector(2, 3, 4), vector(1, 2, 3)), vector(1, -2, 1))

    def test_reflect(self):
        np.testing.assert_allclose(reflect(vector(1, -1, 0), vector(0, 1, 0)), vector(1, 1, 0))
        np.testing.assert_allclose(reflect(vector(0, -1, 0), vector(H, H, 0)), vector(1, 0, 0),
                                   atol=1e-10)


class TestTransforms(unittest.TestCase):

    def test_translation(self):
        t = translation(5, -3, 2)
        np.testing.assert_allclose(t @ point(-3, 4, 5), point(2, 1, 7))
        np.testing.assert_allclose(inverse(t) @ point(-3, 4, 5), point(-8, 7, 3))
        # vectors have no position
        np.testing.assert_allclose(t @ vector(-3, 4, 5), vector(-3, 4, 5))

    def test_scaling(self):
        t = scaling(2, 3, 4)
        np.testing.assert_allclose(t @ point(-4, 6, 8), point(-8, 18, 32))
        np.testing.assert_allclose(t @ vector(-4, 6, 8), vector(-8, 18, 32))
        np.testing.assert_allclose(inverse(t) @ vector(-4, 6, 8), vector(-2, 2, 2))
        np.testing.assert_allclose(scaling(-1, 1, 1) @ point(2, 3, 4), point(-2, 3, 4))

    def test_rotations(self):
        p = point(0, 1, 0)
        np.testing.assert_allclose(rotation_x(np.pi / 4) @ p, point(0, H, H), atol=1e-10)
        np.testing.assert_allclose(rotation_x(np.pi / 2) @ p, point(0, 0, 1), atol=1e-10)
        np.testing.assert_allclose(inverse(rotation_x(np.pi / 4)) @ p, point(0, H, -H), atol=1e-10)

        p = point(0, 0, 1)
        np.testing.assert_allclose(rotation_y(np.pi / 4) @ p, point(H, 0, H), atol=1e-10)
        np.testing.assert_allclose(rotation_y(np.pi / 2) @ p, point(1, 0, 0), atol=1e-10)

        p = point(0, 1, 0)
        np.testing.assert_allclose(rotation_z(np.pi / 4) @ p, point(-H, H, 0), atol=1e-10)
        np.testing.assert_allclose(rotation('z', np.pi / 2) @ p, point(-1, 0, 0), atol=1e-10)
        np.testing.assert_allclose(rotation('X', 0.3), rotation_x(0.3))

    def test_shearing(self):
        p = point(2, 3, 4)
        np.testing.assert_allclose(shearing(1, 0, 0, 0, 0, 0) @ p, point(5, 3, 4))
        np.testing.assert_allclose(shearing(0, 1, 0, 0, 0, 0) @ p, point(6, 3, 4))
        np.testing.assert_allclose(shearing(0, 0, 1, 0, 0, 0) @ p, point(2, 5, 4))
        np.testing.assert_allclose(shearing(0, 0, 0, 1, 0, 0) @ p, point(2, 7, 4))
        np.testing.assert_allclose(shearing(0, 0, 0, 0, 1, 0) @ p, point(2, 3, 6))
        np.testing.assert_allclose(shearing(0, 0, 0, 0, 0, 1) @ p, point(2, 3, 7))

    def test_composition_order(self):
        a = rotation_x(np.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        p = point(1, 0, 1)
        np.testing.assert_allclose(c @ b @ a @ p, point(15, 0, 7), atol=1e-10)
        np.testing.assert_allclose(chain(a, b, c) @ p, point(15, 0, 7), atol=1e-10)
        np.testing.assert_allclose(chain(), identity())

    def test_inverse_round_trip(self):
        t = chain(scaling(1, 0.5, 2), rotation_z(0.628318), shearing(0.2, 0, 0.1, 0, 0, 0.3),
                  translation(3, -1, 2))
        p = point(-4, 2.5, 7)
        np.testing.assert_allclose(inverse(inverse(t)), t, atol=1e-10)
        np.testing.assert_allclose(inverse(t) @ (t @ p), p, atol=1e-10)
        # affine inverses keep points as points exactly
        self.assertEqual((inverse(t) @ p)[3], 1.0)

    def test_singular_matrix(self):
        m = np.array([[-4, 2, -2, -3],
                      [9, 6, 2, 6],
                      [0, -5, 1, -5],
                      [0, 0, 0, 0]], dtype=np.float64)
        with self.assertRaises(NotInvertibleError):
            inverse(m)
        with self.assertRaises(ValueError):
            inverse(scaling(0, 1, 1))


class TestViewTransform(unittest.TestCase):

    def test_default_orientation(self):
        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        np.testing.assert_allclose(t, identity(), atol=1e-10)

    def test_looking_in_positive_z(self):
        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        np.testing.assert_allclose(t, scaling(-1, 1, -1), atol=1e-10)

    def test_moves_the_world(self):
        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        np.testing.assert_allclose(t, translation(0, 0, -8), atol=1e-10)

    def test_arbitrary_view(self):
        eye = point(1, 3, 2)
        target = point(4, -2, 8)
        t = view_transform(eye, target, vector(1, 1, 0))
        # the eye goes to the origin and the target lands straight ahead on -z
        np.testing.assert_allclose(t @ eye, point(0, 0, 0), atol=1e-10)
        ahead = t @ target
        np.testing.assert_allclose(ahead[:2], [0, 0], atol=1e-10)
        self.assertAlmostEqual(ahead[2], -np.sqrt(70))
        # the basis is orthonormal
        basis = t[:3, :3]
        np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-10)

    def test_up_parallel_to_view_direction(self):
        with self.assertRaises(ValueError):
            view_transform(point(0, 5, 0), point(0, 0, 0), vector(0, 1, 0))
        with self.assertRaises(ValueError):
            view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 0, 3))


if __name__ == '__main__':
    unittest.main()
