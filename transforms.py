import numpy as np
from functools import reduce
from tuples import EPSILON, normalize, cross, magnitude

"""
4x4 affine transforms.

All matrices are NumPy (4,4) float arrays applied to column tuples, so
`A @ B @ p` applies B first. Scenes build a matrix once and never mutate it.
"""


class NotInvertibleError(ValueError):
    """Raised when a transform has no inverse."""


def identity():
    return np.eye(4)

def translation(x, y, z):
    m = np.eye(4)
    m[:3, 3] = [x, y, z]
    return m

def scaling(x, y, z):
    return np.diag([x, y, z, 1.0])

def rotation_x(r):
    c, s = np.cos(r), np.sin(r)
    return np.array([
        [1, 0,  0, 0],
        [0, c, -s, 0],
        [0, s,  c, 0],
        [0, 0,  0, 1],
    ], dtype=np.float64)

def rotation_y(r):
    c, s = np.cos(r), np.sin(r)
    return np.array([
        [ c, 0, s, 0],
        [ 0, 1, 0, 0],
        [-s, 0, c, 0],
        [ 0, 0, 0, 1],
    ], dtype=np.float64)

def rotation_z(r):
    c, s = np.cos(r), np.sin(r)
    return np.array([
        [c, -s, 0, 0],
        [s,  c, 0, 0],
        [0,  0, 1, 0],
        [0,  0, 0, 1],
    ], dtype=np.float64)

_ROTATIONS = {'x': rotation_x, 'y': rotation_y, 'z': rotation_z}

def rotation(axis, r):
    """Right-handed rotation of r radians about axis 'x', 'y' or 'z'."""
    return _ROTATIONS[axis.lower()](r)

def shearing(xy, xz, yx, yz, zx, zy):
    """Shear each coordinate in proportion to the other two.

    Parameters:
      xy : float -- how much x moves in proportion to y (and so on)
    """
    return np.array([
        [1,  xy, xz, 0],
        [yx, 1,  yz, 0],
        [zx, zy, 1,  0],
        [0,  0,  0,  1],
    ], dtype=np.float64)


def chain(*transforms):
    """Compose transforms so that the first one listed is applied first."""
    return reduce(lambda acc, m: m @ acc, transforms, identity())


def inverse(m):
    """Invert a transform, raising NotInvertibleError if it is singular."""
    try:
        inv = np.linalg.inv(m)
    except np.linalg.LinAlgError:
        raise NotInvertibleError("matrix is not invertible:\n{}".format(m))
    if not np.all(np.isfinite(inv)):
        raise NotInvertibleError("matrix is not invertible:\n{}".format(m))
    # keep w exact for affine matrices so points stay points
    if np.array_equal(m[3], [0, 0, 0, 1]):
        inv[3] = [0, 0, 0, 1]
    return inv


def view_transform(from_point, to_point, up):
    """Build the world-to-eye transform for an eye at from_point looking at to_point.

    Parameters:
      from_point : (4,) -- eye position
      to_point : (4,) -- the point the eye looks at
      up : (4,) -- approximate up direction
    Return:
      (4,4) -- matrix mapping world space into the eye's basis, eye at the origin
    """
    forward = normalize(from_point - to_point)
    left = cross(up, forward)
    if magnitude(left) < EPSILON:
        raise ValueError("up must not be parallel to the view direction")
    left = normalize(left)
    true_up = cross(forward, left)
    orientation = np.array([
        [left[0],    left[1],    left[2],    0],
        [true_up[0], true_up[1], true_up[2], 0],
        [forward[0], forward[1], forward[2], 0],
        [0,          0,          0,          1],
    ], dtype=np.float64)
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])
