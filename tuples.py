import numpy as np

"""
Homogeneous tuples for the ray tracer.

Points and vectors are NumPy arrays of shape (4,): points carry w = 1 and
vectors carry w = 0, so a 4x4 transform moves points but only rotates and
scales vectors. Colors are plain (3,) arrays.
"""

EPSILON = 1e-5


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def point(x, y, z):
    """A position in space (w = 1)."""
    return vec([x, y, z, 1.0])

def vector(x, y, z):
    """A direction in space (w = 0)."""
    return vec([x, y, z, 0.0])

def color(r, g, b):
    return vec([r, g, b])

BLACK = color(0, 0, 0)
WHITE = color(1, 1, 1)


def is_point(t):
    return t.shape == (4,) and abs(t[3] - 1.0) < EPSILON

def is_vector(t):
    return t.shape == (4,) and abs(t[3]) < EPSILON

def magnitude(v):
    return np.linalg.norm(v)

def normalize(v):
    """Return a unit vector in the direction of the vector v."""
    return v / np.linalg.norm(v)

def cross(a, b):
    """Cross product of two vectors; only the xyz part takes part."""
    c = np.cross(a[:3], b[:3])
    return vector(c[0], c[1], c[2])

def reflect(v, n):
    """Mirror the vector v about the unit normal n."""
    return v - n * 2.0 * np.dot(v, n)
