import numpy as np
from tuples import color, WHITE, BLACK
from transforms import identity, inverse

"""
Procedural color patterns.

A pattern is a pure function of a point in its own local space. Evaluating
it for a world-space point goes world -> shape space (through the shape's
inverse transform, and its parents') -> pattern space (through the pattern's
inverse transform) before the pattern function sees the point.
"""


class Pattern:

    def __init__(self, transform=None):
        """Create a pattern placed by the given transform.

        Parameters:
          transform : (4,4) -- pattern-to-shape transform (identity if None)
        """
        self.transform = identity() if transform is None else np.array(transform, np.float64)
        self.inverse = inverse(self.transform)

    def color_at(self, shape, world_point):
        """The pattern's color at a world-space point on the given shape."""
        object_point = shape.world_to_object(world_point)
        pattern_point = self.inverse @ object_point
        return self.local_color_at(pattern_point)

    def local_color_at(self, p):
        raise NotImplementedError


class Solid(Pattern):

    def __init__(self, c):
        super().__init__()
        self.color = np.array(c, np.float64)

    def local_color_at(self, p):
        return self.color


class TwoColorPattern(Pattern):

    def __init__(self, a=WHITE, b=BLACK, transform=None):
        """Create a pattern alternating or blending between colors a and b."""
        super().__init__(transform)
        self.a = np.array(a, np.float64)
        self.b = np.array(b, np.float64)


class Stripe(TwoColorPattern):
    """Stripes of a and b alternating along x, one unit wide."""

    def local_color_at(self, p):
        return self.a if np.floor(p[0]) % 2 == 0 else self.b


class Gradient(TwoColorPattern):
    """Linear blend from a to b repeating every unit of x."""

    def local_color_at(self, p):
        fraction = p[0] - np.floor(p[0])
        return self.a + (self.b - self.a) * fraction


class Ring(TwoColorPattern):
    """Concentric rings about the y axis."""

    def local_color_at(self, p):
        distance = np.sqrt(p[0] * p[0] + p[2] * p[2])
        return self.a if np.floor(distance) % 2 == 0 else self.b


class Checker(TwoColorPattern):
    """3D checkerboard of unit cubes."""

    def local_color_at(self, p):
        total = np.floor(p[0]) + np.floor(p[1]) + np.floor(p[2])
        return self.a if total % 2 == 0 else self.b


class TestPattern(Pattern):
    """Returns the pattern-space point itself, to expose the transform chain."""

    __test__ = False

    def local_color_at(self, p):
        return color(p[0], p[1], p[2])
