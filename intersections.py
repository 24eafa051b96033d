import numpy as np
from functools import total_ordering
from tuples import EPSILON, reflect

"""
Intersection records, hit selection, and the per-hit shading context.
"""


@total_ordering
class Intersection:

    def __init__(self, t, shape):
        """Create an Intersection at parameter t on the given shape.

        Parameters:
          t : float -- the t value of the intersection along the ray
          shape : Shape -- the surface that was intersected
        """
        self.t = float(t)
        self.shape = shape

    # equality and ordering look at t only
    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t

    def __lt__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t < other.t

    __hash__ = None

    def __repr__(self):
        return "Intersection({}, {})".format(self.t, type(self.shape).__name__)


class Intersections(list):
    """Ordered collection of Intersection, kept in insertion order."""

    def hit(self):
        """The intersection with the smallest non-negative t, or None.

        Entries behind the ray origin (t < 0) never qualify. Among equal t
        values the first one in the collection wins.
        """
        best = None
        for i in self:
            if i.t >= 0 and (best is None or i.t < best.t):
                best = i
        return best


class Precompute:

    def __init__(self, hit, ray, xs=None):
        """Derive the shading context for an intersection.

        Parameters:
          hit : Intersection -- the intersection being shaded
          ray : Ray -- the ray that produced it
          xs : Intersections -- every intersection along the ray, sorted by t;
               needed for the refractive indices (defaults to just the hit)
        """
        self.t = hit.t
        self.shape = hit.shape
        self.point = ray.position(self.t)
        self.eyev = -ray.direction
        self.normalv = self.shape.normal_at(self.point)

        self.inside = np.dot(self.normalv, self.eyev) < 0
        if self.inside:
            self.normalv = -self.normalv

        self.reflectv = reflect(ray.direction, self.normalv)
        self.over_point = self.point + self.normalv * EPSILON
        self.under_point = self.point - self.normalv * EPSILON

        if xs is None:
            xs = Intersections([hit])
        self.n1, self.n2 = refractive_indices(hit, xs)

    def schlick(self):
        """Schlick's approximation of the Fresnel reflectance at this hit.

        Return:
          float -- fraction of light reflected; 1.0 under total internal reflection
        """
        cos = np.dot(self.eyev, self.normalv)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = np.sqrt(1.0 - sin2_t)
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1 - r0) * (1 - cos) ** 5


def refractive_indices(hit, xs):
    """Refractive indices (n1, n2) of the media on either side of hit.

    Walks xs in order keeping a stack of the shapes the ray is currently
    inside. n1 is read off the top of the stack just before hit is
    processed and n2 just after. An empty stack means vacuum (1.0).
    """
    containers = []
    n1 = n2 = 1.0
    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if any(shape is i.shape for shape in containers):
            containers = [shape for shape in containers if shape is not i.shape]
        else:
            containers.append(i.shape)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break
    return n1, n2
