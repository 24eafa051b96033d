import numpy as np
from tuples import EPSILON, point, vector, normalize
from transforms import identity, inverse
from materials import Material
from intersections import Intersection, Intersections

"""
Shape primitives.

Every shape is defined once in its own local space (unit sphere at the
origin, the xz plane, the unit cube, ...). Placement comes entirely from the
shape's transform: a world-space ray is carried into local space with the
inverse transform, and local normals come back out through the transpose of
that inverse. Subclasses only implement local_intersect and local_normal_at.
"""


class Shape:

    def __init__(self, transform=None, material=None):
        """Create a shape placed by a transform and painted by a material.

        Parameters:
          transform : (4,4) -- object-to-world (or object-to-parent) transform;
                      must be invertible
          material : Material -- the surface material (default material if None)
        """
        self.transform = identity() if transform is None else np.array(transform, np.float64)
        self.inverse = inverse(self.transform)
        self.material = Material() if material is None else material
        self.parent = None

    def intersect(self, ray):
        """Intersect a ray given in this shape's parent space.

        Return:
          Intersections -- zero or more intersections tagged with this shape
        """
        return self.local_intersect(ray.transform(self.inverse))

    def normal_at(self, world_point):
        """The unit surface normal at a world-space point on this shape."""
        local_point = self.world_to_object(world_point)
        return self.normal_to_world(self.local_normal_at(local_point))

    def world_to_object(self, world_point):
        if self.parent is not None:
            world_point = self.parent.world_to_object(world_point)
        return self.inverse @ world_point

    def normal_to_world(self, normal):
        normal = self.inverse.T @ normal
        normal[3] = 0.0
        normal = normalize(normal)
        if self.parent is not None:
            normal = self.parent.normal_to_world(normal)
        return normal

    def local_intersect(self, ray):
        raise NotImplementedError

    def local_normal_at(self, p):
        raise NotImplementedError


class Sphere(Shape):
    """The unit sphere centered at the origin."""

    def local_intersect(self, ray):
        sphere_vec = ray.origin - point(0, 0, 0)
        a = np.dot(ray.direction, ray.direction)
        b = 2 * np.dot(ray.direction, sphere_vec)
        c = np.dot(sphere_vec, sphere_vec) - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return Intersections()
        disc_sqrt = np.sqrt(discriminant)
        minus = (-b - disc_sqrt) / (2 * a)
        plus = (-b + disc_sqrt) / (2 * a)
        return Intersections([Intersection(minus, self), Intersection(plus, self)])

    def local_normal_at(self, p):
        return p - point(0, 0, 0)


def glass_sphere(transform=None):
    """A unit sphere of clear glass."""
    return Sphere(transform, Material(transparency=1.0, refractive_index=1.5))


class Plane(Shape):
    """The xz plane, facing +y."""

    def local_intersect(self, ray):
        # parallel or coplanar rays never cross it
        if abs(ray.direction[1]) < EPSILON:
            return Intersections()
        t = -ray.origin[1] / ray.direction[1]
        return Intersections([Intersection(t, self)])

    def local_normal_at(self, p):
        return vector(0, 1, 0)


def _check_axis(origin, direction, minimum=-1.0, maximum=1.0):
    """Entry and exit t of a ray against one pair of parallel slabs."""
    tmin_numerator = minimum - origin
    tmax_numerator = maximum - origin
    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = np.copysign(np.inf, tmin_numerator)
        tmax = np.copysign(np.inf, tmax_numerator)
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """The axis-aligned cube spanning -1..1 on every axis."""

    def local_intersect(self, ray):
        xtmin, xtmax = _check_axis(ray.origin[0], ray.direction[0])
        ytmin, ytmax = _check_axis(ray.origin[1], ray.direction[1])
        ztmin, ztmax = _check_axis(ray.origin[2], ray.direction[2])

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return Intersections()
        return Intersections([Intersection(tmin, self), Intersection(tmax, self)])

    def local_normal_at(self, p):
        x, y, z = abs(p[0]), abs(p[1]), abs(p[2])
        maxc = max(x, y, z)
        if maxc == x:
            return vector(p[0], 0, 0)
        elif maxc == y:
            return vector(0, p[1], 0)
        return vector(0, 0, p[2])


class Cylinder(Shape):

    def __init__(self, transform=None, material=None, minimum=-np.inf, maximum=np.inf, closed=False):
        """Create a unit-radius cylinder around the y axis.

        Parameters:
          minimum, maximum : float -- y extent (exclusive); infinite by default
          closed : bool -- whether the ends are capped
        """
        super().__init__(transform, material)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray):
        ox, oy, oz = ray.origin[:3]
        dx, dy, dz = ray.direction[:3]
        xs = Intersections()

        a = dx * dx + dz * dz
        # rays parallel to the y axis can only hit the caps
        if abs(a) >= EPSILON:
            b = 2 * ox * dx + 2 * oz * dz
            c = ox * ox + oz * oz - 1
            discriminant = b * b - 4 * a * c
            if discriminant < 0:
                return xs
            disc_sqrt = np.sqrt(discriminant)
            t0 = (-b - disc_sqrt) / (2 * a)
            t1 = (-b + disc_sqrt) / (2 * a)
            if t0 > t1:
                t0, t1 = t1, t0
            for t in (t0, t1):
                y = oy + t * dy
                if self.minimum < y < self.maximum:
                    xs.append(Intersection(t, self))

        self._intersect_caps(ray, xs)
        xs.sort(key=lambda i: i.t)
        return xs

    def _intersect_caps(self, ray, xs):
        dy = ray.direction[1]
        if not self.closed or abs(dy) < EPSILON:
            return
        for bound in (self.minimum, self.maximum):
            t = (bound - ray.origin[1]) / dy
            if _within_cap(ray, t):
                xs.append(Intersection(t, self))

    def local_normal_at(self, p):
        dist = p[0] * p[0] + p[2] * p[2]
        if dist < 1 and p[1] >= self.maximum - EPSILON:
            return vector(0, 1, 0)
        if dist < 1 and p[1] <= self.minimum + EPSILON:
            return vector(0, -1, 0)
        return vector(p[0], 0, p[2])


def _within_cap(ray, t):
    x = ray.origin[0] + t * ray.direction[0]
    z = ray.origin[2] + t * ray.direction[2]
    return x * x + z * z <= 1


class Group(Shape):

    def __init__(self, transform=None, children=()):
        """Create a group whose transform applies to all of its children."""
        super().__init__(transform)
        self.children = []
        for child in children:
            self.add_child(child)

    def add_child(self, shape):
        shape.parent = self
        self.children.append(shape)
        return shape

    def local_intersect(self, ray):
        xs = [i for child in self.children for i in child.intersect(ray)]
        xs.sort(key=lambda i: i.t)
        return Intersections(xs)

    def local_normal_at(self, p):
        raise ValueError("a group has no surface of its own")


class TestShape(Shape):
    """Stub shape that records the local ray and reports the local point as its normal."""

    __test__ = False

    def __init__(self, transform=None, material=None):
        super().__init__(transform, material)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return Intersections()

    def local_normal_at(self, p):
        return vector(p[0], p[1], p[2])
