import numpy as np
from tuples import point, color, normalize, magnitude, is_point, is_vector, BLACK
from transforms import identity, inverse, scaling
from materials import Material
from geometry import Sphere
from intersections import Intersections, Precompute
from canvas import Canvas

"""
Core implementation of the ray tracer: rays, lights, the world being
rendered, and the camera that turns it into an image.

As elsewhere, points and vectors are (4,) NumPy arrays and colors are (3,)
arrays. Colors are never clamped here; that happens when the canvas is
written out.
"""

MAX_DEPTH = 5 # max recursion depth for reflection and refraction


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        Parameters:
          origin : (4,) -- the start point of the ray (w = 1)
          direction : (4,) -- the direction of the ray (w = 0), not necessarily normalized
        """
        # Convert these vectors to double to help ensure intersection
        # computations will be done in double precision
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)
        if not is_point(self.origin):
            raise ValueError("ray origin must be a point, got {}".format(self.origin))
        if not is_vector(self.direction):
            raise ValueError("ray direction must be a vector, got {}".format(self.direction))

    def position(self, t):
        """The point at parameter t along the ray."""
        return self.origin + self.direction * t

    def transform(self, m):
        """This ray carried through the 4x4 matrix m."""
        return Ray(m @ self.origin, m @ self.direction)


class PointLight:

    def __init__(self, position, intensity):
        """Create a point light at given position and with given intensity"""
        self.position = np.array(position, np.float64)
        self.intensity = np.array(intensity, np.float64)


class World:

    def __init__(self, objects=(), light=None):
        """Create a world containing the given objects, lit by a single point light.

        The object list is fixed once the world is built; make a new World to change it.
        """
        self.objects = tuple(objects)
        self.light = light

    def intersect(self, ray):
        """Every intersection of the ray with every object, sorted by t.

        Equal t values keep the order of the objects they came from.
        """
        xs = [i for obj in self.objects for i in obj.intersect(ray)]
        xs.sort(key=lambda i: i.t)
        return Intersections(xs)

    def is_shadowed(self, p):
        """True if something lies between the point p and the light."""
        to_light = self.light.position - p
        distance = magnitude(to_light)
        hit = self.intersect(Ray(p, normalize(to_light))).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps, remaining=MAX_DEPTH):
        """The color at a precomputed hit, including reflection and refraction."""
        material = comps.shape.material
        shadowed = self.is_shadowed(comps.over_point)
        surface = material.lighting(comps.shape, self.light, comps.over_point,
                                    comps.eyev, comps.normalv, shadowed)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray, remaining=MAX_DEPTH):
        """The color seen along a ray; black if it hits nothing."""
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK.copy()
        return self.shade_hit(Precompute(hit, ray, xs), remaining)

    def reflected_color(self, comps, remaining=MAX_DEPTH):
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0:
            return BLACK.copy()
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps, remaining=MAX_DEPTH):
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0:
            return BLACK.copy()

        # Snell's law; sin2_t > 1 means total internal reflection
        n_ratio = comps.n1 / comps.n2
        cos_i = np.dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
        if sin2_t > 1:
            return BLACK.copy()

        cos_t = np.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def default_world():
    """Two concentric spheres lit from the upper left, the usual test fixture."""
    outer = Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    return World([outer, inner], light)


class Camera:

    def __init__(self, hsize, vsize, field_of_view, transform=None):
        """Create a camera with given viewing parameters.

        Parameters:
          hsize, vsize : int -- image size in pixels
          field_of_view : float -- angle in radians spanned by the longer image side
          transform : (4,4) -- world-to-camera transform, e.g. from view_transform
        """
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = identity() if transform is None else np.array(transform, np.float64)
        self.inverse = inverse(self.transform)

        half_view = np.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def ray_for_pixel(self, px, py):
        """Compute the ray through the center of pixel (px, py).

        The canvas sits at z = -1 in camera space; the camera looks down -z,
        so +x is to the left.
        """
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size

        pixel = self.inverse @ point(world_x, world_y, -1)
        origin = self.inverse @ point(0, 0, 0)
        return Ray(origin, normalize(pixel - origin))

    def render(self, world, progress=False):
        """
        Render the world into a new canvas, one ray per pixel in row-major order.
        """
        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            if progress:
                print(f"rendering row {y+1}/{self.vsize}...")
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                image.write_pixel(x, y, world.color_at(ray))
        return image
