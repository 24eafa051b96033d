import numpy as np
from tuples import point, vector, color
from transforms import translation, scaling, rotation_x, rotation_y, rotation_z, view_transform, chain
from materials import Material
from patterns import Stripe, Gradient, Ring, Checker
from geometry import Sphere, Plane, Cylinder, Group
from tracer import Camera, PointLight, World


class ExampleSceneDef(object):
    def __init__(self, camera, world):
        self.camera = camera
        self.world = world

    def render(self, output_path=None, progress=False):
        canvas = self.camera.render(self.world, progress=progress)
        if output_path is not None:
            canvas.save(output_path)
        return canvas


def _camera(width, height, eye=point(0, 1.5, -5), target=point(0, 1, 0)):
    return Camera(width, height, np.pi / 3, view_transform(eye, target, vector(0, 1, 0)))


def BasicSceneExample(width=100, height=50):
    """Three spheres resting on a floor, lit from the upper left."""
    floor = Plane(material=Material(color=color(1, 0.9, 0.9), specular=0))

    middle = Sphere(translation(-0.5, 1, 0.5),
                    Material(color=color(0.1, 1, 0.5), diffuse=0.7, specular=0.3))
    right = Sphere(translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
                   Material(color=color(0.5, 1, 0.1), diffuse=0.7, specular=0.3))
    left = Sphere(translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
                  Material(color=color(1, 0.8, 0.1), diffuse=0.7, specular=0.3))

    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    world = World([floor, middle, right, left], light)
    return ExampleSceneDef(camera=_camera(width, height), world=world)


def _hexagon_side(transform, material):
    corner = Sphere(translation(0, 0, -1) @ scaling(0.25, 0.25, 0.25), material)
    edge = Cylinder(chain(scaling(0.25, 1, 0.25), rotation_z(-np.pi / 2),
                          rotation_y(-np.pi / 6), translation(0, 0, -1)),
                    material, minimum=0, maximum=1)
    return Group(transform, [corner, edge])


def HexagonExample(width=100, height=50):
    """A hexagon of spheres joined by cylinders, built from nested groups."""
    gold = Material(color=color(0.9, 0.7, 0.2), diffuse=0.7, specular=0.6, shininess=80)
    sides = [_hexagon_side(rotation_y(n * np.pi / 3), gold) for n in range(6)]
    hexagon = Group(translation(0, 0.8, 0) @ rotation_x(-np.pi / 6), sides)

    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    world = World([hexagon], light)
    return ExampleSceneDef(camera=_camera(width, height), world=world)


def PatternsExample(width=100, height=50):
    """A checkered floor, a mirror wall, and patterned glass and matte spheres."""
    white = color(1, 1, 1)
    floor = Plane(material=Material(pattern=Checker(white, color(0.2, 0.2, 0.2)),
                                    specular=0, reflective=0.2))
    wall = Plane(translation(0, 0, 6) @ rotation_x(np.pi / 2),
                 Material(pattern=Ring(color(0.3, 0.4, 0.8), white, scaling(0.5, 0.5, 0.5)),
                          specular=0))

    striped = Sphere(translation(-1.5, 1, 0.5),
                     Material(pattern=Stripe(color(0.9, 0.2, 0.2), white,
                                             scaling(0.2, 0.2, 0.2) @ rotation_z(np.pi / 4)),
                              diffuse=0.7, specular=0.3))
    blended = Sphere(translation(1.5, 0.75, 0) @ scaling(0.75, 0.75, 0.75),
                     Material(pattern=Gradient(color(0.1, 0.8, 0.3), color(0.9, 0.9, 0.1),
                                               translation(-1, 0, 0) @ scaling(2, 1, 1)),
                              diffuse=0.7, specular=0.3))
    glass = Sphere(translation(0, 1, -1),
                   Material(color=color(0.05, 0.05, 0.05), diffuse=0.1, specular=1.0,
                            shininess=300, reflective=0.9, transparency=0.9,
                            refractive_index=1.5))

    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    world = World([floor, wall, striped, blended, glass], light)
    return ExampleSceneDef(camera=_camera(width, height), world=world)


SCENES = {
    'basic': BasicSceneExample,
    'hexagon': HexagonExample,
    'patterns': PatternsExample,
}
