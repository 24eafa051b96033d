import numpy as np
from tuples import normalize, reflect, WHITE, BLACK
from patterns import Solid


class Material:

    def __init__(self, color=None, pattern=None, ambient=0.1, diffuse=0.9, specular=0.9,
                 shininess=200.0, reflective=0.0, transparency=0.0, refractive_index=1.0):
        """
        Create a new material with the given parameters.

        Parameters:
          color : (3,) -- surface color, shorthand for a Solid pattern (white if omitted)
          pattern : Pattern -- procedural surface color; overrides color
          ambient : float -- ambient coefficient, conventionally in [0, 1]
          diffuse : float -- diffuse coefficient, conventionally in [0, 1]
          specular : float -- specular coefficient, conventionally in [0, 1]
          shininess : float -- specular exponent (> 0, typically 10 to 400)
          reflective : float -- mirror reflection weight (0 for matte)
          transparency : float -- refraction weight (0 for opaque)
          refractive_index : float -- 1.0 for vacuum/air, 1.5 for glass
        """
        if pattern is None:
            pattern = Solid(WHITE if color is None else color)
        self.pattern = pattern
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index

    def lighting(self, shape, light, point, eyev, normalv, in_shadow=False):
        """Compute the Phong shading at a surface point due to a point light.

        Parameters:
          shape : Shape -- the surface being shaded (patterns are evaluated on it)
          light : PointLight -- the light source
          point : (4,) -- world-space point being shaded
          eyev : (4,) -- unit vector toward the eye
          normalv : (4,) -- unit surface normal
          in_shadow : bool -- if True only the ambient term contributes
        Return:
          (3,) -- the color, not clamped
        """
        effective_color = self.pattern.color_at(shape, point) * light.intensity
        ambient = effective_color * self.ambient

        lightv = normalize(light.position - point)
        light_dot_normal = np.dot(lightv, normalv)
        if in_shadow or light_dot_normal < 0:
            return ambient + BLACK

        diffuse = effective_color * self.diffuse * light_dot_normal

        reflectv = reflect(-lightv, normalv)
        reflect_dot_eye = np.dot(reflectv, eyev)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** self.shininess
            specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular
