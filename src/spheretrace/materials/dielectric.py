# src/materials/dielectric.py
import math
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Color
from spheretrace.core.utils import reflect, refract, reflectance
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material, ScatterResult


class Dielectric(Material):
    """
    Clear refractive material (glass, water, ...). Chooses between reflection
    and refraction per ray using Schlick's approximation.
    """
    name = "Dielectric"

    def __init__(self, index_of_refraction: float):
        if index_of_refraction <= 0:
            raise ValueError(
                f"index_of_refraction must be positive, got {index_of_refraction}")
        self.index_of_refraction = index_of_refraction

    def scatter(self, rng, ray_in: Ray, rec: HitRecord) -> ScatterResult:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.index_of_refraction if rec.front_face else self.index_of_refraction

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ratio * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, ratio) > rng.uniform(0.0, 1.0):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio, cos_theta)

        return ScatterResult(attenuation, Ray(rec.point, direction, ray_in.time))

    def to_dict(self) -> dict:
        return {"index_of_refraction": self.index_of_refraction}
