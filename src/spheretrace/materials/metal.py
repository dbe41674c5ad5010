# materials/metal.py
from typing import Optional
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Color
from spheretrace.core.utils import reflect, random_unit_vector
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material, ScatterResult


class Metal(Material):
    """
    Metal material with reflective properties. ``fuzz`` blurs the reflection;
    0 is a perfect mirror.
    """
    name = "Metal"

    def __init__(self, albedo: Color, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"fuzz must be non-negative, got {fuzz}")
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, rng, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.point, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterResult(self.albedo, scattered)

        return None  # Absorb the ray if it does not scatter away from the surface

    def to_dict(self) -> dict:
        return {"albedo": list(self.albedo), "fuzz": self.fuzz}
