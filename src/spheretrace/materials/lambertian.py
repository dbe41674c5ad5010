# materials/lambertian.py
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Color
from spheretrace.core.utils import random_unit_vector
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material, ScatterResult


class Lambertian(Material):
    """
    Lambertian diffuse material with a constant albedo.
    """
    name = "Lambertian"

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, rng, ray_in: Ray, rec: HitRecord) -> ScatterResult:
        """
        Scatter a ray according to a Lambertian reflection model. Never absorbs.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.point, scatter_direction, ray_in.time)
        return ScatterResult(self.albedo, scattered)

    def to_dict(self) -> dict:
        return {"albedo": list(self.albedo)}
