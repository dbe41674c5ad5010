import math
from typing import Optional
from spheretrace.core.vector import Vector3
from spheretrace.core.ray import Ray
from spheretrace.core.aabb import AABB
from spheretrace.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    When ``center2`` is given the sphere moves linearly from ``center`` (ray
    time 0) to ``center2`` (ray time 1), which produces motion blur.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 center2: Optional[Vector3] = None):
        self.center = center
        self.radius = radius
        self.material = material
        self.center2 = center2
        self.motion = center2 - center if center2 is not None else None

        offset = Vector3(abs(radius), abs(radius), abs(radius))
        box = AABB.from_points(center - offset, center + offset)
        if center2 is not None:
            box = AABB.merge(box, AABB.from_points(center2 - offset, center2 + offset))
        self._box = box

    @property
    def is_moving(self) -> bool:
        return self.motion is not None

    def center_at(self, time: float) -> Vector3:
        if self.motion is None:
            return self.center
        return self.center + self.motion * time

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # A zero radius can at best graze the center, which counts as a miss.
        if discriminant < 0 or self.radius == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the open range (t_min, t_max)
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.point = ray.at(rec.t)
        outward_normal = (rec.point - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self._box

    def __repr__(self) -> str:
        if self.center2 is None:
            return f"Sphere({self.center}, {self.radius}, {self.material!r})"
        return f"Sphere({self.center} -> {self.center2}, {self.radius}, {self.material!r})"
