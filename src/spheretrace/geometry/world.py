# src/geometry/world.py
from typing import List, Optional

from spheretrace.core.aabb import AABB
from spheretrace.core.ray import Ray
from spheretrace.geometry.bvh import BVH
from spheretrace.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects. Intersection is a linear closest-hit scan
    until ``build_bvh`` is called, after which queries go through the tree.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh: Optional[BVH] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh = None

    def clear(self):
        self.objects.clear()
        self.bvh = None

    def build_bvh(self, rng) -> BVH:
        self.bvh = BVH(self.objects, rng)
        return self.bvh

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh is not None:
            return self.bvh.hit(ray, t_min, t_max)

        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise ValueError("an empty HittableList has no bounding box")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.merge(box, obj.bounding_box())
        return box

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)
