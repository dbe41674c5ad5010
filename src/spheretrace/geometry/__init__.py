from spheretrace.geometry.hittable import HitRecord, Hittable
from spheretrace.geometry.sphere import Sphere
from spheretrace.geometry.bvh import BVH, BVHNode
from spheretrace.geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "BVH", "BVHNode", "HittableList"]
