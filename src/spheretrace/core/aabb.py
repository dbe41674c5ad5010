# src/core/aabb.py
import math
from typing import Tuple

from spheretrace.core.vector import Vector3


def _inverse(d: float) -> float:
    # A zero component becomes an infinity carrying the zero's sign.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """
    Axis-aligned bounding box stored as its two extreme corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        # a and b are opposite corners in any order.
        return AABB(
            Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
            Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))
        )

    @staticmethod
    def merge(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def axis(self, n: int) -> Tuple[float, float]:
        """Interval (start, end) of the box along axis n (0, 1 or 2)."""
        if n not in (0, 1, 2):
            raise IndexError(f"axis {n} is not supported")
        return self.minimum[n], self.maximum[n]

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        origin = ray.origin
        direction = ray.direction
        for a in ('x', 'y', 'z'):
            invD = _inverse(getattr(direction, a))
            orig = getattr(origin, a)
            t0 = (getattr(self.minimum, a) - orig) * invD
            t1 = (getattr(self.maximum, a) - orig) * invD
            if invD < 0:
                t0, t1 = t1, t0
            # NaN (0 * inf) compares false and leaves the interval alone.
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[n] <= other.minimum[n] and other.maximum[n] <= self.maximum[n]
            for n in range(3)
        )

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
