# core/ray.py
from spheretrace.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the instant
    (in [0, 1]) at which it samples the scene.
    """
    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction}, time={self.time})"
