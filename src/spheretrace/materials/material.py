# materials/material.py
from typing import Optional
from spheretrace.core.ray import Ray
from spheretrace.core.vector import Color
from spheretrace.geometry.hittable import HitRecord


class ScatterResult:
    """
    Outcome of a successful scatter: the color filter applied to the light
    arriving along ``ray``.
    """
    def __init__(self, attenuation: Color, ray: Ray):
        self.attenuation = attenuation
        self.ray = ray

    def __repr__(self) -> str:
        return f"ScatterResult({self.attenuation}, {self.ray})"


class Material:
    """
    Base class of the three surface models. Subclasses must implement scatter().

    ``rng`` is the caller's random source (anything with ``uniform(a, b)``),
    never a module-level generator.
    """
    # Tag used in scene files, e.g. {"Metal": {...}}.
    name = None

    def scatter(self, rng, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def to_dict(self) -> dict:
        """Parameters of the material as plain JSON-ready values."""
        raise NotImplementedError("to_dict() must be implemented by subclasses.")

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({params})"
