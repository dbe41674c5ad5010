# materials/presets.py
from spheretrace.core.vector import Color
from spheretrace.materials.metal import Metal
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.dielectric import Dielectric


class MetalPresets:
    """Metals used by the built-in scenes."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Dielectrics used by the built-in scenes."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Inner surface of a hollow glass sphere: air seen from glass.
        return Dielectric(1.0 / 1.5)


class ColorPresets:
    """Albedos used by the built-in scenes."""

    GRAY = Color(0.5, 0.5, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        return Lambertian(color)
