"""Surface scattering models.

The set of materials is closed: a surface is Lambertian, Metal or
Dielectric. ``scatter`` dispatches over exactly these three and rejects
anything else, and ``MATERIAL_TYPES`` is the lookup used by the scene
loader to turn a tag such as ``"Metal"`` into its class.
"""
from typing import Optional, Union

from spheretrace.core.ray import Ray
from spheretrace.geometry.hittable import HitRecord
from spheretrace.materials.material import Material, ScatterResult
from spheretrace.materials.lambertian import Lambertian
from spheretrace.materials.metal import Metal
from spheretrace.materials.dielectric import Dielectric

AnyMaterial = Union[Lambertian, Metal, Dielectric]

MATERIAL_TYPES = {
    Lambertian.name: Lambertian,
    Metal.name: Metal,
    Dielectric.name: Dielectric,
}


def scatter(material: AnyMaterial, rng, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
    if isinstance(material, Lambertian):
        return material.scatter(rng, ray_in, rec)
    if isinstance(material, Metal):
        return material.scatter(rng, ray_in, rec)
    if isinstance(material, Dielectric):
        return material.scatter(rng, ray_in, rec)
    raise TypeError(f"unsupported material: {material!r}")


__all__ = [
    "AnyMaterial",
    "Dielectric",
    "Lambertian",
    "MATERIAL_TYPES",
    "Material",
    "Metal",
    "ScatterResult",
    "scatter",
]
