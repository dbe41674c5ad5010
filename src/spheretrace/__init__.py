"""spheretrace: an offline Monte Carlo path tracer for scenes of spheres.

Subpackages:
    core: Vectors, rays, bounding boxes and sampling helpers
    geometry: Spheres, hit records, the object list and the BVH
    materials: Lambertian, metal and dielectric scattering
    camera: Camera configuration and primary ray generation
    renderer: Path integrator, multi-threaded sampler, tone mapping, PNG export
    scene: JSON scene files and procedural scenes
"""

__version__ = "0.1.0"
