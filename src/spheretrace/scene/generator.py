# scene/generator.py
from spheretrace.camera.camera import CameraConfig
from spheretrace.core.utils import random_vector
from spheretrace.core.vector import Color, Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.materials import Dielectric, Lambertian, Metal
from spheretrace.materials.presets import ColorPresets, DielectricPresets, MetalPresets
from spheretrace.scene.loader import Scene


def random_spheres(rng, grid: int = 11) -> Scene:
    """
    The classic cover scene: a huge ground sphere, a field of small random
    spheres on a (2 * grid) x (2 * grid) lattice, and three large feature
    spheres (glass, matte, mirror).

    Most small spheres are diffuse and bounce upwards during the exposure,
    which exercises motion blur; the rest are metal or glass.
    """
    objects = [Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY))]

    clearance = Vector3(4, 0.2, 0)
    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = rng.uniform(0.0, 1.0)
            center = Vector3(a + 0.9 * rng.uniform(0.0, 1.0), 0.2, b + 0.9 * rng.uniform(0.0, 1.0))
            if (center - clearance).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng, 0.0, 1.0) * random_vector(rng, 0.0, 1.0)
                center2 = center + Vector3(0, rng.uniform(0.0, 0.5), 0)
                objects.append(Sphere(center, 0.2, Lambertian(albedo), center2))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                objects.append(Sphere(center, 0.2, Metal(albedo, rng.uniform(0.0, 0.5))))
            else:
                objects.append(Sphere(center, 0.2, DielectricPresets.glass()))

    objects.append(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    objects.append(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = CameraConfig(
        look_from=Vector3(13, 2, 3),
        look_at=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=16.0 / 9.0,
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return Scene(camera, objects)


def three_spheres() -> Scene:
    """Small deterministic scene: ground, glass, matte and gold spheres."""
    objects = [
        Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Color(0.8, 0.8, 0.0))),
        Sphere(Vector3(0, 0, -1.2), 0.5, Lambertian(Color(0.1, 0.2, 0.5))),
        Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()),
        Sphere(Vector3(-1, 0, -1), 0.4, DielectricPresets.air_bubble()),
        Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.gold()),
    ]
    camera = CameraConfig(
        look_from=Vector3(-2, 2, 1),
        look_at=Vector3(0, 0, -1),
        vup=Vector3(0, 1, 0),
        vfov=20.0,
        aspect_ratio=16.0 / 9.0,
        defocus_angle=10.0,
        focus_dist=3.4,
    )
    return Scene(camera, objects)
