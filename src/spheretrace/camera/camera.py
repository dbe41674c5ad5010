# camera/camera.py
import math
from dataclasses import dataclass, field

from spheretrace.core.vector import Vector3
from spheretrace.core.ray import Ray
from spheretrace.core.utils import random_in_unit_disk


@dataclass
class CameraConfig:
    """
    Placement and lens of the camera, as read from a scene file.

    Angles are in degrees. A ``defocus_angle`` of 0 or less gives a pinhole
    camera; larger values open the aperture and blur everything that is not
    ``focus_dist`` away from ``look_from``.
    """
    look_from: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 90.0
    aspect_ratio: float = 16.0 / 9.0
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    def validate(self) -> None:
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must be between 0 and 180 degrees, got {self.vfov}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.look_from == self.look_at:
            raise ValueError("look_from and look_at must differ")
        if (self.look_from - self.look_at).cross(self.vup).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")


class Camera:
    """
    Turns pixel coordinates into (jittered, optionally defocused) primary rays.

    Row 0 is the top of the image and column 0 its left edge.
    """
    def __init__(self, config: CameraConfig, image_width: int):
        config.validate()
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        self.config = config
        self.image_width = image_width
        self.image_height = max(1, int(image_width / config.aspect_ratio))
        self.update_camera()

    def update_camera(self):
        """Derives the basis vectors, viewport and defocus disk from the config."""
        cfg = self.config
        self.center = cfg.look_from

        # Viewport dimensions from the vertical field of view, scaled by focus distance
        theta = math.radians(cfg.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * cfg.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal camera basis
        self.w = (cfg.look_from - cfg.look_at).normalize()
        self.u = cfg.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * cfg.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = cfg.focus_dist * math.tan(math.radians(cfg.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Generates a ray through a random point of pixel (column i, row j).
        """
        offset_x = rng.uniform(-0.5, 0.5)
        offset_y = rng.uniform(-0.5, 0.5)
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))

        if self.config.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        return Ray(ray_origin, pixel_sample - ray_origin, rng.uniform(0.0, 1.0))

    def defocus_disk_sample(self, rng) -> Vector3:
        """Random point on the lens."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def render(self, world, samples_per_pixel: int, max_depth: int,
               rng=None, workers=None, progress=None):
        """
        Renders ``world`` through this camera; see ``Renderer.render``.
        """
        from spheretrace.renderer.raytracer import Renderer

        renderer = Renderer(samples_per_pixel, max_depth, workers=workers)
        return renderer.render(self, world, rng=rng, progress=progress)
