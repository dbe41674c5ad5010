# renderer/integrator.py
import math

from spheretrace.core.ray import Ray
from spheretrace.core.vector import Color
from spheretrace.geometry.hittable import Hittable
from spheretrace.materials import scatter

# Minimum hit distance; keeps scattered rays from re-hitting their own origin.
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """Vertical white-to-blue gradient standing in for the sky."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, depth: int, rng, world: Hittable) -> Color:
    """
    Monte Carlo estimate of the light arriving along ``ray``.

    Follows at most ``depth`` surface interactions. Each scatter multiplies the
    running throughput by the material's attenuation; the path ends in the
    sky (which returns its gradient color), in an absorbing surface, or when
    the depth budget runs out (both of which return black).
    """
    throughput = Color(1.0, 1.0, 1.0)
    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return throughput * background(ray)

        result = scatter(rec.material, rng, ray, rec)
        if result is None:
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.ray
        depth -= 1

    return BLACK
