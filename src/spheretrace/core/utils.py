# core/utils.py
import math
from spheretrace.core.vector import Vector3


def random_vector(rng, lo: float = -1.0, hi: float = 1.0) -> Vector3:
    """
    Returns a vector of three independent uniform samples in [lo, hi).
    """
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector by normalizing a point of the [-1, 1] cube.
    """
    return random_vector(rng).normalize()


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point (x, y, 0) strictly inside the unit disk.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, ratio: float, cos_theta: float) -> Vector3:
    """
    Bends the unit direction uv through a surface with normal n (Snell's law).

    ``ratio`` is eta_incident / eta_transmitted and ``cos_theta`` the cosine
    between -uv and n, which callers have already computed.
    """
    r_out_perp = (uv + n * cos_theta) * ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def reflectance(cosine: float, ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ratio) / (1.0 + ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
