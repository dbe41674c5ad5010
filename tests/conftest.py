"""Pytest configuration for spheretrace tests.

Provides random sources (seeded and scripted), small scenes and logger
cleanup shared by all test modules.
"""

import logging
import random

import pytest

from spheretrace.camera.camera import CameraConfig
from spheretrace.core.vector import Color, Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.materials import Lambertian


class SequenceRandom:
    """Random source that replays fixed values.

    ``uniform`` ignores its bounds and returns the next scripted value,
    cycling when the list runs out. An empty list means the code under test
    must not draw at all.
    """

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def uniform(self, a, b):
        if not self.values:
            raise AssertionError("random source should not be used")
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def randint(self, a, b):
        return a

    def getrandbits(self, k):
        return 0


@pytest.fixture
def rng():
    """A seeded generator so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ``SequenceRandom`` instances."""
    return SequenceRandom


@pytest.fixture
def single_sphere():
    """Radius 0.5 gray Lambertian sphere at (0, 0, -1)."""
    return Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))


@pytest.fixture
def origin_camera_config():
    """Camera at the origin looking down -z, 90 degree vfov, 16:9."""
    return CameraConfig(
        look_from=Vector3(0.0, 0.0, 0.0),
        look_at=Vector3(0.0, 0.0, -1.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=16.0 / 9.0,
        defocus_angle=0.0,
        focus_dist=1.0,
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the CLI so they don't outlive a test."""
    yield
    logger = logging.getLogger("spheretrace")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
