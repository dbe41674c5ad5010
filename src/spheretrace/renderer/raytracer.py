# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Callable, Optional, Sequence

import numpy as np

from spheretrace.geometry.hittable import Hittable
from spheretrace.geometry.world import HittableList
from spheretrace.renderer.integrator import ray_color
from spheretrace.renderer.tone_mapping import gamma_correct

if TYPE_CHECKING:
    from spheretrace.camera.camera import Camera

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def build_world(objects: Sequence[Hittable], rng, use_bvh: bool = True) -> HittableList:
    """
    Wraps the scene objects in a HittableList, optionally backed by a BVH.

    The returned world is treated as read-only from here on.
    """
    world = HittableList(list(objects))
    if use_bvh and len(world) > 0:
        logger.info("Building BVH for %d objects...", len(world))
        start = time.perf_counter()
        bvh = world.build_bvh(rng)
        logger.info("BVH built in %.3fs: %d nodes, depth %d",
                    time.perf_counter() - start, len(bvh), bvh.depth())
    return world


class Renderer:
    """
    Multi-threaded per-pixel sampler.

    Work is split into one task per scanline. Every task writes only to its
    own row of the output buffer and draws from its own ``random.Random``,
    whose seed is taken from the parent random source before any task
    starts. The image therefore depends only on the parent source, not on
    thread scheduling or the number of workers.
    """
    def __init__(self, samples_per_pixel: int, max_depth: int, workers: Optional[int] = None):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.last_render_seconds = None

    def render(self, camera: "Camera", world: Hittable, rng=None,
               progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Render ``world`` as seen by ``camera``.

        Returns a (height, width, 3) float64 array of gamma-corrected colors,
        row 0 at the top. ``rng`` seeds the per-row generators; when omitted
        a fresh entropy-seeded ``random.Random`` is used. ``progress`` is
        called as ``progress(rows_done, rows_total)`` after each row.
        """
        if rng is None:
            rng = random.Random()

        height, width = camera.image_height, camera.image_width
        image = np.zeros((height, width, 3), dtype=np.float64)
        seeds = [rng.getrandbits(64) for _ in range(height)]

        logger.info("Rendering %dx%d image, %d samples per pixel, max depth %d",
                    width, height, self.samples_per_pixel, self.max_depth)
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                executor.submit(self._render_row, camera, world, j, seeds[j], image[j])
                for j in range(height)
            ]
            try:
                for done, future in enumerate(as_completed(futures), 1):
                    future.result()
                    if progress is not None:
                        progress(done, height)
            except BaseException:
                # Rows not yet started are dropped instead of rendered.
                for f in futures:
                    f.cancel()
                raise

        self.last_render_seconds = time.perf_counter() - start
        logger.info("Rendered %d rows in %.2fs", height, self.last_render_seconds)
        return image

    def _render_row(self, camera: "Camera", world: Hittable, j: int, seed: int,
                    out_row: np.ndarray) -> None:
        rng = random.Random(seed)
        samples = self.samples_per_pixel
        max_depth = self.max_depth
        linear = np.empty_like(out_row)

        for i in range(camera.image_width):
            r = g = b = 0.0
            for _ in range(samples):
                color = ray_color(camera.get_ray(i, j, rng), max_depth, rng, world)
                r += color.x
                g += color.y
                b += color.z
            linear[i] = (r / samples, g / samples, b / samples)

        out_row[:] = gamma_correct(linear)
        logger.debug("Row %d done", j)
