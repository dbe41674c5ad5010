# main.py
"""Command-line entry point: load (or generate) a scene, render it, save a PNG.

Usage:
    spheretrace scene.json --width 400 --depth 50 -s 100 --output image.png
    spheretrace --random-scene --quality preview --seed 7
"""
import argparse
import logging
import random
import sys
import time
from typing import List, Optional

from spheretrace import __version__
from spheretrace.camera.camera import Camera
from spheretrace.config import QUALITY_LEVELS, RenderSettings
from spheretrace.logging_config import setup_logging
from spheretrace.renderer.export import save_png
from spheretrace.renderer.raytracer import Renderer, build_world
from spheretrace.scene import SceneError, dump_scene, load_scene, random_spheres

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spheretrace",
        description="Path trace a scene of spheres into a PNG image.",
    )
    parser.add_argument("input_file", nargs="?", help="JSON scene description")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--width", type=int, default=400,
                        help="Image width in pixels; height follows the aspect ratio (default: 400)")
    parser.add_argument("--depth", type=int, default=None,
                        help="Maximum number of bounces per path (default: 50)")
    parser.add_argument("-s", "--samples-per-pixel", type=int, default=None,
                        help="Samples per pixel (default: 100)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Preset for samples and depth; explicit flags still win")
    parser.add_argument("-o", "--output", default="image.png",
                        help="Output PNG path (default: image.png)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Render threads (default: chosen by the thread pool)")
    parser.add_argument("--no-bvh", dest="use_bvh", action="store_false",
                        help="Intersect by scanning every object instead of using a BVH")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible render (default: random)")
    parser.add_argument("--random-scene", action="store_true",
                        help="Render the generated cover scene instead of a file")
    parser.add_argument("--save-scene", default=None, metavar="PATH",
                        help="Also write the scene that is rendered as JSON")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args = parser.parse_args(argv)

    if args.input_file is None and not args.random_scene:
        parser.error("an input file is required unless --random-scene is given")
    if args.input_file is not None and args.random_scene:
        parser.error("give either an input file or --random-scene, not both")

    try:
        args.settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    return args


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    if args.quality is not None:
        settings = RenderSettings.from_quality(
            args.quality,
            image_width=args.width,
            samples_per_pixel=args.samples_per_pixel,
            max_depth=args.depth,
            workers=args.workers,
            use_bvh=args.use_bvh,
        )
    else:
        defaults = RenderSettings()
        settings = RenderSettings(
            image_width=args.width,
            samples_per_pixel=(defaults.samples_per_pixel if args.samples_per_pixel is None
                               else args.samples_per_pixel),
            max_depth=defaults.max_depth if args.depth is None else args.depth,
            workers=args.workers,
            use_bvh=args.use_bvh,
        )
    return settings.validate()


def format_duration(seconds: float) -> str:
    minutes, secs = divmod(seconds, 60.0)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}h {minutes}m {secs:.2f}s"
    if minutes:
        return f"{minutes}m {secs:.2f}s"
    return f"{secs:.3f}s"


def log_progress(step_percent: int = 10):
    """Progress callback that logs every ``step_percent`` percent of rows."""
    state = {"next": step_percent}

    def report(done: int, total: int) -> None:
        percent = done * 100 // total
        if percent >= state["next"] or done == total:
            logger.info("Progress: %d/%d rows (%d%%)", done, total, percent)
            state["next"] = percent - percent % step_percent + step_percent

    return report


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    settings = args.settings

    rng = random.Random(args.seed)

    try:
        if args.random_scene:
            scene = random_spheres(rng)
        else:
            scene = load_scene(args.input_file)
        if args.save_scene:
            dump_scene(scene, args.save_scene)
    except (OSError, SceneError) as e:
        print(f"spheretrace: error: {e}", file=sys.stderr)
        return 1

    logger.info("Quality: %s", args.quality or "custom")
    world = build_world(scene.objects, rng, use_bvh=settings.use_bvh)
    camera = Camera(scene.camera, settings.image_width)
    renderer = Renderer(settings.samples_per_pixel, settings.max_depth, workers=settings.workers)

    start = time.perf_counter()
    image = renderer.render(camera, world, rng=rng, progress=log_progress())
    print(f"Rendering took {format_duration(time.perf_counter() - start)}\n")

    try:
        save_png(image, args.output)
    except OSError as e:
        print(f"spheretrace: error: cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
