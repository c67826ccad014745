# main.py
"""
Command line entry point.

Usage examples:
  pathtracer --scene spheres --samples 100 --output output/spheres.png
  python -m pathtracer --quality preview --workers 4
  pathtracer --fov 60 --yaw 15 --pitch -5 --position 0 0.5 1
"""
import argparse
import logging
import math
import sys
from typing import List, Optional

from pathtracer.camera.camera import Camera
from pathtracer.config import (DEFAULT_HEIGHT, DEFAULT_OUTPUT, DEFAULT_SAMPLES,
                               DEFAULT_SEED, DEFAULT_WIDTH, LOG_LEVEL, QUALITY_LEVELS)
from pathtracer.core.vector import Vector3
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_writer import ImageWriteError
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="pathtracer",
                                description="Render a sphere scene to an image file.")
    p.add_argument("--scene", choices=sorted(SCENES), default="spheres")
    p.add_argument("--quality", choices=list(QUALITY_LEVELS),
                   help="preset for samples and resolution; explicit flags win")
    p.add_argument("--width", type=int)
    p.add_argument("--height", type=int)
    p.add_argument("--samples", type=int, help="samples per pixel")
    p.add_argument("--workers", type=int, help="worker processes (default: all CPUs)")
    p.add_argument("--fov", type=float,
                   help="vertical field of view in degrees; default is the classic 4x2 view")
    p.add_argument("--yaw", type=float, default=0.0, help="degrees, 0 looks down -z")
    p.add_argument("--pitch", type=float, default=0.0, help="degrees, positive looks up")
    p.add_argument("--position", type=float, nargs=3, default=(0.0, 0.0, 0.0),
                   metavar=("X", "Y", "Z"), help="eye position for --fov")
    p.add_argument("--seed", type=int, default=DEFAULT_SEED)
    p.add_argument("--output", default=DEFAULT_OUTPUT)
    p.add_argument("--log-level", default=LOG_LEVEL)
    return p.parse_args(argv)

def resolve_settings(args: argparse.Namespace):
    """Combine the quality preset with explicit flags into (width, height, samples)."""
    width, height, samples = DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_SAMPLES
    if args.quality is not None:
        quality = QUALITY_LEVELS[args.quality]
        width = max(1, int(width * quality["scale"]))
        height = max(1, int(height * quality["scale"]))
        samples = quality["samples"]
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    if args.samples is not None:
        samples = args.samples
    return width, height, samples

def build_camera(args: argparse.Namespace, width: int, height: int) -> Camera:
    """
    The classic view rectangle, or a yaw/pitch camera when --fov is given.
    Angles on the command line are in degrees.
    """
    if args.fov is None:
        return Camera.default()
    if not 0.0 < args.fov < 180.0:
        raise ValueError(f"field of view must be in (0, 180) degrees, got {args.fov}")
    if not -90.0 < args.pitch < 90.0:
        raise ValueError(f"pitch must be in (-90, 90) degrees, got {args.pitch}")
    return Camera.from_fov(Vector3(*args.position),
                           yaw=math.radians(args.yaw),
                           pitch=math.radians(args.pitch),
                           fov=math.radians(args.fov),
                           aspect_ratio=width / height)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    width, height, samples = resolve_settings(args)

    try:
        renderer = Renderer(width, height, samples=samples,
                            seed=args.seed, workers=args.workers)
        # Renderer has already rejected a zero height here.
        renderer.camera = build_camera(args, width, height)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    scene = SCENES[args.scene]()
    logger.info("Rendering scene '%s' at %dx%d, %d samples per pixel",
                args.scene, width, height, samples)
    try:
        metrics = renderer.render_to_file(scene, args.output)
    except ImageWriteError as e:
        logger.error("%s", e)
        return 1

    logger.info("Done: %s", metrics.describe())
    return 0

if __name__ == "__main__":
    sys.exit(main())
