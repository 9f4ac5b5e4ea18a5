"""Open a window rendering a cube from a first-person camera."""
from __future__ import annotations

import argparse
import logging
import random

from .camera import Camera
from .config import RendererConfig
from .logging_config import setup_logging
from .mesh import Cube
from .scene import Scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="painter3d",
        description="Move with W/A/S/D, space and shift; look around with the mouse.",
    )
    parser.add_argument("--fov", type=float, default=100.0, help="Field of view in degrees")
    parser.add_argument("--size", type=float, default=2.0, help="Cube edge length")
    parser.add_argument(
        "--center", type=float, nargs=3, default=(0.0, 0.0, 10.0), metavar=("X", "Y", "Z"),
        help="Cube center",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the face colours")
    parser.add_argument("--cull-threshold", type=float, default=2.0, help="Forward-distance cull threshold")
    parser.add_argument("--width", type=int, default=800, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Window height in pixels")
    parser.add_argument("--no-vertices", action="store_true", help="Do not draw vertex markers")
    parser.add_argument("--save", type=str, default="", help="Render a single frame to this image and exit")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", type=str, default="", help="Also append log records to this file")
    return parser


def build_scene(args: argparse.Namespace) -> Scene:
    scene = Scene()
    scene.add("cube", Cube(args.center, args.size, random.Random(args.seed)))
    return scene


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file or None)

    try:
        config = RendererConfig(
            width=args.width,
            height=args.height,
            cull_threshold=args.cull_threshold,
            show_vertices=not args.no_vertices,
        )
        camera = Camera(fov=args.fov)
        scene = build_scene(args)
    except ValueError as exc:
        parser.error(str(exc))

    from .viewer import Viewer

    viewer = Viewer(scene, camera, config)
    if args.save:
        stats = viewer.render_single_frame(args.save)
        logger.info("Drew %d of %d faces", stats.drawn, stats.faces)
        viewer.close()
        return 0

    viewer.animate()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
