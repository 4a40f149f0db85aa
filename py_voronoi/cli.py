"""
Command-line entry point.

Generates random foci, renders the Voronoi diagram and writes it as a
binary PPM file (voronoi.ppm in the working directory by default).

Usage:
    python -m py_voronoi [--width 800] [--height 600] [--foci 20] [--seed abc]
"""

import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import Settings, get_settings
from .core.voronoi_image import VoronoiImage
from .logging_config import configure_logging
from .utils.output import write_image
from .utils.random import random_foci, set_random_seed

logger = structlog.get_logger()


def render(settings: Settings) -> bytes:
    """
    Run the full pipeline for `settings` and return the PPM bytes.

    Reseeds the global PRNG with `settings.seed` (or a fresh seed).
    """
    seed = set_random_seed(settings.seed)
    logger.info("Generating Voronoi image",
                width=settings.width, height=settings.height,
                foci=settings.focus_count, seed=seed)

    foci = random_foci(settings.width, settings.height, settings.focus_count)
    image = VoronoiImage(settings.width, settings.height,
                         dot_radius=settings.dot_radius).with_foci(foci)
    canvas = image.build_canvas(method=settings.method)
    return canvas.to_ppm()


def main(argv: Optional[List[str]] = None) -> int:
    """Main function. Returns the process exit status."""
    import argparse

    parser = argparse.ArgumentParser(description="Render a random Voronoi diagram to a PPM file")
    parser.add_argument("--width", type=int, help="Canvas width in pixels (default 800)")
    parser.add_argument("--height", type=int, help="Canvas height in pixels (default 600)")
    parser.add_argument("--foci", type=int, dest="focus_count", help="Number of foci (default 20)")
    parser.add_argument("--seed", help="Seed string for reproducible output")
    parser.add_argument("--output", dest="output_path", help="Output file (default voronoi.ppm)")
    parser.add_argument("--method", choices=["scan", "numpy"], help="Nearest-focus build method")
    parser.add_argument("--log-level", dest="log_level", help="Log level (default INFO)")

    args = parser.parse_args(argv)

    try:
        settings = get_settings(**vars(args))
    except ValidationError as e:
        parser.error(str(e))

    configure_logging(settings.log_level, settings.log_format)

    ppm = render(settings)

    try:
        write_image(settings.output_path, ppm)
    except OSError as e:
        logger.error("Could not write image", path=settings.output_path, error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
