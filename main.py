import argparse
import logging
import sys

from spheretracer.app import LinesApp, RaytracerApp
from spheretracer.common import Settings

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render spheres or lines to a PPM image")
    parser.add_argument("--scene", choices=("spheres", "lines"), default="spheres")

    parser.add_argument("--width", type=positive_int, default=600, help="Image width")
    parser.add_argument("--height", type=positive_int, default=600, help="Image height")
    parser.add_argument("--depth", type=int, default=3, help="Number of times a ray can reflect")

    parser.add_argument("--output", default="raytracer_spheres_example.ppm", help="PPM output path")
    parser.add_argument("--png", default=None, help="Also write a PNG to this path")
    parser.add_argument("--show", action="store_true", help="Display the image when done")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings(
        width=args.width,
        height=args.height,
        recursion_depth=args.depth,
        progress=args.progress,
    )

    if args.scene == "lines":
        app = LinesApp(settings)
    else:
        app = RaytracerApp(settings)

    app.run()

    try:
        app.save(args.output)
        if args.png:
            app.save_png(args.png)
    except OSError as e:
        logger.error("Failed to save image: %s", e)
        return 1

    if args.show:
        plt.imshow(app.image)
        plt.show(block=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
