"""
Command-line entry point.

    hull-scan [--closed] [--clockwise] [--show] -- 0,-1 1,0 1,5 -5,5 -5,0 -2,1

Points are "x,y" pairs, already in hull order. Without positional points they
are read from standard input, one per line. Put "--" before the points when
the first one has a negative x.
"""

import argparse
import logging
import sys

from hull_scan.graham_scan import closed_graham_scan, open_graham_scan
from hull_scan.orientation import Point, clockwise, orientation

logger = logging.getLogger(__name__)


def _point(text):
    try:
        return Point.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="hull-scan",
        description="Graham scan over points given in hull order.")
    parser.add_argument("points", nargs="*", type=_point, metavar="X,Y",
                        help="input points; read from stdin when omitted")
    parser.add_argument("--closed", action="store_true",
                        help="treat the result as a closed polygon")
    parser.add_argument("--clockwise", action="store_true",
                        help="keep clockwise turns instead of counter-clockwise ones")
    parser.add_argument("--show", action="store_true",
                        help="animate the scan in a matplotlib window")
    parser.add_argument("--interval", type=int, default=700,
                        help="milliseconds between animation frames (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    points = args.points
    if not points:
        try:
            points = [Point.parse(line) for line in sys.stdin if line.strip()]
        except ValueError as e:
            parser.error(str(e))

    predicate = clockwise(orientation) if args.clockwise else orientation
    scan = closed_graham_scan if args.closed else open_graham_scan
    hull = scan(points, predicate)
    logger.debug("hull of %d points from %d input points", len(hull), len(points))

    for pt in hull:
        print(f"{pt[0]},{pt[1]}")

    if args.show:
        # imported here so that printing a hull does not need a display
        import matplotlib.pyplot as plt
        from hull_scan.animator import AnimationConfig, animate_scan

        config = AnimationConfig(interval=args.interval)
        fig, anim = animate_scan(points, closed=args.closed, predicate=predicate, config=config)
        plt.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
