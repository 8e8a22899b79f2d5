#!/usr/bin/env python3
"""
Runpath command line tool.

Reads a route from a GPX file or an encoded "lon,lat;..." string, and
reports its length and bounds, simplifies it, or generates a synthetic
route for demos and fixtures.

Requirements:
    pip install gpxpy shapely pyproj

"""

from typing import List, Optional
import argparse
import io
import logging
import sys
from gpxpy import gpx

from . import __version__
from .codec import ParseError, decode
from .config import RunpathConfig
from .formatting import format_distance
from .geometry import Coordinate
from .metrics import collect_metrics, log_metrics
from .route import Route
from .synthesis import generate_route

logger = logging.getLogger("runpath")


def parse_start(value: str) -> Coordinate:
    """argparse type for a single "lon,lat" coordinate."""
    try:
        coords = decode(value)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e))
    if len(coords) != 1:
        raise argparse.ArgumentTypeError(
            f"expected a single lon,lat pair, got {len(coords)}"
        )
    return coords[0]


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="runpath",
        description="Geographic path analysis tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"runpath {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    info_parser = subparsers.add_parser(
        "info", help="Show length, bounds and region coverage of a route"
    )
    info_parser.add_argument(
        "input", type=str, help="GPX file, encoded path file, or - for stdin"
    )

    simplify_parser = subparsers.add_parser(
        "simplify", help="Simplify a route and print it encoded"
    )
    simplify_parser.add_argument(
        "input", type=str, help="GPX file, encoded path file, or - for stdin"
    )
    simplify_parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Simplification tolerance in degrees (default: 0.0001)",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a synthetic route and print it encoded"
    )
    generate_parser.add_argument(
        "--start",
        type=parse_start,
        default=None,
        help="Start coordinate as lon,lat (default: Shanghai center)",
    )
    generate_parser.add_argument(
        "--distance",
        dest="total_distance",
        type=float,
        default=None,
        help="Total route distance in meters (default: 5000)",
    )
    generate_parser.add_argument(
        "--points",
        dest="point_count",
        type=int,
        default=None,
        help="Number of route points (default: 50)",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    return parser


def setup_logging(level_name: str) -> None:
    """Setup logging configuration."""
    level = getattr(logging, level_name)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def load_route(source: str) -> Route:
    """
    Load a route from a file name, or from stdin when source is "-".

    Stdin content starting with "<" is parsed as GPX, anything else as an
    encoded path.
    """
    if source != "-":
        return Route.from_file(source)

    text = sys.stdin.read().strip()
    if text.startswith("<"):
        return Route.from_gpx(io.StringIO(text))
    return Route.decode(text)


def print_route_info(route: Route, config: RunpathConfig) -> None:
    """Print a summary of the route to stdout."""
    bounds = route.get_bounds(config.default_center)
    inside = route.within(config.region)

    print(f"Points: {len(route)}")
    print(f"Length: {format_distance(route.length)}")
    print(
        f"Bounds: {bounds.min_lon:.6f},{bounds.min_lat:.6f} - "
        f"{bounds.max_lon:.6f},{bounds.max_lat:.6f}"
    )
    print(f"Inside {config.region.name}: {len(inside)}/{len(route)}")


def main(argv: Optional[List[str]] = None):
    """
    Parses command-line arguments and runs the requested command.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.log_level)
    config = RunpathConfig.from_args(args)

    if args.command == "generate":
        start = args.start if args.start is not None else config.default_center
        try:
            route = Route(
                generate_route(
                    start, config.total_distance, config.point_count, seed=config.seed
                )
            )
        except ValueError as e:
            logger.error(f"Cannot generate route: {e}")
            sys.exit(1)
        logger.info(f"Generated route with {len(route)} points")
        print(route.encode())
        log_metrics(collect_metrics(route, config), config)
        return

    try:
        route = load_route(args.input)
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read input file (permission denied): {args.input}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except ParseError as e:
        logger.error(f"Invalid encoded path: {e}")
        sys.exit(1)
    except IsADirectoryError:
        logger.error(f"Input is a directory, not a file: {args.input}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8 text: {e}")
        sys.exit(1)
    logger.info(f"Loaded route with {len(route)} points")

    if args.command == "info":
        print_route_info(route, config)
        log_metrics(collect_metrics(route, config), config)
        return

    try:
        simplified = route.simplify(config.tolerance)
    except ValueError as e:
        logger.error(f"Cannot simplify route: {e}")
        sys.exit(1)
    logger.info(f"Simplified route from {len(route)} to {len(simplified)} points")
    print(simplified.encode())
    log_metrics(collect_metrics(route, config, simplified), config)


if __name__ == "__main__":
    main()
