#!/usr/bin/env python3
"""
Synthetic route generation for demos and test fixtures.

Each step turns by a random angle measured from the fixed east axis, so
consecutive headings are independent rather than a persistent random walk.
Degree deltas use fixed meters-per-degree constants with no cos(latitude)
correction on longitude. Both behaviors are kept so that fixtures generated
from a given seed stay reproducible.
"""

from typing import List, Optional, Protocol
import logging
import math
import random

from .geometry import Coordinate, SHANGHAI_CENTER

logger = logging.getLogger(__name__)

METERS_PER_DEGREE_LON = 111320.0
METERS_PER_DEGREE_LAT = 110540.0
MAX_TURN_ANGLE = math.pi / 4


class RandomSource(Protocol):
    """Anything with a random() method returning floats in [0, 1)."""

    def random(self) -> float: ...


def generate_route(
    start=SHANGHAI_CENTER,
    total_distance: float = 5000.0,
    point_count: int = 50,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> List[Coordinate]:
    """
    Generate a synthetic route starting at a given point.

    Args:
        start: First (longitude, latitude) of the route
        total_distance: Nominal route length in meters
        point_count: Number of points to produce, start included
        rng: Random source with a random() method returning floats in [0, 1).
             Takes precedence over seed.
        seed: Seed for a fresh random.Random when rng is not given

    Returns:
        List of exactly max(point_count, 1) coordinates, beginning with start

    Raises:
        ValueError: If total_distance is negative or point_count is not an int
    """
    if isinstance(point_count, bool) or not isinstance(point_count, int):
        raise ValueError(f"point_count must be an integer, got {point_count!r}")
    if total_distance < 0:
        raise ValueError(f"total_distance must be non-negative, got {total_distance}")

    start = Coordinate(*start)
    if point_count <= 1:
        return [start]

    if rng is None:
        rng = random.Random(seed)

    step_distance = total_distance / point_count
    step_lon = step_distance / METERS_PER_DEGREE_LON
    step_lat = step_distance / METERS_PER_DEGREE_LAT

    current_lon, current_lat = start
    coordinates = [start]

    for _ in range(1, point_count):
        angle = (rng.random() * 2.0 - 1.0) * MAX_TURN_ANGLE
        current_lon += step_lon * math.cos(angle)
        current_lat += step_lat * math.sin(angle)
        coordinates.append(Coordinate(current_lon, current_lat))

    logger.debug(
        f"Generated {len(coordinates)} points over {total_distance:.1f}m "
        f"from ({start.longitude:.6f}, {start.latitude:.6f})"
    )
    return coordinates
