#!/usr/bin/env python3
"""
Distance and bounding box calculations for coordinate paths.
"""

from typing import List
import logging
import math

from .geometry import BoundingBox, Coordinate, Path, SHANGHAI_CENTER

logger = logging.getLogger(__name__)

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371000.0


def haversine_distance(coord1, coord2) -> float:
    """
    Calculate the great circle distance between two coordinates.

    NaN components propagate to a NaN result.

    Args:
        coord1: First (longitude, latitude) pair
        coord2: Second (longitude, latitude) pair

    Returns:
        Distance in meters
    """
    lon1, lat1 = coord1
    lon2, lat2 = coord2

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push a just past 1 for near-antipodal points
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_cumulative_distances(path: Path) -> List[float]:
    """
    Calculate cumulative distances along a path.

    Args:
        path: Sequence of (longitude, latitude) pairs

    Returns:
        List of cumulative distances in meters, with same length as path
    """
    if not path:
        return []

    cumulative_distances = [0.0]

    for i in range(1, len(path)):
        segment_distance = haversine_distance(path[i - 1], path[i])
        cumulative_distances.append(cumulative_distances[-1] + segment_distance)

    return cumulative_distances


def path_length(path: Path) -> float:
    """Total length of a path in meters (0.0 for fewer than two points)."""
    total = 0.0
    for i in range(1, len(path)):
        total += haversine_distance(path[i - 1], path[i])
    return total


def calculate_bounds(
    path: Path, default_center: Coordinate = SHANGHAI_CENTER
) -> BoundingBox:
    """
    Calculate the bounding box of a path in a single pass.

    Args:
        path: Sequence of (longitude, latitude) pairs
        default_center: Point used for both corners when path is empty

    Returns:
        BoundingBox covering every coordinate in path
    """
    if not path:
        lon, lat = default_center
        return BoundingBox(lon, lat, lon, lat)

    min_lon = max_lon = path[0][0]
    min_lat = max_lat = path[0][1]

    for lon, lat in path:
        if lon < min_lon:
            min_lon = lon
        elif lon > max_lon:
            max_lon = lon

        if lat < min_lat:
            min_lat = lat
        elif lat > max_lat:
            max_lat = lat

    logger.debug(
        f"Bounding box for {len(path)} points: "
        f"({min_lon:.6f}, {min_lat:.6f}, {max_lon:.6f}, {max_lat:.6f})"
    )
    return BoundingBox(min_lon, min_lat, max_lon, max_lat)
