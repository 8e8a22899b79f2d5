#!/usr/bin/env python3
"""
Douglas-Peucker path simplification.

Distances are measured in raw coordinate degrees, not meters, so the
tolerance must be chosen in degrees as well (0.0001° is roughly 11 m of
latitude). Squared distances are compared against the squared tolerance
to avoid square roots in the inner loop.
"""

from typing import List, Tuple
import logging

from .geometry import Path

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.0001


def squared_distance(p1, p2) -> float:
    """Squared planar distance between two (lon, lat) pairs."""
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return dx * dx + dy * dy


def squared_segment_distance(p, seg_start, seg_end) -> float:
    """
    Squared planar distance from a point to the closest point on a segment.

    The projection of p onto the segment is clamped to the segment's
    endpoints. A zero-length segment degrades to the distance to its
    single point.

    Args:
        p: Point to measure from
        seg_start: Start of the segment
        seg_end: End of the segment

    Returns:
        Squared distance in degrees squared
    """
    x, y = seg_start[0], seg_start[1]
    dx = seg_end[0] - x
    dy = seg_end[1] - y

    if dx != 0 or dy != 0:
        t = ((p[0] - x) * dx + (p[1] - y) * dy) / (dx * dx + dy * dy)

        if t > 1:
            x, y = seg_end[0], seg_end[1]
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = p[0] - x
    dy = p[1] - y
    return dx * dx + dy * dy


def _find_farthest(
    path: Path, first: int, last: int
) -> Tuple[int, float]:
    """Index and squared distance of the interior point farthest from the chord."""
    max_sq_dist = -1.0
    index = first

    for i in range(first + 1, last):
        sq_dist = squared_segment_distance(path[i], path[first], path[last])
        if sq_dist > max_sq_dist:
            index = i
            max_sq_dist = sq_dist

    return index, max_sq_dist


def simplify_path(path: Path, tolerance: float = DEFAULT_TOLERANCE) -> List:
    """
    Simplify a path with the Douglas-Peucker algorithm.

    Sub-ranges are processed from an explicit work stack rather than by
    recursion, so arbitrarily long paths are safe.

    Args:
        path: Sequence of (longitude, latitude) pairs
        tolerance: Maximum deviation in degrees for a point to be dropped

    Returns:
        New list holding a subsequence of path that always includes the
        first and last points

    Raises:
        ValueError: If tolerance is negative
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")

    if len(path) <= 2:
        return list(path)

    sq_tolerance = tolerance * tolerance
    last = len(path) - 1

    keep = [False] * len(path)
    keep[0] = keep[last] = True

    stack: List[Tuple[int, int]] = [(0, last)]
    while stack:
        first, end = stack.pop()
        if end - first < 2:
            continue

        index, max_sq_dist = _find_farthest(path, first, end)

        if max_sq_dist > sq_tolerance:
            keep[index] = True
            stack.append((index, end))
            stack.append((first, index))

    simplified = [coord for coord, kept in zip(path, keep) if kept]

    logger.debug(
        f"Simplified path from {len(path)} to {len(simplified)} points "
        f"(tolerance: {tolerance})"
    )
    return simplified
