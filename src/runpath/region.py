#!/usr/bin/env python3
"""
Rectangular regions used as containment predicates.
"""

from dataclasses import dataclass
from typing import List
import logging

from .geometry import BoundingBox, Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """A named axis-aligned rectangle in decimal degrees."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float
    name: str = ""

    def __post_init__(self):
        if self.min_lon > self.max_lon or self.min_lat > self.max_lat:
            raise ValueError(
                f"Region {self.name or '<unnamed>'} has inverted bounds: "
                f"({self.min_lon}, {self.min_lat}, {self.max_lon}, {self.max_lat})"
            )

    @classmethod
    def from_bounds(cls, bbox: BoundingBox, name: str = "") -> "Region":
        """Build a region covering the given bounding box."""
        return cls(bbox.min_lon, bbox.min_lat, bbox.max_lon, bbox.max_lat, name)

    def contains(self, point) -> bool:
        """True if point lies inside the region, edges included."""
        lon, lat = point
        return (
            self.min_lon <= lon <= self.max_lon
            and self.min_lat <= lat <= self.max_lat
        )


SHANGHAI_REGION = Region(
    min_lon=120.8, min_lat=30.7, max_lon=122.2, max_lat=31.9, name="Shanghai"
)


def contains(region: Region, point) -> bool:
    """True if point lies inside region, edges included."""
    return region.contains(point)


def filter_path(region: Region, path: Path) -> List:
    """Return the points of path that lie inside region, in order."""
    inside = [coord for coord in path if region.contains(coord)]
    logger.debug(
        f"{len(inside)}/{len(path)} points inside region {region.name or '<unnamed>'}"
    )
    return inside
