"""
Core coordinate types and projection helpers.

This module defines the value types shared by every other module
(Coordinate, BoundingBox) and helpers for turning a coordinate sequence
into a Shapely LineString in a local Transverse Mercator projection.
"""

from typing import List, Optional, Sequence, Tuple, NamedTuple
from shapely.geometry import LineString
import pyproj


class Coordinate(NamedTuple):
    """A geographic coordinate in decimal degrees, longitude first."""

    longitude: float
    latitude: float


class BoundingBox(NamedTuple):
    """Axis-aligned bounding box in decimal degrees."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.min_lon + self.max_lon) / 2.0, (self.min_lat + self.max_lat) / 2.0
        )


# Any (lon, lat) pair is accepted where a Coordinate is expected.
Path = Sequence[Tuple[float, float]]

SHANGHAI_CENTER = Coordinate(121.4737, 31.2304)


def create_transverse_mercator_projection(bbox: BoundingBox) -> pyproj.Proj:
    """
    Create a custom transverse mercator projection centered on the given bounding box.

    Args:
        bbox: BoundingBox in decimal degrees

    Returns:
        pyproj.Proj object for the custom projection
    """
    center = bbox.center

    proj_string = (
        f"+proj=tmerc +lat_0={center.latitude} +lon_0={center.longitude} "
        f"+k=1 +x_0=0 +y_0=0 +datum=WGS84 +units=m +no_defs"
    )
    return pyproj.Proj(proj_string)


def coords_to_polyline(
    coords: Path, projection: Optional[pyproj.Proj] = None
) -> LineString:
    """
    Convert a list of (longitude, latitude) pairs to a Shapely LineString.

    Args:
        coords: Sequence of (longitude, latitude) pairs
        projection: Optional pyproj.Proj object for coordinate transformation.
                   If None, uses lon/lat coordinates directly.

    Returns:
        LineString object in projected coordinates if projection is provided,
        otherwise in geographic coordinates

    Raises:
        ValueError: If coords has fewer than 2 points
    """
    if len(coords) < 2:
        raise ValueError("At least two coordinates are required to create a LineString.")

    coord_tuples: List[Tuple[float, float]] = [(lon, lat) for lon, lat in coords]

    if projection is not None:
        lons = [c[0] for c in coord_tuples]
        lats = [c[1] for c in coord_tuples]
        x_coords, y_coords = projection(lons, lats)
        return LineString(list(zip(x_coords, y_coords)))

    return LineString(coord_tuples)
