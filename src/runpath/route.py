#!/usr/bin/env python3
"""
Route data model tying path operations together.
"""

from typing import List, Optional, TextIO
import logging
import gpxpy
import gpxpy.gpx
from shapely.geometry import LineString

from . import codec
from .geometry import (
    BoundingBox,
    Coordinate,
    Path,
    SHANGHAI_CENTER,
    coords_to_polyline,
    create_transverse_mercator_projection,
)
from .geometry_utils import (
    calculate_bounds,
    calculate_cumulative_distances,
    path_length,
)
from .region import Region, filter_path
from .simplify import DEFAULT_TOLERANCE, simplify_path

logger = logging.getLogger(__name__)


class Route:
    """Represents a coordinate path with memoized geometric operations."""

    def __init__(self, coords: Path):
        """Initializes a Route object.

        Args:
            coords: A sequence of (longitude, latitude) pairs. May be empty.
        """
        self.coords: List[Coordinate] = [Coordinate(lon, lat) for lon, lat in coords]
        self._length: Optional[float] = None
        self._cumulative_distances: Optional[List[float]] = None
        self._linestring: Optional[LineString] = None

    @property
    def length(self) -> float:
        """Great circle length of the route in meters."""
        if self._length is None:
            self._length = path_length(self.coords)
        return self._length

    @property
    def cumulative_distances(self) -> List[float]:
        """Cumulative distance in meters at each route point."""
        if self._cumulative_distances is None:
            self._cumulative_distances = calculate_cumulative_distances(self.coords)
        return self._cumulative_distances

    def get_bounds(self, default_center: Coordinate = SHANGHAI_CENTER) -> BoundingBox:
        """
        Get the bounding box of this route.

        Args:
            default_center: Point to degenerate to when the route is empty

        Returns:
            BoundingBox in decimal degrees
        """
        return calculate_bounds(self.coords, default_center)

    @property
    def linestring(self) -> LineString:
        """
        LineString in a transverse mercator projection centered on the route.

        Raises:
            ValueError: If the route has fewer than two points
        """
        if self._linestring is None:
            projection = create_transverse_mercator_projection(self.get_bounds())
            self._linestring = coords_to_polyline(self.coords, projection)
        return self._linestring

    @property
    def projected_length(self) -> float:
        """Planar length in meters of the projected route (0.0 if too short)."""
        if len(self.coords) < 2:
            return 0.0
        return self.linestring.length

    def simplify(self, tolerance: float = DEFAULT_TOLERANCE) -> "Route":
        """Return a new Route simplified with Douglas-Peucker."""
        simplified = Route(simplify_path(self.coords, tolerance))
        logger.debug(
            f"Route simplified from {len(self)} to {len(simplified)} points"
        )
        return simplified

    def within(self, region: Region) -> List[Coordinate]:
        """Return the route points that fall inside region."""
        return filter_path(region, self.coords)

    def encode(self) -> str:
        """Encode this route in the "lon,lat;..." text format."""
        return codec.encode(self.coords)

    @classmethod
    def decode(cls, text: str) -> "Route":
        """
        Build a route from its text encoding.

        Raises:
            ParseError: If text is malformed
        """
        return cls(codec.decode(text))

    @classmethod
    def from_gpx(cls, file_input: TextIO) -> "Route":
        """
        Parse GPX data and concatenate all tracks/segments into a single route.

        GPX files with no track points fall back to their route points.

        Args:
            file_input: File-like object containing GPX data

        Returns:
            Route object representing the concatenated route

        Raises:
            gpxpy.gpx.GPXException: If GPX data is malformed.
        """
        gpx_data = gpxpy.parse(file_input)

        coords = []

        for track in gpx_data.tracks:
            for segment in track.segments:
                for point in segment.points:
                    coords.append(Coordinate(point.longitude, point.latitude))

        if not coords:
            for gpx_route in gpx_data.routes:
                for point in gpx_route.points:
                    coords.append(Coordinate(point.longitude, point.latitude))

        route = cls(coords)

        logger.debug(f"Parsed {len(route.coords)} points from GPX data")

        return route

    @classmethod
    def from_file(cls, filename: str) -> "Route":
        """
        Load a route from a GPX file or a file holding an encoded path.

        Files ending in .gpx (case-insensitive) are parsed as GPX; anything
        else is read as encoded text.

        Args:
            filename: Path to the input file

        Returns:
            Route object representing the file's coordinates

        Raises:
            FileNotFoundError: If file doesn't exist.
            PermissionError: If file can't be read.
            gpxpy.gpx.GPXException: If GPX file is malformed.
            ParseError: If an encoded file is malformed.
        """
        logger.debug(f"Reading route file: {filename}")
        with open(filename, "r", encoding="utf-8") as f:
            if filename.lower().endswith(".gpx"):
                return cls.from_gpx(f)
            return cls.decode(f.read().strip())

    def __len__(self) -> int:
        """Return number of points in route."""
        return len(self.coords)

    def __getitem__(self, index):
        """Allow indexing into route points."""
        return self.coords[index]

    def __iter__(self):
        """Allow iteration over route points."""
        return iter(self.coords)
