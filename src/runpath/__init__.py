#!/usr/bin/env python3
"""
Runpath - geometric processing of running routes.

This package provides distance, bounding box, simplification, region
containment, synthetic route generation and text encoding for sequences
of (longitude, latitude) coordinates.
"""
import importlib.metadata

__version__ = importlib.metadata.version("runpath")

# Import main classes for public API
from .geometry import BoundingBox, Coordinate, SHANGHAI_CENTER
from .geometry_utils import calculate_bounds, haversine_distance, path_length
from .simplify import simplify_path
from .region import Region, SHANGHAI_REGION, contains
from .synthesis import generate_route
from .codec import ParseError, decode, encode
from .route import Route

__all__ = [
    "BoundingBox",
    "Coordinate",
    "SHANGHAI_CENTER",
    "calculate_bounds",
    "haversine_distance",
    "path_length",
    "simplify_path",
    "Region",
    "SHANGHAI_REGION",
    "contains",
    "generate_route",
    "ParseError",
    "decode",
    "encode",
    "Route",
]
