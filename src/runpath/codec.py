#!/usr/bin/env python3
"""
Text encoding of coordinate paths.

The wire format is "lon,lat" pairs with exactly six fractional digits,
joined by ";" with no whitespace or trailing separator, e.g.
"121.473700,31.230400;121.474100,31.230900".
"""

from typing import List
import logging
import re

from .geometry import Coordinate, Path

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = ";"
VALUE_SEPARATOR = ","

# Plain decimal numbers only: no whitespace, underscores, inf or nan
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class ParseError(ValueError):
    """Raised when a segment of an encoded path cannot be parsed."""

    def __init__(self, index: int, segment: str, reason: str):
        self.index = index
        self.segment = segment
        self.reason = reason
        super().__init__(f"Invalid coordinate segment {index} {segment!r}: {reason}")


def encode(path: Path) -> str:
    """Encode a path as "lon,lat;lon,lat;..." with six decimals per value."""
    return PAIR_SEPARATOR.join(f"{lon:.6f},{lat:.6f}" for lon, lat in path)


def _parse_segment(index: int, segment: str) -> Coordinate:
    tokens = segment.split(VALUE_SEPARATOR)
    if len(tokens) != 2:
        raise ParseError(index, segment, f"expected 2 values, got {len(tokens)}")

    for token in tokens:
        if not NUMBER_PATTERN.fullmatch(token):
            raise ParseError(index, segment, f"{token!r} is not a decimal number")

    return Coordinate(float(tokens[0]), float(tokens[1]))


def decode(text: str) -> List[Coordinate]:
    """
    Parse an encoded path.

    Args:
        text: Encoded path; the empty string decodes to an empty path

    Returns:
        List of Coordinate in encoded order

    Raises:
        ParseError: If any segment does not hold exactly two numbers
    """
    if text == "":
        return []

    path = [
        _parse_segment(i, segment)
        for i, segment in enumerate(text.split(PAIR_SEPARATOR))
    ]
    logger.debug(f"Decoded {len(path)} coordinates")
    return path
