import argparse
from dataclasses import dataclass
from typing import Optional

from .geometry import Coordinate, SHANGHAI_CENTER
from .region import Region, SHANGHAI_REGION
from .simplify import DEFAULT_TOLERANCE


@dataclass
class RunpathConfig:
    """Configuration for the runpath CLI."""

    tolerance: float = DEFAULT_TOLERANCE
    default_center: Coordinate = SHANGHAI_CENTER
    region: Region = SHANGHAI_REGION
    total_distance: float = 5000.0
    point_count: int = 50
    seed: Optional[int] = None
    log_level: str = "WARNING"
    metrics: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunpathConfig":
        """Build a config from parsed arguments, keeping defaults for absent ones."""
        config = cls()
        for name in (
            "tolerance",
            "total_distance",
            "point_count",
            "seed",
            "log_level",
            "metrics",
        ):
            value = getattr(args, name, None)
            if value is not None:
                setattr(config, name, value)
        return config
