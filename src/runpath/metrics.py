"""
Module for collecting and logging metrics about processed paths.
"""

import logging
from typing import NamedTuple, Optional

from .config import RunpathConfig
from .route import Route

logger = logging.getLogger(__name__)


class PathMetrics(NamedTuple):
    """Container for path metrics data."""

    point_count: int
    length_m: float
    inside_region: int
    simplified_count: Optional[int] = None


def collect_metrics(
    route: Route, config: RunpathConfig, simplified: Optional[Route] = None
) -> PathMetrics:
    """
    Collect metrics for a route.

    Args:
        route: Route being processed
        config: RunpathConfig holding the reference region
        simplified: Simplified version of route, if one was produced

    Returns:
        PathMetrics for the route
    """
    return PathMetrics(
        point_count=len(route),
        length_m=route.length,
        inside_region=len(route.within(config.region)),
        simplified_count=len(simplified) if simplified is not None else None,
    )


def log_metrics(metrics: PathMetrics, config: RunpathConfig) -> None:
    """
    Log collected metrics as key=value lines.

    Args:
        metrics: PathMetrics to log
        config: RunpathConfig; nothing is logged unless metrics is enabled
    """
    if not config.metrics:
        return

    logger.debug("=== RUNPATH_METRICS ===")
    logger.debug(f"point_count={metrics.point_count}")
    logger.debug(f"length_m={metrics.length_m:.3f}")
    logger.debug(f"inside_region[{config.region.name}]={metrics.inside_region}")
    if metrics.simplified_count is not None:
        logger.debug(f"simplified_count={metrics.simplified_count}")
        logger.debug(
            f"points_removed={metrics.point_count - metrics.simplified_count}"
        )
    logger.debug("=== END_RUNPATH_METRICS ===")
