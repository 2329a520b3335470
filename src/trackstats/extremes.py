"""
Selection of the outermost points of a track along each axis.
"""

from typing import Dict, List, Sequence
import logging

from .exceptions import require_points
from .geometry import TrackPoint

logger = logging.getLogger(__name__)


def find_extremes(points: Sequence[TrackPoint]) -> List[TrackPoint]:
    """
    Find the points with minimum/maximum longitude and minimum/maximum latitude.

    Results are ordered [min-lon, max-lon, min-lat, max-lat]. Ties are won by
    the earliest point. A point that is extreme along several axes is listed
    once, in the slot where it first appears, so up to four points are
    returned. Each returned point has its distance cleared.

    Args:
        points: Track points to examine

    Returns:
        List of up to four extreme points

    Raises:
        InsufficientPointsError: If fewer than two points are given
    """
    require_points(points, "Extreme point selection")

    longitudes = [point.longitude for point in points]
    latitudes = [point.latitude for point in points]

    indices = [
        longitudes.index(min(longitudes)),
        longitudes.index(max(longitudes)),
        latitudes.index(min(latitudes)),
        latitudes.index(max(latitudes)),
    ]

    # dict preserves the slot of each index's first occurrence
    selected: Dict[int, TrackPoint] = {}
    for index in indices:
        if index not in selected:
            selected[index] = points[index]._replace(distance=None)

    logger.debug(f"Extreme point indices: {indices}")
    return list(selected.values())
