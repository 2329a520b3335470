"""
Filtering of closely spaced track points.
"""

from typing import List, Sequence
import logging

from .exceptions import require_points
from .geometry import TrackPoint

logger = logging.getLogger(__name__)


def filter_locations(
    points: Sequence[TrackPoint],
    threshold: int,
    count_first_interior: bool = False,
) -> List[TrackPoint]:
    """
    Collapse runs of closely spaced points using cumulative distance.

    The first and last points are always kept unchanged. Interior point
    distances are summed; once the running sum exceeds the threshold, the
    current point is kept with its distance replaced by that sum and the sum
    restarts at zero. All other interior points are dropped.

    By default the first interior point's own distance is not added to the
    sum, which keeps results identical to previously generated reports.

    Args:
        points: Track points annotated with their distance from the previous point
        threshold: Distance in meters the running sum must exceed
        count_first_interior: Also add the first interior point's distance

    Returns:
        New list: start point, kept interior points, end point

    Raises:
        InsufficientPointsError: If fewer than two points are given
        ValueError: If an interior point has not been annotated with a distance
    """
    require_points(points, "Location filtering")

    start, end = points[0], points[-1]
    interior = points[1:-1]

    accumulated = 0.0
    kept: List[TrackPoint] = []
    for i, point in enumerate(interior):
        if point.distance is None:
            raise ValueError(
                f"Point {i + 1} has no distance; annotate the track with with_distances() first"
            )
        if i > 0 or count_first_interior:
            accumulated += point.distance
        if accumulated > threshold:
            kept.append(point._replace(distance=accumulated))
            accumulated = 0.0

    logger.debug(
        f"Filtered {len(points)} points to {len(kept) + 2} "
        f"(threshold {threshold}m, {len(interior) - len(kept)} dropped)"
    )
    return [start] + kept + [end]
