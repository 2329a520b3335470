#!/usr/bin/env python3
"""
Centre point calculations for sets of track points.

Two approximations are provided and reported side by side:

- `vector_centroid` averages unit vectors on the sphere, so it behaves
  correctly across the antimeridian and near the poles.
- `simple_centroid` averages longitude and latitude directly. It is only
  meaningful for tracks spanning less than roughly 400 km.
"""

from typing import Sequence
import logging
import math
from shapely.geometry import MultiPoint

from .exceptions import require_points
from .geometry import Centroid, TrackPoint

logger = logging.getLogger(__name__)


def vector_centroid(points: Sequence[TrackPoint]) -> Centroid:
    """
    Calculate the centre of a set of points by averaging 3D unit vectors.

    Args:
        points: Track points; their distance field is ignored

    Returns:
        Centroid in decimal degrees

    Raises:
        InsufficientPointsError: If fewer than two points are given
    """
    require_points(points, "Vector centroid")

    x = y = z = 0.0
    for point in points:
        lon = math.radians(point.longitude)
        lat = math.radians(point.latitude)
        x += math.cos(lat) * math.cos(lon)
        y += math.cos(lat) * math.sin(lon)
        z += math.sin(lat)

    total = len(points)
    x /= total
    y /= total
    z /= total

    centre_lon = math.atan2(y, x)
    hyp = math.sqrt(x * x + y * y)
    centre_lat = math.atan2(z, hyp)

    centroid = Centroid(
        longitude=math.degrees(centre_lon), latitude=math.degrees(centre_lat)
    )
    logger.debug(
        f"Vector centroid of {total} points: {centroid.longitude:.6f},{centroid.latitude:.6f}"
    )
    return centroid


def simple_centroid(points: Sequence[TrackPoint]) -> Centroid:
    """
    Calculate the planar centre of a set of points (valid below ~400 km extent).

    Raises:
        InsufficientPointsError: If fewer than two points are given
    """
    require_points(points, "Simple centroid")

    centre = MultiPoint([(p.longitude, p.latitude) for p in points]).centroid
    return Centroid(longitude=centre.x, latitude=centre.y)
