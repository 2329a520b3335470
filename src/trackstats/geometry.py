"""
Coordinate records and great-circle distance for track analysis.
"""

from typing import NamedTuple, Optional
import math

# Equatorial radius in kilometers, matching the figures in existing reports
EARTH_RADIUS_KM = 6378.137


class TrackPoint(NamedTuple):
    """A recorded track point with its distance from the previous point."""

    longitude: float
    latitude: float
    distance: Optional[float] = None  # meters, None until annotated


class Centroid(NamedTuple):
    """A representative centre position of a set of track points."""

    longitude: float
    latitude: float


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def distance_between(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Calculate the great-circle distance between two coordinates.

    Args:
        lon1: Longitude of the first coordinate in degrees
        lat1: Latitude of the first coordinate in degrees
        lon2: Longitude of the second coordinate in degrees
        lat2: Latitude of the second coordinate in degrees

    Returns:
        Distance in meters, rounded to one decimal place
    """
    rad_lat1 = math.radians(lat1)
    rad_lat2 = math.radians(lat2)
    dlat = rad_lat1 - rad_lat2
    dlon = math.radians(lon1) - math.radians(lon2)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(dlon / 2) ** 2
    )
    # a can drift slightly above 1 for antipodal points
    s = 2 * math.asin(math.sqrt(min(1.0, a)))

    distance_km = s * EARTH_RADIUS_KM
    return _round_half_up(distance_km * 10000) / 10


def haversine_distance(coord1, coord2) -> float:
    """
    Calculate the great-circle distance between two positions.

    Args:
        coord1: First position (anything with longitude and latitude attributes)
        coord2: Second position

    Returns:
        Distance in meters, rounded to one decimal place
    """
    return distance_between(
        coord1.longitude, coord1.latitude, coord2.longitude, coord2.latitude
    )
