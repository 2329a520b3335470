#!/usr/bin/env python3
"""
Track data model: loading recorded points and annotating distances.
"""

from typing import Any, List, TextIO, Tuple
import json
import logging
import math
import numbers
import os
import gpxpy
import gpxpy.gpx

from .exceptions import TrackParseError
from .geometry import TrackPoint, haversine_distance

logger = logging.getLogger(__name__)


def _parse_coordinate(entry: Any, field: str, index: int) -> float:
    """Extract a numeric coordinate field from a raw JSON point."""
    if field not in entry:
        raise TrackParseError(f"missing '{field}' field", index)
    value = entry[field]
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TrackParseError(
            f"'{field}' must be a number, got {type(value).__name__}", index
        )
    if not math.isfinite(value):
        raise TrackParseError(f"'{field}' must be finite, got {value}", index)
    return float(value)


def _reject_constant(name: str) -> float:
    """Refuse the non-standard NaN and Infinity tokens json accepts by default."""
    raise TrackParseError(f"Invalid JSON: non-standard constant '{name}'")


class Track:
    """Represents an ordered sequence of recorded track points."""

    def __init__(self, points: List[TrackPoint]):
        """Initializes a Track object.

        Args:
            points: TrackPoint objects in recording order.
        """
        self.points = points

    def get_bbox(self) -> Tuple[float, float, float, float]:
        """
        Get the bounding box of this track.

        Returns:
            Tuple of (south, west, north, east) in decimal degrees

        Raises:
            ValueError: If the track has no points
        """
        if not self.points:
            raise ValueError("Cannot compute bounding box of an empty track")

        latitudes = [point.latitude for point in self.points]
        longitudes = [point.longitude for point in self.points]

        return (min(latitudes), min(longitudes), max(latitudes), max(longitudes))

    def with_distances(self) -> "Track":
        """
        Annotate every point with its distance from the preceding point.

        The first point's distance is 0. Coordinates are left untouched.

        Returns:
            A new Track whose points carry their distance in meters
        """
        annotated: List[TrackPoint] = []
        for i, point in enumerate(self.points):
            if i == 0:
                distance = 0.0
            else:
                distance = haversine_distance(self.points[i - 1], point)
            annotated.append(point._replace(distance=distance))

        logger.debug(f"Annotated distances for {len(annotated)} points")
        return Track(annotated)

    def total_distance(self) -> float:
        """Sum of the annotated point distances in meters."""
        return sum(point.distance or 0.0 for point in self.points)

    @classmethod
    def from_json(cls, file_input: TextIO) -> "Track":
        """
        Parse a JSON array of {longitude, latitude} objects into a track.

        Args:
            file_input: File-like object containing JSON data

        Returns:
            Track object with unannotated points

        Raises:
            TrackParseError: If the document is malformed or a point is invalid.
        """
        try:
            raw = json.load(file_input, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise TrackParseError(f"Invalid JSON: {e}") from e

        if not isinstance(raw, list):
            raise TrackParseError(
                f"Expected a JSON array of points, got {type(raw).__name__}"
            )
        if not raw:
            raise TrackParseError("Track contains no points")

        points = []
        for i, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise TrackParseError(
                    f"expected an object, got {type(entry).__name__}", i
                )
            points.append(
                TrackPoint(
                    longitude=_parse_coordinate(entry, "longitude", i),
                    latitude=_parse_coordinate(entry, "latitude", i),
                )
            )

        logger.debug(f"Parsed {len(points)} points from JSON")
        return cls(points)

    @classmethod
    def from_gpx(cls, file_input: TextIO) -> "Track":
        """
        Parse GPX file and concatenate all tracks/segments into a single track.

        Args:
            file_input: File-like object containing GPX data

        Returns:
            Track object with unannotated points

        Raises:
            TrackParseError: If the GPX file contains no track points.
            gpxpy.gpx.GPXException: If GPX file is malformed.
        """
        gpx_data = gpxpy.parse(file_input)

        points = []
        for track in gpx_data.tracks:
            for segment in track.segments:
                for point in segment.points:
                    points.append(
                        TrackPoint(longitude=point.longitude, latitude=point.latitude)
                    )

        if not points:
            raise TrackParseError("GPX file contains no track points")

        logger.debug(f"Parsed {len(points)} track points from GPX file")
        return cls(points)

    @classmethod
    def from_file(cls, filename: str) -> "Track":
        """
        Load a track from a JSON or GPX file, chosen by file extension.

        Args:
            filename: Path to the track file

        Returns:
            Track object with unannotated points

        Raises:
            FileNotFoundError: If file doesn't exist.
            PermissionError: If file can't be read.
            IsADirectoryError: If filename names a directory.
            TrackParseError: If the content is not a valid track.
            gpxpy.gpx.GPXException: If a GPX file is malformed.
        """
        logger.debug(f"Reading track file: {filename}")
        extension = os.path.splitext(filename)[1].lower()
        with open(filename, "r", encoding="utf-8") as f:
            try:
                if extension == ".gpx":
                    return cls.from_gpx(f)
                return cls.from_json(f)
            except UnicodeDecodeError as e:
                raise TrackParseError(f"File is not valid UTF-8: {e}") from e

    def __len__(self) -> int:
        """Return number of points in track."""
        return len(self.points)

    def __getitem__(self, index):
        """Allow indexing into points."""
        return self.points[index]

    def __iter__(self):
        """Allow iteration over points."""
        return iter(self.points)
