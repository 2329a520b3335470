#!/usr/bin/env python3
"""
Trackstats - distance, filtering and centroid statistics for recorded tracks.

This package loads a recorded path of longitude/latitude points, drops
closely spaced points, and reports centre points and extreme points.
"""
import importlib.metadata

__version__ = importlib.metadata.version("trackstats")

# Import main classes and functions for public API
from .centroid import simple_centroid, vector_centroid
from .exceptions import InsufficientPointsError, TrackParseError, TrackStatsError
from .extremes import find_extremes
from .filtering import filter_locations
from .geometry import Centroid, TrackPoint, distance_between, haversine_distance
from .metrics import TrackSummary, summarize_track
from .report import format_report
from .track import Track

__all__ = [
    "Centroid",
    "TrackPoint",
    "Track",
    "TrackSummary",
    "TrackStatsError",
    "TrackParseError",
    "InsufficientPointsError",
    "distance_between",
    "haversine_distance",
    "filter_locations",
    "vector_centroid",
    "simple_centroid",
    "find_extremes",
    "summarize_track",
    "format_report",
]
