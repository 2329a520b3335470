"""
Module for collecting and logging summary metrics of a track.
"""

import argparse
import logging
from typing import List, NamedTuple

from .centroid import simple_centroid, vector_centroid
from .extremes import find_extremes
from .filtering import filter_locations
from .geometry import Centroid, TrackPoint, haversine_distance
from .track import Track

logger = logging.getLogger(__name__)


class TrackSummary(NamedTuple):
    """Container for the statistics of a raw and filtered track."""

    threshold: int
    raw_count: int
    raw_distance: float
    filtered_count: int
    filtered_distance: float
    centroid: Centroid
    simple_centroid: Centroid
    extremes: List[TrackPoint]


def summarize_track(
    track: Track, threshold: int = 5, count_first_interior: bool = False
) -> TrackSummary:
    """
    Annotate, filter and summarize a track.

    Args:
        track: Track as loaded from file; distances are computed here
        threshold: Filter threshold in meters
        count_first_interior: Passed through to the location filter

    Returns:
        TrackSummary for the raw and filtered track

    Raises:
        InsufficientPointsError: If the track has fewer than two points
    """
    annotated = track.with_distances()
    filtered = filter_locations(
        annotated.points, threshold, count_first_interior=count_first_interior
    )

    summary = TrackSummary(
        threshold=threshold,
        raw_count=len(annotated),
        raw_distance=annotated.total_distance(),
        filtered_count=len(filtered),
        filtered_distance=Track(filtered).total_distance(),
        centroid=vector_centroid(filtered),
        simple_centroid=simple_centroid(filtered),
        extremes=find_extremes(filtered),
    )

    logger.info(
        f"Track of {summary.raw_count} points ({summary.raw_distance:.1f}m) "
        f"filtered to {summary.filtered_count} points"
    )
    return summary


def log_metrics(summary: TrackSummary, args: argparse.Namespace) -> None:
    """
    Log structured metrics for the summarized track.

    Args:
        summary: TrackSummary to report
        args: argparse.Namespace object containing settings like metrics flag
    """
    if not args.metrics:
        return

    centroid_spread = haversine_distance(summary.centroid, summary.simple_centroid)

    logger.debug("=== TRACKSTATS_METRICS ===")
    logger.debug(f"threshold={summary.threshold}")
    logger.debug(f"raw_point_count={summary.raw_count}")
    logger.debug(f"raw_distance={summary.raw_distance:.1f}")
    logger.debug(f"filtered_point_count={summary.filtered_count}")
    logger.debug(f"filtered_distance={summary.filtered_distance:.1f}")
    logger.debug(f"dropped_point_count={summary.raw_count - summary.filtered_count}")
    logger.debug(
        f"vector_centroid={summary.centroid.longitude},{summary.centroid.latitude}"
    )
    logger.debug(
        f"simple_centroid={summary.simple_centroid.longitude},{summary.simple_centroid.latitude}"
    )
    logger.debug(f"centroid_spread={centroid_spread:.1f}")
    logger.debug(f"extreme_point_count={len(summary.extremes)}")
    logger.debug("=== END_TRACKSTATS_METRICS ===")
