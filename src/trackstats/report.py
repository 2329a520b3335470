"""
Text rendering of track summaries.
"""

from typing import List

from .metrics import TrackSummary

LINE_BREAK = "<br>"
INDENT = "&nbsp;" * 4


def format_coordinate(value: float) -> str:
    """Format a coordinate with 14 significant digits."""
    return f"{value:.14g}"


def format_distance(value: float) -> str:
    """Format a distance sum in meters to one decimal place."""
    return f"{value:.1f}"


def format_report(summary: TrackSummary) -> str:
    """
    Render the fixed-format report for a summarized track.

    Args:
        summary: TrackSummary to render

    Returns:
        Report text; every line ends with an HTML line break
    """
    centroid = summary.centroid
    simple = summary.simple_centroid

    lines: List[str] = [
        f"1. Points in track: {summary.raw_count}; "
        f"total distance: {format_distance(summary.raw_distance)} m",
        f"2. Points after filtering (under {summary.threshold} m): "
        f"{summary.filtered_count}; "
        f"total distance: {format_distance(summary.filtered_distance)} m",
        f"3. Centre of the track: "
        f"{format_coordinate(centroid.longitude)},{format_coordinate(centroid.latitude)}"
        f"{LINE_BREAK}{INDENT}(simple average: "
        f"{format_coordinate(simple.longitude)},{format_coordinate(simple.latitude)})",
        "4. Extreme points:",
    ]
    for point in summary.extremes:
        lines.append(
            f"{format_coordinate(point.longitude)},{format_coordinate(point.latitude)}"
        )

    return "".join(line + LINE_BREAK + "\n" for line in lines)
