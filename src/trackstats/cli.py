#!/usr/bin/env python3
"""
Track statistics tool.
This script loads a recorded track of longitude/latitude points, filters out
closely spaced points, and prints point counts, distance sums, centre points
and extreme points of the track.

Requirements:
    pip install gpxpy shapely

"""

from typing import Optional
import argparse
import logging
import sys
from gpxpy import gpx

from . import __version__
from .config import TrackStatsConfig
from .exceptions import InsufficientPointsError, TrackParseError
from .metrics import log_metrics, summarize_track
from .report import format_report
from .track import Track

# Configure logging
logger = logging.getLogger("trackstats")


def create_argument_parser(
    config: Optional[TrackStatsConfig] = None,
) -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Args:
        config: Defaults for the parser's options

    Returns:
        Configured ArgumentParser instance
    """
    if config is None:
        config = TrackStatsConfig()

    parser = argparse.ArgumentParser(
        description="Track distance, filtering and centroid statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        default=config.input_file,
        help=f"JSON or GPX track file to process (default: {config.input_file})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        default=config.metrics,
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"trackstats {__version__}",
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    """Setup logging configuration."""
    if hasattr(sys.stdout, "reconfigure") and sys.stdout.encoding != "utf-8":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            if hasattr(sys.stderr, "reconfigure") and sys.stderr.encoding != "utf-8":
                sys.stderr.reconfigure(encoding="utf-8")
            logger.debug("Reconfigured stdout and stderr to UTF-8 encoding.")
        except Exception as e:
            logger.debug(f"Could not reconfigure stdout/stderr to UTF-8: {e}")
    level = getattr(logging, args.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def main(argv=None):
    """
    Parses command-line arguments, loads the track file,
    summarizes the track, and prints the report.
    """
    config = TrackStatsConfig()
    parser = create_argument_parser(config)
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args)

    # Load and parse the track file
    try:
        track = Track.from_file(args.filename)
    except FileNotFoundError:
        logger.error(f"Track file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read track file (permission denied): {args.filename}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read track file {args.filename}: {e}")
        sys.exit(1)
    except TrackParseError as e:
        logger.error(f"Invalid track file: {e}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    logger.info(f"Loaded track with {len(track)} points")

    try:
        summary = summarize_track(
            track,
            threshold=config.threshold,
            count_first_interior=config.count_first_interior,
        )
    except InsufficientPointsError as e:
        logger.error(f"Cannot summarize track: {e}")
        sys.exit(1)

    sys.stdout.write(format_report(summary))

    log_metrics(summary, args)


if __name__ == "__main__":
    main()
