from dataclasses import dataclass


@dataclass
class TrackStatsConfig:
    """Configuration defaults for the trackstats CLI."""

    input_file: str = "data.json"
    threshold: int = 5
    count_first_interior: bool = False
    log_level: str = "WARNING"
    metrics: bool = False
