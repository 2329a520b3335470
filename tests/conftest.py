import json
import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers that setup_logging attaches to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def write_track(tmp_path):
    """Write a list of (longitude, latitude) pairs as a JSON track file."""

    def _write(coords, name="data.json"):
        path = tmp_path / name
        path.write_text(
            json.dumps([{"longitude": lon, "latitude": lat} for lon, lat in coords]),
            encoding="utf-8",
        )
        return path

    return _write
