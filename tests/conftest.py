"""Pytest configuration and fixtures."""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure the repo root is importable when running pytest from anywhere
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from bikeflow.traffic.types import Trip  # noqa: E402


def make_trip(start, end, started, ended, ride_id=None):
    """started / ended as "HH:MM" on 2024-03-01, or full datetimes."""
    if isinstance(started, str):
        h, m = map(int, started.split(":"))
        started = datetime(2024, 3, 1, h, m)
    if isinstance(ended, str):
        h, m = map(int, ended.split(":"))
        ended = datetime(2024, 3, 1, h, m)
    return Trip(start, end, started, ended, ride_id)


@pytest.fixture
def stations():
    return [
        {"short_name": "A32000", "name": "Kendall T", "lat": 42.3625, "lon": -71.0843},
        {"short_name": "B32006", "name": "MIT Stata", "lat": "42.3616", "lon": "-71.0907"},
        {"short_name": "C32094", "name": "Central Sq", "lat": 42.3651, "lon": -71.1031},
    ]


@pytest.fixture
def trips():
    return [
        make_trip("A32000", "B32006", "08:05", "08:20", "r1"),
        make_trip("a32000 ", "C32094", "08:05", "08:40", "r2"),
        make_trip("B32006", "A32000", "17:30", "17:45", "r3"),
        make_trip("C32094", "A32000", "23:59", "00:10", "r4"),
        make_trip("ZZZ999", "B32006", "12:00", "12:15", "r5"),
    ]
