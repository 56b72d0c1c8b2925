# bikeflow/traffic/window.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.traffic.types import Trip

DISABLED = -1
WINDOW_RADIUS = 60


def validate_time_filter(value) -> int:
    """
    Coerce a slider value to an int filter: -1 (show all) or a minute of day.
    """
    try:
        minute = int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"time filter must be a number, got {value!r}")

    if minute != DISABLED and not (0 <= minute < MINUTES_PER_DAY):
        raise ValueError(
            f"time filter must be {DISABLED} or in [0, {MINUTES_PER_DAY - 1}], got {minute}"
        )
    return minute


def window_bounds(center: int, radius: int = WINDOW_RADIUS) -> Tuple[int, int]:
    """
    Returns (min_minute, max_minute) for a circular window around center.
    min is inclusive, max is exclusive, so radius=60 covers 120 buckets.
    """
    radius = int(radius)
    if not (1 <= radius < MINUTES_PER_DAY // 2):
        raise ValueError(f"radius must be in [1, {MINUTES_PER_DAY // 2 - 1}], got {radius}")

    min_minute = (center - radius + MINUTES_PER_DAY) % MINUTES_PER_DAY
    max_minute = (center + radius) % MINUTES_PER_DAY
    return min_minute, max_minute


def _flatten(slots: Sequence[List[Trip]]) -> List[Trip]:
    return [trip for bucket in slots for trip in bucket]


def select_trips(
    slots: Sequence[List[Trip]],
    center: int,
    radius: int = WINDOW_RADIUS,
) -> List[Trip]:
    """
    Flatten the buckets inside the window around `center`.

    slots: one bucket axis (MinuteBuckets.departures or .arrivals)
    center == DISABLED returns every trip without any window math.
    Order is bucket index, then insertion order inside a bucket.
    """
    if center == DISABLED:
        return _flatten(slots)

    min_minute, max_minute = window_bounds(center, radius)

    if min_minute > max_minute:
        # straddles midnight
        return _flatten(slots[min_minute:]) + _flatten(slots[:max_minute])
    return _flatten(slots[min_minute:max_minute])
