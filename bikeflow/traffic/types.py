# bikeflow/traffic/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


def minutes_since_midnight(ts: datetime) -> int:
    """
    Minute of day for a timestamp. Date, seconds and sub-seconds are dropped,
    so every day of the month collapses onto the same 1440 slots.
    """
    return ts.hour * 60 + ts.minute


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime
    ride_id: str | None = None

    @property
    def start_minute(self) -> int:
        return minutes_since_midnight(self.started_at)

    @property
    def end_minute(self) -> int:
        return minutes_since_midnight(self.ended_at)
