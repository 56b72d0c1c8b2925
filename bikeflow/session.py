# bikeflow/session.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from colorama import Fore, Style

from bikeflow.traffic.aggregate import aggregate_traffic
from bikeflow.traffic.buckets import MinuteBuckets, build_buckets
from bikeflow.traffic.scale import radius_scale
from bikeflow.traffic.types import Trip
from bikeflow.traffic.window import DISABLED, WINDOW_RADIUS, select_trips, validate_time_filter
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips


def format_time(minutes: int) -> str:
    """
    Slider label, e.g. 0 -> "12:00 AM", 810 -> "1:30 PM". Empty when disabled.
    """
    if minutes == DISABLED:
        return ""
    hour, minute = divmod(int(minutes), 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"


@dataclass
class TrafficSession:
    """
    Everything one map viewer needs:
      - stations / trips: loaded once, never mutated
      - buckets: built once from trips
      - time_filter, filtered_stations, scale: replaced on every set_time_filter()
    """
    stations: List[Dict[str, Any]]
    trips: List[Trip]
    buckets: MinuteBuckets
    window_radius: int = WINDOW_RADIUS
    time_filter: int = DISABLED
    filtered_stations: List[Dict[str, Any]] = field(default_factory=list)
    scale: Optional[Callable[[float], float]] = field(default=None, repr=False)

    @classmethod
    def from_data(cls, stations, trips, *, window_radius: int = WINDOW_RADIUS) -> "TrafficSession":
        trips = list(trips)
        session = cls(
            stations=list(stations),
            trips=trips,
            buckets=build_buckets(trips),
            window_radius=window_radius,
        )
        session.set_time_filter(DISABLED)
        return session

    def set_time_filter(self, value) -> List[Dict[str, Any]]:
        minute = validate_time_filter(value)

        departures = select_trips(self.buckets.departures, minute, self.window_radius)
        arrivals = select_trips(self.buckets.arrivals, minute, self.window_radius)

        self.time_filter = minute
        self.filtered_stations = aggregate_traffic(self.stations, departures, arrivals)
        self.scale = radius_scale(self.filtered_stations, minute)
        return self.filtered_stations

    def radius_for(self, total_traffic: float) -> float:
        return self.scale(total_traffic)

    @property
    def time_label(self) -> str:
        return format_time(self.time_filter)


def load_session(stations_source: str | Path | dict, trips_source: str | Path) -> TrafficSession:
    """
    Load both feeds, then bucket. If either load raises, nothing is built.
    """
    stations = load_stations(stations_source)
    trips = load_trips(trips_source)

    print(f"{Fore.CYAN}Bucketing {len(trips):,} trips by minute of day…{Style.RESET_ALL}")
    session = TrafficSession.from_data(stations, trips)

    print(
        f"{Fore.GREEN}Session ready: {len(session.stations):,} stations, "
        f"{len(session.trips):,} trips.{Style.RESET_ALL}"
    )
    return session
