# bikeflow/traffic/buckets.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from bikeflow.traffic.types import Trip, minutes_since_midnight

MINUTES_PER_DAY = 1440


def _empty_slots() -> List[List[Trip]]:
    return [[] for _ in range(MINUTES_PER_DAY)]


@dataclass
class MinuteBuckets:
    """
    departures[m]: trips whose started_at falls in minute m
    arrivals[m]:   trips whose ended_at falls in minute m
    """
    departures: List[List[Trip]] = field(default_factory=_empty_slots)
    arrivals: List[List[Trip]] = field(default_factory=_empty_slots)

    def trip_count(self, axis: str = "departures") -> int:
        slots = self.departures if axis == "departures" else self.arrivals
        return sum(len(b) for b in slots)

    def __len__(self) -> int:
        return self.trip_count("departures")


def build_buckets(trips: Iterable[Trip]) -> MinuteBuckets:
    buckets = MinuteBuckets()

    for trip in trips:
        buckets.departures[minutes_since_midnight(trip.started_at)].append(trip)
        buckets.arrivals[minutes_since_midnight(trip.ended_at)].append(trip)

    return buckets
