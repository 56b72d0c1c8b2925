# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from bikeflow.traffic.types import Trip


def normalize_station_id(value: Any) -> str:
    """
    Join key between trip station ids and station short names.
    The two feeds disagree on casing and padding, so both sides go through here.
    """
    if value is None:
        return ""
    return str(value).strip().upper()


def count_by_station(trips: Iterable[Trip], key: Callable[[Trip], Any]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for trip in trips:
        sid = normalize_station_id(key(trip))
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def aggregate_traffic(
    stations: List[Dict[str, Any]],
    departures: Iterable[Trip],
    arrivals: Iterable[Trip],
) -> List[Dict[str, Any]]:
    """
    One new record per station (same order as `stations`) carrying
    departures, arrivals and total_traffic for the given trip subsets.

    Trip ids that match no station are counted but never surface here.
    """
    dep_counts = count_by_station(departures, lambda t: t.start_station_id)
    arr_counts = count_by_station(arrivals, lambda t: t.end_station_id)

    out = []
    for s in stations:
        sid = normalize_station_id(s.get("short_name"))
        dep = dep_counts.get(sid, 0)
        arr = arr_counts.get(sid, 0)

        station = dict(s)
        station["departures"] = dep
        station["arrivals"] = arr
        station["total_traffic"] = dep + arr
        out.append(station)

    return out
