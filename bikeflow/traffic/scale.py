# bikeflow/traffic/scale.py
from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

from bikeflow.traffic.window import DISABLED

RADIUS_RANGE_ALL = (3.0, 25.0)
RADIUS_RANGE_FILTERED = (3.0, 50.0)

COLOR_DEPARTURES = "#4682b4"  # steelblue
COLOR_ARRIVALS = "#ff8c00"    # darkorange
COLOR_BALANCED = "#a2875a"
COLOR_NO_DATA = "#999999"


def radius_range(time_filter: int) -> Tuple[float, float]:
    # a narrow time window has far fewer trips, so markers are allowed to grow more
    return RADIUS_RANGE_ALL if time_filter == DISABLED else RADIUS_RANGE_FILTERED


def radius_scale(
    filtered_stations: List[Dict[str, Any]],
    time_filter: int,
) -> Callable[[float], float]:
    """
    Square-root scale: total_traffic in [0, max] -> radius in radius_range().
    With no traffic anywhere every station gets the smallest radius.
    """
    r0, r1 = radius_range(time_filter)
    max_total = max((int(s.get("total_traffic", 0)) for s in filtered_stations), default=0)

    if max_total <= 0:
        # d3.scaleSqrt would return the range midpoint for a [0, 0] domain;
        # here an all-zero map stays at the smallest radius
        return lambda value: r0

    root_max = math.sqrt(max_total)

    def _scale(value: float) -> float:
        v = max(0.0, float(value))
        return r0 + (r1 - r0) * (math.sqrt(v) / root_max)

    return _scale


def departure_ratio(station: Dict[str, Any]) -> float | None:
    total = int(station.get("total_traffic", 0))
    if total == 0:
        return None
    return int(station.get("departures", 0)) / total


def station_flow(ratio: float | None) -> float | None:
    """
    Quantize a departure ratio into 0 (mostly arrivals), 0.5 (balanced)
    or 1 (mostly departures).
    """
    if ratio is None:
        return None
    if ratio < 1 / 3:
        return 0.0
    if ratio < 2 / 3:
        return 0.5
    return 1.0


def flow_color(flow: float | None) -> str:
    if flow is None:
        return COLOR_NO_DATA
    if flow == 1.0:
        return COLOR_DEPARTURES
    if flow == 0.0:
        return COLOR_ARRIVALS
    return COLOR_BALANCED
