# bikeflow/util/stations.py
from __future__ import annotations

import json
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

from colorama import Fore, Style

DEFAULT_STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"


def _is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _read_json(source: str | Path, timeout: int = 30) -> Any:
    if _is_url(source):
        req = urllib.request.Request(
            source,
            headers={"User-Agent": "bikeflow/1.0", "Accept": "application/json"},
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return json.loads(resp.read().decode("utf-8"))

    with open(source) as f:
        return json.load(f)


def load_stations(source: str | Path | dict | list) -> List[Dict[str, Any]]:
    """
    Load bike share stations from a GBFS-style station feed.

    source may be a file path, an http(s) URL, or an already decoded payload
    ({"data": {"stations": [...]}} or a bare list of station dicts).

    Every field of each station is kept; short_name is required because it is
    the key trips are joined on.
    """
    if isinstance(source, (dict, list)):
        raw = source
    else:
        print(f"{Fore.CYAN}Loading station registry from {source}…{Style.RESET_ALL}")
        raw = _read_json(source)

    if isinstance(raw, dict):
        try:
            raw = raw["data"]["stations"]
        except (KeyError, TypeError):
            raise ValueError("station feed must contain data.stations")

    stations = []
    for i, s in enumerate(raw):
        if s.get("short_name") is None:
            raise ValueError(f"station #{i} has no short_name")
        stations.append(dict(s))

    return stations
