# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.traffic.types import Trip

DEFAULT_TRIPS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"

REQUIRED_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]
ID_COLUMNS = ["start_station_id", "end_station_id", "ride_id"]


def load_trips(source: str | Path) -> List[Trip]:
    """
    Loads a Bluebikes-style trips CSV (path or URL) with columns like:

      ride_id, rideable_type, started_at, ended_at,
      start_station_id, end_station_id, ...

    Station ids are read as strings so ids like "A32000" and "0123" survive.
    """
    print(f"{Fore.CYAN}Loading trips from {source}…{Style.RESET_ALL}")
    df = pd.read_csv(source, dtype={c: str for c in ID_COLUMNS})
    return trips_from_frame(df)


def trips_from_rows(rows: Iterable[Dict[str, Any]]) -> List[Trip]:
    rows = list(rows)
    if not rows:
        return []
    return trips_from_frame(pd.DataFrame(rows))


def trips_from_frame(df: pd.DataFrame) -> List[Trip]:
    """
    Convert raw trip rows into Trip records.

    Rows whose started_at / ended_at do not parse are dropped (and counted),
    so a bad row never reaches the minute buckets.
    """
    # Normalize column names (some exports pad them with spaces)
    df = df.rename(columns={c: str(c).strip() for c in df.columns})

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips data missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"]
    out["end_station_id"] = df["end_station_id"]
    # exports mix precisions row to row (".123", ":00", none)
    out["started_at"] = pd.to_datetime(df["started_at"], format="mixed", errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], format="mixed", errors="coerce")
    out["ride_id"] = df["ride_id"] if "ride_id" in df.columns else None

    n_before = len(out)
    out = out.dropna(subset=["started_at", "ended_at"])
    dropped = n_before - len(out)
    if dropped:
        print(
            f"{Fore.YELLOW}Dropped {dropped:,} trips with unparseable timestamps{Style.RESET_ALL}"
        )

    trips = []
    rows = out.itertuples(index=False)
    # small frames (tests, row lists) stay quiet
    for row in tqdm(rows, total=len(out), desc="Building trips", disable=len(out) < 10_000):
        trips.append(
            Trip(
                start_station_id=_as_id(row.start_station_id),
                end_station_id=_as_id(row.end_station_id),
                started_at=row.started_at.to_pydatetime(),
                ended_at=row.ended_at.to_pydatetime(),
                ride_id=_as_id(row.ride_id),
            )
        )

    return trips


def _as_id(value: Any) -> str | None:
    if value is None or pd.isna(value):
        return None
    return str(value)
