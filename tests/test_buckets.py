from datetime import datetime

from bikeflow.traffic.buckets import MINUTES_PER_DAY, build_buckets, minutes_since_midnight
from conftest import make_trip


def test_minutes_since_midnight_truncates_seconds():
    assert minutes_since_midnight(datetime(2024, 3, 7, 0, 0, 59, 999999)) == 0
    assert minutes_since_midnight(datetime(2024, 3, 7, 13, 45, 30)) == 825
    assert minutes_since_midnight(datetime(2024, 3, 31, 23, 59, 59)) == 1439


def test_minutes_ignore_date():
    a = datetime(2024, 3, 1, 7, 15)
    b = datetime(2024, 3, 28, 7, 15, 42)
    assert minutes_since_midnight(a) == minutes_since_midnight(b)


def test_trip_minute_properties(trips):
    for t in trips:
        assert 0 <= t.start_minute < MINUTES_PER_DAY
        assert 0 <= t.end_minute < MINUTES_PER_DAY
    assert trips[3].start_minute == 1439
    assert trips[3].end_minute == 10


def test_bucket_arrays_have_fixed_length():
    buckets = build_buckets([])
    assert len(buckets.departures) == MINUTES_PER_DAY
    assert len(buckets.arrivals) == MINUTES_PER_DAY
    assert len(buckets) == 0


def test_every_trip_in_exactly_one_slot_per_axis(trips):
    buckets = build_buckets(trips)

    assert buckets.trip_count("departures") == len(trips)
    assert buckets.trip_count("arrivals") == len(trips)

    for t in trips:
        dep_slots = [i for i, b in enumerate(buckets.departures) if any(x is t for x in b)]
        arr_slots = [i for i, b in enumerate(buckets.arrivals) if any(x is t for x in b)]
        assert dep_slots == [t.start_minute]
        assert arr_slots == [t.end_minute]


def test_bucket_keeps_input_order():
    first = make_trip("A", "B", "08:05", "09:00", "first")
    second = make_trip("C", "D", "08:05", "09:00", "second")
    buckets = build_buckets([first, second])

    assert [t.ride_id for t in buckets.departures[485]] == ["first", "second"]
    assert [t.ride_id for t in buckets.arrivals[540]] == ["first", "second"]


def test_trip_minutes_use_shared_rule():
    from bikeflow.traffic.types import minutes_since_midnight as rule

    t = make_trip("A", "B", datetime(2024, 3, 9, 6, 7, 58), datetime(2024, 3, 10, 0, 0, 1))
    assert t.start_minute == rule(t.started_at) == 367
    assert t.end_minute == rule(t.ended_at) == 0
    assert rule is minutes_since_midnight
