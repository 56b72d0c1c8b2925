import folium

from bikeflow.session import TrafficSession
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.stations import add_traffic_markers, station_coords, traffic_label


def test_station_coords():
    assert station_coords({"lat": "42.5", "lon": -71}) == (42.5, -71.0)
    assert station_coords({"lat": "n/a", "lon": -71}) is None
    assert station_coords({"lat": None, "lon": -71}) is None
    assert station_coords({"lat": float("nan"), "lon": 0}) is None
    assert station_coords({"lon": 0}) is None


def test_bad_coordinates_skip_marker_but_keep_counts(stations, trips):
    stations[1]["lat"] = "oops"
    session = TrafficSession.from_data(stations, trips)

    m = folium.Map(location=[42.36, -71.09], zoom_start=12)
    drawn = add_traffic_markers(m, session.filtered_stations, session.radius_for)

    assert drawn == 2
    bad = session.filtered_stations[1]
    assert bad["short_name"] == "B32006"
    assert bad["total_traffic"] == 3


def test_traffic_label():
    s = {"departures": 4, "arrivals": 1, "total_traffic": 5}
    assert traffic_label(s) == "5 trips (4 departures, 1 arrivals)"


def test_render_document(stations, trips):
    session = TrafficSession.from_data(stations, trips)
    html = render_map_document(session, title="Traffic")

    assert "circleMarker" in html
    assert "time-slider" in html
    assert "map-legend" in html
    assert "(any time)" in html
    assert "4 trips (2 departures, 2 arrivals)" in html


def test_render_document_with_filter(stations, trips):
    session = TrafficSession.from_data(stations, trips)
    session.set_time_filter(485)
    html = render_map_document(session)

    assert "8:05 AM" in html
    assert 'value="485"' in html


def test_title_is_escaped(stations, trips):
    session = TrafficSession.from_data(stations, trips)
    html = render_map_document(session, title="Bikes <3 & more")

    assert 'id="map-title"' in html
    assert "Bikes &lt;3 &amp; more" in html


def test_no_title_element_without_title(stations, trips):
    session = TrafficSession.from_data(stations, trips)
    assert 'id="map-title"' not in render_map_document(session)
