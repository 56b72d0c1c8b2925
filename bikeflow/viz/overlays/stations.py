# bikeflow/viz/overlays/stations.py
import math

import folium

from bikeflow.traffic.scale import departure_ratio, flow_color, station_flow


def station_coords(s):
    """
    (lat, lon) as floats, or None when either value is not numeric.
    """
    try:
        lat = float(s["lat"])
        lon = float(s["lon"])
    except (KeyError, TypeError, ValueError):
        return None
    if math.isnan(lat) or math.isnan(lon):
        return None
    return lat, lon


def traffic_label(s):
    return f"{s['total_traffic']} trips ({s['departures']} departures, {s['arrivals']} arrivals)"


def add_traffic_markers(m, filtered_stations, radius):
    """
    Draw one circle per station, sized by total traffic and coloured by the
    departure/arrival balance.

    filtered_stations: output of aggregate_traffic()
    radius: callable total_traffic -> pixel radius

    Returns the number of markers drawn. Stations with unusable coordinates
    are left off the map but keep their counts.
    """
    drawn = 0
    for s in filtered_stations:
        coords = station_coords(s)
        if coords is None:
            continue

        color = flow_color(station_flow(departure_ratio(s)))
        name = s.get("name") or s.get("short_name")

        folium.CircleMarker(
            location=list(coords),
            radius=radius(s["total_traffic"]),
            color="white",
            weight=1,
            fill=True,
            fill_color=color,
            fill_opacity=0.6,
            tooltip=traffic_label(s),
            popup=f"<b>{name}</b><br>Station: {s['short_name']}<br>{traffic_label(s)}",
        ).add_to(m)
        drawn += 1

    return drawn
