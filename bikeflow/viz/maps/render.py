# bikeflow/viz/maps/render.py
import html

import folium

from bikeflow.viz.overlays.stations import add_traffic_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider

# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415


def _title_element(title):
    return folium.Element(
        f"""
<style>
#map-title {{
  position: fixed;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  z-index: 1300;
  background: #fff;
  padding: 6px 16px;
  border-radius: 999px;
  font: 600 14px sans-serif;
}}
</style>
<div id="map-title">{html.escape(title)}</div>
"""
    )


def render_map_document(session, *, title: str | None = None):
    """
    Full-page Folium document for the session's current time filter.
    Widgets are fixed overlays on top of the map.
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    add_traffic_markers(m, session.filtered_stations, session.radius_for)

    root = m.get_root().html
    root.add_child(build_time_slider(session.time_filter))
    root.add_child(build_legend_widget())
    if title:
        root.add_child(_title_element(title))

    return m.get_root().render()
