# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.traffic.scale import COLOR_ARRIVALS, COLOR_BALANCED, COLOR_DEPARTURES, COLOR_NO_DATA

LEGEND_ROWS = [
    (COLOR_DEPARTURES, "more departures"),
    (COLOR_BALANCED, "balanced"),
    (COLOR_ARRIVALS, "more arrivals"),
    (COLOR_NO_DATA, "no trips"),
]


def build_legend_widget():
    """
    Floating flow legend, pinned above the time slider.
    """
    rows = "".join(
        f'<div><span class="swatch" style="background:{color}"></span>{text}</div>'
        for color, text in LEGEND_ROWS
    )

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: fixed;
  left: 16px;
  bottom: 110px;
  z-index: 1200;
  background: #fff;
  padding: 8px 12px;
  border-radius: 8px;
  font: 12px sans-serif;
  line-height: 1.6;
}}
#map-legend .swatch {{
  display: inline-block;
  width: 10px;
  height: 10px;
  margin-right: 6px;
  border-radius: 50%;
  opacity: 0.8;
}}
</style>
<div id="map-legend"><b>Traffic flow</b>{rows}</div>
"""
    )
