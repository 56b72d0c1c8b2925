# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.session import format_time
from bikeflow.traffic.buckets import MINUTES_PER_DAY
from bikeflow.traffic.window import DISABLED


def build_time_slider(time_filter: int, *, key: str = "t"):
    """
    Time-of-day slider:
      - value -1 means "any time" (no filter)
      - 0..1439 is the centre minute of the window
    Releasing the slider reloads the page with ?t=<value>.
    """
    label = format_time(time_filter)
    any_display = "block" if time_filter == DISABLED else "none"

    return folium.Element(
        f"""
<style>
#timeslider {{
  position: fixed;
  left: 50%;
  bottom: 24px;
  transform: translateX(-50%);
  width: min(520px, 90%);
  z-index: 1200;
  background: rgba(255,255,255,0.95);
  padding: 10px 16px;
  border-radius: 12px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}

#timeslider label {{
  display: flex;
  align-items: center;
  gap: 10px;
}}

#timeslider input {{
  flex: 1;
}}

#selected-time {{
  font-weight: 600;
  min-width: 70px;
}}

#any-time {{
  color: #777;
  font-style: italic;
}}
</style>

<div id="timeslider">
  <label>
    Filter by time:
    <input id="time-slider" type="range"
           min="{DISABLED}" max="{MINUTES_PER_DAY - 1}" value="{time_filter}">
  </label>
  <time id="selected-time">{label}</time>
  <em id="any-time" style="display:{any_display};">(any time)</em>
</div>

<script>
function formatMinutes(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + (h < 12 ? " AM" : " PM");
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  slider.addEventListener("input", () => {{
    const v = Number(slider.value);
    selected.textContent = v === {DISABLED} ? "" : formatMinutes(v);
    anyTime.style.display = v === {DISABLED} ? "block" : "none";
  }});

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("{key}", String(slider.value));
    window.location.href = url.toString();
  }});
}});
</script>
"""
    )
