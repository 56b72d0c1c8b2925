import os

from bikeflow.session import load_session
from bikeflow.util.stations import DEFAULT_STATIONS_URL
from bikeflow.util.trips import DEFAULT_TRIPS_URL
from bikeflow.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", DEFAULT_STATIONS_URL)
TRIPS = os.environ.get("TRIPS_CSV", DEFAULT_TRIPS_URL)


def main():
  session = load_session(STATIONS, TRIPS)

  serve_traffic_map(
      session=session,
      host=os.environ.get("HOST", "127.0.0.1"),
      port=int(os.environ.get("PORT", "8080")),
      debug=os.environ.get("DEBUG", "") == "1",
      title="Bluebikes Traffic by Time of Day",
  )


if __name__ == "__main__":
  main()
