# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.traffic.window import DISABLED, validate_time_filter
from bikeflow.viz.maps.render import render_map_document


def _requested_filter() -> int:
    raw = request.args.get("t", None)
    if raw is None:
        return DISABLED
    try:
        return validate_time_filter(raw)
    except ValueError:
        return DISABLED


def create_app(session, *, title: str | None = None) -> Flask:
    """
    Flask app over one TrafficSession.

    GET /               map page for ?t=<minute> (-1 or missing = all trips)
    GET /stations.json  filtered station records for ?t=<minute>
    """
    if session is None:
        raise ValueError("create_app requires a TrafficSession")

    app = Flask(__name__)

    @app.route("/")
    def _index():
        session.set_time_filter(_requested_filter())
        return render_map_document(session, title=title)

    @app.route("/stations.json")
    def _stations():
        stations = session.set_time_filter(_requested_filter())
        return jsonify(
            {
                "time_filter": session.time_filter,
                "time_label": session.time_label,
                "stations": stations,
            }
        )

    return app


def serve_traffic_map(
    *,
    session,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
):
    app = create_app(session, title=title)
    # one session, one request at a time
    app.run(host=host, port=int(port), debug=bool(debug), threaded=False)
