"""Flask application factory for the py-disk JSON API.

The ``create_app`` function builds a Flask app around a simulation
configuration with two endpoints:

- ``GET /api/config`` — return the configuration as JSON.
- ``GET /api/simulate?head=N&seed=S`` — run one comparison and return
  the head, workload preview and per-policy totals as JSON.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, request

from py_disk.config import SimulationConfig
from py_disk.geometry import OutOfRangeError
from py_disk.simulation import Simulator
from py_disk.workload import WorkloadGenerator

_HTTP_BAD_REQUEST = 400


def create_app(config: SimulationConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Simulation settings; defaults to ``SimulationConfig()``.

    Returns:
        A configured Flask application ready to serve.

    """
    settings = config or SimulationConfig()
    app = Flask(__name__)

    @app.route("/api/config")
    def show_config() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the active simulation settings."""
        return jsonify(settings.to_dict())

    @app.route("/api/simulate")
    def simulate() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one simulation and return the totals as JSON.

        Query parameters ``head`` and ``seed`` are optional integers.

        Returns:
            JSON with ``head``, ``request_count``, ``preview`` and
            ``totals`` fields, or an ``error`` field on bad input.

        """
        try:
            head = int(request.args.get("head", settings.default_head))
            seed = request.args.get("seed", type=int, default=settings.seed)
        except ValueError:
            return jsonify({"error": "head must be an integer"}), _HTTP_BAD_REQUEST

        simulator = Simulator(settings, generator=WorkloadGenerator(seed=seed))
        try:
            result = simulator.run(head)
        except OutOfRangeError as e:
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        first, last = result.workload.preview(settings.preview_count)
        return jsonify(
            {
                "head": result.head,
                "request_count": len(result.workload),
                "preview": {"first": first, "last": last},
                "totals": result.totals,
            }
        )

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disk-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
