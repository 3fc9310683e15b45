"""Tests for the JSON web API.

The web API exposes simulations over HTTP.  Tests use
``pytest.importorskip`` so they are skipped gracefully when Flask is
not installed.
"""

from __future__ import annotations

from typing import Any

import pytest

flask = pytest.importorskip("flask")

from py_disk.config import SimulationConfig  # noqa: E402
from py_disk.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400

_CONFIG = SimulationConfig(disk_size=10, request_count=30, default_head=5, preview_count=3)


def _create_client(config: SimulationConfig | None = None) -> Any:
    """Create a test client from a fresh app."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app.test_client()


class TestAppCreation:
    """Verify the app factory."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_config_endpoint(self) -> None:
        """GET /api/config returns the active settings."""
        response = _create_client(_CONFIG).get("/api/config")
        assert response.status_code == HTTP_OK
        assert response.get_json() == _CONFIG.to_dict()


class TestSimulateEndpoint:
    """Verify GET /api/simulate."""

    def test_returns_totals(self) -> None:
        """A valid request returns every policy total."""
        response = _create_client(_CONFIG).get("/api/simulate?head=4&seed=1")
        assert response.status_code == HTTP_OK
        data = response.get_json()
        assert data["head"] == 4  # noqa: PLR2004
        assert data["request_count"] == _CONFIG.request_count
        assert set(data["totals"]) == {"FCFS", "SCAN", "C-SCAN"}
        assert data["totals"]["SCAN"] == _CONFIG.disk_size - 1
        assert len(data["preview"]["first"]) == _CONFIG.preview_count
        assert len(data["preview"]["last"]) == _CONFIG.preview_count

    def test_default_head(self) -> None:
        """Without a head the configured default is used."""
        data = _create_client(_CONFIG).get("/api/simulate?seed=1").get_json()
        assert data["head"] == _CONFIG.default_head

    def test_seed_is_reproducible(self) -> None:
        """The same seed returns the same totals."""
        client = _create_client(_CONFIG)
        first = client.get("/api/simulate?seed=9").get_json()
        second = client.get("/api/simulate?seed=9").get_json()
        assert first == second

    def test_non_integer_head(self) -> None:
        """A non-integer head is a bad request."""
        response = _create_client(_CONFIG).get("/api/simulate?head=abc")
        assert response.status_code == HTTP_BAD_REQUEST
        assert "error" in response.get_json()

    def test_head_off_disk(self) -> None:
        """A head outside the disk is a bad request."""
        response = _create_client(_CONFIG).get("/api/simulate?head=10")
        assert response.status_code == HTTP_BAD_REQUEST
        assert "outside the disk range" in response.get_json()["error"]
