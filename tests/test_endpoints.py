"""Tests de la API FastAPI con el upstream simulado."""

from datetime import timezone

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import HOUR_MS, T0_MS, history_item, make_client

from queue_api.dependencies import get_display_timezone, get_queue_client
from queue_api.main import app

NOW_S = T0_MS // 1000


def upstream_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/gfn/queue/history":
        return httpx.Response(
            200,
            json=[
                history_item(T0_MS, {"A": 100}),
                history_item(T0_MS + HOUR_MS, {"A": 120}),
                history_item(T0_MS + 2 * HOUR_MS, {"A": 80}),
            ],
        )
    if request.url.path == "/gfn/queue":
        return httpx.Response(
            200,
            json={
                "Europe": {
                    "EU-FRA-01": {"QueuePosition": 130, "Last Updated": NOW_S, "Name": "EU Central"},
                },
                "North America": {
                    "NP-SEA-02": {"QueuePosition": 12, "Last Updated": NOW_S, "Name": "US West"},
                    "NP-DAL-01": {"QueuePosition": 60, "Last Updated": NOW_S, "Name": "US Central"},
                },
            },
        )
    return httpx.Response(404)


@pytest.fixture
def api():
    def override(handler):
        app.dependency_overrides[get_queue_client] = lambda: make_client(handler)
        app.dependency_overrides[get_display_timezone] = lambda: timezone.utc
        return TestClient(app)

    yield override
    app.dependency_overrides.clear()


class TestHealth:

    def test_health(self, api):
        resp = api(upstream_handler).get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestServerChart:

    def test_day_chart(self, api):
        resp = api(upstream_handler).get("/servers/A/chart", params={"range": "24h"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["time_range"] == "24h"
        assert body["granularity"] == "hour"
        assert [p["value"] for p in body["points"]] == [100, 120, 80]
        assert [p["index"] for p in body["points"]] == [0, 1, 2]
        assert body["summary"] == {
            "current": 80,
            "current_level": "elevated",
            "min": 80,
            "max": 120,
            "average": 100,
            "range_label": "May 10 - May 10",
        }

    def test_unknown_server_is_empty_not_error(self, api):
        resp = api(upstream_handler).get("/servers/ZZ/chart", params={"range": "30d"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["points"] == []
        assert body["summary"]["current"] is None
        assert body["summary"]["range_label"] is None

    def test_unknown_range_falls_back(self, api):
        resp = api(upstream_handler).get("/servers/A/chart", params={"range": "1y"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["time_range"] is None
        assert body["points"][0]["label"] == "05/10 00:00"

    def test_upstream_failure_is_503(self, api):
        resp = api(lambda request: httpx.Response(502)).get("/servers/A/chart")

        assert resp.status_code == 503
        assert resp.json() == {"detail": "no data available"}

    def test_malformed_payload_is_503(self, api):
        bad = lambda request: httpx.Response(200, json=[{"timestamp": "soon"}])
        resp = api(bad).get("/servers/A/chart")

        assert resp.status_code == 503


class TestQueueListing:

    def test_listing_sorted_with_levels(self, api):
        resp = api(upstream_handler).get("/queue")

        assert resp.status_code == 200
        body = resp.json()
        assert [r["region"] for r in body] == ["Europe", "North America"]
        na = body[1]["servers"]
        assert [s["server_id"] for s in na] == ["NP-DAL-01", "NP-SEA-02"]
        assert [s["level"] for s in na] == ["elevated", "normal"]
        assert body[0]["servers"][0]["level"] == "high"
        assert body[0]["servers"][0]["last_updated_ago"].endswith("ago")

    def test_listing_failure(self, api):
        resp = api(lambda request: httpx.Response(500)).get("/queue")
        assert resp.status_code == 503
