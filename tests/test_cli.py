"""Tests de la CLI de gráfico de cola."""

import json

import httpx
import pytest

from conftest import HOUR_MS, T0_MS, history_item, make_client

from jobs import queue_chart_cli
from queue_api.aggregation import aggregate_server_series
from queue_api.transports.http import QueueApiClient


@pytest.fixture
def upstream(monkeypatch):
    def install(handler):
        monkeypatch.setattr(QueueApiClient, "from_settings", lambda *a, **k: make_client(handler))

    return install


def history(request):
    return httpx.Response(
        200,
        json=[history_item(T0_MS, {"A": 10}), history_item(T0_MS + 3 * HOUR_MS, {"A": 40})],
    )


class TestQueueChartCli:

    def test_table_output(self, upstream, capsys):
        upstream(history)
        code = queue_chart_cli.main(["--server", "A", "--range", "24h", "--tz", "UTC"])

        out = capsys.readouterr().out
        assert code == 0
        assert "A (24h)  May 10 - May 10" in out
        assert "02:00     30" in out
        assert "current=40 (normal) min=10 max=40 avg=25" in out

    def test_json_output(self, upstream, capsys):
        upstream(history)
        code = queue_chart_cli.main(["--server", "A", "--range", "7d", "--tz", "UTC", "--json"])

        body = json.loads(capsys.readouterr().out)
        assert code == 0
        assert body["granularity"] == "hour"
        assert [p["value"] for p in body["points"]] == [10, 40]
        assert body["summary"]["average"] == 25

    def test_upstream_failure(self, upstream, capsys):
        upstream(lambda request: httpx.Response(503))
        code = queue_chart_cli.main(["--server", "A", "--tz", "UTC"])

        assert code == 1
        assert "no data available" in capsys.readouterr().out


class TestRenderSeries:

    def test_empty_series(self, utc):
        series = aggregate_server_series([], "A", "24h", utc)
        assert queue_chart_cli.render_series(series) == "A (24h)\n  no samples for this server"
