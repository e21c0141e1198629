"""CLI: descarga el historial de un servidor y muestra la serie agregada.

Ejecutar:
    python -m jobs.queue_chart_cli --server NP-SEA-02 --range 24h
    python -m jobs.queue_chart_cli --server NP-SEA-02 --watch
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from typing import List, Optional

from common.config import get_settings
from queue_api.aggregation import ServerSeries, resolve_timezone
from queue_api.core.domain import TimeRange, queue_level
from queue_api.services import load_server_series
from queue_api.transports.http import QueueApiClient

logger = logging.getLogger(__name__)


def render_series(series: ServerSeries) -> str:
    summary = series.summary
    lines: List[str] = []

    header = f"{series.server_id} ({series.time_range.value if series.time_range else '7d'})"
    if summary.range_label:
        header = f"{header}  {summary.range_label}"
    lines.append(header)

    if not series.points:
        lines.append("  no samples for this server")
        return "\n".join(lines)

    width = max(len(p.label) for p in series.points)
    for point in series.points:
        lines.append(f"  {point.label.ljust(width)}  {point.value:>5}")

    level = queue_level(summary.current)
    lines.append(
        "  current=%s (%s) min=%s max=%s avg=%s"
        % (summary.current, level.value if level else "-", summary.min, summary.max, summary.average)
    )
    return "\n".join(lines)


def series_to_json(series: ServerSeries) -> str:
    s = series.summary
    return json.dumps(
        {
            "server_id": series.server_id,
            "range": series.time_range.value if series.time_range else None,
            "granularity": series.granularity.value,
            "points": [p.to_dict() for p in series.points],
            "summary": {
                "current": s.current,
                "min": s.min,
                "max": s.max,
                "average": s.average,
                "range_label": s.range_label,
            },
        },
        indent=2,
    )


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    p = argparse.ArgumentParser(description="Queue position chart for one server")
    p.add_argument("--server", required=True, help="server id, e.g. NP-SEA-02")
    p.add_argument("--range", dest="time_range", default=TimeRange.DAY.value,
                   choices=[r.value for r in TimeRange])
    p.add_argument("--tz", default=settings.display_timezone, help="IANA zone for labels")
    p.add_argument("--json", action="store_true", help="print JSON instead of a table")
    p.add_argument("--watch", action="store_true", help="refresh until interrupted")
    p.add_argument("--interval", type=float, default=settings.refresh_seconds)
    args = p.parse_args(argv)

    tz = resolve_timezone(args.tz)

    with QueueApiClient.from_settings(settings) as client:
        while True:
            series = load_server_series(client, args.server, args.time_range, tz)
            if series is None:
                # Se mantiene la última salida; solo se avisa
                print("no data available")
                if not args.watch:
                    return 1
            else:
                print(series_to_json(series) if args.json else render_series(series))

            if not args.watch:
                return 0
            logger.info("Esperando %.1fs para refrescar...", args.interval)
            try:
                time.sleep(args.interval)
            except KeyboardInterrupt:
                return 0


if __name__ == "__main__":
    raise SystemExit(main())
