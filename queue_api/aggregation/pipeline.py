"""Pipeline de agregación de una serie de cola.

muestras crudas → estrategia → buckets → reducción por bucket →
(24h) densificación → resumen → etiqueta de rango

Todo el estado intermedio vive dentro de una invocación; llamadas
concurrentes con entradas independientes no comparten nada.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, tzinfo
from typing import Iterable, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.domain import Sample, TimeRange
from .assignment import assign_buckets
from .gap_filler import densify
from .models import ChartPoint, ServerSeries
from .reducer import reduce_bucket
from .strategy import select_strategy
from .summary import summarize

logger = logging.getLogger(__name__)

_LOCALTIME_PATH = "/etc/localtime"


def _host_timezone() -> tzinfo:
    """Zona local del host con sus reglas de horario (TZ o /etc/localtime)."""
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("TZ_UNKNOWN tz=%s, usando /etc/localtime", name)

    try:
        with open(_LOCALTIME_PATH, "rb") as fh:
            return ZoneInfo.from_file(fh, key="localtime")
    except (OSError, ValueError) as e:
        # Sin base de zonas en el host: offset fijo actual
        logger.warning("LOCALTIME_UNAVAILABLE path=%s err=%s", _LOCALTIME_PATH, e)
        return datetime.now().astimezone().tzinfo


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """ZoneInfo por nombre IANA; sin nombre, la zona local del host."""
    if name:
        return ZoneInfo(name)
    return _host_timezone()


def aggregate_server_series(
    samples: Iterable[Sample],
    server_id: str,
    time_range: Union[TimeRange, str, None],
    tz: Optional[tzinfo] = None,
) -> ServerSeries:
    """Ejecuta una pasada completa y devuelve puntos + resumen."""
    tz = tz or resolve_timezone(None)
    parsed_range = TimeRange.parse(time_range)
    strategy = select_strategy(parsed_range)

    assignment = assign_buckets(samples, server_id, strategy.granularity, tz)

    points: List[ChartPoint] = []
    for index, key in enumerate(assignment.ordered_keys()):
        points.append(
            ChartPoint(
                label=strategy.label_format.render(key.start),
                value=reduce_bucket(assignment.buckets[key]),
                bucket_start=key.start,
                index=index,
            )
        )

    if parsed_range is TimeRange.DAY and points:
        raw_count = len(points)
        points = densify(points, points[0].bucket_start, strategy.label_format)
        logger.debug(
            "DENSIFY server=%s raw_buckets=%d points=%d", server_id, raw_count, len(points)
        )

    summary = summarize(points, assignment, tz)

    logger.debug(
        "AGGREGATE server=%s range=%s granularity=%s points=%d current=%s",
        server_id,
        parsed_range.value if parsed_range else time_range,
        strategy.granularity.value,
        len(points),
        summary.current,
    )

    return ServerSeries(
        server_id=server_id,
        time_range=parsed_range,
        granularity=strategy.granularity,
        points=points,
        summary=summary,
    )
