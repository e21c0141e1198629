"""Estadísticos derivados de la serie final y de las muestras crudas."""

from __future__ import annotations

from datetime import tzinfo
from typing import Sequence

from .assignment import BucketAssignment
from .formatting import format_range_label
from .models import EMPTY_SUMMARY, ChartPoint, SeriesSummary
from .reducer import truncated_mean


def summarize(
    points: Sequence[ChartPoint],
    assignment: BucketAssignment,
    tz: tzinfo,
) -> SeriesSummary:
    """min/max/average sobre la serie bucketizada; current sobre lo crudo.

    - ``current``: posición de la muestra cruda más reciente que contenía el
      servidor, independiente del bucketing.
    - ``average``: media entera truncada de los valores de la serie.
    """
    if assignment.latest is None and not points:
        return EMPTY_SUMMARY

    values = [p.value for p in points]
    current = assignment.latest[1].position if assignment.latest is not None else None

    return SeriesSummary(
        current=current,
        min=min(values) if values else None,
        max=max(values) if values else None,
        average=truncated_mean(values) if values else None,
        range_label=format_range_label(assignment.first_ts, assignment.last_ts, tz),
    )
