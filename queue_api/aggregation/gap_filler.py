"""Densificación de la serie de 24h.

Solo aplica al rango más corto: se generan 24 slots horarios a partir de la
primera hora con datos. Los slots con bucket real se conservan; los huecos se
interpolan linealmente entre los puntos conocidos más cercanos (antes y
después), ponderando por distancia en índice de slot. Un hueco sin vecino a
ambos lados (borde de la serie) se omite, así que el resultado puede tener
menos de 24 puntos.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from .models import ChartPoint
from .reducer import trunc_div
from .strategy import LabelFormat

HOURS_IN_DAY = 24
_SECONDS_PER_HOUR = 3600


def _slot_offset(first_hour: datetime, bucket_start: datetime) -> Optional[int]:
    # Distancia en UTC, igual que _slot_start
    seconds = (
        bucket_start.astimezone(timezone.utc) - first_hour.astimezone(timezone.utc)
    ).total_seconds()
    if seconds % _SECONDS_PER_HOUR:
        return None
    return int(seconds // _SECONDS_PER_HOUR)


def _slot_start(first_hour: datetime, offset: int) -> datetime:
    # Aritmética en UTC para no duplicar/saltar horas en cambios de horario
    utc_start = first_hour.astimezone(timezone.utc) + timedelta(hours=offset)
    return utc_start.astimezone(first_hour.tzinfo)


def interpolate(before: int, after: int, before_slot: int, after_slot: int, slot: int) -> int:
    """Interpolación lineal entera (truncada) entre dos slots conocidos."""
    span = after_slot - before_slot
    return before + trunc_div((after - before) * (slot - before_slot), span)


def densify(
    points: Sequence[ChartPoint],
    first_hour_boundary: datetime,
    label_format: LabelFormat = LabelFormat.HOUR_MINUTE,
) -> List[ChartPoint]:
    known: Dict[int, ChartPoint] = {}
    for point in points:
        offset = _slot_offset(first_hour_boundary, point.bucket_start)
        if offset is not None:
            known[offset] = point

    known_slots = sorted(known)
    result: List[ChartPoint] = []

    for slot in range(HOURS_IN_DAY):
        existing = known.get(slot)
        if existing is not None:
            result.append(existing)
            continue

        before_slot = next((s for s in reversed(known_slots) if s < slot), None)
        after_slot = next((s for s in known_slots if s > slot), None)
        if before_slot is None or after_slot is None:
            continue

        start = _slot_start(first_hour_boundary, slot)
        value = interpolate(
            known[before_slot].value,
            known[after_slot].value,
            before_slot,
            after_slot,
            slot,
        )
        result.append(ChartPoint(label=label_format.render(start), value=value, bucket_start=start))

    return [
        point if point.index == i else replace(point, index=i)
        for i, point in enumerate(result)
    ]
