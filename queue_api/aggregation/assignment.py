"""Asignación de muestras crudas a buckets de tiempo local."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.domain import BucketKey, Granularity, QueueReading, Sample, bucket_key_for

logger = logging.getLogger(__name__)


@dataclass
class BucketAssignment:
    """Resultado de una pasada de asignación (efímero, no se persiste).

    ``buckets`` conserva el orden de llegada de las posiciones dentro de cada
    bucket; ``first_ts``/``last_ts`` son los timestamps crudos (ms) mínimo y
    máximo de las muestras que contenían el servidor.
    """
    buckets: Dict[BucketKey, List[int]] = field(default_factory=dict)
    first_ts: Optional[int] = None
    last_ts: Optional[int] = None
    latest: Optional[Tuple[int, QueueReading]] = None
    skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.buckets

    def ordered_keys(self) -> List[BucketKey]:
        return sorted(self.buckets)


def assign_buckets(
    samples: Iterable[Sample],
    server_id: str,
    granularity: Granularity,
    tz: tzinfo,
) -> BucketAssignment:
    """Agrupa las posiciones de ``server_id`` por bucket truncado.

    Las muestras sin lectura para el servidor se ignoran: el polling omite
    servidores de forma intermitente y eso no es un error.
    """
    result = BucketAssignment()

    for sample in samples:
        reading = sample.reading_for(server_id)
        if reading is None:
            result.skipped += 1
            continue

        ts = sample.timestamp_millis
        key = bucket_key_for(sample.local_time(tz), granularity)
        result.buckets.setdefault(key, []).append(reading.position)

        if result.first_ts is None or ts < result.first_ts:
            result.first_ts = ts
        if result.last_ts is None or ts > result.last_ts:
            result.last_ts = ts
        # Empate de timestamps: gana la última muestra recibida
        if result.latest is None or ts >= result.latest[0]:
            result.latest = (ts, reading)

    if result.skipped:
        logger.debug(
            "BUCKETS server=%s granularity=%s buckets=%d skipped_samples=%d",
            server_id, granularity.value, len(result.buckets), result.skipped,
        )

    return result
