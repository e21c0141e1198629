"""Claves de bucket explícitas por granularidad.

En lugar de depender de utilidades genéricas de truncado de fechas, cada
granularidad tiene su propio tipo de clave:

- HourBucket → inicio de la hora local (minutos/segundos a cero)
- DayBucket  → medianoche local
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union


class Granularity(str, Enum):
    HOUR = "hour"
    DAY = "day"


@dataclass(frozen=True, order=True)
class HourBucket:
    start: datetime

    @classmethod
    def containing(cls, local_dt: datetime) -> "HourBucket":
        return cls(start=local_dt.replace(minute=0, second=0, microsecond=0))


@dataclass(frozen=True, order=True)
class DayBucket:
    start: datetime

    @classmethod
    def containing(cls, local_dt: datetime) -> "DayBucket":
        return cls(start=local_dt.replace(hour=0, minute=0, second=0, microsecond=0))


BucketKey = Union[HourBucket, DayBucket]


def bucket_key_for(local_dt: datetime, granularity: Granularity) -> BucketKey:
    """Trunca un datetime local al bucket de la granularidad indicada."""
    if granularity is Granularity.DAY:
        return DayBucket.containing(local_dt)
    return HourBucket.containing(local_dt)
