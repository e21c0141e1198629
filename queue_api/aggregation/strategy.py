"""Selección de granularidad y formato de etiqueta según el rango."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from ..core.domain import Granularity, TimeRange


class LabelFormat(str, Enum):
    """Formato de etiqueta del eje X (patrón strftime)."""
    HOUR_MINUTE = "%H:%M"
    MONTH_DAY_TIME = "%m/%d %H:%M"
    MONTH_DAY = "%m/%d"

    def render(self, local_dt: datetime) -> str:
        return local_dt.strftime(self.value)


@dataclass(frozen=True)
class BucketingStrategy:
    granularity: Granularity
    label_format: LabelFormat


HOURLY_TIME = BucketingStrategy(Granularity.HOUR, LabelFormat.HOUR_MINUTE)
HOURLY_DATE_TIME = BucketingStrategy(Granularity.HOUR, LabelFormat.MONTH_DAY_TIME)
DAILY = BucketingStrategy(Granularity.DAY, LabelFormat.MONTH_DAY)

_POLICY = {
    TimeRange.DAY: HOURLY_TIME,
    TimeRange.WEEK: HOURLY_DATE_TIME,
    TimeRange.TWO_WEEKS: DAILY,
    TimeRange.MONTH: DAILY,
    TimeRange.LIFETIME: DAILY,
}


def select_strategy(time_range: Union[TimeRange, str, None]) -> BucketingStrategy:
    """Granularidad + formato para un rango.

    Función total: un rango no reconocido usa la política de ``7d``.
    """
    parsed = TimeRange.parse(time_range)
    if parsed is None:
        return HOURLY_DATE_TIME
    return _POLICY.get(parsed, HOURLY_DATE_TIME)
