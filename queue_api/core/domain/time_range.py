"""Rangos de tiempo seleccionables para el gráfico de cola."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class TimeRange(str, Enum):
    """Ventana de lookback elegida por el usuario."""
    DAY = "24h"
    WEEK = "7d"
    TWO_WEEKS = "14d"
    MONTH = "30d"
    LIFETIME = "lifetime"

    @property
    def lookback_hours(self) -> Optional[int]:
        """Horas de lookback; None para ``lifetime`` (sin límite)."""
        return _LOOKBACK_HOURS[self]

    @classmethod
    def parse(cls, value: Union[str, "TimeRange", None]) -> Optional["TimeRange"]:
        """Devuelve el TimeRange correspondiente o None si no se reconoce."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


_LOOKBACK_HOURS = {
    TimeRange.DAY: 24,
    TimeRange.WEEK: 168,
    TimeRange.TWO_WEEKS: 336,
    TimeRange.MONTH: 720,
    TimeRange.LIFETIME: None,
}
