"""Salidas del motor de agregación."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..core.domain import Granularity, TimeRange


@dataclass(frozen=True)
class ChartPoint:
    """Punto del gráfico.

    La identidad del punto es ``index`` / ``bucket_start``; ``label`` puede
    repetirse (p.ej. el mismo MM/DD en años distintos en ``lifetime``).
    """
    label: str
    value: int
    bucket_start: datetime
    index: int = 0

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "label": self.label,
            "value": self.value,
            "bucket_start": self.bucket_start.isoformat(),
        }


@dataclass(frozen=True)
class SeriesSummary:
    current: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None
    average: Optional[int] = None
    range_label: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.current is None and self.min is None


EMPTY_SUMMARY = SeriesSummary()


@dataclass(frozen=True)
class ServerSeries:
    """Resultado completo de una pasada para un servidor y un rango."""
    server_id: str
    time_range: Optional[TimeRange]
    granularity: Granularity
    points: List[ChartPoint] = field(default_factory=list)
    summary: SeriesSummary = EMPTY_SUMMARY
