from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .aggregation import ServerSeries
from .core.domain import Granularity, QueueLevel, TimeRange, queue_level


class ChartPointOut(BaseModel):
    # index/bucket_start son la identidad del punto; label puede repetirse
    index: int = Field(..., ge=0)
    label: str
    value: int = Field(..., ge=0)
    bucket_start: datetime


class SeriesSummaryOut(BaseModel):
    current: Optional[int] = None
    current_level: Optional[QueueLevel] = None
    min: Optional[int] = None
    max: Optional[int] = None
    average: Optional[int] = None
    range_label: Optional[str] = None


class ServerChartOut(BaseModel):
    server_id: str
    time_range: Optional[TimeRange] = None
    granularity: Granularity
    points: List[ChartPointOut] = Field(default_factory=list)
    summary: SeriesSummaryOut

    @classmethod
    def from_series(cls, series: ServerSeries) -> "ServerChartOut":
        summary = series.summary
        return cls(
            server_id=series.server_id,
            time_range=series.time_range,
            granularity=series.granularity,
            points=[
                ChartPointOut(
                    index=p.index,
                    label=p.label,
                    value=p.value,
                    bucket_start=p.bucket_start,
                )
                for p in series.points
            ],
            summary=SeriesSummaryOut(
                current=summary.current,
                current_level=queue_level(summary.current),
                min=summary.min,
                max=summary.max,
                average=summary.average,
                range_label=summary.range_label,
            ),
        )


class QueueServerOut(BaseModel):
    server_id: str
    name: str
    position: int
    level: QueueLevel
    last_updated: int
    last_updated_ago: str


class RegionQueueOut(BaseModel):
    region: str
    servers: List[QueueServerOut] = Field(default_factory=list)
