"""Motor de agregación de series de cola.

Modules:
- strategy: granularidad + formato de etiqueta por rango
- reducer: reducción de bucket con filtro de outliers (2σ)
- assignment: agrupación de muestras en buckets locales
- gap_filler: densificación de la serie de 24h
- summary: current/min/max/average + etiqueta de rango
- formatting: formatters de fechas
- selection: punto más cercano (índice / tiempo)
- pipeline: orquestador (aggregate_server_series)
"""

from .assignment import BucketAssignment, assign_buckets
from .formatting import format_range_label, format_time_ago, short_month_day
from .gap_filler import densify
from .models import ChartPoint, SeriesSummary, ServerSeries
from .pipeline import aggregate_server_series, resolve_timezone
from .reducer import reduce_bucket, trunc_div
from .selection import nearest_point_by_time, point_at_fraction
from .strategy import BucketingStrategy, LabelFormat, select_strategy
from .summary import summarize

__all__ = [
    "BucketAssignment",
    "assign_buckets",
    "format_range_label",
    "format_time_ago",
    "short_month_day",
    "densify",
    "ChartPoint",
    "SeriesSummary",
    "ServerSeries",
    "aggregate_server_series",
    "resolve_timezone",
    "reduce_bucket",
    "trunc_div",
    "nearest_point_by_time",
    "point_at_fraction",
    "BucketingStrategy",
    "LabelFormat",
    "select_strategy",
    "summarize",
]
