"""Formatters de fechas legibles para el gráfico y el listado."""

from __future__ import annotations

import time
from datetime import datetime, tzinfo
from typing import Optional

from ..core.domain import millis_to_datetime


def short_month_day(local_dt: datetime) -> str:
    """``Oct 3`` (mes abreviado + día sin cero a la izquierda)."""
    return f"{local_dt.strftime('%b')} {local_dt.day}"


def format_range_label(first_ts: Optional[int], last_ts: Optional[int], tz: tzinfo) -> Optional[str]:
    """``"{inicio} - {fin}"`` a partir de los timestamps crudos (ms)."""
    if first_ts is None or last_ts is None:
        return None
    start = short_month_day(millis_to_datetime(first_ts, tz))
    end = short_month_day(millis_to_datetime(last_ts, tz))
    return f"{start} - {end}"


def format_time_ago(ts: Optional[float], now: Optional[float] = None) -> str:
    """Format epoch seconds as a human-readable "time ago" string."""
    if not ts:
        return "never"
    if now is None:
        now = time.time()
    diff = max(0.0, now - ts)
    if diff >= 365 * 86400:
        return f"{int(diff / (365 * 86400))}y ago"
    if diff >= 30 * 86400:
        return f"{int(diff / (30 * 86400))}mo ago"
    if diff >= 86400:
        return f"{int(diff / 86400)}d ago"
    if diff >= 3600:
        return f"{int(diff / 3600)}h ago"
    if diff >= 60:
        return f"{int(diff / 60)}m ago"
    return "just now"
