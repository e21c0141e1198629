"""Fixtures y helpers comunes para los tests del servicio de colas."""

from datetime import datetime, timedelta, timezone
from typing import Dict

import httpx
import pytest

from queue_api.core.domain import QueueReading, Sample
from queue_api.transports.http import QueueApiClient, RetryConfig, RetryExecutor

# 2024-05-10 00:00 UTC, límite de hora (y de día)
T0 = datetime(2024, 5, 10, 0, 0, tzinfo=timezone.utc)
HOUR_MS = 3_600_000
MINUTE_MS = 60_000


def to_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


T0_MS = to_ms(T0)


def make_sample(ts_ms: int, positions: Dict[str, int], region: str = "US Central") -> Sample:
    return Sample(
        timestamp_millis=ts_ms,
        readings_by_server={
            sid: QueueReading(position=pos, last_updated_millis=ts_ms, region=region)
            for sid, pos in positions.items()
        },
    )


def hour_start(offset: int) -> datetime:
    return T0 + timedelta(hours=offset)


def history_item(ts_ms: int, positions: Dict[str, int]) -> dict:
    """Elemento JSON del endpoint de historial."""
    return {
        "timestamp": ts_ms,
        "data": {
            sid: {"QueuePosition": pos, "Last Updated": ts_ms, "Region": "US Central"}
            for sid, pos in positions.items()
        },
    }


def make_client(handler) -> QueueApiClient:
    return QueueApiClient(
        "https://upstream.test",
        user_agent="TestAgent/1.0",
        transport=httpx.MockTransport(handler),
        retry=RetryExecutor(RetryConfig(max_attempts=3, jitter=False), sleep=lambda _: None),
    )


@pytest.fixture
def utc():
    return timezone.utc
