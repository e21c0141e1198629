"""Dependencias FastAPI compartidas por los endpoints."""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterator

from common.config import get_settings
from .aggregation import resolve_timezone
from .transports.http import QueueApiClient


def get_queue_client() -> Iterator[QueueApiClient]:
    client = QueueApiClient.from_settings(get_settings())
    try:
        yield client
    finally:
        client.close()


def get_display_timezone() -> tzinfo:
    return resolve_timezone(get_settings().display_timezone)
