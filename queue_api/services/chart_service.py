"""Orquestación fetch → motor de agregación.

Un fallo del upstream se traduce en "no data available" (None) sin invocar al
motor; el llamador mantiene su estado previo.
"""

from __future__ import annotations

import logging
import time
from datetime import tzinfo
from typing import List, Optional, Union

from ..aggregation import ServerSeries, aggregate_server_series, format_time_ago
from ..core.domain import TimeRange, queue_level
from ..schemas import QueueServerOut, RegionQueueOut
from ..transports.http import QueueApiClient, QueueFetchError

logger = logging.getLogger(__name__)


def load_server_series(
    client: QueueApiClient,
    server_id: str,
    time_range: Union[TimeRange, str, None],
    tz: tzinfo,
) -> Optional[ServerSeries]:
    try:
        samples = client.fetch_history(server_id, time_range)
    except QueueFetchError as e:
        logger.warning(
            "FETCH_FAILED server=%s range=%s status=%s err=%s",
            server_id, time_range, e.status_code, e,
        )
        return None

    return aggregate_server_series(samples, server_id, time_range, tz)


def load_queue_listing(client: QueueApiClient, now: Optional[float] = None) -> Optional[List[RegionQueueOut]]:
    """Listado actual ordenado por región y luego por server_id."""
    try:
        listing = client.fetch_listing()
    except QueueFetchError as e:
        logger.warning("FETCH_FAILED listing status=%s err=%s", e.status_code, e)
        return None

    now = time.time() if now is None else now
    regions: List[RegionQueueOut] = []
    for region in sorted(listing):
        servers = listing[region]
        regions.append(
            RegionQueueOut(
                region=region,
                servers=[
                    QueueServerOut(
                        server_id=server_id,
                        name=status.name,
                        position=status.queue_position,
                        level=queue_level(status.queue_position),
                        last_updated=status.last_updated,
                        last_updated_ago=format_time_ago(status.last_updated, now),
                    )
                    for server_id, status in sorted(servers.items())
                ],
            )
        )
    return regions
