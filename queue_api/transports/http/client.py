"""Cliente HTTP del upstream de colas (colaborador de fetch).

Contrato hacia el motor: entrega una secuencia finita (posiblemente vacía)
de ``Sample`` o señala el fallo con ``QueueFetchError`` sin llamar al motor.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from common.config import Settings, get_settings
from ...core.domain import Sample, TimeRange
from .errors import PayloadDecodeError, QueueFetchError
from .payloads import ServerStatusIn, decode_history, decode_listing
from .retry import RetryConfig, RetryExecutor

logger = logging.getLogger(__name__)

QUEUE_PATH = "/gfn/queue"
HISTORY_PATH = "/gfn/queue/history"


class QueueApiClient:
    """GETs JSON contra el upstream con User-Agent, timeout y retry."""

    def __init__(
        self,
        base_url: str,
        *,
        user_agent: str = "PrintedWasteApp/1.0",
        timeout: float = 10.0,
        max_attempts: int = 3,
        transport: Optional[httpx.BaseTransport] = None,
        retry: Optional[RetryExecutor] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=transport,
        )
        self._retry = retry or RetryExecutor(RetryConfig(max_attempts=max_attempts))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "QueueApiClient":
        settings = settings or get_settings()
        return cls(
            settings.api_base_url,
            user_agent=settings.user_agent,
            timeout=settings.http_timeout_seconds,
            max_attempts=settings.http_max_attempts,
            **kwargs,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "QueueApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _get_json(self, path: str, params: Optional[Dict[str, Union[str, int]]] = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = self._retry.execute(self._client.get, path, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise QueueFetchError(
                f"Upstream returned {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise QueueFetchError(f"Upstream request failed: {type(e).__name__}", url=url) from e

        try:
            return resp.json()
        except ValueError as e:
            raise PayloadDecodeError("Upstream returned invalid JSON", url=url) from e

    def fetch_history(self, server_id: str, time_range: Union[TimeRange, str, None]) -> List[Sample]:
        """Muestras crudas de ``server_id`` para el rango (lookback en horas).

        ``lifetime`` (o un rango no reconocido sin lookback) no envía ``hours``.
        """
        params: Dict[str, Union[str, int]] = {"server": server_id}
        parsed = TimeRange.parse(time_range) or TimeRange.WEEK
        if parsed.lookback_hours is not None:
            params["hours"] = parsed.lookback_hours

        samples = decode_history(self._get_json(HISTORY_PATH, params=params))
        logger.info(
            "FETCH_HISTORY server=%s range=%s samples=%d",
            server_id, parsed.value, len(samples),
        )
        return samples

    def fetch_listing(self) -> Dict[str, Dict[str, ServerStatusIn]]:
        """Listado actual {región: {server_id: estado}}."""
        listing = decode_listing(self._get_json(QUEUE_PATH, params={"advanced": "true"}))
        logger.info(
            "FETCH_LISTING regions=%d servers=%d",
            len(listing), sum(len(servers) for servers in listing.values()),
        )
        return listing
