"""Esquemas Pydantic de los payloads del upstream.

Dos endpoints:

- ``/gfn/queue?advanced=true`` → {región: {server_id: ServerStatusIn}}
- ``/gfn/queue/history``       → [HistorySampleIn, ...]

La validación ocurre aquí; el motor de agregación nunca recibe un payload
parcialmente decodificado.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ...core.domain import QueueReading, Sample
from .errors import PayloadDecodeError


class ServerStatusIn(BaseModel):
    """Estado actual de un servidor en el listado.

    Formato esperado:
    {"QueuePosition": 12, "Last Updated": 1715300000, "Name": "US Central"}
    """

    model_config = ConfigDict(populate_by_name=True)

    queue_position: int = Field(..., alias="QueuePosition", ge=0)
    last_updated: int = Field(..., alias="Last Updated")  # epoch segundos
    name: str = Field(..., alias="Name")


class HistoryReadingIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    queue_position: int = Field(..., alias="QueuePosition", ge=0)
    last_updated: int = Field(default=0, alias="Last Updated")  # epoch ms
    region: str = Field(default="", alias="Region")

    def to_domain(self) -> QueueReading:
        return QueueReading(
            position=self.queue_position,
            last_updated_millis=self.last_updated,
            region=self.region,
        )


class HistorySampleIn(BaseModel):
    """Una muestra del historial.

    {"timestamp": 1715300000000, "data": {"NP-SEA-02": {...HistoryReadingIn}}}
    """

    timestamp: int
    data: Dict[str, HistoryReadingIn] = Field(default_factory=dict)

    def to_domain(self) -> Sample:
        return Sample(
            timestamp_millis=self.timestamp,
            readings_by_server={sid: r.to_domain() for sid, r in self.data.items()},
        )


QueueListingIn = Dict[str, Dict[str, ServerStatusIn]]

_history_adapter = TypeAdapter(List[HistorySampleIn])
_listing_adapter = TypeAdapter(QueueListingIn)


def decode_history(raw: Any) -> List[Sample]:
    """Valida el JSON del historial y lo convierte a Samples."""
    try:
        parsed = _history_adapter.validate_python(raw)
    except ValidationError as e:
        raise PayloadDecodeError(f"Invalid history payload: {e.error_count()} errors") from e
    return [item.to_domain() for item in parsed]


def decode_listing(raw: Any) -> Dict[str, Dict[str, ServerStatusIn]]:
    try:
        return _listing_adapter.validate_python(raw)
    except ValidationError as e:
        raise PayloadDecodeError(f"Invalid queue listing payload: {e.error_count()} errors") from e
