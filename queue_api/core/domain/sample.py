"""Modelo de dominio para muestras de cola.

Una ``Sample`` es una foto del endpoint de historial: un timestamp y las
lecturas de todos los servidores que vinieron en esa respuesta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from types import MappingProxyType
from typing import Mapping, Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class QueueReading:
    """Lectura de cola de un servidor.

    Solo ``position`` participa en la agregación; ``last_updated_millis`` y
    ``region`` son informativos.
    """
    position: int
    last_updated_millis: int = 0
    region: str = ""


@dataclass(frozen=True)
class Sample:
    """Muestra inmutable: timestamp (epoch ms) + lecturas por servidor."""
    timestamp_millis: int
    readings_by_server: Mapping[str, QueueReading] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Vista de solo lectura
        object.__setattr__(
            self, "readings_by_server", MappingProxyType(dict(self.readings_by_server))
        )

    def reading_for(self, server_id: str) -> Optional[QueueReading]:
        return self.readings_by_server.get(server_id)

    def local_time(self, tz: tzinfo) -> datetime:
        """Timestamp de la muestra en la zona horaria del viewer."""
        return millis_to_datetime(self.timestamp_millis, tz)


def millis_to_datetime(timestamp_millis: int, tz: tzinfo) -> datetime:
    # Suma exacta con timedelta, sin pasar por float
    return (_EPOCH + timedelta(milliseconds=timestamp_millis)).astimezone(tz)
