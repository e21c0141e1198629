"""Nivel de congestión de la cola (colores del badge en el listado)."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class QueueLevel(str, Enum):
    NORMAL = "normal"
    ELEVATED = "elevated"
    HIGH = "high"


HIGH_THRESHOLD = 100
ELEVATED_THRESHOLD = 50


def queue_level(position: Optional[int]) -> Optional[QueueLevel]:
    if position is None:
        return None
    if position > HIGH_THRESHOLD:
        return QueueLevel.HIGH
    if position > ELEVATED_THRESHOLD:
        return QueueLevel.ELEVATED
    return QueueLevel.NORMAL
