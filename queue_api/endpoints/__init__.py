"""Módulo de endpoints HTTP.

Contiene todos los endpoints de la API organizados por función.
"""

from .health import router as health_router
from .queue_status import router as queue_status_router
from .server_chart import router as server_chart_router

__all__ = [
    "health_router",
    "queue_status_router",
    "server_chart_router",
]
