"""Endpoint de la serie agregada de un servidor."""

from datetime import tzinfo

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_display_timezone, get_queue_client
from ..schemas import ServerChartOut
from ..services import load_server_series
from ..transports.http import QueueApiClient

router = APIRouter(tags=["servers"])


@router.get("/servers/{server_id}/chart", response_model=ServerChartOut)
def get_server_chart(
    server_id: str,
    time_range: str = Query(default="24h", alias="range"),
    client: QueueApiClient = Depends(get_queue_client),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Serie bucketizada + resumen de la cola del servidor.

    Un rango no reconocido usa la política de 7d. Si el upstream falla se
    responde 503 sin datos parciales.
    """
    series = load_server_series(client, server_id, time_range, tz)
    if series is None:
        raise HTTPException(status_code=503, detail="no data available")
    return ServerChartOut.from_series(series)
