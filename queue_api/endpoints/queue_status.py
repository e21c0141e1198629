"""Endpoint del listado actual de colas por región."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_queue_client
from ..schemas import RegionQueueOut
from ..services import load_queue_listing
from ..transports.http import QueueApiClient

router = APIRouter(tags=["queue"])


@router.get("/queue", response_model=List[RegionQueueOut])
def get_queue(client: QueueApiClient = Depends(get_queue_client)):
    """Posición actual de cada servidor, agrupada por región."""
    regions = load_queue_listing(client)
    if regions is None:
        raise HTTPException(status_code=503, detail="no data available")
    return regions
