from __future__ import annotations

import logging

from fastapi import FastAPI

from common.config import get_settings
from .endpoints import health_router, queue_status_router, server_chart_router

logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)

app = FastAPI(title="GFN Queue Service", version="0.1.0")

app.include_router(health_router)
app.include_router(queue_status_router)
app.include_router(server_chart_router)
