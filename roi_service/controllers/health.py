from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from pydantic import BaseModel

from roi_service.config import APP_VERSION

router = APIRouter(tags=["health"])

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


@router.get("/healthz", response_model=HealthResponse)
async def healthz(response: Response) -> HealthResponse:
    """Liveness probe; the engine has no backing services to check."""
    response.headers.update(NO_CACHE_HEADERS)
    logger.debug("Health check requested")
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=APP_VERSION,
    )
