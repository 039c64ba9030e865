from __future__ import annotations

import logging

from fastapi import HTTPException
from pydantic import BaseModel

from roi_service.config import Settings

settings = Settings()

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    code: str
    message: str


def get_settings() -> Settings:
    return settings


def error(status_code: int, code: str, message: str) -> HTTPException:
    """Build an ``HTTPException`` carrying an :class:`ErrorResponse` detail."""
    logger.warning("Request rejected (%s): %s", code, message)
    err = ErrorResponse(code=code, message=message)
    return HTTPException(status_code=status_code, detail=err.model_dump())
