from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from roi_service.config import APP_VERSION
from roi_service.controllers import health, v1
from roi_service.dependencies import settings
from roi_service.logger import setup_logging

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

if sys.version_info[:2] < (3, 11):
    raise RuntimeError("Python 3.11+ is required")

app = FastAPI(
    title=settings.app_name,
    version=APP_VERSION,
)

app.include_router(health.router)
app.include_router(v1.router)

# 👇 HTTP metrics at /metrics
if settings.metrics_enabled:
    Instrumentator().instrument(app).expose(app)

logger.info("%s %s started", settings.app_name, APP_VERSION)
