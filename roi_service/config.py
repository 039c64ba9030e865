from __future__ import annotations

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field("ROI Scenario Service", alias="APP_NAME")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    currency_symbol: str = Field(
        "$",
        alias="CURRENCY_SYMBOL",
        description="Prefix used when formatting monetary amounts",
    )
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    model_config = ConfigDict(
        extra="ignore",
        env_file=".env",
        case_sensitive=False,
    )
