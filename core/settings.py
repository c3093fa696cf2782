"""Dashboard settings loaded from environment variables and ``.env``."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.policy import (
    DEFAULT_MAX_LIQUIDITY_MILLIONS,
    DEFAULT_REFRESH_INTERVAL_SEC,
    LIQUIDITY_STEP_MILLIONS,
)


class Settings(BaseSettings):
    """Application settings. Every field can be overridden with ``FUNDING_<NAME>``."""

    # Base URL of the backend that serves /api/hyperliquid/data
    api_base_url: str = "http://localhost:8001"

    refresh_interval_sec: float = Field(default=DEFAULT_REFRESH_INTERVAL_SEC, gt=0)
    request_timeout_sec: float = Field(default=10.0, gt=0)

    # Slider range used before the first snapshot arrives
    default_max_liquidity_millions: float = Field(default=DEFAULT_MAX_LIQUIDITY_MILLIONS, gt=0)
    liquidity_step_millions: float = Field(default=LIQUIDITY_STEP_MILLIONS, gt=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FUNDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
