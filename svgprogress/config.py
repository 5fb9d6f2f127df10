"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgprogress_env: str = "development"
    svgprogress_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Animation defaults
    frame_rate: int = 60
    default_duration_ms: int = 800
    default_easing: str = "linear"

    # Upper bound on frames one /api/frames request may capture
    max_capture_frames: int = 2000

    # Raster output edge length in pixels
    raster_size: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
