"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes: list[str] = Field(default_factory=list)


class FramesResponse(BaseModel):
    frames: list[str] = Field(default_factory=list)
    value: float = 0.0
    duration_ms: float = 0.0
