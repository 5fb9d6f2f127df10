"""API request models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    shape: str = Field(..., description="Registered shape name (line, circle, semicircle, square)")
    progress: float = Field(..., ge=0.0, le=1.0, description="Progress to render")
    options: dict[str, Any] = Field(default_factory=dict, description="Shape options")
    text: str | None = Field(default=None, description="Text overlay (html format only)")
    format: Literal["svg", "png", "html"] = Field(default="svg", description="Output format")
    size: int | None = Field(default=None, gt=0, le=4096, description="PNG edge length in pixels")


class FramesRequest(BaseModel):
    shape: str = Field(..., description="Registered shape name")
    progress: float = Field(..., ge=0.0, le=1.0, description="Progress to animate to")
    start: float = Field(default=0.0, ge=0.0, le=1.0, description="Progress to animate from")
    options: dict[str, Any] = Field(default_factory=dict, description="Shape options")
    fps: int = Field(default=30, gt=0, le=120, description="Frames per second to capture")
