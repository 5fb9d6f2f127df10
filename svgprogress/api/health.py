"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svgprogress import __version__
from svgprogress.engine.easing import easing_names
from svgprogress.models.responses import HealthResponse
from svgprogress.shapes.geometry import get_registry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes=get_registry().names(),
    )


@router.get("/easings")
async def easings() -> list[str]:
    return easing_names()
