"""POST /api/render, /api/frames — server-side progress indicator rendering."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from svgprogress.config import settings
from svgprogress.engine.scheduler import SteppedFrameScheduler
from svgprogress.errors import UnknownShapeError
from svgprogress.models.requests import FramesRequest, RenderRequest
from svgprogress.models.responses import FramesResponse
from svgprogress.shapes.base import ProgressShape, create_shape
from svgprogress.svg.document import Document
from svgprogress.svg.serializer import rasterize, serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()

_HOST_MARKUP = '<div id="progress"></div>'

_MEDIA_TYPES = {
    "svg": "image/svg+xml",
    "png": "image/png",
    "html": "text/html",
}


def _build(
    kind: str,
    options: dict[str, Any],
    scheduler: SteppedFrameScheduler,
) -> tuple[Document, ProgressShape]:
    """Render a shape into a fresh host, translating misuse into HTTP errors."""
    document = Document.from_string(_HOST_MARKUP)
    try:
        shape = create_shape(kind, "#progress", options, document=document, scheduler=scheduler)
    except UnknownShapeError as e:
        logger.warning("Render rejected: %s", e)
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        logger.warning("Render rejected: invalid options: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return document, shape


@router.post("/render")
async def render(req: RenderRequest) -> Response:
    document, shape = _build(req.shape, req.options, SteppedFrameScheduler())
    shape.set(req.progress)
    if req.text is not None:
        shape.set_text(req.text)

    if req.format == "html":
        content: str | bytes = document.to_string()
    else:
        content = serialize_svg(shape.svg, title=f"{req.progress:.0%}")
        if req.format == "png":
            content = rasterize(content, req.size or settings.raster_size)

    logger.info("Rendered %s at %.3f as %s", req.shape, req.progress, req.format)
    return Response(content=content, media_type=_MEDIA_TYPES[req.format])


@router.post("/frames", response_model=FramesResponse)
async def frames(req: FramesRequest) -> FramesResponse:
    scheduler = SteppedFrameScheduler(interval_ms=1000.0 / req.fps)
    _, shape = _build(req.shape, req.options, scheduler)

    expected = shape.options.duration * req.fps / 1000.0
    if expected > settings.max_capture_frames:
        logger.warning("Frames rejected: %.0f frames requested", expected)
        raise HTTPException(
            status_code=422,
            detail=f"Animation would capture {expected:.0f} frames; the limit is {settings.max_capture_frames}",
        )
    shape.set(req.start)

    captured: list[str] = []

    def capture(state: dict[str, Any], reference: Any, attachment: ProgressShape) -> None:
        captured.append(serialize_svg(attachment.svg, xml_declaration=False))

    try:
        shape.animate(req.progress, {"step": capture})
    except ValueError as e:
        logger.warning("Frames rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    # One frame of slack for float rounding in the elapsed time
    scheduler.run_until_idle(max_frames=settings.max_capture_frames + 1)

    logger.info("Captured %d frames for %s %.3f -> %.3f", len(captured), req.shape, req.start, req.progress)
    return FramesResponse(
        frames=captured,
        value=shape.value(),
        duration_ms=shape.options.duration,
    )
