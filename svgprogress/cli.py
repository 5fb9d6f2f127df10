"""Command-line renderer — write a progress indicator to SVG or PNG."""

from __future__ import annotations

import argparse
import logging
import sys

from svgprogress.config import settings
from svgprogress.engine.scheduler import SteppedFrameScheduler
from svgprogress.errors import UnknownShapeError
from svgprogress.shapes.base import create_shape
from svgprogress.shapes.geometry import get_registry
from svgprogress.svg.document import Document
from svgprogress.svg.serializer import rasterize, serialize_svg

logger = logging.getLogger(__name__)


def _progress(value: str) -> float:
    progress = float(value)
    if not 0.0 <= progress <= 1.0:
        raise argparse.ArgumentTypeError(f"progress must be within [0, 1], got {value}")
    return progress


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svgprogress", description="Render a progress indicator")
    parser.add_argument("shape", help=f"Shape name ({', '.join(get_registry().names())})")
    parser.add_argument("progress", type=_progress, help="Progress in [0, 1]")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--color", help="Stroke color")
    parser.add_argument("--trail-color", help="Trail stroke color (enables the trail)")
    parser.add_argument("--stroke-width", type=float, help="Stroke width in viewBox units")
    parser.add_argument("--fill", help="Fill color of the primary path")
    parser.add_argument("--text", help="Text overlay; writes the host HTML fragment instead of bare SVG")
    parser.add_argument("--title", default="", help="Accessible <title> for the SVG")
    parser.add_argument("--png", action="store_true", help="Write PNG instead of SVG")
    parser.add_argument("--size", type=int, default=settings.raster_size, help="PNG edge length in pixels")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def render(args: argparse.Namespace) -> bytes:
    options = {
        key: value
        for key, value in (
            ("color", args.color),
            ("trailColor", args.trail_color),
            ("strokeWidth", args.stroke_width),
            ("fill", args.fill),
        )
        if value is not None
    }

    document = Document.from_string('<div id="progress"></div>')
    shape = create_shape(args.shape, "#progress", options, document=document, scheduler=SteppedFrameScheduler())
    shape.set(args.progress)

    if args.text is not None:
        shape.set_text(args.text)
        markup = document.to_string()
    else:
        markup = serialize_svg(shape.svg, title=args.title)
    shape.destroy()

    if args.png:
        return rasterize(markup, args.size)
    return markup.encode("utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.text is not None and args.png:
        parser.error("--text cannot be combined with --png")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        data = render(args)
    except UnknownShapeError as e:
        parser.error(str(e))
    except ValueError as e:
        parser.error(f"invalid options: {e}")

    if args.output:
        with open(args.output, "wb") as f:
            f.write(data)
        logger.info("Saved %s", args.output)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.write(b"\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
