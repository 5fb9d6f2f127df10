"""Progress shapes — options, geometry, rendering and lifecycle."""

from svgprogress.shapes.base import (
    Circle,
    Line,
    ProgressShape,
    SemiCircle,
    Square,
    create_shape,
)
from svgprogress.shapes.geometry import Geometry, geometry, get_geometry, get_registry
from svgprogress.shapes.options import DEFAULT_OPTIONS, ShapeOptions, TextOptions, resolve_options
from svgprogress.shapes.renderer import ShapeRenderer, SvgView

__all__ = [
    "Circle",
    "DEFAULT_OPTIONS",
    "Geometry",
    "Line",
    "ProgressShape",
    "SemiCircle",
    "ShapeOptions",
    "ShapeRenderer",
    "Square",
    "SvgView",
    "TextOptions",
    "create_shape",
    "geometry",
    "get_geometry",
    "get_registry",
    "resolve_options",
]
