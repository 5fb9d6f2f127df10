"""svgprogress — scalable vector progress indicators."""

__version__ = "0.1.0"

from svgprogress.errors import (
    ConstructorMisuseError,
    ContainerNotFoundError,
    DestroyedObjectError,
    ProgressBarError,
    UnimplementedGeometryError,
    UnknownShapeError,
)
from svgprogress.shapes import (
    Circle,
    Geometry,
    Line,
    ProgressShape,
    SemiCircle,
    ShapeOptions,
    Square,
    create_shape,
    resolve_options,
)
from svgprogress.svg.document import Document

__all__ = [
    "Circle",
    "ConstructorMisuseError",
    "ContainerNotFoundError",
    "DestroyedObjectError",
    "Document",
    "Geometry",
    "Line",
    "ProgressBarError",
    "ProgressShape",
    "SemiCircle",
    "ShapeOptions",
    "Square",
    "UnimplementedGeometryError",
    "UnknownShapeError",
    "create_shape",
    "resolve_options",
]
