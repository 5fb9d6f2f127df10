"""Geometry providers — per-shape path hooks in the 0..100 normalized space.

Every shape is a Geometry subclass registered via decorator:

    @geometry("line")
    class LineGeometry(Geometry):
        def path_string(self, options: ShapeOptions) -> str:
            return "M 0,50 L 100,50"

Adding a new shape = one class with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging

from svgprogress.errors import UnimplementedGeometryError, UnknownShapeError
from svgprogress.shapes.options import ShapeOptions
from svgprogress.utils.math_helpers import format_number as _n

logger = logging.getLogger(__name__)


class Geometry:
    """Base geometry. Concrete shapes override both hooks."""

    name = "base"

    def path_string(self, options: ShapeOptions) -> str:
        raise UnimplementedGeometryError("path_string")

    def trail_string(self, options: ShapeOptions) -> str:
        raise UnimplementedGeometryError("trail_string")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class GeometryRegistry:
    """Registry of geometry classes by shape name."""

    def __init__(self) -> None:
        self._geometries: dict[str, type[Geometry]] = {}

    def register(self, name: str, cls: type[Geometry]) -> None:
        if name in self._geometries:
            raise ValueError(f"Duplicate geometry: {name}")
        self._geometries[name] = cls
        logger.debug("Registered geometry %s (%s)", name, cls.__name__)

    def get(self, name: str) -> Geometry:
        """A fresh geometry instance for ``name``."""
        try:
            cls = self._geometries[name]
        except KeyError:
            raise UnknownShapeError(name) from None
        return cls()

    def names(self) -> list[str]:
        return sorted(self._geometries)

    def __contains__(self, name: object) -> bool:
        return name in self._geometries

    @property
    def count(self) -> int:
        return len(self._geometries)


# Module-level singleton
_registry = GeometryRegistry()


def get_registry() -> GeometryRegistry:
    return _registry


def get_geometry(name: str) -> Geometry:
    return _registry.get(name)


def geometry(name: str):
    """Decorator to register a geometry class under a shape name."""

    def decorator(cls: type[Geometry]) -> type[Geometry]:
        cls.name = name
        _registry.register(name, cls)
        return cls

    return decorator


def _wider_stroke(options: ShapeOptions) -> float:
    if options.trail_width and options.trail_width > options.stroke_width:
        return options.trail_width
    return options.stroke_width


@geometry("line")
class LineGeometry(Geometry):
    """Horizontal bar across the middle of the box."""

    def path_string(self, options: ShapeOptions) -> str:
        return "M 0,50 L 100,50"

    def trail_string(self, options: ShapeOptions) -> str:
        return self.path_string(options)


@geometry("circle")
class CircleGeometry(Geometry):
    """Full circle starting at 12 o'clock, drawn clockwise as two arcs."""

    def path_string(self, options: ShapeOptions) -> str:
        # Inset so the wider of the two strokes stays inside the box
        r = 50 - _wider_stroke(options) / 2
        return (
            f"M 50,50 m 0,-{_n(r)} "
            f"a {_n(r)},{_n(r)} 0 1 1 0,{_n(2 * r)} "
            f"a {_n(r)},{_n(r)} 0 1 1 0,-{_n(2 * r)}"
        )

    def trail_string(self, options: ShapeOptions) -> str:
        return self.path_string(options)


@geometry("semicircle")
class SemiCircleGeometry(Geometry):
    """Upper half circle from 9 o'clock to 3 o'clock."""

    def path_string(self, options: ShapeOptions) -> str:
        r = 50 - _wider_stroke(options) / 2
        return f"M 50,50 m -{_n(r)},0 a {_n(r)},{_n(r)} 0 1 1 {_n(2 * r)},0"

    def trail_string(self, options: ShapeOptions) -> str:
        return self.path_string(options)


@geometry("square")
class SquareGeometry(Geometry):
    """Square outline traced clockwise from the top-left corner."""

    def path_string(self, options: ShapeOptions) -> str:
        w = _n(100 - options.stroke_width / 2)
        half = _n(options.stroke_width / 2)
        return f"M 0,{half} L {w},{half} L {w},{w} L {half},{w} L {half},{_n(options.stroke_width)}"

    def trail_string(self, options: ShapeOptions) -> str:
        w = _n(100 - options.stroke_width / 2)
        half = _n(options.stroke_width / 2)
        return f"M {half},{half} L {w},{half} L {w},{w} L {half},{w} L {half},{half}"
