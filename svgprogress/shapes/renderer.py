"""ShapeRenderer — builds the SVG tree for one shape from its geometry hooks."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svgprogress.shapes.geometry import Geometry
from svgprogress.shapes.options import ShapeOptions
from svgprogress.svg.document import Document
from svgprogress.utils.math_helpers import format_number

logger = logging.getLogger(__name__)

VIEWBOX = "0 0 100 100"
DEFAULT_TRAIL_COLOR = "#eee"


@dataclass
class SvgView:
    """Nodes produced by one build. ``trail`` is None when no trail was requested."""

    svg: ET.Element
    path: ET.Element
    trail: ET.Element | None = None


class ShapeRenderer:
    """Renders root, optional trail and primary path in the 0..100 space."""

    def __init__(self, geometry: Geometry, document: Document) -> None:
        self.geometry = geometry
        self.document = document

    def build(self, options: ShapeOptions) -> SvgView:
        svg = self.document.create_svg_element("svg")
        self._initialize_svg(svg, options)

        trail = None
        # Either trail option is the trigger for a trail path
        if options.has_trail:
            trail = self._create_trail(options)
            self.document.append_child(svg, trail)

        path = self._create_path(options)
        self.document.append_child(svg, path)

        logger.debug("Built %s view (trail=%s)", self.geometry.name, trail is not None)
        return SvgView(svg=svg, path=path, trail=trail)

    def create_text_element(self, options: ShapeOptions, container: ET.Element) -> ET.Element:
        """Empty text overlay for ``container``. The caller attaches it and sets content."""
        element = self.document.create_element("p")
        text = options.text

        if text.auto_style:
            self.document.set_style(container, "position", "relative")
            self.document.set_style(element, "position", "absolute")
            self.document.set_style(element, "top", "50%")
            self.document.set_style(element, "left", "50%")
            self.document.set_style(element, "padding", 0)
            self.document.set_style(element, "margin", 0)
            self.document.set_style(element, "transform", "translate(-50%, -50%)", prefixed=True)
            self.document.set_style(element, "color", text.color or options.color)

        element.set("class", text.class_name)
        return element

    def _initialize_svg(self, svg: ET.Element, options: ShapeOptions) -> None:
        svg.set("viewBox", VIEWBOX)

    def _create_path(self, options: ShapeOptions) -> ET.Element:
        return self._create_path_element(self.geometry.path_string(options), options)

    def _create_trail(self, options: ShapeOptions) -> ET.Element:
        # Geometry sees the original options; only styling is derived
        path_string = self.geometry.trail_string(options)

        trail_options = options.model_copy(
            update={
                "color": options.trail_color or DEFAULT_TRAIL_COLOR,
                "stroke_width": options.trail_width or options.stroke_width,
                # The fill belongs to the primary path; a filled trail would clip its stroke
                "fill": None,
            }
        )
        return self._create_path_element(path_string, trail_options)

    def _create_path_element(self, path_string: str, options: ShapeOptions) -> ET.Element:
        path = self.document.create_svg_element("path")
        path.set("d", path_string)
        path.set("stroke", options.color)
        path.set("stroke-width", format_number(options.stroke_width))

        if options.fill:
            path.set("fill", options.fill)
        else:
            path.set("fill-opacity", "0")

        return path
