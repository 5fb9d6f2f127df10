"""Write clean SVG output from a rendered shape tree."""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def serialize_svg(
    svg: ET.Element,
    title: str = "",
    description: str = "",
    xml_declaration: bool = True,
) -> str:
    """Generate SVG markup for a rendered root. The live node is left untouched."""
    root = copy.deepcopy(svg)
    root.set("role", "img")

    # <title> and <desc> must precede the drawn content
    if description:
        desc = ET.Element("desc")
        desc.text = description
        root.insert(0, desc)
    if title:
        title_el = ET.Element("title")
        title_el.text = title
        root.insert(0, title_el)

    markup = ET.tostring(root, encoding="unicode")
    if xml_declaration:
        return f"{_XML_DECLARATION}\n{markup}"
    return markup


def rasterize(svg_markup: str, size: int = 256) -> bytes:
    """Render SVG markup to PNG bytes using cairosvg."""
    import cairosvg

    png_bytes = cairosvg.svg2png(
        bytestring=svg_markup.encode("utf-8"),
        output_width=size,
        output_height=size,
    )
    logger.debug("Rasterized SVG to %dpx PNG (%d bytes)", size, len(png_bytes))
    return png_bytes
