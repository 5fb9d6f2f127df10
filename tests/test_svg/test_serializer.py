"""Tests for SVG serialization."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgprogress.shapes.base import Circle
from svgprogress.svg.serializer import rasterize, serialize_svg


def test_markup_structure(document, scheduler):
    shape = Circle("#c", {"color": "#000", "trailColor": "#eee"}, document=document, scheduler=scheduler)
    shape.set(0.5)
    markup = serialize_svg(shape.svg)
    assert markup.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 100 100"' in markup
    # trail before path
    assert markup.index('stroke="#eee"') < markup.index('stroke="#000"')

    root = ET.fromstring(markup.split("\n", 1)[1])
    assert root.get("role") == "img"


def test_title_and_desc_first(document, scheduler):
    shape = Circle("#c", document=document, scheduler=scheduler)
    markup = serialize_svg(shape.svg, title="50%", description="Upload", xml_declaration=False)
    root = ET.fromstring(markup)
    assert [child.tag.split("}")[-1] for child in root][:3] == ["title", "desc", "path"]
    assert root[0].text == "50%"


def test_live_tree_untouched(document, scheduler):
    shape = Circle("#c", document=document, scheduler=scheduler)
    serialize_svg(shape.svg, title="t")
    assert shape.svg.get("role") is None
    assert [child.tag for child in shape.svg] == ["path"]


def test_rasterize_png(document, scheduler):
    pytest.importorskip("cairosvg")
    shape = Circle("#c", {"color": "#000"}, document=document, scheduler=scheduler)
    shape.set(0.75)
    png = rasterize(serialize_svg(shape.svg), size=32)
    assert png.startswith(b"\x89PNG")
