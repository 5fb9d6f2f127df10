"""Tests for the SVG tree built by ShapeRenderer."""

from __future__ import annotations

import pytest

from svgprogress.errors import UnimplementedGeometryError
from svgprogress.shapes.geometry import Geometry, get_geometry
from svgprogress.shapes.options import DEFAULT_OPTIONS, resolve_options
from svgprogress.shapes.renderer import ShapeRenderer
from svgprogress.svg.document import SVG_NS


def _build(document, name="circle", **user):
    opts = resolve_options(DEFAULT_OPTIONS, user)
    return ShapeRenderer(get_geometry(name), document).build(opts), opts


def test_root_viewbox(document):
    view, _ = _build(document)
    assert view.svg.tag == "svg"
    assert view.svg.get("viewBox") == "0 0 100 100"
    assert view.svg.get("xmlns") == SVG_NS


def test_no_trail_by_default(document):
    view, _ = _build(document)
    assert view.trail is None
    assert [child.tag for child in view.svg] == ["path"]


@pytest.mark.parametrize("user", [{"trailColor": "#eee"}, {"trailWidth": 0.5}])
def test_either_trail_option_adds_one_trail_first(document, user):
    view, _ = _build(document, **user)
    children = list(view.svg)
    assert len(children) == 2
    assert children[0] is view.trail
    assert children[1] is view.path


def test_primary_path_attributes(document):
    view, opts = _build(document, color="#000", strokeWidth=3)
    path = view.path
    assert path.get("d") == get_geometry("circle").path_string(opts)
    assert path.get("stroke") == "#000"
    assert path.get("stroke-width") == "3"
    assert path.get("fill-opacity") == "0"
    assert path.get("fill") is None


def test_primary_fill(document):
    view, _ = _build(document, fill="rgba(0, 0, 0, 0.1)")
    assert view.path.get("fill") == "rgba(0, 0, 0, 0.1)"
    assert view.path.get("fill-opacity") is None


def test_trail_defaults(document):
    view, _ = _build(document, trailWidth=2, strokeWidth=4)
    assert view.trail.get("stroke") == "#eee"
    assert view.trail.get("stroke-width") == "2"

    view, _ = _build(document, trailColor="#ccc", strokeWidth=4)
    assert view.trail.get("stroke") == "#ccc"
    assert view.trail.get("stroke-width") == "4"


def test_trail_never_filled(document):
    view, opts = _build(document, trailColor="#eee", fill="#f00")
    assert view.trail.get("fill") is None
    assert view.trail.get("fill-opacity") == "0"
    assert view.path.get("fill") == "#f00"
    # deriving the trail style left the options alone
    assert opts.fill == "#f00"
    assert opts.color == "#555"


def test_trail_uses_trail_string(document):
    view, opts = _build(document, name="square", trailColor="#eee", strokeWidth=2)
    square = get_geometry("square")
    assert view.trail.get("d") == square.trail_string(opts)
    assert view.path.get("d") == square.path_string(opts)


def test_base_geometry_cannot_render(document):
    opts = resolve_options(DEFAULT_OPTIONS, {})
    with pytest.raises(UnimplementedGeometryError):
        ShapeRenderer(Geometry(), document).build(opts)


def test_text_element_auto_style(document, container):
    opts = resolve_options(DEFAULT_OPTIONS, {"color": "#123"})
    renderer = ShapeRenderer(get_geometry("line"), document)
    element = renderer.create_text_element(opts, container)
    style = document.get_style(element)
    assert element.tag == "p"
    assert element.get("class") == "progressbar-text"
    assert style["position"] == "absolute"
    assert style["top"] == "50%"
    assert style["left"] == "50%"
    assert style["transform"] == "translate(-50%, -50%)"
    assert style["-webkit-transform"] == "translate(-50%, -50%)"
    assert style["color"] == "#123"
    assert document.get_style(container)["position"] == "relative"
    assert document.text_content_children(element) == []


def test_text_color_overrides_shape_color(document, container):
    opts = resolve_options(DEFAULT_OPTIONS, {"color": "#123", "text": {"color": "#f00"}})
    element = ShapeRenderer(get_geometry("line"), document).create_text_element(opts, container)
    assert document.get_style(element)["color"] == "#f00"


def test_text_element_without_auto_style(document, container):
    opts = resolve_options(DEFAULT_OPTIONS, {"text": {"autoStyle": False, "className": "label"}})
    element = ShapeRenderer(get_geometry("line"), document).create_text_element(opts, container)
    assert element.get("style") is None
    assert element.get("class") == "label"
    assert container.get("style") is None
