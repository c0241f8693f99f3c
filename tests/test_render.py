"""Tests for SVG link previews."""

import math
import xml.etree.ElementTree as ET

from link_path.link.path import build_link_path_definition
from link_path.model import LineType
from link_path.render.constants import EMPTY_SVG
from link_path.render.svg import render_link_svg
from link_path.themes import DARK_THEME, DEFAULT_THEME

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render_simple(**kwargs):
    return render_link_svg(
        (0, 0), (120, 40), LineType.CURVE_SMOOTH, [(40, 60)], 30, 20, **kwargs
    )


def _link_path(root):
    paths = [p for p in root.iter(f"{SVG_NS}path") if p.get("marker-end")]
    assert len(paths) == 1
    return paths[0]


def test_render_produces_valid_svg():
    root = ET.fromstring(_render_simple())
    assert root.tag.endswith("svg")


def test_link_path_matches_path_definition():
    root = ET.fromstring(_render_simple())
    expected = build_link_path_definition(
        (0, 0), (120, 40), LineType.CURVE_SMOOTH, [(40, 60)], 30, 20,
    )
    assert _link_path(root).get("d") == expected


def test_link_has_arrowhead_marker():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert _link_path(root).get("marker-end").startswith("url(#")
    assert list(root.iter(f"{SVG_NS}marker"))


def test_link_uses_theme_color():
    root = ET.fromstring(_render_simple())
    link = _link_path(root)
    assert link.get("stroke") == DEFAULT_THEME.link_color
    assert link.get("fill") == "none"


def test_target_box_is_drawn():
    root = ET.fromstring(_render_simple())
    rects = [r for r in root.iter(f"{SVG_NS}rect")
             if r.get("stroke") == DEFAULT_THEME.node_stroke]
    assert len(rects) == 1
    assert float(rects[0].get("width")) == 30
    assert float(rects[0].get("height")) == 20


def test_no_target_box_without_dimensions():
    svg = render_link_svg((0, 0), (100, 0))
    root = ET.fromstring(svg)
    assert not list(root.iter(f"{SVG_NS}rect"))


def test_source_and_break_points_are_drawn():
    svg = render_link_svg((0, 0), (100, 0), "STRAIGHT", [(20, 20), (50, -20), (80, 10)])
    root = ET.fromstring(svg)
    circles = list(root.iter(f"{SVG_NS}circle"))
    assert len(circles) == 4
    dots = [c for c in circles if c.get("fill") == DEFAULT_THEME.break_point_fill]
    assert len(dots) == 3


def test_dark_theme_background():
    svg = _render_simple(theme=DARK_THEME)
    assert DARK_THEME.background_color in svg


def test_default_theme_has_no_background():
    svg = _render_simple()
    assert DARK_THEME.background_color not in svg


def test_explicit_size():
    root = ET.fromstring(_render_simple(width=640, height=480))
    assert float(root.get("width")) == 640
    assert float(root.get("height")) == 480


def test_nan_endpoint_still_renders():
    svg = render_link_svg((0, 0), (0, 10), LineType.STRAIGHT, [], 0, 10)
    root = ET.fromstring(svg)
    assert _link_path(root).get("d") == "M0,0 A0,0 0 0,1 NaN,NaN"


def test_undefined_link_renders_empty_svg():
    assert render_link_svg(None, None) == EMPTY_SVG


def test_overflowing_span_renders_empty_svg():
    """Finite coordinates whose span overflows to infinity cannot be sized."""
    svg = render_link_svg((-1e308, 0), (1e308, 0), LineType.STRAIGHT, [], 4, 4)
    assert svg == EMPTY_SVG


def test_nan_target_size_draws_no_box():
    svg = render_link_svg((0, 0), (100, 0), LineType.STRAIGHT, [], math.nan, 10)
    root = ET.fromstring(svg)
    assert not list(root.iter(f"{SVG_NS}rect"))
    assert "nan" not in svg


def test_infinite_target_size_draws_no_box():
    svg = render_link_svg((0, 0), (100, 0), LineType.STRAIGHT, [], 20, math.inf)
    root = ET.fromstring(svg)
    assert not list(root.iter(f"{SVG_NS}rect"))
