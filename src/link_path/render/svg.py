"""SVG preview of a single link using drawsvg."""

from __future__ import annotations

import math
from collections.abc import Iterable

import drawsvg as draw

from link_path.link.path import build_link_path_definition
from link_path.model import LineType, Point
from link_path.render.constants import (
    CANVAS_PADDING,
    EMPTY_SVG,
    MIN_CANVAS_SIZE,
    TARGET_BOX_RADIUS,
)
from link_path.render.style import Theme
from link_path.themes import DEFAULT_THEME


def render_link_svg(
    source: object,
    target: object,
    line_type: object = LineType.STRAIGHT,
    break_points: Iterable[object] = (),
    target_width: float = 0,
    target_height: float = 0,
    theme: Theme = DEFAULT_THEME,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a link, its break points and its target box to an SVG string.

    The link path's ``d`` attribute is exactly what
    ``build_link_path_definition`` returns for the same arguments.
    """
    start = Point.coerce(source)
    end = Point.coerce(target)
    waypoints = [Point.coerce(bp) for bp in break_points]

    bounds = _bounds(start, end, waypoints, target_width, target_height)
    if bounds is None:
        return EMPTY_SVG
    min_x, min_y, max_x, max_y = bounds

    span_x = max_x - min_x + padding * 2
    span_y = max_y - min_y + padding * 2
    if not (math.isfinite(span_x) and math.isfinite(span_y)):
        return EMPTY_SVG

    svg_width = width or max(int(span_x), MIN_CANVAS_SIZE)
    svg_height = height or max(int(span_y), MIN_CANVAS_SIZE)

    d = draw.Drawing(svg_width, svg_height, origin=(min_x - padding, min_y - padding))

    if theme.background_color != "none":
        d.append(draw.Rectangle(
            min_x - padding, min_y - padding, svg_width, svg_height,
            fill=theme.background_color,
        ))

    _render_target(d, end, target_width, target_height, theme)

    path_def = build_link_path_definition(
        start, end, line_type, waypoints, target_width, target_height,
    )
    d.append(draw.Path(
        d=path_def,
        stroke=theme.link_color,
        stroke_width=theme.link_width,
        fill="none",
        marker_end=_arrow_marker(theme),
    ))

    _render_points(d, start, waypoints, theme)

    return d.as_svg()


def _bounds(
    start: Point,
    end: Point,
    waypoints: list[Point],
    target_width: float,
    target_height: float,
) -> tuple[float, float, float, float] | None:
    """Bounding box of every finite coordinate in the preview."""
    xs: list[float] = []
    ys: list[float] = []
    for p in [start, *waypoints]:
        if math.isfinite(p.x) and math.isfinite(p.y):
            xs.append(p.x)
            ys.append(p.y)
    if math.isfinite(end.x) and math.isfinite(end.y):
        half_w = target_width / 2 if math.isfinite(target_width) else 0
        half_h = target_height / 2 if math.isfinite(target_height) else 0
        xs.extend([end.x - half_w, end.x + half_w])
        ys.extend([end.y - half_h, end.y + half_h])
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


def _arrow_marker(theme: Theme) -> draw.Marker:
    """Arrowhead drawn at the clipped end of the link."""
    length = theme.arrow_length
    half = theme.arrow_width / 2
    marker = draw.Marker(
        -length, -half, 0, half,
        scale=1,
        orient="auto",
        markerUnits="strokeWidth",
    )
    marker.append(draw.Lines(
        -length, -half,
        0, 0,
        -length, half,
        close=True,
        fill=theme.link_color,
    ))
    return marker


def _render_target(
    d: draw.Drawing,
    end: Point,
    target_width: float,
    target_height: float,
    theme: Theme,
) -> None:
    """Render the target's bounding box centered on the target point."""
    if not (math.isfinite(target_width) and target_width > 0):
        return
    if not (math.isfinite(target_height) and target_height > 0):
        return
    if not (math.isfinite(end.x) and math.isfinite(end.y)):
        return
    d.append(draw.Rectangle(
        end.x - target_width / 2, end.y - target_height / 2,
        target_width, target_height,
        rx=TARGET_BOX_RADIUS, ry=TARGET_BOX_RADIUS,
        fill=theme.node_fill,
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
    ))


def _render_points(
    d: draw.Drawing,
    start: Point,
    waypoints: list[Point],
    theme: Theme,
) -> None:
    """Render the source as a node circle and break points as small dots."""
    if math.isfinite(start.x) and math.isfinite(start.y):
        d.append(draw.Circle(
            start.x, start.y, theme.source_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
    for wp in waypoints:
        if not (math.isfinite(wp.x) and math.isfinite(wp.y)):
            continue
        d.append(draw.Circle(
            wp.x, wp.y, theme.break_point_radius,
            fill=theme.break_point_fill,
        ))
