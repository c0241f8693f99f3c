"""SVG path definitions for links.

A link is drawn as ``M`` to the source followed by one elliptical arc
command per break point and one for the target::

    M0,0 A0,0 0 0,1 20,5 A0,0 0 0,1 16,0

The arc radius comes from the line type's radius strategy. Only the final
arc is clipped to the target's bounding box.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from link_path.link.clipping import clip_endpoint
from link_path.link.constants import (
    ARC_LARGE_ARC_FLAG,
    ARC_SWEEP_FLAG,
    ARC_X_AXIS_ROTATION,
    CLIP_THRESHOLD,
)
from link_path.link.radius import get_radius_strategy
from link_path.model import LineType, Point


def format_number(value: float) -> str:
    """Format a coordinate or radius for a path definition.

    Whole numbers drop the fractional part, other values keep their shortest
    round-trip representation. Non-finite values are written as ``NaN``,
    ``Infinity`` and ``-Infinity``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def arc_command(radius: float, x: float, y: float) -> str:
    """Return one arc command ending at (x, y)."""
    r = format_number(radius)
    return (
        f" A{r},{r} {ARC_X_AXIS_ROTATION} {ARC_LARGE_ARC_FLAG},{ARC_SWEEP_FLAG} "
        f"{format_number(x)},{format_number(y)}"
    )


def link_segments(
    source: object = None,
    target: object = None,
    line_type: object = LineType.STRAIGHT,
    break_points: Iterable[object] = (),
    target_width: float = 0,
    target_height: float = 0,
    threshold: float = CLIP_THRESHOLD,
) -> list[tuple[float, float, float]]:
    """Compute ``(radius, x, y)`` for every arc of a link, in drawing order.

    The last entry is the clipped target. There is always exactly one more
    entry than there are break points.
    """
    calc_radius = get_radius_strategy(line_type)
    start = Point.coerce(source)
    points = [Point.coerce(bp) for bp in break_points]
    points.append(Point.coerce(target))

    segments: list[tuple[float, float, float]] = []
    prev = start
    last = len(points) - 1
    for i, point in enumerate(points):
        radius = calc_radius(prev.x, prev.y, point.x, point.y)
        x, y = point.x, point.y
        if i == last:
            x, y = clip_endpoint(
                prev.x, prev.y, x, y, target_width, target_height, threshold,
            )
        segments.append((radius, x, y))
        prev = point

    return segments


def build_link_path_definition(
    source: object = None,
    target: object = None,
    line_type: object = LineType.STRAIGHT,
    break_points: Iterable[object] = (),
    target_width: float = 0,
    target_height: float = 0,
) -> str:
    """Return the SVG ``d`` attribute for a link.

    Parameters
    ----------
    source, target : Point, mapping, (x, y) pair or None
        Link endpoints. Missing coordinates become NaN.
    line_type : LineType or str
        ``STRAIGHT``, ``CURVE_SMOOTH`` or ``CURVE_FULL``. Anything else is
        drawn straight.
    break_points : iterable of points
        Waypoints the link passes through, in order.
    target_width, target_height : float
        Bounding box of the target node, used to stop the link at its edge.

    Degenerate geometry is never rejected: NaN and infinite coordinates are
    written into the path as ``NaN`` / ``Infinity``.
    """
    start = Point.coerce(source)
    segments = link_segments(
        start, target, line_type, break_points, target_width, target_height,
    )
    arcs = "".join(arc_command(r, x, y) for r, x, y in segments)
    return f"M{format_number(start.x)},{format_number(start.y)}{arcs}"
