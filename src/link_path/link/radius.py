"""Arc radius strategies, one per line type.

Every strategy takes the two endpoints of a segment as ``(x1, y1, x2, y2)``
and returns the radius used for both axes of that segment's arc command.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from link_path.link.constants import FULL_CURVE_RADIUS, STRAIGHT_RADIUS
from link_path.model import LineType, resolve_line_type

RadiusStrategy = Callable[[float, float, float, float], float]


def straight_line_radius(x1: float, y1: float, x2: float, y2: float) -> float:
    """Radius for a straight line (always zero)."""
    return STRAIGHT_RADIUS


def smooth_curve_radius(x1: float, y1: float, x2: float, y2: float) -> float:
    """Radius for a smooth curve: the length of the segment.

    A radius equal to the chord gives the same gentle bow at any scale
    (see mbostock's "Mobile Patent Suits" block).
    """
    dx = x2 - x1
    dy = y2 - y1
    # NaN for any NaN input, even alongside an infinity
    return math.sqrt(dx * dx + dy * dy)


def full_curve_radius(x1: float, y1: float, x2: float, y2: float) -> float:
    """Radius for a full curve (semi circumference)."""
    return FULL_CURVE_RADIUS


def get_radius_strategy(line_type: object = LineType.STRAIGHT) -> RadiusStrategy:
    """Return the radius strategy for a line type.

    Accepts a LineType or its exact name. Unknown values get the straight
    line strategy.
    """
    line_type = resolve_line_type(line_type)
    if line_type is LineType.CURVE_SMOOTH:
        return smooth_curve_radius
    elif line_type is LineType.CURVE_FULL:
        return full_curve_radius
    else:
        return straight_line_radius
