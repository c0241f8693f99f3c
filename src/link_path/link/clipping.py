"""Endpoint clipping against a rectangular target.

A link aimed at a node's center would disappear under the node. The last
point of the path is therefore moved back along the link until it meets the
node's bounding box, then pushed out by a small threshold so the arrowhead
sits just outside the box.

Which edge the link crosses is decided by comparing slopes::

    alpha = atan(dy / dx)     slope of the link
    beta  = atan(h / w)       slope of the box diagonal (always >= 0)

If ``-beta < alpha <= beta`` the link enters through the left or right edge,
otherwise through the top or bottom edge.

Degenerate input is not guarded. A zero-length component on the side being
scaled, or a zero-sized box, produces NaN or infinite coordinates; callers
that care must check ``math.isfinite`` on the result.
"""

from __future__ import annotations

import math

from link_path.link.constants import CLIP_THRESHOLD


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def sign(value: float) -> float:
    """Return -1, 1, or the value itself for zeros and NaN."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return value


def crosses_side_edge(
    px: float,
    py: float,
    x: float,
    y: float,
    target_width: float,
    target_height: float,
) -> bool:
    """True if the link from (px, py) enters the target box through its left or right edge."""
    alpha = math.atan(safe_divide(y - py, x - px))
    beta = math.atan(safe_divide(target_height, target_width))
    return -beta < alpha <= beta


def clip_endpoint(
    px: float,
    py: float,
    x: float,
    y: float,
    target_width: float = 0,
    target_height: float = 0,
    threshold: float = CLIP_THRESHOLD,
) -> tuple[float, float]:
    """Clip the link (px, py) -> (x, y) to the box of the target at (x, y).

    Parameters
    ----------
    px, py : float
        The point preceding the target (source or last break point).
    x, y : float
        Center of the target.
    target_width, target_height : float
        Size of the target's bounding box, centered on (x, y).
    threshold : float
        Distance the clipped point is pushed out along the crossed axis.

    Returns
    -------
    tuple[float, float]
        The adjusted endpoint. May contain NaN or infinity for degenerate
        geometry.
    """
    dx = x - px
    dy = y - py

    if crosses_side_edge(px, py, x, y, target_width, target_height):
        direction = sign(dx)
        width_percent = safe_divide(target_width / 2, dx)
        x_new = x - direction * dx * width_percent + direction * threshold
        y_new = y - direction * dy * width_percent
    else:
        direction = sign(dy)
        height_percent = safe_divide(target_height / 2, dy)
        x_new = x - direction * dx * height_percent
        y_new = y - direction * dy * height_percent + direction * threshold

    return x_new, y_new
