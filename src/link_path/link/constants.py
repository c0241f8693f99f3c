"""Geometric constants for link path construction."""

# ---------------------------------------------------------------------------
# Endpoint clipping
# ---------------------------------------------------------------------------
CLIP_THRESHOLD: float = 8.0
"""Pixels the clipped endpoint is pushed past the target edge.

Leaves room for the arrowhead marker drawn at the end of the link.
"""

# ---------------------------------------------------------------------------
# Arc commands
# ---------------------------------------------------------------------------
ARC_X_AXIS_ROTATION: int = 0
"""Rotation of the arc ellipse's x-axis, in degrees."""

ARC_LARGE_ARC_FLAG: int = 0
"""Always draw the minor arc."""

ARC_SWEEP_FLAG: int = 1
"""Always sweep in the positive-angle direction."""

# ---------------------------------------------------------------------------
# Radius strategies
# ---------------------------------------------------------------------------
STRAIGHT_RADIUS: float = 0
"""Arc radius that degenerates into a straight segment."""

FULL_CURVE_RADIUS: float = 1
"""Arc radius used for full curves.

SVG scales a too-small radius up until the arc fits, so this yields a
half-ellipse through both endpoints.
"""
