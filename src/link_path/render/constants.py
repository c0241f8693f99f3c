"""Render constants for link previews."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Padding around the link's bounding box."""

MIN_CANVAS_SIZE: int = 100
"""Smallest width or height of an auto-sized preview."""

# ---------------------------------------------------------------------------
# Target box
# ---------------------------------------------------------------------------
TARGET_BOX_RADIUS: float = 3.0
"""Corner radius of the target rectangle."""

# ---------------------------------------------------------------------------
# Empty preview
# ---------------------------------------------------------------------------
EMPTY_SVG: str = '<svg xmlns="http://www.w3.org/2000/svg"></svg>'
"""Returned when the link has no finite coordinates to draw."""
