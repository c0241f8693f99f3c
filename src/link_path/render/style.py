"""Theme for link previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a link preview."""

    name: str
    background_color: str
    link_color: str
    link_width: float
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    source_radius: float
    break_point_fill: str
    break_point_radius: float
    # Arrowhead marker, in units of link_width
    arrow_length: float = 4.0
    arrow_width: float = 3.0
