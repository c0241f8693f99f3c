"""link-path: SVG arc path definitions for graph links."""

from link_path.link import (
    build_link_path_definition,
    clip_endpoint,
    get_radius_strategy,
)
from link_path.model import LineType, Point, resolve_line_type
from link_path.render import render_link_svg

__version__ = "0.1.0"

__all__ = [
    "LineType",
    "Point",
    "build_link_path_definition",
    "clip_endpoint",
    "get_radius_strategy",
    "render_link_svg",
    "resolve_line_type",
]
