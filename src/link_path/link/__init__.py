"""Link path construction.

Public API:
- build_link_path_definition: SVG ``d`` attribute for a link
- link_segments: per-arc (radius, x, y) triples behind the path
- get_radius_strategy: radius function for a line type
- clip_endpoint: stop a link at the edge of its target's box
"""

from link_path.link.clipping import clip_endpoint
from link_path.link.path import build_link_path_definition, link_segments
from link_path.link.radius import get_radius_strategy

__all__ = [
    "build_link_path_definition",
    "clip_endpoint",
    "get_radius_strategy",
    "link_segments",
]
