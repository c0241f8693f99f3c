"""SVG preview rendering for links."""

from link_path.render.svg import render_link_svg

__all__ = ["render_link_svg"]
