"""Default light theme."""

from link_path.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="none",
    link_color="#d3d3d3",
    link_width=1.5,
    node_fill="#ffffff",
    node_stroke="#333333",
    node_stroke_width=1.5,
    source_radius=4.0,
    break_point_fill="#ff9800",
    break_point_radius=2.5,
)
