"""Dark grey theme."""

from link_path.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    link_color="#e0e0e0",
    link_width=2.0,
    node_fill="rgba(255, 255, 255, 0.06)",
    node_stroke="rgba(255, 255, 255, 0.4)",
    node_stroke_width=1.0,
    source_radius=5.0,
    break_point_fill="#f5b942",
    break_point_radius=3.0,
    arrow_length=3.5,
)
