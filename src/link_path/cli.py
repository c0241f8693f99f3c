"""CLI for link-path."""

from __future__ import annotations

import math
from pathlib import Path

import click

from link_path import __version__
from link_path.link import build_link_path_definition, link_segments
from link_path.link.path import format_number
from link_path.link.radius import get_radius_strategy
from link_path.model import LineType, Point, resolve_line_type
from link_path.render import render_link_svg
from link_path.themes import THEMES


class PointType(click.ParamType):
    """An ``X,Y`` coordinate pair."""

    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, Point):
            return value
        parts = str(value).split(",")
        if len(parts) != 2:
            self.fail(f"{value!r} is not an X,Y pair", param, ctx)
        try:
            return Point(float(parts[0]), float(parts[1]))
        except ValueError:
            self.fail(f"{value!r} has a non-numeric coordinate", param, ctx)


POINT = PointType()


def _link_options(func):
    """Options shared by every command that describes a link."""
    options = [
        click.option("-s", "--source", type=POINT, required=True,
                     help="Source point as X,Y"),
        click.option("-t", "--target", type=POINT, required=True,
                     help="Target point as X,Y"),
        click.option("--type", "line_type", default=LineType.STRAIGHT.value,
                     help="Line type: STRAIGHT, CURVE_SMOOTH or CURVE_FULL. "
                          "Unknown values are drawn straight (default: STRAIGHT)"),
        click.option("-b", "--break", "break_points", type=POINT, multiple=True,
                     help="Break point as X,Y. Repeat for several, in order"),
        click.option("--target-width", type=click.FloatRange(min=0), default=0.0,
                     help="Width of the target node's box (default: 0)"),
        click.option("--target-height", type=click.FloatRange(min=0), default=0.0,
                     help="Height of the target node's box (default: 0)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """link-path: SVG arc path definitions for graph links."""


@cli.command()
@_link_options
def path(
    source: Point,
    target: Point,
    line_type: str,
    break_points: tuple[Point, ...],
    target_width: float,
    target_height: float,
) -> None:
    """Print the SVG path definition of a link."""
    click.echo(build_link_path_definition(
        source, target, line_type, break_points, target_width, target_height,
    ))


@cli.command()
@_link_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=Path("link.svg"),
              help="Output SVG file path (default: link.svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="default",
              help="Visual theme (default: default)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
def render(
    source: Point,
    target: Point,
    line_type: str,
    break_points: tuple[Point, ...],
    target_width: float,
    target_height: float,
    output: Path,
    theme: str,
    width: int | None,
    height: int | None,
) -> None:
    """Render an SVG preview of a link."""
    svg = render_link_svg(
        source, target, line_type, break_points, target_width, target_height,
        theme=THEMES[theme], width=width, height=height,
    )
    output.write_text(svg + "\n")
    click.echo(f"Rendered {len(break_points) + 1} segments -> {output}")


@cli.command()
@_link_options
def info(
    source: Point,
    target: Point,
    line_type: str,
    break_points: tuple[Point, ...],
    target_width: float,
    target_height: float,
) -> None:
    """Show how a link's path is built, segment by segment."""
    resolved = resolve_line_type(line_type)
    if resolved.value != line_type:
        click.echo(f"Unknown line type '{line_type}', using {resolved.value}",
                   err=True)
    segments = link_segments(
        source, target, resolved, break_points, target_width, target_height,
    )

    click.echo(f"Type: {resolved.value}")
    click.echo(f"Radius strategy: {get_radius_strategy(resolved).__name__}")
    click.echo(f"Segments: {len(segments)}")
    for i, (radius, x, y) in enumerate(segments, start=1):
        click.echo(f"  [{i}] radius {format_number(radius)} -> "
                   f"{format_number(x)},{format_number(y)}")
    clipped_x, clipped_y = segments[-1][1], segments[-1][2]
    click.echo(f"Target: {format_number(target.x)},{format_number(target.y)} "
               f"clipped to {format_number(clipped_x)},{format_number(clipped_y)}")
    if not (math.isfinite(clipped_x) and math.isfinite(clipped_y)):
        click.echo("Warning: clipped endpoint is not finite", err=True)
