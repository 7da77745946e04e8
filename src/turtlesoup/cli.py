"""CLI for turtlesoup."""

import logging
from pathlib import Path

import click

from .config import Config
from .drawing import DRAWINGS, draw_personal_art
from .geometry import chord_length, distance
from .planner import find_path
from .turtle import Point, SimpleTurtle

logger = logging.getLogger(__name__)

EXPORTERS = ("html", "gcode")


def _exporter(fmt: str, config: Config):
    if fmt == "gcode":
        from .gcode import GcodeExporter

        return GcodeExporter(config)

    from .html import HtmlExporter

    return HtmlExporter(config)


def _parse_point(value: str) -> Point:
    try:
        x, y = value.split(",")
        return Point(float(x), float(y))
    except ValueError:
        raise click.BadParameter(f"expected X,Y but got {value!r}", param_hint="WAYPOINTS") from None


def _load_config(path: Path | None) -> Config:
    if path is None:
        return Config()
    try:
        return Config.load(path)
    except (OSError, ValueError) as e:
        raise click.BadParameter(f"cannot load {path}: {e}", param_hint="--config") from None


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """turtlesoup - Turtle graphics drawings and path planning."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("drawing", type=click.Choice(sorted(DRAWINGS)), default="art")
@click.option("--output", "-o", type=Path, help="Output file (default from config)")
@click.option("--format", "-f", "fmt", type=click.Choice(EXPORTERS), default="html")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path))
@click.option("--no-open", is_flag=True, help="Don't open the result in a viewer")
def draw(drawing: str, output: Path | None, fmt: str, config_path: Path | None, no_open: bool):
    """Draw a figure and export it."""
    from .viewer import publish

    config = _load_config(config_path)
    turtle = SimpleTurtle()
    DRAWINGS[drawing](turtle)
    segments = turtle.get_path()
    logger.debug("%s: %d segments", drawing, len(segments))

    content = _exporter(fmt, config).export(segments)
    saved = publish(content, output or config.output, show=not no_open)
    if saved is None:
        raise click.ClickException("Drawing could not be saved")
    click.echo(f"Saved: {saved}")


@main.command()
@click.argument("radius", type=float)
@click.argument("angle", type=float)
def chord(radius: float, angle: float):
    """Chord length for a central ANGLE (degrees) on a circle of RADIUS."""
    click.echo(chord_length(radius, angle))


@main.command("distance")
@click.argument("x1", type=float)
@click.argument("y1", type=float)
@click.argument("x2", type=float)
@click.argument("y2", type=float)
def distance_cmd(x1: float, y1: float, x2: float, y2: float):
    """Distance between (X1, Y1) and (X2, Y2)."""
    click.echo(distance(Point(x1, y1), Point(x2, y2)))


@main.command()
@click.argument("waypoints", nargs=-1, required=True)
def path(waypoints: tuple[str, ...]):
    """Plan turns and moves visiting WAYPOINTS given as X,Y."""
    for instruction in find_path([_parse_point(w) for w in waypoints]):
        click.echo(instruction)


@main.command()
@click.option("--output", "-o", type=Path, default=Path("output.html"))
@click.option("--no-open", is_flag=True, help="Don't open the result in a viewer")
def demo(output: Path, no_open: bool):
    """Print sample calculations and draw the personal art."""
    from .html import HtmlExporter
    from .viewer import publish

    click.echo(f"Chord length for radius 5, angle 60 degrees: {chord_length(5, 60)}")

    waypoints = [Point(20, 20), Point(80, 20), Point(80, 80)]
    click.echo(f"Path instructions: {find_path(waypoints)}")

    turtle = SimpleTurtle()
    draw_personal_art(turtle)
    publish(HtmlExporter().export(turtle.get_path()), output, show=not no_open)


if __name__ == "__main__":
    main()
