"""Drawing routines built from turtle primitives."""

from collections.abc import Callable

from .geometry import chord_length
from .turtle import Color, Turtle

ART_PALETTE: tuple[Color, ...] = ("cyan", "magenta", "blue", "green", "purple")


def draw_square(turtle: Turtle, side_length: float) -> None:
    """Draw a square, turning clockwise at each corner."""
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def draw_approximate_circle(turtle: Turtle, radius: float, num_sides: int) -> None:
    """Draw a regular polygon with `num_sides` sides inscribed in a circle of `radius`.

    The circle is traced clockwise starting at the turtle's position, so its
    centre lies `radius` to the right of the starting heading.
    """
    if isinstance(num_sides, bool) or not isinstance(num_sides, int) or num_sides <= 0:
        raise ValueError(f"num_sides must be a positive integer, got {num_sides!r}")

    angle = 360 / num_sides
    side = chord_length(radius, angle)
    for _ in range(num_sides):
        turtle.forward(side)
        turtle.turn(angle)


def _draw_spike(turtle: Turtle, length: float, spikes: int) -> None:
    turtle.forward(length)
    turtle.turn(45)
    turtle.forward(length / 2)
    turtle.turn(-90)
    turtle.forward(length / 2)
    turtle.turn(45)
    turtle.forward(length)
    turtle.turn(360 / spikes)


def draw_personal_art(turtle: Turtle) -> None:
    """Radial spikes in four colored layers, finished with a black curl."""
    # Move off-centre before starting
    turtle.forward(50)
    turtle.turn(-90)
    turtle.forward(170)
    turtle.turn(90)

    layers = 4
    spikes_per_layer = 8
    base_length = 30

    for layer in range(layers):
        turtle.color(ART_PALETTE[layer % len(ART_PALETTE)])
        length = base_length + layer * 10
        for _ in range(spikes_per_layer):
            _draw_spike(turtle, length, spikes_per_layer)
        turtle.turn(15)

    # Inner curl
    turtle.color("black")
    for _ in range(18):
        turtle.forward(20)
        turtle.turn(100)


DRAWINGS: dict[str, Callable[[Turtle], None]] = {
    "square": lambda turtle: draw_square(turtle, 100),
    "circle": lambda turtle: draw_approximate_circle(turtle, 50, 360),
    "art": draw_personal_art,
}
