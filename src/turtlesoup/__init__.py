"""turtlesoup - Turtle graphics drawings and path planning."""

from .drawing import draw_approximate_circle, draw_personal_art, draw_square
from .geometry import chord_length, distance, normalize_turn
from .planner import find_path
from .turtle import PALETTE, Color, CountingTurtle, PathSegment, Point, SimpleTurtle, Turtle

__all__ = [
    "PALETTE",
    "Color",
    "CountingTurtle",
    "PathSegment",
    "Point",
    "SimpleTurtle",
    "Turtle",
    "chord_length",
    "distance",
    "draw_approximate_circle",
    "draw_personal_art",
    "draw_square",
    "find_path",
    "normalize_turn",
]
