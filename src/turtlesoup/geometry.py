"""Plane geometry helpers used by the drawing routines and path planner."""

import math

from .turtle import Point

# Floats this large are spaced 0.125 or wider, so already whole thousandths
_EXACT_AT_MILLI = 2.0**49


def chord_length(radius: float, angle_in_degrees: float) -> float:
    """Length of the chord subtending `angle_in_degrees` on a circle of `radius`.

    Rounded to 3 decimal places, halves toward +inf.
    """
    result = 2 * radius * math.sin(math.radians(angle_in_degrees) / 2)
    if abs(result) >= _EXACT_AT_MILLI:
        return result
    return math.floor(result * 1000 + 0.5) / 1000


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def normalize_turn(turn: float) -> float:
    """Fold a heading difference into (-180, 180].

    A single step is enough for differences of two headings that are each
    within (-180, 180]. Exactly -180 is left as is.
    """
    if turn > 180:
        turn -= 360
    if turn < -180:
        turn += 360
    return turn
