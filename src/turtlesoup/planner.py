"""Plan turn/forward instructions that visit a list of waypoints in order."""

import math
from collections.abc import Iterable

from .geometry import distance, normalize_turn
from .turtle import Point

_TURN_EPSILON = 1e-6


def find_path(waypoints: Iterable[Point | tuple[float, float]]) -> list[str]:
    """Return instructions like "turn 90.00" and "forward 10.00".

    The turtle is assumed to start at the first waypoint facing heading 0.
    Turns are relative to the current heading and folded into (-180, 180];
    turns smaller than floating-point noise are omitted.
    """
    points = [Point.of(p) for p in waypoints]
    if len(points) < 2:
        return []

    instructions = []
    heading = 0.0

    for start, end in zip(points, points[1:]):
        length = distance(start, end)
        angle = math.degrees(math.atan2(end.y - start.y, end.x - start.x))

        turn = normalize_turn(angle - heading)
        if abs(turn) > _TURN_EPSILON:
            instructions.append(f"turn {turn:.2f}")

        instructions.append(f"forward {length:.2f}")
        heading = angle

    return instructions
