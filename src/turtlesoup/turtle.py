"""Turtle graphics state: position, heading, pen color and recorded path."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

Color = str

PALETTE: tuple[Color, ...] = (
    "black",
    "gray",
    "red",
    "orange",
    "yellow",
    "green",
    "cyan",
    "blue",
    "purple",
    "magenta",
)

DEFAULT_COLOR: Color = "black"


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: "Point | tuple[float, float]") -> "Point":
        """Coerce an (x, y) pair into a Point."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


@dataclass(frozen=True)
class PathSegment:
    """One straight stroke drawn by a single forward move."""

    start: Point
    end: Point
    color: Color = DEFAULT_COLOR

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


class Turtle(ABC):
    """Anything that can move forward, turn and change pen color.

    Headings are in degrees, 0 along +x, increasing clockwise (screen
    coordinates, y grows downward).
    """

    @abstractmethod
    def forward(self, distance: float) -> None: ...

    @abstractmethod
    def turn(self, angle_degrees: float) -> None: ...

    @abstractmethod
    def color(self, c: Color) -> None: ...

    @abstractmethod
    def get_path(self) -> tuple[PathSegment, ...]: ...


def _advance(position: Point, heading: float, distance: float) -> Point:
    rad = math.radians(heading % 360.0)
    return Point(
        position.x + distance * math.cos(rad),
        position.y + distance * math.sin(rad),
    )


def _check_color(c: Color) -> Color:
    if c not in PALETTE:
        raise ValueError(f"Unknown color: {c!r} (expected one of {', '.join(PALETTE)})")
    return c


@dataclass
class SimpleTurtle(Turtle):
    """Turtle that records every forward move as a PathSegment."""

    _position: Point = field(default_factory=Point, init=False)
    _heading: float = field(default=0.0, init=False)
    _color: Color = field(default=DEFAULT_COLOR, init=False)
    _path: list[PathSegment] = field(default_factory=list, init=False)

    @property
    def position(self) -> Point:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def pen_color(self) -> Color:
        return self._color

    def forward(self, distance: float) -> None:
        start = self._position
        end = _advance(start, self._heading, distance)
        self._path.append(PathSegment(start, end, self._color))
        self._position = end

    def turn(self, angle_degrees: float) -> None:
        self._heading += angle_degrees

    def color(self, c: Color) -> None:
        self._color = _check_color(c)

    def get_path(self) -> tuple[PathSegment, ...]:
        return tuple(self._path)


@dataclass
class CountingTurtle(Turtle):
    """Turtle that tracks motion and counts calls but draws nothing."""

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    pen_color: Color = DEFAULT_COLOR
    forwards: int = 0
    turns: int = 0
    color_changes: int = 0
    distance_travelled: float = 0.0

    def forward(self, distance: float) -> None:
        self.position = _advance(self.position, self.heading, distance)
        self.distance_travelled += abs(distance)
        self.forwards += 1

    def turn(self, angle_degrees: float) -> None:
        self.heading += angle_degrees
        self.turns += 1

    def color(self, c: Color) -> None:
        self.pen_color = _check_color(c)
        self.color_changes += 1

    def get_path(self) -> tuple[PathSegment, ...]:
        return ()
