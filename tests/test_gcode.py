"""Tests for gcode export."""

from turtlesoup.config import Config, PlotterConfig
from turtlesoup.drawing import draw_personal_art, draw_square
from turtlesoup.gcode import GcodeExporter, strokes
from turtlesoup.turtle import PathSegment, Point, SimpleTurtle


def test_connected_segments_form_one_stroke():
    turtle = SimpleTurtle()
    draw_square(turtle, 10)

    (stroke,) = strokes(turtle.get_path())
    color, points = stroke
    assert color == "black"
    assert len(points) == 5


def test_gap_or_color_change_starts_new_stroke():
    segments = [
        PathSegment(Point(0, 0), Point(1, 0), "red"),
        PathSegment(Point(2, 0), Point(3, 0), "red"),
        PathSegment(Point(3, 0), Point(4, 0), "blue"),
    ]
    assert [c for c, _ in strokes(segments)] == ["red", "red", "blue"]


def test_square_program():
    turtle = SimpleTurtle()
    draw_square(turtle, 10)
    gcode = GcodeExporter().export(turtle.get_path(), comment="square")
    lines = gcode.split("\n")

    assert lines[0] == "; square"
    assert "G0 X0.00 Y0.00 F1000" in lines
    assert lines.count("M280 P0 S40 ; pen down") == 1
    assert sum(1 for line in lines if line.startswith("G1 ")) == 4
    assert "G1 X10.00 Y10.00 F500" in lines
    assert lines[-1] == "M84 ; motors off"


def test_art_program_marks_colors():
    turtle = SimpleTurtle()
    draw_personal_art(turtle)
    gcode = GcodeExporter().export(turtle.get_path())

    colors = [line.split()[-1] for line in gcode.split("\n") if line.startswith("; color ")]
    assert colors == ["black", "cyan", "magenta", "blue", "green", "black"]
    assert sum(1 for line in gcode.split("\n") if line.startswith("G1 ")) == 149


def test_plotter_settings_from_config():
    config = Config(plotter=PlotterConfig(pen_up_angle=120, pen_down_angle=10, draw_speed=250))
    segment = PathSegment(Point(0, 0), Point(5, 5))
    gcode = GcodeExporter(config).export([segment])
    assert "M280 P0 S120 ; pen up" in gcode
    assert "M280 P0 S10 ; pen down" in gcode
    assert "G1 X5.00 Y5.00 F250" in gcode
