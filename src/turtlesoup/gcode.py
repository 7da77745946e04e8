"""GCode generation from turtle paths."""

from collections.abc import Sequence

from .config import Config
from .turtle import Color, PathSegment, Point


def strokes(segments: Sequence[PathSegment]) -> list[tuple[Color, list[Point]]]:
    """Join connected same-colored segments into continuous polylines."""
    result: list[tuple[Color, list[Point]]] = []
    for seg in segments:
        if result:
            color, points = result[-1]
            if color == seg.color and points[-1] == seg.start:
                points.append(seg.end)
                continue
        result.append((seg.color, [seg.start, seg.end]))
    return result


class GcodeExporter:
    """Exports turtle paths to pen-plotter gcode."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.pen = self.config.plotter

    def export(self, segments: Sequence[PathSegment], comment: str = "") -> str:
        """Convert path segments to a gcode string."""
        lines = []

        if comment:
            lines.append(f"; {comment}")
        lines.append("; turtlesoup")
        lines.append("")
        lines.append("G21 ; mm")
        lines.append("G90 ; absolute")
        lines.append(f"M280 P0 S{self.pen.pen_up_angle} ; pen up")
        lines.append("G28 ; home")
        lines.append("")

        current_color = None
        for color, points in strokes(segments):
            if color != current_color:
                lines.append(f"; color {color}")
                current_color = color

            # Move to start with pen up
            x0, y0 = points[0].x, points[0].y
            lines.append(f"G0 X{x0:.2f} Y{y0:.2f} F{self.pen.travel_speed}")
            lines.append(f"M280 P0 S{self.pen.pen_down_angle} ; pen down")

            for p in points[1:]:
                lines.append(f"G1 X{p.x:.2f} Y{p.y:.2f} F{self.pen.draw_speed}")

            lines.append(f"M280 P0 S{self.pen.pen_up_angle} ; pen up")
            lines.append("")

        # Footer
        lines.append(f"G0 X0 Y0 F{self.pen.travel_speed} ; return home")
        lines.append(f"M280 P0 S{self.pen.pen_up_angle} ; pen up")
        lines.append("M84 ; motors off")

        return "\n".join(lines)
