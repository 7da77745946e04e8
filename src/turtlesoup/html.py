"""HTML/SVG rendering of turtle paths."""

from collections.abc import Sequence
from html import escape

from .config import CanvasConfig, Config
from .turtle import PathSegment

_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <style>
        body {{ margin: 0; }}
        canvas {{ display: block; }}
    </style>
</head>
<body>
    <svg width="{width}" height="{height}" style="background-color:{background};">
        {lines}
    </svg>
</body>
</html>"""


def _fmt(value: float) -> str:
    """Shortest round-trip text for a coordinate, without a trailing .0."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


class HtmlExporter:
    """Exports turtle paths to an HTML page holding one SVG line per segment."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas: CanvasConfig = self.config.canvas

    def line(self, segment: PathSegment) -> str:
        """SVG line for one segment, with the origin moved to the canvas centre."""
        scale = self.canvas.scale
        ox = self.canvas.width / 2
        oy = self.canvas.height / 2

        x1 = segment.start.x * scale + ox
        y1 = segment.start.y * scale + oy
        x2 = segment.end.x * scale + ox
        y2 = segment.end.y * scale + oy
        return (
            f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
            f'stroke="{escape(segment.color)}" stroke-width="{_fmt(self.canvas.stroke_width)}"/>'
        )

    def export(self, segments: Sequence[PathSegment]) -> str:
        """Render segments, in drawing order, to a complete HTML document."""
        return _PAGE.format(
            title=escape(self.canvas.title),
            width=self.canvas.width,
            height=self.canvas.height,
            background=escape(self.canvas.background),
            lines="".join(self.line(s) for s in segments),
        )
