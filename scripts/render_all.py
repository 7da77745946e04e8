"""Render every built-in drawing to HTML and gcode."""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turtlesoup.config import Config
from turtlesoup.drawing import DRAWINGS
from turtlesoup.gcode import GcodeExporter
from turtlesoup.html import HtmlExporter
from turtlesoup.turtle import SimpleTurtle
from turtlesoup.viewer import save


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-o", "--output", type=Path, default=Path("renders"))
    parser.add_argument("-c", "--config", type=Path, help="Config JSON")
    parser.add_argument("-d", "--drawings", nargs="+", choices=sorted(DRAWINGS), help="Specific drawings to render")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = Config.load(args.config) if args.config else Config()
    args.output.mkdir(parents=True, exist_ok=True)

    html = HtmlExporter(config)
    gcode = GcodeExporter(config)

    for name in args.drawings or sorted(DRAWINGS):
        turtle = SimpleTurtle()
        DRAWINGS[name](turtle)
        path = turtle.get_path()

        save(html.export(path), args.output / f"{name}.html")
        save(gcode.export(path, comment=f"Drawing: {name}"), args.output / f"{name}.gcode")
        print(f"{name}: {len(path)} segments")


if __name__ == "__main__":
    main()
