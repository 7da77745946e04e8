"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel


class CanvasConfig(BaseModel):
    width: int = 500
    height: int = 500
    scale: float = 1.0
    stroke_width: float = 2
    background: str = "#f0f0f0"
    title: str = "Turtle Graphics Output"


class PlotterConfig(BaseModel):
    pen_up_angle: int = 90
    pen_down_angle: int = 40
    travel_speed: int = 1000
    draw_speed: int = 500


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    plotter: PlotterConfig = PlotterConfig()
    output: str = "output.html"

    @classmethod
    def load(cls, path: str | Path = "turtlesoup.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "turtlesoup.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
