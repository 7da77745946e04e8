"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from turtlesoup import viewer
from turtlesoup.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_viewer(monkeypatch):
    calls = []
    monkeypatch.setattr(viewer, "open_file", lambda path, runner=None: calls.append(path) or True)
    return calls


def test_chord(runner):
    result = runner.invoke(main, ["chord", "5", "60"])
    assert result.exit_code == 0
    assert result.output.strip() == "5.0"


def test_distance(runner):
    result = runner.invoke(main, ["distance", "1", "2", "4", "6"])
    assert result.exit_code == 0
    assert result.output.strip() == "5.0"


def test_path(runner):
    result = runner.invoke(main, ["path", "0,0", "10,0", "10,10"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["forward 10.00", "turn 90.00", "forward 10.00"]


def test_path_rejects_bad_waypoint(runner):
    result = runner.invoke(main, ["path", "0,0", "ten"])
    assert result.exit_code == 2
    assert "expected X,Y" in result.output


def test_draw_square_html(runner, no_viewer):
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["draw", "square", "-o", "sq.html"])
        assert result.exit_code == 0, result.output
        with open("sq.html") as f:
            assert f.read().count("<line ") == 4
    assert [str(p) for p in no_viewer] == ["sq.html"]


def test_draw_gcode_without_opening(runner, no_viewer):
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["draw", "circle", "-f", "gcode", "-o", "c.gcode", "--no-open"])
        assert result.exit_code == 0, result.output
        with open("c.gcode") as f:
            assert f.read().count("\nG1 ") == 360
    assert no_viewer == []


def test_draw_uses_config_output(runner):
    with runner.isolated_filesystem():
        with open("cfg.json", "w") as f:
            json.dump({"canvas": {"width": 320}, "output": "from_config.html"}, f)

        result = runner.invoke(main, ["draw", "art", "-c", "cfg.json", "--no-open"])
        assert result.exit_code == 0, result.output
        with open("from_config.html") as f:
            assert '<svg width="320"' in f.read()


def test_draw_reports_save_failure(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["draw", "square", "-o", "nope/out.html", "--no-open"])
    assert result.exit_code == 1
    assert "could not be saved" in result.output


def test_demo(runner, no_viewer):
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0, result.output
        with open("output.html") as f:
            assert f.read().count("<line ") == 149

    assert "Chord length for radius 5, angle 60 degrees: 5.0" in result.output
    assert "Path instructions: ['forward 60.00', 'turn 90.00', 'forward 60.00']" in result.output
    assert len(no_viewer) == 1


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"canvas": {"width": "wide"}})],
)
def test_draw_rejects_bad_config(runner, content):
    with runner.isolated_filesystem():
        with open("cfg.json", "w") as f:
            f.write(content)
        result = runner.invoke(main, ["draw", "square", "-c", "cfg.json", "--no-open"])

    assert result.exit_code == 2
    assert "--config" in result.output
    assert "Traceback" not in result.output


def test_chord_huge_radius(runner):
    result = runner.invoke(main, ["chord", "1e30", "90"])
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(1.4142135623730951e30)
