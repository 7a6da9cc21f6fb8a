"""Tests for the svgbuilder command-line entry point."""

# Standard Library
import json

# Third Party
import pytest

# Local
import conftest
from svgbuilder import constants
from svgbuilder.cli import analyze_svg, main, parse_args

FIXTURE_SVG = conftest.tests_path("fixtures", "svg", "wedge_and_chart.svg")


#============================================
def test_parse_args_defaults():
	args = parse_args(["drawing.svg"])
	assert args.input_svg == "drawing.svg"
	assert args.find_axes is True
	assert args.label_distance == pytest.approx(30.0)
	assert args.direction_tolerance == pytest.approx(constants.LINE_DIRECTION_TOLERANCE_DEGREES)


#============================================
def test_parse_args_no_axes():
	args = parse_args(["drawing.svg", "--no-axes", "--label-distance", "12"])
	assert args.find_axes is False
	assert args.label_distance == pytest.approx(12.0)


#============================================
def test_analyze_svg_structures():
	report = analyze_svg(FIXTURE_SVG)
	assert report["primitives"]["circles"] == 1
	assert report["primitives"]["texts"] == 9
	structures = report["structures"]
	assert structures["tram_lines"] == 1
	assert structures["hatched_polygons"] == 1
	kinds = {member["kind"] for member in structures["joinables"]}
	assert "hatched_polygon" in kinds
	assert "tram_line" in kinds


#============================================
def test_analyze_svg_calibrates_both_axes():
	report = analyze_svg(FIXTURE_SVG)
	axes = {axis["direction"]: axis for axis in report["axes"]}
	horizontal = axes[constants.HORIZONTAL]
	assert horizontal["values"] == [0.0, 10.0, 20.0, 30.0, 40.0]
	assert horizontal["scale"] == pytest.approx(0.4)
	assert horizontal["error"] is None
	vertical = axes[constants.VERTICAL]
	assert vertical["major_ticks"] == [300.0, 345.0, 390.0]
	assert vertical["values"] == [2.0, 1.0, 0.0]
	assert vertical["scale"] == pytest.approx(2.0 / 90.0)


#============================================
def test_analyze_svg_without_axes():
	assert analyze_svg(FIXTURE_SVG, find_axes=False)["axes"] == []


#============================================
def test_main_prints_json(capsys):
	assert main([FIXTURE_SVG, "--pretty"]) == 0
	report = json.loads(capsys.readouterr().out)
	assert report["input"] == FIXTURE_SVG
	assert len(report["axes"]) == 2
