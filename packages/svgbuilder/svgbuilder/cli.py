#!/usr/bin/env python3
"""Analyse one SVG drawing and print junctions and calibrated axes as JSON."""

# Standard Library
import argparse
import json
import logging
import sys

# local repo modules
from . import constants
from .axis import calibrate_axes, find_axis_requests
from .config import BuilderConfig, ClassifierConfig
from .higher_primitives import build_higher_primitives
from .svg_parse import load_svg_primitives


#============================================
def parse_args(argv=None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(
		description="Rebuild junctions, tram lines, hatched wedges and chart axes from SVG primitives.",
	)
	parser.add_argument("input_svg", help="SVG file to analyse")
	parser.add_argument(
		"--no-axes", dest="find_axes", action="store_false",
		help="Skip axis detection and calibration",
	)
	parser.add_argument(
		"--label-distance", dest="label_distance", type=float, default=30.0,
		help="Maximum distance from an axis to its scale labels",
	)
	parser.add_argument(
		"--direction-tolerance", dest="direction_tolerance", type=float,
		default=constants.LINE_DIRECTION_TOLERANCE_DEGREES,
		help="Angular tolerance in degrees for horizontal/vertical lines",
	)
	parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
	return parser.parse_args(argv)


#============================================
def analyze_svg(svg_path, find_axes: bool = True, label_distance: float = 30.0, config: BuilderConfig | None = None) -> dict:
	"""Return the JSON-ready report for one SVG file."""
	if config is None:
		config = BuilderConfig()
	primitives = load_svg_primitives(svg_path)
	higher = build_higher_primitives(primitives, config)
	report = {
		"input": str(svg_path),
		"primitives": {
			"lines": len(primitives.lines),
			"texts": len(primitives.texts),
			"polygons": len(primitives.polygons),
			"circles": len(primitives.circles),
		},
		"structures": higher.to_dict(),
		"axes": [],
	}
	if find_axes:
		requests = find_axis_requests(
			primitives.lines,
			primitives.texts,
			label_distance,
			tolerance_degrees=config.classifier.direction_tolerance_degrees,
		)
		report["axes"] = [axis.to_dict() for axis in calibrate_axes(requests, config.axis)]
	return report


#============================================
def main(argv=None) -> int:
	"""Analyse one SVG file and print the report."""
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	config = BuilderConfig(classifier=ClassifierConfig(direction_tolerance_degrees=args.direction_tolerance))
	report = analyze_svg(args.input_svg, find_axes=args.find_axes, label_distance=args.label_distance, config=config)
	json.dump(report, sys.stdout, indent=2 if args.pretty else None)
	sys.stdout.write("\n")
	return 0


if __name__ == "__main__":
	sys.exit(main())
