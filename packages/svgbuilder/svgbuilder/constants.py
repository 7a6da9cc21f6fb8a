"""Shared numeric constants for primitive classification, joining and axes."""

# Standard Library
import re


SVG_FLOAT_PATTERN = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")

# line direction classification
LINE_DIRECTION_TOLERANCE_DEGREES = 1.0
LINE_COORDINATE_EPS = 0.5
ZERO_LENGTH_EPS = 1e-6

# tram lines (double bonds)
TRAM_PARALLEL_TOLERANCE_DEGREES = 5.0
TRAM_LENGTH_RATIO_MIN = 0.75
TRAM_PERP_DISTANCE_MIN = 0.5
TRAM_PERP_DISTANCE_MAX = 10.0
TRAM_OVERLAP_FRACTION_MIN = 0.5

# hatched wedge strokes
HATCH_MIN_STROKES = 3
HATCH_STROKE_MAX_LENGTH = 15.0
HATCH_PARALLEL_TOLERANCE_DEGREES = 10.0
HATCH_PERPENDICULAR_TOLERANCE_DEGREES = 20.0
HATCH_MAX_GAP = 6.0
HATCH_GAP_RATIO_TOLERANCE = 0.35
HATCH_CARRIER_OFFSET_MAX = 1.5
HATCH_MIN_TAPER = 0.5

# join points
LINE_JOIN_PRIORITY = 1.0
POLYGON_JOIN_PRIORITY = 1.5
TRAM_LINE_PRIORITY = 2.0
TEXT_JOIN_PRIORITY = 2.5
HATCHED_POLYGON_PRIORITY = 2.9
LINE_RADIUS_FRACTION = 0.1
POLYGON_RADIUS_FRACTION = 0.2
TEXT_RADIUS_FACTOR = 0.75
MIN_JOIN_RADIUS = 0.5
HATCH_RELATIVE_DISTANCE = 0.5
JUNCTION_POINT_EPS = 1e-6

# text runs
ROTATION_NONE = "none"
ROTATED_POSITIVE = "rotated_positive"
ROTATED_NEGATIVE = "rotated_negative"
DEFAULT_FONT_SIZE = 12.0
FONT_WIDTH_FACTOR = 0.55
WORD_GAP_FACTOR = 0.35
BASELINE_TOLERANCE_FACTOR = 0.2

# axes
AXIS_EPS = 0.01
AXIS_END_EPS = 1.0
TICK_LENGTH_DECIMALS = 2
MAJOR_TICK_CHAR = "M"
MINOR_TICK_CHAR = "m"
HORIZONTAL = "horizontal"
VERTICAL = "vertical"
OTHER = "other"
