"""Rebuild bonds, junctions and calibrated chart axes from flat SVG primitives."""

from .axis import (
	AnnotatedAxis,
	AxisRequest,
	calibrate_axes,
	calibrate_axis,
	cluster_tick_lengths,
	find_axis_requests,
)
from .config import AxisConfig, BuilderConfig, ClassifierConfig, JoinConfig, TextConfig
from .errors import (
	AxisNotCalibrated,
	CalibrationError,
	DegenerateRange,
	SelfJoinError,
	SvgBuilderError,
	TickLabelCountMismatch,
	TooManyTickLengthClasses,
	UnsupportedPrimitive,
)
from .geometry import BoundingBox, LinearRange
from .higher_primitives import HigherPrimitives, build_higher_primitives
from .join_manager import JoinManager, JoinPoint, resolve_common_point
from .joinable import (
	HatchedPolygon,
	Joinable,
	LineJoin,
	PolygonJoin,
	TextJoin,
	TramLine,
	make_joinable,
	make_joinable_list,
)
from .junction import Junction, build_junctions, merge_junctions
from .line_classifier import ClassifiedLines, classify_lines
from .primitives import Circle, LineSegment, Polygon, SvgPrimitives, TextRun
from .svg_parse import load_svg_primitives, parse_svg_text

__version__ = "0.1.0"
