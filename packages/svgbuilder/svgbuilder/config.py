"""Explicit configuration objects for classification, joining, text and axes.

Every component takes its tolerances from one of these frozen dataclasses;
nothing reads module-level state at call time except to build the defaults.
"""

# Standard Library
import dataclasses

# local repo modules
from . import constants


#============================================
@dataclasses.dataclass(frozen=True)
class ClassifierConfig:
	"""Tolerances used to split raw lines into singles, tram pairs and hatches."""
	direction_tolerance_degrees: float = constants.LINE_DIRECTION_TOLERANCE_DEGREES
	tram_parallel_tolerance_degrees: float = constants.TRAM_PARALLEL_TOLERANCE_DEGREES
	tram_length_ratio_min: float = constants.TRAM_LENGTH_RATIO_MIN
	tram_perp_distance_min: float = constants.TRAM_PERP_DISTANCE_MIN
	tram_perp_distance_max: float = constants.TRAM_PERP_DISTANCE_MAX
	tram_overlap_fraction_min: float = constants.TRAM_OVERLAP_FRACTION_MIN
	hatch_min_strokes: int = constants.HATCH_MIN_STROKES
	hatch_stroke_max_length: float = constants.HATCH_STROKE_MAX_LENGTH
	hatch_parallel_tolerance_degrees: float = constants.HATCH_PARALLEL_TOLERANCE_DEGREES
	hatch_perpendicular_tolerance_degrees: float = constants.HATCH_PERPENDICULAR_TOLERANCE_DEGREES
	hatch_max_gap: float = constants.HATCH_MAX_GAP
	hatch_gap_ratio_tolerance: float = constants.HATCH_GAP_RATIO_TOLERANCE
	hatch_carrier_offset_max: float = constants.HATCH_CARRIER_OFFSET_MAX
	hatch_min_taper: float = constants.HATCH_MIN_TAPER


#============================================
@dataclasses.dataclass(frozen=True)
class JoinConfig:
	"""Join-point radius factors for each joinable variant."""
	line_radius_fraction: float = constants.LINE_RADIUS_FRACTION
	polygon_radius_fraction: float = constants.POLYGON_RADIUS_FRACTION
	text_radius_factor: float = constants.TEXT_RADIUS_FACTOR
	min_radius: float = constants.MIN_JOIN_RADIUS
	hatch_relative_distance: float = constants.HATCH_RELATIVE_DISTANCE
	junction_point_eps: float = constants.JUNCTION_POINT_EPS


#============================================
@dataclasses.dataclass(frozen=True)
class TextConfig:
	"""Font width estimate and merge thresholds for text runs."""
	font_width_factor: float = constants.FONT_WIDTH_FACTOR
	word_gap_factor: float = constants.WORD_GAP_FACTOR
	baseline_tolerance_factor: float = constants.BASELINE_TOLERANCE_FACTOR


#============================================
@dataclasses.dataclass(frozen=True)
class AxisConfig:
	"""Axis calibration tolerances."""
	eps: float = constants.AXIS_EPS
	end_eps: float = constants.AXIS_END_EPS
	tick_length_decimals: int = constants.TICK_LENGTH_DECIMALS
	invert_decreasing_values: bool = False
	text: TextConfig = dataclasses.field(default_factory=TextConfig)


#============================================
@dataclasses.dataclass(frozen=True)
class BuilderConfig:
	"""Bundle of every component configuration used by the pipeline."""
	classifier: ClassifierConfig = dataclasses.field(default_factory=ClassifierConfig)
	join: JoinConfig = dataclasses.field(default_factory=JoinConfig)
	text: TextConfig = dataclasses.field(default_factory=TextConfig)
	axis: AxisConfig = dataclasses.field(default_factory=AxisConfig)
