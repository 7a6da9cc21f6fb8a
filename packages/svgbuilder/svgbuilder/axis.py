"""Annotated chart axes: tick clustering, scale labels and screen-to-user calibration.

An axis is one backbone line, the perpendicular tick lines touching it and
the numeric scale labels beside it. Calibration runs once:

1. tick lengths are clustered into major and minor classes,
2. the axis range is taken from the backbone and checked against the ticks,
3. scale values are read from the labels,
4. major ticks are paired with values, synthesising missing end ticks,
5. a linear screen-to-user map is derived from the two ranges.

Failures raise a CalibrationError subclass carrying the partial axis.
"""

# Standard Library
import dataclasses
import logging

# local repo modules
from . import constants
from .config import AxisConfig
from .errors import (
	AxisNotCalibrated,
	CalibrationError,
	DegenerateRange,
	TickLabelCountMismatch,
	TooManyTickLengthClasses,
)
from .geometry import LinearRange
from .line_classifier import partition_by_direction
from .primitives import LineSegment, TextRun
from .text_phrase import make_phrase, parse_number

logger = logging.getLogger(__name__)

AXIS_DIRECTIONS = (constants.HORIZONTAL, constants.VERTICAL)


#============================================
def cluster_tick_lengths(
		lengths: list[float],
		decimals: int = constants.TICK_LENGTH_DECIMALS) -> tuple[float | None, float | None]:
	"""Return (major, minor) tick lengths from one pass over rounded lengths.

	The largest distinct length is major and the other one minor. A third
	distinct length raises TooManyTickLengthClasses.
	"""
	major = None
	minor = None
	for raw_length in lengths:
		length = round(float(raw_length), decimals)
		if length == major or length == minor:
			continue
		if major is None:
			major = length
		elif minor is None:
			if length > major:
				major, minor = length, major
			else:
				minor = length
		else:
			raise TooManyTickLengthClasses(
				f"cannot process ticks: more than two lengths ({major}, {minor}, {length})"
			)
	return major, minor


#============================================
class AnnotatedAxis:
	"""One horizontal or vertical axis with ticks, scale values and a transform."""

	def __init__(
			self,
			direction: str,
			backbone: LineSegment,
			tick_lines: list[LineSegment] | None = None,
			config: AxisConfig | None = None):
		if direction not in AXIS_DIRECTIONS:
			raise ValueError(f"axis direction must be one of {AXIS_DIRECTIONS}, got {direction!r}")
		self.direction = direction
		self.backbone = backbone
		self.tick_lines = list(tick_lines or [])
		self.config = config if config is not None else AxisConfig()
		self.range: LinearRange | None = None
		self.major_tick_length: float | None = None
		self.minor_tick_length: float | None = None
		self.major_ticks_screen_coords: list[float] = []
		self.minor_ticks_screen_coords: list[float] = []
		self.tick_values_user_coords: list[float] = []
		self.tick_signature = ""
		self.scales_phrase = None
		self.screen_to_user_scale: float | None = None
		self.screen_to_user_constant: float | None = None
		self.inverted = False
		self.error: CalibrationError | None = None

	def __repr__(self):
		return (
			f"AnnotatedAxis(direction={self.direction!r}, range={self.range}, "
			f"signature={self.tick_signature!r}, calibrated={self.is_calibrated})"
		)

	@property
	def is_calibrated(self) -> bool:
		return self.screen_to_user_scale is not None

	def screen_coordinate(self, point: tuple[float, float]) -> float:
		"""Return the coordinate of point that runs along this axis."""
		return float(point[0]) if self.direction == constants.HORIZONTAL else float(point[1])

	#============================================
	def ingest_ticks(self) -> None:
		"""Classify tick lines as major or minor and record their positions."""
		lengths = [tick.length for tick in self.tick_lines]
		logger.debug("tick lengths %s", lengths)
		major, minor = cluster_tick_lengths(lengths, self.config.tick_length_decimals)
		self.major_tick_length = major
		self.minor_tick_length = minor
		signature = []
		major_coords = []
		minor_coords = []
		for tick in self.tick_lines:
			length = round(tick.length, self.config.tick_length_decimals)
			coordinate = self.screen_coordinate(tick.start)
			if major is not None and abs(length - major) <= self.config.eps:
				signature.append(constants.MAJOR_TICK_CHAR)
				major_coords.append(coordinate)
			else:
				signature.append(constants.MINOR_TICK_CHAR)
				minor_coords.append(coordinate)
		self.tick_signature = "".join(signature)
		self.major_ticks_screen_coords = sorted(major_coords)
		self.minor_ticks_screen_coords = sorted(minor_coords)

	#============================================
	def determine_range(self, use_declared_range: bool = True, declared_range: LinearRange | None = None) -> LinearRange:
		"""Set the axis range from the backbone, checked against tick positions."""
		if declared_range is None:
			bbox = self.backbone.bounding_box
			declared_range = bbox.x_range if self.direction == constants.HORIZONTAL else bbox.y_range
		tick_coords = [self.screen_coordinate(tick.start) for tick in self.tick_lines]
		if not tick_coords:
			self.range = declared_range
			return self.range
		tick_range = LinearRange.from_values(tick_coords)
		if declared_range.is_equal(tick_range, self.config.eps):
			self.range = declared_range
		elif use_declared_range:
			logger.debug("axis range %s differs from tick range %s, keeping axis range", declared_range, tick_range)
			self.range = declared_range
		else:
			logger.debug("axis range %s differs from tick range %s, using tick range", declared_range, tick_range)
			self.range = tick_range
		return self.range

	#============================================
	def extract_scale_values(self, labels: list[TextRun]) -> list[float]:
		"""Read scale values from labels in screen order along the axis."""
		if self.direction == constants.HORIZONTAL:
			ordered = sorted(labels, key=lambda label: (label.x, label.y))
			self.scales_phrase = make_phrase(ordered, self.config.text)
			values = self.scales_phrase.numeric_values()
		else:
			values = []
			for label in sorted(labels, key=lambda label: (label.y, label.x)):
				value = parse_number(label.text)
				if value is None:
					logger.debug("skipping non-numeric axis label %r", label.text)
					continue
				values.append(value)
		self.tick_values_user_coords = values
		# plain range-to-range map unless flipping is asked for
		self.inverted = self.config.invert_decreasing_values and len(values) >= 2 and values[0] > values[-1]
		return values

	#============================================
	def add_missing_end_ticks(self) -> int:
		"""Insert ticks at axis ends further than the end tolerance from any tick."""
		if not self.major_ticks_screen_coords or self.range is None:
			return 0
		added = 0
		if self.major_ticks_screen_coords[0] - self.range.minimum > self.config.end_eps:
			self.major_ticks_screen_coords.insert(0, self.range.minimum)
			added += 1
		if self.range.maximum - self.major_ticks_screen_coords[-1] > self.config.end_eps:
			self.major_ticks_screen_coords.append(self.range.maximum)
			added += 1
		return added

	#============================================
	def map_ticks_to_values(self) -> None:
		"""Pair major ticks with scale values, adding end ticks when one or two short."""
		missing = len(self.tick_values_user_coords) - len(self.major_ticks_screen_coords)
		if missing in (1, 2):
			missing -= self.add_missing_end_ticks()
		if missing != 0:
			logger.error(
				"axis has %d major ticks for %d scale values",
				len(self.major_ticks_screen_coords), len(self.tick_values_user_coords),
			)
			raise TickLabelCountMismatch(
				f"{len(self.major_ticks_screen_coords)} major ticks cannot carry "
				f"{len(self.tick_values_user_coords)} scale values",
				axis=self,
			)

	#============================================
	def create_screen_to_user_transform(self) -> None:
		"""Derive scale and constant mapping major-tick screen range to value range."""
		tick_range = LinearRange.from_values(self.major_ticks_screen_coords)
		value_range = LinearRange.from_values(self.tick_values_user_coords)
		if tick_range.width == 0.0 or value_range.width == 0.0:
			raise DegenerateRange(
				f"cannot scale tick range {tick_range} onto value range {value_range}",
				axis=self,
			)
		scale, constant = tick_range.scale_and_constant_to(value_range, inverted=self.inverted)
		self.screen_to_user_scale = scale
		self.screen_to_user_constant = constant
		logger.debug("screen to user: scale %s, constant %s", scale, constant)

	#============================================
	def calibrate(
			self,
			labels: list[TextRun],
			use_declared_range: bool = True,
			declared_range: LinearRange | None = None) -> "AnnotatedAxis":
		"""Run every calibration step, freezing the tick arrays when done.

		Raises:
			CalibrationError: with ``error.axis`` set to this axis.
		"""
		try:
			self.ingest_ticks()
			self.determine_range(use_declared_range, declared_range)
			self.extract_scale_values(labels)
			if not self.major_ticks_screen_coords or not self.tick_values_user_coords:
				raise DegenerateRange("axis has no major ticks or no scale values", axis=self)
			self.map_ticks_to_values()
			self.create_screen_to_user_transform()
		except CalibrationError as error:
			error.axis = self
			self.error = error
			raise
		finally:
			self.major_ticks_screen_coords = tuple(self.major_ticks_screen_coords)
			self.minor_ticks_screen_coords = tuple(self.minor_ticks_screen_coords)
			self.tick_values_user_coords = tuple(self.tick_values_user_coords)
		return self

	#============================================
	def _ranges(self) -> tuple[LinearRange, LinearRange]:
		if not self.is_calibrated:
			raise AxisNotCalibrated("axis has no screen-to-user transform", axis=self)
		return (
			LinearRange.from_values(self.major_ticks_screen_coords),
			LinearRange.from_values(self.tick_values_user_coords),
		)

	def transform_screen_to_user(self, screen_value: float) -> float:
		"""Return the data value shown at one screen coordinate on this axis."""
		tick_range, value_range = self._ranges()
		return tick_range.transform_to_range(value_range, float(screen_value), inverted=self.inverted)

	def transform_user_to_screen(self, user_value: float) -> float:
		"""Return the screen coordinate of one data value on this axis."""
		tick_range, value_range = self._ranges()
		return value_range.transform_to_range(tick_range, float(user_value), inverted=self.inverted)

	def to_dict(self) -> dict:
		return {
			"direction": self.direction,
			"range": None if self.range is None else [self.range.minimum, self.range.maximum],
			"major_tick_length": self.major_tick_length,
			"minor_tick_length": self.minor_tick_length,
			"major_ticks": list(self.major_ticks_screen_coords),
			"minor_ticks": list(self.minor_ticks_screen_coords),
			"values": list(self.tick_values_user_coords),
			"tick_signature": self.tick_signature,
			"scale": self.screen_to_user_scale,
			"constant": self.screen_to_user_constant,
			"error": None if self.error is None else str(self.error),
		}


#============================================
def calibrate_axis(
		backbone: LineSegment,
		ticks: list[LineSegment],
		labels: list[TextRun],
		direction: str,
		use_declared_range: bool = True,
		declared_range: LinearRange | None = None,
		config: AxisConfig | None = None) -> AnnotatedAxis:
	"""Build and calibrate one axis.

	Args:
		backbone: the axis line.
		ticks: tick lines perpendicular to the backbone.
		labels: scale text runs beside the axis.
		direction: HORIZONTAL or VERTICAL.
		use_declared_range: on a backbone/tick range mismatch keep the
			backbone (or declared) range when True, else the tick range.
		declared_range: explicit axis range replacing the backbone range.
		config: calibration tolerances.

	Returns:
		AnnotatedAxis: the calibrated axis.

	Raises:
		CalibrationError: when the axis yields no transform.
	"""
	axis = AnnotatedAxis(direction, backbone, ticks, config=config)
	return axis.calibrate(labels, use_declared_range=use_declared_range, declared_range=declared_range)


#============================================
@dataclasses.dataclass(frozen=True)
class AxisRequest:
	"""Inputs for calibrating one axis in a batch."""
	backbone: LineSegment
	ticks: tuple
	labels: tuple
	direction: str
	use_declared_range: bool = True
	declared_range: LinearRange | None = None


#============================================
def calibrate_axes(requests: list[AxisRequest], config: AxisConfig | None = None) -> list[AnnotatedAxis]:
	"""Calibrate every requested axis; failures keep their axis without a transform."""
	axes = []
	for request in requests:
		try:
			axis = calibrate_axis(
				request.backbone,
				list(request.ticks),
				list(request.labels),
				request.direction,
				use_declared_range=request.use_declared_range,
				declared_range=request.declared_range,
				config=config,
			)
		except CalibrationError as error:
			logger.warning("%s axis not calibrated: %s", request.direction, error)
			axis = error.axis
		axes.append(axis)
	return axes


#============================================
def extract_tick_lines(
		backbone: LineSegment,
		lines: list[LineSegment],
		direction: str,
		eps: float = constants.LINE_COORDINATE_EPS) -> list[LineSegment]:
	"""Return lines perpendicular to the backbone that touch or cross it."""
	ticks = []
	bbox = backbone.bounding_box
	for line in lines:
		if line is backbone or line.is_zero():
			continue
		line_box = line.bounding_box
		if direction == constants.HORIZONTAL:
			if not line.is_vertical(eps):
				continue
			on_axis = bbox.x_range.contains(line.start[0], eps)
			touches = line_box.y_range.contains(backbone.start[1], eps)
		else:
			if not line.is_horizontal(eps):
				continue
			on_axis = bbox.y_range.contains(line.start[1], eps)
			touches = line_box.x_range.contains(backbone.start[0], eps)
		if on_axis and touches:
			ticks.append(line)
	return ticks


#============================================
def extract_scale_texts(
		backbone: LineSegment,
		texts: list[TextRun],
		direction: str,
		max_distance: float) -> list[TextRun]:
	"""Return text runs beside the axis: below a horizontal axis, left of a vertical one."""
	labels = []
	bbox = backbone.bounding_box
	for text in texts:
		margin = float(text.font_size)
		if direction == constants.HORIZONTAL:
			offset = text.y - backbone.start[1]
			along = bbox.x_range.contains(text.x, margin)
		else:
			offset = backbone.start[0] - text.x
			along = bbox.y_range.contains(text.y, margin)
		if along and 0.0 < offset <= max_distance:
			labels.append(text)
	return labels


#============================================
def find_axis_requests(
		lines: list[LineSegment],
		texts: list[TextRun],
		label_distance: float,
		tolerance_degrees: float = constants.LINE_DIRECTION_TOLERANCE_DEGREES,
		eps: float = constants.LINE_COORDINATE_EPS) -> list[AxisRequest]:
	"""Return one axis request per direction, built around its longest line."""
	requests = []
	groups = partition_by_direction(lines, tolerance_degrees)
	for direction in AXIS_DIRECTIONS:
		candidates = groups[direction]
		if not candidates:
			continue
		backbone = max(candidates, key=lambda line: line.length)
		ticks = extract_tick_lines(backbone, lines, direction, eps)
		if not ticks:
			logger.debug("no ticks on longest %s line", direction)
			continue
		labels = extract_scale_texts(backbone, texts, direction, label_distance)
		requests.append(AxisRequest(backbone, tuple(ticks), tuple(labels), direction))
	return requests
