"""Flat vector primitives consumed by the builders: lines, text runs, shapes."""

# Standard Library
import dataclasses

# local repo modules
from . import constants
from . import geometry


#============================================
class LineSegment:
	"""One straight line primitive with cached derived geometry.

	Endpoints change only through ``apply_transform``, which clears the
	cached length, midpoint, angle and bounding box.
	"""

	def __init__(self, start, end, width: float = 1.0, linecap: str = "butt"):
		self._start = (float(start[0]), float(start[1]))
		self._end = (float(end[0]), float(end[1]))
		self.width = float(width)
		self.linecap = str(linecap or "butt").strip().lower()
		self._cache = {}

	def __repr__(self):
		return f"LineSegment({self._start!r}, {self._end!r})"

	@classmethod
	def from_coords(cls, x1: float, y1: float, x2: float, y2: float, **kwargs) -> "LineSegment":
		return cls((x1, y1), (x2, y2), **kwargs)

	@property
	def start(self) -> tuple[float, float]:
		return self._start

	@property
	def end(self) -> tuple[float, float]:
		return self._end

	@property
	def endpoints(self) -> tuple[tuple[float, float], tuple[float, float]]:
		return (self._start, self._end)

	def _cached(self, key: str, compute):
		if key not in self._cache:
			self._cache[key] = compute()
		return self._cache[key]

	@property
	def length(self) -> float:
		return self._cached("length", lambda: geometry.point_distance(self._start, self._end))

	@property
	def midpoint(self) -> tuple[float, float]:
		return self._cached("midpoint", lambda: geometry.midpoint(self._start, self._end))

	@property
	def angle_degrees(self) -> float:
		"""Direction angle from start to end in [0, 360)."""
		return self._cached("angle", lambda: geometry.angle_degrees(self._start, self._end))

	@property
	def bounding_box(self) -> geometry.BoundingBox:
		return self._cached("bbox", lambda: geometry.BoundingBox.from_points(self.endpoints))

	#============================================
	def apply_transform(self, matrix: tuple[float, ...]) -> None:
		"""Transform both endpoints by one SVG affine matrix in place."""
		self._start = geometry.apply_matrix(self._start, matrix)
		self._end = geometry.apply_matrix(self._end, matrix)
		self._cache.clear()

	#============================================
	def direction(self, tolerance_degrees: float = constants.LINE_DIRECTION_TOLERANCE_DEGREES) -> str:
		"""Return HORIZONTAL, VERTICAL or OTHER within one angular tolerance."""
		if self.is_zero():
			return constants.OTHER
		angle = self.angle_degrees
		if geometry.parallel_error_degrees(angle, 0.0) <= tolerance_degrees:
			return constants.HORIZONTAL
		if geometry.parallel_error_degrees(angle, 90.0) <= tolerance_degrees:
			return constants.VERTICAL
		return constants.OTHER

	def is_horizontal(self, eps: float = constants.LINE_COORDINATE_EPS) -> bool:
		return abs(self._start[1] - self._end[1]) <= eps

	def is_vertical(self, eps: float = constants.LINE_COORDINATE_EPS) -> bool:
		return abs(self._start[0] - self._end[0]) <= eps

	def is_zero(self, eps: float = constants.ZERO_LENGTH_EPS) -> bool:
		bbox = self.bounding_box
		return bbox.x_range.width < eps and bbox.y_range.width < eps

	def is_parallel_to(self, other: "LineSegment", tolerance_degrees: float) -> bool:
		return geometry.parallel_error_degrees(self.angle_degrees, other.angle_degrees) <= tolerance_degrees

	def is_perpendicular_to(self, other: "LineSegment", tolerance_degrees: float) -> bool:
		diff = geometry.parallel_error_degrees(self.angle_degrees, other.angle_degrees)
		return abs(diff - 90.0) <= tolerance_degrees

	#============================================
	def common_end_point(self, other: "LineSegment", eps: float) -> tuple[float, float] | None:
		"""Return this line's endpoint shared with other, or None."""
		for point in self.endpoints:
			if geometry.points_close(point, other.start, eps) or geometry.points_close(point, other.end, eps):
				return point
		return None

	def other_point(self, point, eps: float) -> tuple[float, float] | None:
		"""Return the opposite endpoint when point sits on one end, else None."""
		if geometry.points_close(point, self._start, eps):
			return self._end
		if geometry.points_close(point, self._end, eps):
			return self._start
		return None

	def normalize_direction(self, eps: float = constants.LINE_COORDINATE_EPS) -> "LineSegment":
		"""Return a copy whose first point has the smaller running coordinate."""
		start, end = self._start, self._end
		if self.is_horizontal(eps) and start[0] > end[0]:
			start, end = end, start
		elif self.is_vertical(eps) and (not self.is_horizontal(eps)) and start[1] > end[1]:
			start, end = end, start
		return LineSegment(start, end, width=self.width, linecap=self.linecap)


#============================================
@dataclasses.dataclass(frozen=True)
class TextRun:
	"""One text primitive anchored at (x, y)."""
	x: float
	y: float
	text: str
	font_size: float = constants.DEFAULT_FONT_SIZE
	rotation: str = constants.ROTATION_NONE
	font_family: str = "sans-serif"

	@property
	def anchor(self) -> tuple[float, float]:
		return (float(self.x), float(self.y))

	@property
	def baseline(self) -> float:
		"""Return the coordinate shared by runs on one text line."""
		if self.rotation == constants.ROTATION_NONE:
			return float(self.y)
		return float(self.x)

	@property
	def advance_start(self) -> float:
		"""Return the reading-order coordinate of the run start."""
		if self.rotation == constants.ROTATION_NONE:
			return float(self.x)
		if self.rotation == constants.ROTATED_POSITIVE:
			return -float(self.y)
		return float(self.y)

	def estimated_width(self, font_width_factor: float = constants.FONT_WIDTH_FACTOR) -> float:
		return len(self.text) * float(self.font_size) * float(font_width_factor)


#============================================
@dataclasses.dataclass(frozen=True)
class Circle:
	"""Opaque circle primitive."""
	cx: float
	cy: float
	r: float

	@property
	def center(self) -> tuple[float, float]:
		return (float(self.cx), float(self.cy))


#============================================
@dataclasses.dataclass(frozen=True)
class Polygon:
	"""Ordered closed polygon primitive."""
	points: tuple[tuple[float, float], ...]
	fill: str = "none"

	def __post_init__(self):
		object.__setattr__(self, "points", tuple((float(x), float(y)) for x, y in self.points))

	def edges(self) -> list[LineSegment]:
		"""Return the closed edge list, last vertex joined back to the first."""
		count = len(self.points)
		if count < 2:
			return []
		return [LineSegment(self.points[index], self.points[(index + 1) % count]) for index in range(count)]


#============================================
@dataclasses.dataclass
class SvgPrimitives:
	"""Primitive lists collected from one drawing region."""
	lines: list = dataclasses.field(default_factory=list)
	texts: list = dataclasses.field(default_factory=list)
	polygons: list = dataclasses.field(default_factory=list)
	circles: list = dataclasses.field(default_factory=list)
	unclassified: list = dataclasses.field(default_factory=list)

	def add(self, primitive) -> None:
		"""Append one primitive to the list matching its type."""
		if isinstance(primitive, LineSegment):
			self.lines.append(primitive)
		elif isinstance(primitive, TextRun):
			self.texts.append(primitive)
		elif isinstance(primitive, Polygon):
			self.polygons.append(primitive)
		elif isinstance(primitive, Circle):
			self.circles.append(primitive)
		else:
			self.unclassified.append(primitive)

