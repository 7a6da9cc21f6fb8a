"""Point, vector and range geometry shared by all primitive builders.

Points and vectors are plain ``(x, y)`` float tuples. ``LinearRange`` and
``BoundingBox`` are small immutable value types; ``LinearRange`` carries the
linear range-to-range scaling used by axis calibration.
"""

# Standard Library
import dataclasses
import math


#============================================
def point_distance_sq(point_a: tuple[float, float], point_b: tuple[float, float]) -> float:
	"""Return squared Euclidean distance between two points."""
	dx = point_a[0] - point_b[0]
	dy = point_a[1] - point_b[1]
	return (dx * dx) + (dy * dy)


#============================================
def point_distance(point_a: tuple[float, float], point_b: tuple[float, float]) -> float:
	"""Return Euclidean distance between two points."""
	return math.hypot(point_a[0] - point_b[0], point_a[1] - point_b[1])


#============================================
def points_close(
		point_a: tuple[float, float],
		point_b: tuple[float, float],
		tol: float = 1.0) -> bool:
	"""Return True when two points are within one distance tolerance."""
	return point_distance_sq(point_a, point_b) <= (tol * tol)


#============================================
def midpoint(point_a: tuple[float, float], point_b: tuple[float, float]) -> tuple[float, float]:
	"""Return the midpoint of two points."""
	return ((point_a[0] + point_b[0]) * 0.5, (point_a[1] + point_b[1]) * 0.5)


#============================================
def vector_between(start: tuple[float, float], end: tuple[float, float]) -> tuple[float, float]:
	"""Return the vector from start to end."""
	return (end[0] - start[0], end[1] - start[1])


#============================================
def translate(point: tuple[float, float], vector: tuple[float, float], factor: float = 1.0) -> tuple[float, float]:
	"""Return point moved by factor times vector."""
	return (point[0] + (vector[0] * factor), point[1] + (vector[1] * factor))


#============================================
def unit_vector(vector: tuple[float, float]) -> tuple[float, float]:
	"""Return the unit vector, raising ValueError for a zero vector."""
	length = math.hypot(vector[0], vector[1])
	if length <= 1e-12:
		raise ValueError("cannot normalize a zero-length vector")
	return (vector[0] / length, vector[1] / length)


#============================================
def angle_degrees(start: tuple[float, float], end: tuple[float, float]) -> float:
	"""Return direction angle from start to end in degrees in [0, 360)."""
	return math.degrees(math.atan2(end[1] - start[1], end[0] - start[0])) % 360.0


#============================================
def angle_difference_degrees(angle_a: float, angle_b: float) -> float:
	"""Return smallest absolute angle difference in [0, 180]."""
	return abs(((angle_a - angle_b + 180.0) % 360.0) - 180.0)


#============================================
def parallel_error_degrees(angle_a: float, angle_b: float) -> float:
	"""Return smallest parallel-or-antiparallel angular difference."""
	diff = angle_difference_degrees(angle_a, angle_b)
	return min(diff, abs(diff - 180.0))


#============================================
def point_to_infinite_line_distance(
		point: tuple[float, float],
		line_start: tuple[float, float],
		line_end: tuple[float, float]) -> float:
	"""Return perpendicular distance from one point to one infinite line.

	A degenerate line falls back to the distance to line_start.
	"""
	direction = vector_between(line_start, line_end)
	length = math.hypot(direction[0], direction[1])
	if length <= 1e-12:
		return point_distance(point, line_start)
	offset = vector_between(line_start, point)
	return abs((direction[0] * offset[1]) - (direction[1] * offset[0])) / length


#============================================
def projection_parameter(
		point: tuple[float, float],
		line_start: tuple[float, float],
		line_end: tuple[float, float]) -> float:
	"""Return the unclamped parameter t of point projected onto start->end."""
	dx = line_end[0] - line_start[0]
	dy = line_end[1] - line_start[1]
	denominator = (dx * dx) + (dy * dy)
	if denominator <= 1e-12:
		return 0.0
	return ((point[0] - line_start[0]) * dx + (point[1] - line_start[1]) * dy) / denominator


#============================================
def apply_matrix(point: tuple[float, float], matrix: tuple[float, ...]) -> tuple[float, float]:
	"""Return point transformed by one SVG affine matrix (a, b, c, d, e, f)."""
	if len(matrix) != 6:
		raise ValueError(f"affine matrix needs 6 values, got {len(matrix)}")
	a, b, c, d, e, f = (float(value) for value in matrix)
	x, y = point
	return ((a * x) + (c * y) + e, (b * x) + (d * y) + f)


#============================================
@dataclasses.dataclass(frozen=True)
class LinearRange:
	"""Closed one-dimensional range with linear range-to-range scaling."""
	minimum: float
	maximum: float

	def __post_init__(self):
		if self.minimum > self.maximum:
			raise ValueError(f"range minimum {self.minimum} exceeds maximum {self.maximum}")

	@classmethod
	def from_values(cls, values) -> "LinearRange":
		"""Return the bounding range of one non-empty value collection."""
		values = [float(value) for value in values]
		if not values:
			raise ValueError("cannot build a range from no values")
		return cls(min(values), max(values))

	@property
	def width(self) -> float:
		return self.maximum - self.minimum

	@property
	def midpoint(self) -> float:
		return (self.minimum + self.maximum) * 0.5

	def contains(self, value: float, eps: float = 0.0) -> bool:
		"""Return True when value lies inside the range widened by eps."""
		return (self.minimum - eps) <= value <= (self.maximum + eps)

	def is_equal(self, other: "LinearRange", eps: float) -> bool:
		"""Return True when both ends agree within eps."""
		return abs(self.minimum - other.minimum) <= eps and abs(self.maximum - other.maximum) <= eps

	def scale_and_constant_to(self, other: "LinearRange", inverted: bool = False) -> tuple[float, float]:
		"""Return (scale, constant) so that other = scale * self + constant.

		Args:
			other: target range.
			inverted: map self.minimum onto other.maximum instead of other.minimum.

		Returns:
			tuple[float, float]: scale and constant of the affine map.
		"""
		if self.width == 0.0:
			raise ValueError("cannot scale from a zero-width range")
		scale = other.width / self.width
		if inverted:
			scale = -scale
			return scale, other.maximum - (scale * self.minimum)
		return scale, other.minimum - (scale * self.minimum)

	def transform_to_range(self, other: "LinearRange", value: float, inverted: bool = False) -> float:
		"""Return value mapped from this range onto other."""
		if self.width == 0.0:
			raise ValueError("cannot scale from a zero-width range")
		offset = (value - self.minimum) * other.width / self.width
		if inverted:
			return other.maximum - offset
		return other.minimum + offset


#============================================
@dataclasses.dataclass(frozen=True)
class BoundingBox:
	"""Axis-aligned bounding box as one x range and one y range."""
	x_range: LinearRange
	y_range: LinearRange

	@classmethod
	def from_points(cls, points) -> "BoundingBox":
		"""Return the bounding box of one non-empty point collection."""
		points = list(points)
		if not points:
			raise ValueError("cannot build a bounding box from no points")
		return cls(
			LinearRange.from_values(point[0] for point in points),
			LinearRange.from_values(point[1] for point in points),
		)

	@property
	def center(self) -> tuple[float, float]:
		return (self.x_range.midpoint, self.y_range.midpoint)
