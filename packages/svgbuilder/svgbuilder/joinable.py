"""Joinable wrappers that give classified primitives one uniform join contract.

Each variant builds its join points once at construction time and keeps them
in its own JoinManager. Common-point resolution is one function for every
variant pair (``join_manager.resolve_common_point``).
"""

# Standard Library
import itertools
import logging

# local repo modules
from . import constants
from . import geometry
from .config import JoinConfig
from .errors import UnsupportedPrimitive
from .join_manager import JoinManager, JoinPoint, resolve_common_point
from .primitives import LineSegment, Polygon, TextRun

logger = logging.getLogger(__name__)


#============================================
class Joinable:
	"""Base class for every joinable variant.

	joinable_id names the owner of every join point. Callers building one
	drawing pass ids from one counter; without one the object id is used.
	"""

	PRIORITY = 0.0
	KIND = "joinable"

	def __init__(self, config: JoinConfig | None = None, joinable_id: int | None = None):
		self.config = config if config is not None else JoinConfig()
		self.joinable_id = id(self) if joinable_id is None else int(joinable_id)
		self.join_manager = JoinManager(self.joinable_id)

	def __repr__(self):
		return f"{type(self).__name__}(id={self.joinable_id})"

	@property
	def priority(self) -> float:
		return self.PRIORITY

	@property
	def join_points(self) -> list[JoinPoint]:
		return self.join_manager.join_points

	@property
	def junctions(self) -> list:
		return self.join_manager.junctions

	def add_join_point(self, point: tuple[float, float], radius: float) -> JoinPoint:
		return self.join_manager.add_point(point, max(self.config.min_radius, radius), self.PRIORITY)

	def common_point(self, other: "Joinable") -> JoinPoint | None:
		"""Return the common join point with other, or None."""
		return resolve_common_point(self, other)

	def add_junction(self, junction) -> bool:
		return self.join_manager.add_junction(junction)


#============================================
class LineJoin(Joinable):
	"""One single line; join points at its ends unless other locations are given."""

	PRIORITY = constants.LINE_JOIN_PRIORITY
	KIND = "line"

	def __init__(self, line: LineSegment, interest_points=None, config: JoinConfig | None = None, joinable_id: int | None = None):
		super().__init__(config, joinable_id)
		self.line = line
		if interest_points is None:
			interest_points = line.endpoints
		radius = self.config.line_radius_fraction * line.length
		for point in interest_points:
			self.add_join_point(point, radius)


#============================================
class TextJoin(Joinable):
	"""One text run joined at its anchor."""

	PRIORITY = constants.TEXT_JOIN_PRIORITY
	KIND = "text"

	def __init__(self, text: TextRun, config: JoinConfig | None = None, joinable_id: int | None = None):
		super().__init__(config, joinable_id)
		self.text = text
		self.add_join_point(text.anchor, self.config.text_radius_factor * float(text.font_size))


#============================================
class TramLine(Joinable):
	"""Two near-parallel lines drawn as one double bond."""

	PRIORITY = constants.TRAM_LINE_PRIORITY
	KIND = "tram_line"

	def __init__(self, line0: LineSegment, line1: LineSegment, config: JoinConfig | None = None, joinable_id: int | None = None):
		super().__init__(config, joinable_id)
		self.line0 = line0
		self.line1 = line1
		self.backbone = self._make_backbone()
		radius = self.config.line_radius_fraction * self.backbone.length
		self.add_join_point(line0.midpoint, radius)
		self.add_join_point(line1.midpoint, radius)
		self.add_join_point(self.central_point, radius)
		for point in self.backbone.endpoints:
			self.add_join_point(point, radius)

	def _make_backbone(self) -> LineSegment:
		# pair the ends of line1 with the nearer ends of line0
		start1, end1 = self.line1.endpoints
		direct = geometry.point_distance(self.line0.start, start1) + geometry.point_distance(self.line0.end, end1)
		crossed = geometry.point_distance(self.line0.start, end1) + geometry.point_distance(self.line0.end, start1)
		if crossed < direct:
			start1, end1 = end1, start1
		return LineSegment(
			geometry.midpoint(self.line0.start, start1),
			geometry.midpoint(self.line0.end, end1),
		)

	@property
	def central_point(self) -> tuple[float, float]:
		return geometry.midpoint(self.line0.midpoint, self.line1.midpoint)

	@property
	def lines(self) -> tuple[LineSegment, LineSegment]:
		return (self.line0, self.line1)


#============================================
class PolygonJoin(Joinable):
	"""One ordered polygon joined at its vertices."""

	PRIORITY = constants.POLYGON_JOIN_PRIORITY
	KIND = "polygon"

	def __init__(self, polygon: Polygon, config: JoinConfig | None = None, joinable_id: int | None = None):
		super().__init__(config, joinable_id)
		self.polygon = polygon
		edges = polygon.edges()
		mean_edge = (sum(edge.length for edge in edges) / len(edges)) if edges else 0.0
		radius = self.config.polygon_radius_fraction * mean_edge
		for point in polygon.points:
			self.add_join_point(point, radius)


#============================================
class HatchedPolygon(Joinable):
	"""Ordered hatch strokes forming one wedge bond.

	The first join point is the midpoint of the longer of the first and last
	strokes. The second lies on the line from that midpoint through the
	shorter stroke's midpoint, one stroke gap beyond the shorter stroke.
	"""

	PRIORITY = constants.HATCHED_POLYGON_PRIORITY
	KIND = "hatched_polygon"

	def __init__(self, lines: list[LineSegment], config: JoinConfig | None = None, joinable_id: int | None = None):
		super().__init__(config, joinable_id)
		if not lines:
			raise ValueError("hatched polygon needs at least one line")
		self.lines = list(lines)
		self.relative_distance = self.config.hatch_relative_distance
		first_line = self.lines[0]
		last_line = self.lines[-1]
		if first_line.length > last_line.length:
			self.longest_line, self.shortest_line = first_line, last_line
		else:
			self.longest_line, self.shortest_line = last_line, first_line
		radius = self.relative_distance * self.longest_line.length
		self.add_join_point(self.longest_line.midpoint, radius)
		tip = self._extrapolated_tip()
		if tip is not None:
			self.add_join_point(tip, radius)

	def _extrapolated_tip(self) -> tuple[float, float] | None:
		if len(self.lines) < 2:
			return None
		long_mid = self.longest_line.midpoint
		short_mid = self.shortest_line.midpoint
		span = geometry.point_distance(long_mid, short_mid)
		if span <= constants.ZERO_LENGTH_EPS:
			return None
		step = geometry.point_distance(self.lines[0].midpoint, self.lines[1].midpoint)
		scale_factor = (span + step) / span
		return geometry.translate(long_mid, geometry.vector_between(long_mid, short_mid), scale_factor)

	@property
	def backbone(self) -> LineSegment | None:
		"""Return the segment between the two join points, None with only one."""
		if len(self.join_points) < 2:
			return None
		return LineSegment(self.join_points[0].point, self.join_points[1].point)

	@property
	def point(self) -> tuple[float, float] | None:
		"""Return the only join point when the tip could not be extrapolated."""
		if len(self.join_points) == 1:
			return self.join_points[0].point
		return None


#============================================
def make_joinable(primitive, config: JoinConfig | None = None, joinable_id: int | None = None) -> Joinable:
	"""Return the joinable wrapper for one classified primitive.

	A two-line tuple becomes a TramLine and a list of lines a HatchedPolygon.
	An existing Joinable is returned unchanged, keeping its id.

	Raises:
		UnsupportedPrimitive: when no variant wraps the primitive.
	"""
	if isinstance(primitive, Joinable):
		return primitive
	if isinstance(primitive, LineSegment):
		return LineJoin(primitive, config=config, joinable_id=joinable_id)
	if isinstance(primitive, TextRun):
		return TextJoin(primitive, config=config, joinable_id=joinable_id)
	if isinstance(primitive, Polygon):
		return PolygonJoin(primitive, config=config, joinable_id=joinable_id)
	if isinstance(primitive, tuple) and len(primitive) == 2 and all(isinstance(item, LineSegment) for item in primitive):
		return TramLine(primitive[0], primitive[1], config=config, joinable_id=joinable_id)
	if isinstance(primitive, list) and primitive and all(isinstance(item, LineSegment) for item in primitive):
		return HatchedPolygon(primitive, config=config, joinable_id=joinable_id)
	raise UnsupportedPrimitive(primitive)


#============================================
def make_joinable_list(primitives, config: JoinConfig | None = None, ids=None) -> list[Joinable]:
	"""Return joinables for every supported primitive, dropping the rest.

	Ids are drawn from ids, an integer iterator; a fresh count from 1 is
	used when it is None.
	"""
	if ids is None:
		ids = itertools.count(1)
	joinables = []
	for primitive in primitives:
		try:
			joinables.append(make_joinable(primitive, config=config, joinable_id=next(ids)))
		except UnsupportedPrimitive as error:
			logger.warning("dropping primitive: %s", error)
	return joinables
