"""Join points and the per-joinable manager that resolves common points."""

# Standard Library
import dataclasses
import logging

# local repo modules
from . import geometry
from .errors import SelfJoinError

logger = logging.getLogger(__name__)


#============================================
@dataclasses.dataclass(frozen=True)
class JoinPoint:
	"""Candidate connection location with tolerance radius and owner priority.

	The owner is referenced by its integer ``joinable_id`` only.
	"""
	owner_id: int
	point: tuple[float, float]
	radius: float
	priority: float

	def distance_to(self, other: "JoinPoint") -> float:
		return geometry.point_distance(self.point, other.point)

	def matches(self, other: "JoinPoint") -> bool:
		"""Return True when the radii sum exceeds the distance; touching is no match."""
		return self.radius + other.radius > self.distance_to(other)


#============================================
def _preferred_point(point_a: JoinPoint, point_b: JoinPoint) -> JoinPoint:
	"""Return the point of the higher-priority owner, smaller (x, y) then owner id on ties."""
	if point_a.priority > point_b.priority:
		return point_a
	if point_b.priority > point_a.priority:
		return point_b
	return min(point_a, point_b, key=lambda join_point: (join_point.point, join_point.owner_id))


#============================================
class JoinManager:
	"""Join points and junctions owned by exactly one joinable."""

	def __init__(self, owner_id: int):
		self.owner_id = owner_id
		self.join_points: list[JoinPoint] = []
		self.junctions: list = []

	def __repr__(self):
		points = ", ".join(f"{join_point.point}" for join_point in self.join_points)
		return f"JoinManager(owner={self.owner_id}, points=[{points}])"

	def add_point(self, point: tuple[float, float], radius: float, priority: float) -> JoinPoint:
		join_point = JoinPoint(self.owner_id, (float(point[0]), float(point[1])), float(radius), float(priority))
		self.join_points.append(join_point)
		return join_point

	def add_junction(self, junction) -> bool:
		"""Register one junction unless the same object is already present."""
		if any(existing is junction for existing in self.junctions):
			return False
		self.junctions.append(junction)
		return True

	def _check_not_self(self, other: "JoinManager") -> None:
		if other is self:
			raise SelfJoinError(self)

	#============================================
	def common_points(self, other: "JoinManager") -> list[JoinPoint]:
		"""Return the preferred point of every matching pair in discovery order."""
		self._check_not_self(other)
		found = []
		for join_point in self.join_points:
			for other_point in other.join_points:
				if join_point.matches(other_point):
					found.append(_preferred_point(join_point, other_point))
		return found

	#============================================
	def common_point(self, other: "JoinManager") -> JoinPoint | None:
		"""Return the single best common point with other, or None.

		Matching pairs are ranked by combined priority (higher wins), then by
		pair distance, then by the (x, y) location of the preferred point, so
		the answer does not depend on which manager is asked.
		"""
		self._check_not_self(other)
		best_key = None
		best_point = None
		for join_point in self.join_points:
			for other_point in other.join_points:
				if not join_point.matches(other_point):
					continue
				preferred = _preferred_point(join_point, other_point)
				key = (
					-(join_point.priority + other_point.priority),
					join_point.distance_to(other_point),
					preferred.point,
					preferred.owner_id,
				)
				if best_key is None or key < best_key:
					best_key = key
					best_point = preferred
		return best_point


#============================================
def resolve_common_point(joinable_a, joinable_b) -> JoinPoint | None:
	"""Return the common join point of two joinables, or None.

	Raises:
		SelfJoinError: when both arguments are the same joinable.
	"""
	if joinable_a is joinable_b or joinable_a.join_manager is joinable_b.join_manager:
		raise SelfJoinError(joinable_a)
	common = joinable_a.join_manager.common_point(joinable_b.join_manager)
	if common is not None:
		logger.debug(
			"joinables %s and %s meet at %s",
			joinable_a.joinable_id, joinable_b.joinable_id, common.point,
		)
	return common
