"""Cluster joinables that share one resolved connection point into junctions."""

# Standard Library
import logging

# local repo modules
from . import constants
from . import geometry
from .join_manager import resolve_common_point

logger = logging.getLogger(__name__)


#============================================
class Junction:
	"""Identity set of joinables meeting at one point."""

	def __init__(self, point: tuple[float, float]):
		self.point = (float(point[0]), float(point[1]))
		self.joinables: list = []

	def __repr__(self):
		ids = ", ".join(str(joinable.joinable_id) for joinable in self.joinables)
		return f"Junction(point={self.point}, joinables=[{ids}])"

	def __len__(self):
		return len(self.joinables)

	def __contains__(self, joinable) -> bool:
		return any(member is joinable for member in self.joinables)

	def add(self, joinable) -> bool:
		"""Add one joinable unless the same object is already a member."""
		if joinable in self:
			return False
		self.joinables.append(joinable)
		return True

	def to_dict(self) -> dict:
		return {
			"point": [self.point[0], self.point[1]],
			"members": [
				{"id": joinable.joinable_id, "kind": joinable.KIND}
				for joinable in self.joinables
			],
		}


#============================================
def _find_junction(junctions: list[Junction], point: tuple[float, float], eps: float) -> Junction | None:
	for junction in junctions:
		if geometry.points_close(junction.point, point, tol=eps):
			return junction
	return None


#============================================
def build_junctions(joinables: list, point_eps: float = constants.JUNCTION_POINT_EPS) -> list[Junction]:
	"""Return junctions for every joinable pair with a common point.

	Pairs resolving to the same point (within point_eps) share one junction.
	Each junction is registered once with the JoinManager of every member.
	"""
	junctions: list[Junction] = []
	for i_pos, joinable_a in enumerate(joinables):
		for joinable_b in joinables[i_pos + 1:]:
			common = resolve_common_point(joinable_a, joinable_b)
			if common is None:
				continue
			junction = _find_junction(junctions, common.point, point_eps)
			if junction is None:
				junction = Junction(common.point)
				junctions.append(junction)
			for joinable in (joinable_a, joinable_b):
				junction.add(joinable)
				joinable.add_junction(junction)
	logger.debug("built %d junctions from %d joinables", len(junctions), len(joinables))
	return junctions


#============================================
def merge_junctions(junctions: list[Junction], eps: float) -> list[Junction]:
	"""Return new junctions where junctions closer than eps are combined.

	The merged point is the first junction's point; membership is the
	identity union in original order. Member JoinManagers are not updated.
	"""
	merged: list[Junction] = []
	for junction in junctions:
		target = _find_junction(merged, junction.point, eps)
		if target is None:
			target = Junction(junction.point)
			merged.append(target)
		for joinable in junction.joinables:
			target.add(joinable)
	return merged
