"""One-call pipeline from raw primitives to joinables and junctions."""

# Standard Library
import dataclasses
import itertools
import logging

# local repo modules
from .config import BuilderConfig
from .joinable import HatchedPolygon, Joinable, LineJoin, TramLine, make_joinable_list
from .junction import Junction, build_junctions, merge_junctions
from .line_classifier import ClassifiedLines, classify_lines
from .primitives import LineSegment, SvgPrimitives

logger = logging.getLogger(__name__)


#============================================
@dataclasses.dataclass
class HigherPrimitives:
	"""Structures built from one region's primitives."""
	classified: ClassifiedLines
	single_lines: list[LineSegment] = dataclasses.field(default_factory=list)
	tram_lines: list[TramLine] = dataclasses.field(default_factory=list)
	hatched_polygons: list[HatchedPolygon] = dataclasses.field(default_factory=list)
	joinables: list[Joinable] = dataclasses.field(default_factory=list)
	raw_junctions: list[Junction] = dataclasses.field(default_factory=list)
	merged_junctions: list[Junction] = dataclasses.field(default_factory=list)

	def to_dict(self) -> dict:
		return {
			"single_lines": len(self.single_lines),
			"tram_lines": len(self.tram_lines),
			"hatched_polygons": len(self.hatched_polygons),
			"joinables": [
				{"id": joinable.joinable_id, "kind": joinable.KIND, "priority": joinable.priority}
				for joinable in self.joinables
			],
			"junctions": [junction.to_dict() for junction in self.merged_junctions],
		}


#============================================
def build_higher_primitives(
		primitives: SvgPrimitives,
		config: BuilderConfig | None = None,
		merge_eps: float | None = None) -> HigherPrimitives:
	"""Classify lines, wrap everything as joinables and cluster junctions.

	Args:
		primitives: lines, texts, polygons and circles of one region.
		config: component configuration bundle.
		merge_eps: distance below which raw junctions are merged; defaults to
			the minimum join radius.

	Returns:
		HigherPrimitives: classified lines, joinables and junctions. Joinable
		ids count from 1 within each call.
	"""
	if config is None:
		config = BuilderConfig()
	if merge_eps is None:
		merge_eps = config.join.min_radius
	ids = itertools.count(1)
	classified = classify_lines(primitives.lines, config.classifier)
	result = HigherPrimitives(classified=classified, single_lines=list(classified.singles))
	result.tram_lines = [
		TramLine(line0, line1, config=config.join, joinable_id=next(ids))
		for line0, line1 in classified.tram_pairs
	]
	result.hatched_polygons = [
		HatchedPolygon(lines, config=config.join, joinable_id=next(ids))
		for lines in classified.polygon_sequences
	]
	joinables: list[Joinable] = [
		LineJoin(line, config=config.join, joinable_id=next(ids))
		for line in classified.singles
	]
	joinables.extend(result.tram_lines)
	joinables.extend(result.hatched_polygons)
	joinables.extend(make_joinable_list(
		[*primitives.texts, *primitives.polygons, *primitives.circles], config.join, ids=ids,
	))
	result.joinables = joinables
	result.raw_junctions = build_junctions(joinables, config.join.junction_point_eps)
	result.merged_junctions = merge_junctions(result.raw_junctions, merge_eps)
	logger.info(
		"built %d joinables and %d junctions (%d before merging)",
		len(joinables), len(result.merged_junctions), len(result.raw_junctions),
	)
	return result
