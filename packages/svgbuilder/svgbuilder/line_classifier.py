"""Split raw line primitives into single lines, tram-line pairs and hatch sequences."""

# Standard Library
import dataclasses
import logging
import math

# local repo modules
from . import constants
from . import geometry
from .config import ClassifierConfig
from .primitives import LineSegment

logger = logging.getLogger(__name__)


#============================================
@dataclasses.dataclass
class ClassifiedLines:
	"""Three disjoint groups of lines from one drawing region."""
	singles: list[LineSegment] = dataclasses.field(default_factory=list)
	tram_pairs: list[tuple[LineSegment, LineSegment]] = dataclasses.field(default_factory=list)
	polygon_sequences: list[list[LineSegment]] = dataclasses.field(default_factory=list)

	def __iter__(self):
		return iter((self.singles, self.tram_pairs, self.polygon_sequences))


#============================================
def partition_by_direction(
		lines: list[LineSegment],
		tolerance_degrees: float = constants.LINE_DIRECTION_TOLERANCE_DEGREES) -> dict[str, list[LineSegment]]:
	"""Return lines keyed by HORIZONTAL, VERTICAL and OTHER direction."""
	groups = {constants.HORIZONTAL: [], constants.VERTICAL: [], constants.OTHER: []}
	for line in lines:
		groups[line.direction(tolerance_degrees)].append(line)
	return groups


#============================================
def is_hatch_stroke_candidate(line: LineSegment, config: ClassifierConfig) -> bool:
	"""Return True when one line is short enough to be one hatch stroke."""
	return constants.ZERO_LENGTH_EPS < line.length <= config.hatch_stroke_max_length


#============================================
def strokes_adjacent(line_a: LineSegment, line_b: LineSegment, config: ClassifierConfig) -> bool:
	"""Return True when two strokes could be neighbours within one hatch."""
	if not line_a.is_parallel_to(line_b, config.hatch_parallel_tolerance_degrees):
		return False
	gap = geometry.point_distance(line_a.midpoint, line_b.midpoint)
	if gap <= constants.ZERO_LENGTH_EPS or gap > config.hatch_max_gap:
		return False
	step_angle = geometry.angle_degrees(line_a.midpoint, line_b.midpoint)
	perpendicular_error = abs(geometry.parallel_error_degrees(step_angle, line_a.angle_degrees) - 90.0)
	return perpendicular_error <= config.hatch_perpendicular_tolerance_degrees


#============================================
def _connected_components(count: int, edges: dict[int, set[int]]) -> list[list[int]]:
	seen: set[int] = set()
	components = []
	for seed in range(count):
		if seed in seen or seed not in edges:
			continue
		stack = [seed]
		component = []
		seen.add(seed)
		while stack:
			current = stack.pop()
			component.append(current)
			for neighbour in edges.get(current, ()):
				if neighbour not in seen:
					seen.add(neighbour)
					stack.append(neighbour)
		components.append(sorted(component))
	return components


#============================================
def order_strokes_along_carrier(strokes: list[LineSegment]) -> list[LineSegment]:
	"""Return strokes sorted along the carrier perpendicular to the first stroke."""
	direction = geometry.unit_vector(geometry.vector_between(strokes[0].start, strokes[0].end))
	carrier = (-direction[1], direction[0])
	origin = strokes[0].midpoint
	def _position(line: LineSegment) -> float:
		offset = geometry.vector_between(origin, line.midpoint)
		return (offset[0] * carrier[0]) + (offset[1] * carrier[1])
	ordered = sorted(strokes, key=_position)
	# start from the longest end so that the first stroke is the wide end
	if ordered[0].length < ordered[-1].length:
		ordered.reverse()
	return ordered


#============================================
def is_hatch_sequence(ordered: list[LineSegment], config: ClassifierConfig) -> bool:
	"""Return True when ordered strokes are collinear, evenly spaced and taper to one end."""
	if len(ordered) < config.hatch_min_strokes:
		return False
	first_mid = ordered[0].midpoint
	last_mid = ordered[-1].midpoint
	for stroke in ordered[1:-1]:
		offset = geometry.point_to_infinite_line_distance(stroke.midpoint, first_mid, last_mid)
		if offset > config.hatch_carrier_offset_max:
			return False
	gaps = [
		geometry.point_distance(ordered[index].midpoint, ordered[index + 1].midpoint)
		for index in range(len(ordered) - 1)
	]
	mean_gap = sum(gaps) / len(gaps)
	if mean_gap <= constants.ZERO_LENGTH_EPS:
		return False
	if any(abs(gap - mean_gap) / mean_gap > config.hatch_gap_ratio_tolerance for gap in gaps):
		return False
	lengths = [stroke.length for stroke in ordered]
	# equal strokes are a multiple bond, not a wedge
	if lengths[0] - lengths[-1] <= config.hatch_min_taper:
		return False
	tolerance = 1e-6 * max(lengths)
	return all(lengths[index] + tolerance >= lengths[index + 1] for index in range(len(lengths) - 1))


#============================================
def detect_hatch_sequences(
		lines: list[LineSegment],
		config: ClassifierConfig) -> list[list[int]]:
	"""Return index lists of hatch sequences ordered from wide end to narrow end."""
	candidates = [index for index, line in enumerate(lines) if is_hatch_stroke_candidate(line, config)]
	edges: dict[int, set[int]] = {}
	for i_pos, idx_a in enumerate(candidates):
		for idx_b in candidates[i_pos + 1:]:
			if strokes_adjacent(lines[idx_a], lines[idx_b], config):
				edges.setdefault(idx_a, set()).add(idx_b)
				edges.setdefault(idx_b, set()).add(idx_a)
	sequences = []
	for component in _connected_components(len(lines), edges):
		if len(component) < config.hatch_min_strokes:
			continue
		by_identity = {id(lines[index]): index for index in component}
		ordered = order_strokes_along_carrier([lines[index] for index in component])
		if not is_hatch_sequence(ordered, config):
			logger.debug("rejected hatch candidate of %d strokes", len(component))
			continue
		sequences.append([by_identity[id(line)] for line in ordered])
	return sequences


#============================================
def projection_overlap_fraction(line_a: LineSegment, line_b: LineSegment) -> float:
	"""Return the overlap of b projected on a as a fraction of the shorter line."""
	t_start = geometry.projection_parameter(line_b.start, line_a.start, line_a.end)
	t_end = geometry.projection_parameter(line_b.end, line_a.start, line_a.end)
	low = max(0.0, min(t_start, t_end))
	high = min(1.0, max(t_start, t_end))
	if high <= low:
		return 0.0
	overlap = (high - low) * line_a.length
	shorter = min(line_a.length, line_b.length)
	if shorter <= constants.ZERO_LENGTH_EPS:
		return 0.0
	return overlap / shorter


#============================================
def tram_partner_distance(line_a: LineSegment, line_b: LineSegment, config: ClassifierConfig) -> float | None:
	"""Return perpendicular separation when two lines form a tram pair, else None."""
	if line_a.length < constants.ZERO_LENGTH_EPS or line_b.length < constants.ZERO_LENGTH_EPS:
		return None
	if not line_a.is_parallel_to(line_b, config.tram_parallel_tolerance_degrees):
		return None
	ratio = min(line_a.length, line_b.length) / max(line_a.length, line_b.length)
	if ratio < config.tram_length_ratio_min:
		return None
	perp_dist = geometry.point_to_infinite_line_distance(line_b.midpoint, line_a.start, line_a.end)
	if not (config.tram_perp_distance_min <= perp_dist <= config.tram_perp_distance_max):
		return None
	if projection_overlap_fraction(line_a, line_b) < config.tram_overlap_fraction_min:
		return None
	return perp_dist


#============================================
def detect_tram_pairs(
		lines: list[LineSegment],
		checked_indexes: list[int],
		config: ClassifierConfig) -> list[tuple[int, int]]:
	"""Return (first, second) index pairs of tram lines among the checked lines.

	Each line pairs with its closest qualifying partner later in the list;
	lines already paired are not reconsidered.
	"""
	paired: set[int] = set()
	pairs: list[tuple[int, int]] = []
	for i_pos, idx_a in enumerate(checked_indexes):
		if idx_a in paired:
			continue
		best_partner = None
		best_perp = math.inf
		for idx_b in checked_indexes[i_pos + 1:]:
			if idx_b in paired:
				continue
			perp_dist = tram_partner_distance(lines[idx_a], lines[idx_b], config)
			if perp_dist is not None and perp_dist < best_perp:
				best_perp = perp_dist
				best_partner = idx_b
		if best_partner is None:
			continue
		paired.add(idx_a)
		paired.add(best_partner)
		pairs.append((idx_a, best_partner))
	return pairs


#============================================
def classify_lines(lines: list[LineSegment], config: ClassifierConfig | None = None) -> ClassifiedLines:
	"""Split lines into singles, tram pairs and hatch (polygon) sequences.

	Hatch sequences are found first, tram pairs among what remains, and every
	other line is a single. No line appears in more than one group.

	Args:
		lines: raw line primitives from one drawing region.
		config: classification tolerances, defaults when None.

	Returns:
		ClassifiedLines: the three disjoint groups.
	"""
	if config is None:
		config = ClassifierConfig()
	lines = list(lines)
	used: set[int] = set()
	result = ClassifiedLines()
	for sequence in detect_hatch_sequences(lines, config):
		result.polygon_sequences.append([lines[index] for index in sequence])
		used.update(sequence)
	remaining = [index for index in range(len(lines)) if index not in used]
	for idx_a, idx_b in detect_tram_pairs(lines, remaining, config):
		result.tram_pairs.append((lines[idx_a], lines[idx_b]))
		used.add(idx_a)
		used.add(idx_b)
	result.singles = [line for index, line in enumerate(lines) if index not in used]
	logger.debug(
		"classified %d lines: %d singles, %d tram pairs, %d hatch sequences",
		len(lines), len(result.singles), len(result.tram_pairs), len(result.polygon_sequences),
	)
	return result
