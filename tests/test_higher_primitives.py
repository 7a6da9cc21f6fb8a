"""Tests for svgbuilder.higher_primitives module."""

# Third Party
import pytest

# Local
import conftest  # noqa: F401
from svgbuilder.config import BuilderConfig
from svgbuilder.higher_primitives import build_higher_primitives
from svgbuilder.joinable import HatchedPolygon, LineJoin, TextJoin, TramLine
from svgbuilder.primitives import Circle, LineSegment, SvgPrimitives, TextRun


#============================================
def _molecule() -> SvgPrimitives:
	"""Hatched wedge, single bond, double bond and one label in a row."""
	primitives = SvgPrimitives()
	for index, length in enumerate((5.0, 4.0, 3.0, 2.0, 1.0)):
		x_value = 180.0 + (2.0 * index)
		primitives.add(LineSegment((x_value, 20.0 - (length * 0.5)), (x_value, 20.0 + (length * 0.5))))
	primitives.add(LineSegment((190.0, 20.0), (230.0, 20.0)))
	primitives.add(LineSegment((230.0, 20.0), (260.0, 20.0)))
	primitives.add(LineSegment((230.0, 24.0), (260.0, 24.0)))
	primitives.add(TextRun(262.0, 22.0, "OH"))
	primitives.add(Circle(500.0, 500.0, 3.0))
	return primitives


#============================================
def test_build_higher_primitives_structures():
	result = build_higher_primitives(_molecule())
	assert len(result.single_lines) == 1
	assert len(result.tram_lines) == 1
	assert len(result.hatched_polygons) == 1
	kinds = [type(joinable) for joinable in result.joinables]
	# circles are dropped
	assert kinds == [LineJoin, TramLine, HatchedPolygon, TextJoin]


#============================================
def test_joinable_ids_count_from_one_per_call():
	first = build_higher_primitives(_molecule())
	second = build_higher_primitives(_molecule())
	first_ids = [joinable.joinable_id for joinable in first.joinables]
	assert sorted(first_ids) == [1, 2, 3, 4]
	assert [joinable.joinable_id for joinable in second.joinables] == first_ids


#============================================
def test_build_higher_primitives_junctions():
	result = build_higher_primitives(_molecule())
	points = sorted(junction.point for junction in result.merged_junctions)
	assert points == [(190.0, 20.0), (230.0, 22.0), (262.0, 22.0)]
	for junction in result.merged_junctions:
		assert len(junction) == 2
	hatched = result.hatched_polygons[0]
	assert len(hatched.junctions) == 1
	assert hatched.junctions[0].point == pytest.approx((190.0, 20.0))
	tram = result.tram_lines[0]
	assert len(tram.junctions) == 2


#============================================
def test_merge_eps_combines_nearby_junctions():
	result = build_higher_primitives(_molecule(), BuilderConfig(), merge_eps=40.0)
	assert len(result.raw_junctions) == 3
	assert len(result.merged_junctions) < 3


#============================================
def test_to_dict_is_json_ready():
	report = build_higher_primitives(_molecule()).to_dict()
	assert report["tram_lines"] == 1
	assert report["hatched_polygons"] == 1
	assert {member["kind"] for member in report["joinables"]} == {"line", "tram_line", "hatched_polygon", "text"}
	assert len(report["junctions"]) == 3
