"""Tests for svgbuilder.joinable module."""

# Standard Library
import logging

# Third Party
import pytest

# Local
import conftest  # noqa: F401
from svgbuilder import constants
from svgbuilder.config import JoinConfig
from svgbuilder.errors import UnsupportedPrimitive
from svgbuilder.joinable import (
	HatchedPolygon,
	LineJoin,
	PolygonJoin,
	TextJoin,
	TramLine,
	make_joinable,
	make_joinable_list,
)
from svgbuilder.primitives import Circle, LineSegment, Polygon, TextRun


#============================================
def _hatch(lengths, spacing: float = 2.0) -> list[LineSegment]:
	lines = []
	for index, length in enumerate(lengths):
		x_value = index * spacing
		lines.append(LineSegment((x_value, -length * 0.5), (x_value, length * 0.5)))
	return lines


#============================================
def _points(joinable) -> list[tuple[float, float]]:
	return [join_point.point for join_point in joinable.join_points]


#============================================
def test_priorities_are_ordered():
	assert LineJoin.PRIORITY < PolygonJoin.PRIORITY < TramLine.PRIORITY
	assert TramLine.PRIORITY < TextJoin.PRIORITY < HatchedPolygon.PRIORITY
	assert HatchedPolygon.PRIORITY == pytest.approx(2.9)


#============================================
def test_joinable_ids_are_unique():
	line = LineSegment((0, 0), (10, 0))
	first = LineJoin(line)
	second = LineJoin(line)
	assert first.joinable_id != second.joinable_id
	assert first.join_manager is not second.join_manager


#============================================
def test_line_join_points_at_ends():
	line_join = LineJoin(LineSegment((0, 0), (10, 0)))
	assert _points(line_join) == [(0.0, 0.0), (10.0, 0.0)]
	assert [join_point.radius for join_point in line_join.join_points] == pytest.approx([1.0, 1.0])
	assert all(join_point.owner_id == line_join.joinable_id for join_point in line_join.join_points)


#============================================
def test_line_join_radius_floor_and_interest_points():
	line_join = LineJoin(LineSegment((0, 0), (2, 0)), interest_points=[(1, 0)])
	assert _points(line_join) == [(1.0, 0.0)]
	assert line_join.join_points[0].radius == pytest.approx(constants.MIN_JOIN_RADIUS)


#============================================
def test_text_join_at_anchor():
	text_join = TextJoin(TextRun(5.0, 6.0, "OH", font_size=10.0))
	assert _points(text_join) == [(5.0, 6.0)]
	assert text_join.join_points[0].radius == pytest.approx(7.5)


#============================================
@pytest.mark.parametrize("second_line", [
	LineSegment((0, 4), (20, 4)),
	LineSegment((20, 4), (0, 4)),
])
def test_tram_line_backbone_and_points(second_line):
	tram = TramLine(LineSegment((0, 0), (20, 0)), second_line)
	assert tram.backbone.endpoints == ((0.0, 2.0), (20.0, 2.0))
	assert tram.central_point == (10.0, 2.0)
	assert _points(tram) == [(10.0, 0.0), (10.0, 4.0), (10.0, 2.0), (0.0, 2.0), (20.0, 2.0)]
	assert tram.join_points[0].radius == pytest.approx(2.0)


#============================================
def test_polygon_join_at_vertices():
	polygon_join = PolygonJoin(Polygon(((0, 0), (4, 0), (4, 3))))
	assert _points(polygon_join) == [(0.0, 0.0), (4.0, 0.0), (4.0, 3.0)]
	assert polygon_join.join_points[0].radius == pytest.approx(0.8)


#============================================
def test_hatched_polygon_tip_one_gap_beyond_shortest():
	hatched = HatchedPolygon(_hatch([5.0, 4.0, 3.0, 2.0, 1.0]))
	assert hatched.longest_line is hatched.lines[0]
	assert hatched.shortest_line is hatched.lines[-1]
	assert len(hatched.join_points) == 2
	assert hatched.join_points[0].point == (0.0, 0.0)
	assert hatched.join_points[1].point == pytest.approx((10.0, 0.0))
	assert hatched.join_points[0].radius == pytest.approx(2.5)
	assert hatched.backbone.length == pytest.approx(10.0)
	assert hatched.point is None


#============================================
def test_hatched_polygon_short_end_first():
	hatched = HatchedPolygon(_hatch([1.0, 2.0, 3.0]))
	assert hatched.longest_line is hatched.lines[-1]
	assert hatched.join_points[0].point == (4.0, 0.0)
	assert hatched.join_points[1].point == pytest.approx((-2.0, 0.0))


#============================================
def test_hatched_polygon_single_line():
	hatched = HatchedPolygon(_hatch([4.0]))
	assert _points(hatched) == [(0.0, 0.0)]
	assert hatched.point == (0.0, 0.0)
	assert hatched.backbone is None


#============================================
def test_hatched_polygon_needs_lines():
	with pytest.raises(ValueError):
		HatchedPolygon([])


#============================================
def test_relative_distance_from_config():
	config = JoinConfig(hatch_relative_distance=0.25)
	hatched = HatchedPolygon(_hatch([8.0, 6.0, 4.0]), config=config)
	assert hatched.relative_distance == pytest.approx(0.25)
	assert hatched.join_points[0].radius == pytest.approx(2.0)


#============================================
def test_make_joinable_dispatch():
	line = LineSegment((0, 0), (10, 0))
	assert isinstance(make_joinable(line), LineJoin)
	assert isinstance(make_joinable(TextRun(0.0, 0.0, "N")), TextJoin)
	assert isinstance(make_joinable(Polygon(((0, 0), (1, 0), (1, 1)))), PolygonJoin)
	assert isinstance(make_joinable((line, LineSegment((0, 4), (10, 4)))), TramLine)
	assert isinstance(make_joinable(_hatch([3.0, 2.0, 1.0])), HatchedPolygon)
	existing = LineJoin(line)
	assert make_joinable(existing) is existing


#============================================
def test_make_joinable_rejects_circle():
	circle = Circle(0.0, 0.0, 1.0)
	with pytest.raises(UnsupportedPrimitive) as excinfo:
		make_joinable(circle)
	assert excinfo.value.primitive is circle
	with pytest.raises(TypeError):
		make_joinable("text")


#============================================
def test_make_joinable_list_drops_unsupported(caplog):
	primitives = [LineSegment((0, 0), (10, 0)), Circle(0.0, 0.0, 1.0), TextRun(0.0, 0.0, "O")]
	with caplog.at_level(logging.WARNING, logger="svgbuilder.joinable"):
		joinables = make_joinable_list(primitives)
	assert [type(joinable) for joinable in joinables] == [LineJoin, TextJoin]
	assert "Circle" in caplog.text
