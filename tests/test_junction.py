"""Tests for svgbuilder.junction module."""

# Local
import conftest  # noqa: F401
from svgbuilder.joinable import LineJoin, TextJoin, TramLine
from svgbuilder.junction import Junction, build_junctions, merge_junctions
from svgbuilder.primitives import LineSegment, TextRun


#============================================
def test_two_lines_sharing_endpoint_make_one_junction():
	line_a = LineJoin(LineSegment((0, 0), (10, 0)))
	line_b = LineJoin(LineSegment((10, 0), (10, 10)))
	junctions = build_junctions([line_a, line_b])
	assert len(junctions) == 1
	junction = junctions[0]
	assert junction.point == (10.0, 0.0)
	assert line_a in junction
	assert line_b in junction
	assert len(junction) == 2
	assert line_a.junctions == [junction]
	assert line_b.junctions == [junction]


#============================================
def test_disjoint_lines_make_no_junction():
	line_a = LineJoin(LineSegment((0, 0), (10, 0)))
	line_b = LineJoin(LineSegment((50, 50), (60, 50)))
	assert build_junctions([line_a, line_b]) == []
	assert line_a.junctions == []


#============================================
def test_three_lines_meeting_share_one_junction():
	center = (10.0, 10.0)
	joinables = [
		LineJoin(LineSegment(center, (20, 10))),
		LineJoin(LineSegment(center, (10, 20))),
		LineJoin(LineSegment(center, (0, 0))),
	]
	junctions = build_junctions(joinables)
	assert len(junctions) == 1
	assert len(junctions[0]) == 3
	for joinable in joinables:
		assert joinable.junctions == [junctions[0]]


#============================================
def test_junction_membership_is_by_identity():
	line = LineSegment((0, 0), (10, 0))
	first = LineJoin(line)
	twin = LineJoin(line)
	junction = Junction((0, 0))
	assert junction.add(first) is True
	assert junction.add(first) is False
	assert twin not in junction
	assert junction.add(twin) is True
	assert len(junction) == 2


#============================================
def test_text_and_tram_line_junction():
	tram = TramLine(LineSegment((0, 0), (20, 0)), LineSegment((0, 4), (20, 4)))
	label = TextJoin(TextRun(21.0, 2.0, "O"))
	junctions = build_junctions([tram, label])
	assert len(junctions) == 1
	# the text has the higher priority so its anchor wins
	assert junctions[0].point == (21.0, 2.0)
	members = junctions[0].to_dict()["members"]
	assert [member["kind"] for member in members] == ["tram_line", "text"]


#============================================
def test_merge_junctions_combines_close_points():
	line_a = LineJoin(LineSegment((0, 0), (10, 0)))
	line_b = LineJoin(LineSegment((10, 0), (10, 10)))
	line_c = LineJoin(LineSegment((30, 0), (40, 0)))
	first = Junction((10.0, 0.0))
	first.add(line_a)
	first.add(line_b)
	second = Junction((10.2, 0.0))
	second.add(line_b)
	second.add(line_c)
	far = Junction((50.0, 50.0))
	far.add(line_c)
	merged = merge_junctions([first, second, far], eps=0.5)
	assert len(merged) == 2
	assert merged[0].point == (10.0, 0.0)
	assert merged[0].joinables == [line_a, line_b, line_c]
	assert merged[1].joinables == [line_c]
	# originals untouched
	assert len(first) == 2
	assert line_a.junctions == []
