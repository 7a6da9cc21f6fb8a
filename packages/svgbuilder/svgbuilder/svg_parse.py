"""SVG element collection into flat line, text and shape primitives."""

# Standard Library
import logging
import pathlib
import re

# Third Party
import defusedxml.ElementTree as ET

# local repo modules
from . import constants
from .primitives import Circle, LineSegment, Polygon, SvgPrimitives, TextRun

logger = logging.getLogger(__name__)

ROTATE_ATTRIBUTE_MAP = {
	"y+": constants.ROTATED_POSITIVE,
	"y-": constants.ROTATED_NEGATIVE,
}


#============================================
def local_tag_name(tag: str) -> str:
	"""Return local XML tag name without namespace prefix."""
	if "}" in tag:
		return tag.rsplit("}", 1)[-1]
	return tag


#============================================
def parse_float(raw_value: str | None, default_value: float) -> float:
	"""Parse one SVG numeric attribute with a default fallback."""
	if raw_value is None:
		return float(default_value)
	try:
		return float(str(raw_value).strip())
	except ValueError:
		return float(default_value)


#============================================
def svg_number_tokens(text_value: str) -> list[float]:
	"""Return all float-like numeric tokens parsed from one SVG attribute string."""
	return [float(token) for token in constants.SVG_FLOAT_PATTERN.findall(str(text_value or ""))]


#============================================
def polygon_points(points_text: str) -> list[tuple[float, float]]:
	"""Parse SVG polygon points string into coordinate tuples."""
	points = []
	coordinates = svg_number_tokens(points_text)
	for index in range(0, len(coordinates) - 1, 2):
		points.append((coordinates[index], coordinates[index + 1]))
	return points


#============================================
def visible_text(text_node) -> str:
	"""Return SVG text content with surrounding whitespace removed."""
	text_value = "".join(str(part) for part in text_node.itertext())
	return re.sub(r"\s+", " ", text_value or "").strip()


#============================================
def text_rotation(node) -> str:
	"""Return the rotation tag for one text node."""
	raw_value = str(node.get("rotate") or "").strip().lower()
	return ROTATE_ATTRIBUTE_MAP.get(raw_value, constants.ROTATION_NONE)


#============================================
def line_from_node(node) -> LineSegment:
	"""Return one line primitive built from one SVG line node."""
	return LineSegment(
		(parse_float(node.get("x1"), 0.0), parse_float(node.get("y1"), 0.0)),
		(parse_float(node.get("x2"), 0.0), parse_float(node.get("y2"), 0.0)),
		width=parse_float(node.get("stroke-width"), 1.0),
		linecap=str(node.get("stroke-linecap") or "butt"),
	)


#============================================
def polyline_segments(node) -> list[LineSegment]:
	"""Return consecutive line primitives along one SVG polyline node."""
	points = polygon_points(str(node.get("points") or ""))
	width = parse_float(node.get("stroke-width"), 1.0)
	linecap = str(node.get("stroke-linecap") or "butt")
	return [
		LineSegment(points[index], points[index + 1], width=width, linecap=linecap)
		for index in range(len(points) - 1)
	]


#============================================
def text_from_node(node) -> TextRun | None:
	"""Return one text primitive, or None when the node has no visible text."""
	text_value = visible_text(node)
	if not text_value:
		return None
	return TextRun(
		x=parse_float(node.get("x"), 0.0),
		y=parse_float(node.get("y"), 0.0),
		text=text_value,
		font_size=parse_float(node.get("font-size"), constants.DEFAULT_FONT_SIZE),
		rotation=text_rotation(node),
		font_family=str(node.get("font-family") or "sans-serif"),
	)


#============================================
def collect_svg_primitives(svg_root) -> SvgPrimitives:
	"""Collect line, text, polygon and circle primitives from one SVG root."""
	primitives = SvgPrimitives()
	for node in svg_root.iter():
		tag_name = local_tag_name(str(node.tag))
		if tag_name == "line":
			primitives.add(line_from_node(node))
		elif tag_name == "polyline":
			for segment in polyline_segments(node):
				primitives.add(segment)
		elif tag_name == "text":
			text_run = text_from_node(node)
			if text_run is not None:
				primitives.add(text_run)
		elif tag_name == "polygon":
			points = polygon_points(str(node.get("points") or ""))
			if len(points) < 3:
				logger.debug("skipping polygon with %d points", len(points))
				continue
			fill = str(node.get("fill") or "none").strip().lower()
			primitives.add(Polygon(tuple(points), fill=fill))
		elif tag_name == "circle":
			primitives.add(
				Circle(
					parse_float(node.get("cx"), 0.0),
					parse_float(node.get("cy"), 0.0),
					parse_float(node.get("r"), 0.0),
				)
			)
	logger.debug(
		"collected %d lines, %d texts, %d polygons, %d circles",
		len(primitives.lines), len(primitives.texts),
		len(primitives.polygons), len(primitives.circles),
	)
	return primitives


#============================================
def load_svg_primitives(svg_path) -> SvgPrimitives:
	"""Parse one SVG file and collect its primitives."""
	path = pathlib.Path(svg_path)
	tree = ET.parse(str(path))
	return collect_svg_primitives(tree.getroot())


#============================================
def parse_svg_text(svg_text: str) -> SvgPrimitives:
	"""Parse SVG markup held in one string and collect its primitives."""
	return collect_svg_primitives(ET.fromstring(svg_text))
