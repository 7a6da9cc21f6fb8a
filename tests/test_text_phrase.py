"""Tests for svgbuilder.text_phrase module."""

# Third Party
import pytest

# Local
import conftest  # noqa: F401
from svgbuilder import constants
from svgbuilder.primitives import TextRun
from svgbuilder.text_phrase import make_phrase, make_words, parse_number


#============================================
@pytest.mark.parametrize("text, expected", [
	("10", 10.0),
	(" 2.5 ", 2.5),
	("−5", -5.0),
	("–3", -3.0),
	("1e3", 1000.0),
	("", None),
	("mg/L", None),
])
def test_parse_number(text, expected):
	assert parse_number(text) == expected


#============================================
def test_adjacent_runs_merge_into_one_word():
	# "1" is about 6.6 wide at font size 12, so "2" starts right after it
	runs = [TextRun(6.6, 50.0, "2"), TextRun(0.0, 50.0, "1")]
	words = make_words(runs)
	assert len(words) == 1
	assert words[0].text == "12"
	assert words[0].value == 12.0


#============================================
def test_spaced_runs_stay_separate_words():
	runs = [TextRun(x_value, 50.0, str(index)) for index, x_value in enumerate((0.0, 25.0, 50.0))]
	phrase = make_phrase(runs)
	assert [word.text for word in phrase.words] == ["0", "1", "2"]
	assert phrase.text == "0 1 2"
	assert phrase.numeric_values() == [0.0, 1.0, 2.0]


#============================================
def test_runs_on_other_baselines_do_not_merge():
	words = make_words([TextRun(0.0, 50.0, "1"), TextRun(6.6, 80.0, "2")])
	assert [word.text for word in words] == ["1", "2"]


#============================================
def test_numeric_values_skip_words():
	runs = [TextRun(0.0, 10.0, "0"), TextRun(30.0, 10.0, "time"), TextRun(80.0, 10.0, "5")]
	assert make_phrase(runs).numeric_values() == [0.0, 5.0]


#============================================
def test_rotated_runs_read_bottom_to_top():
	runs = [
		TextRun(10.0, 20.0, "B", rotation=constants.ROTATED_POSITIVE),
		TextRun(10.0, 50.0, "A", rotation=constants.ROTATED_POSITIVE),
	]
	words = make_words(runs)
	assert [word.text for word in words] == ["A", "B"]
