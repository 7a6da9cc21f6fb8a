"""Merge adjacent text runs into words and phrases and read numeric values."""

# Standard Library
import dataclasses
import logging

# local repo modules
from .config import TextConfig
from .primitives import TextRun

logger = logging.getLogger(__name__)

MINUS_SIGNS = ("−", "–", "‒")


#============================================
def parse_number(text: str) -> float | None:
	"""Return the float value of one label string, or None when not numeric."""
	value = str(text or "").strip()
	for minus_sign in MINUS_SIGNS:
		value = value.replace(minus_sign, "-")
	value = value.replace(" ", "")
	if not value:
		return None
	try:
		return float(value)
	except ValueError:
		return None


#============================================
@dataclasses.dataclass
class Word:
	"""Text runs on one baseline read as one token."""
	runs: list[TextRun]
	font_width_factor: float

	@property
	def text(self) -> str:
		return "".join(run.text for run in self.runs)

	@property
	def rotation(self) -> str:
		return self.runs[0].rotation

	@property
	def baseline(self) -> float:
		return self.runs[0].baseline

	@property
	def font_size(self) -> float:
		return max(float(run.font_size) for run in self.runs)

	@property
	def advance_start(self) -> float:
		return self.runs[0].advance_start

	@property
	def advance_end(self) -> float:
		last = self.runs[-1]
		return last.advance_start + last.estimated_width(self.font_width_factor)

	@property
	def anchor(self) -> tuple[float, float]:
		return self.runs[0].anchor

	@property
	def value(self) -> float | None:
		return parse_number(self.text)

	def can_append(self, run: TextRun, config: TextConfig) -> bool:
		"""Return True when run continues this word on the same baseline."""
		if run.rotation != self.rotation:
			return False
		font_size = max(self.font_size, float(run.font_size))
		if abs(run.baseline - self.baseline) > config.baseline_tolerance_factor * font_size:
			return False
		gap = run.advance_start - self.advance_end
		return -font_size <= gap <= config.word_gap_factor * font_size


#============================================
@dataclasses.dataclass
class Phrase:
	"""Words in reading order."""
	words: list[Word] = dataclasses.field(default_factory=list)

	@property
	def text(self) -> str:
		return " ".join(word.text for word in self.words)

	def numeric_values(self) -> list[float]:
		"""Return the value of every numeric word, skipping the others."""
		values = []
		for word in self.words:
			value = word.value
			if value is None:
				logger.debug("skipping non-numeric word %r", word.text)
				continue
			values.append(value)
		return values


#============================================
def make_words(texts: list[TextRun], config: TextConfig | None = None) -> list[Word]:
	"""Return words built from runs sorted by baseline and reading order."""
	if config is None:
		config = TextConfig()
	ordered = sorted(texts, key=lambda run: (run.rotation, run.advance_start))
	words: list[Word] = []
	for run in ordered:
		target = None
		for word in reversed(words):
			if word.can_append(run, config):
				target = word
				break
		if target is None:
			words.append(Word([run], config.font_width_factor))
		else:
			target.runs.append(run)
	words.sort(key=lambda word: (word.rotation, word.advance_start))
	return words


#============================================
def make_phrase(texts: list[TextRun], config: TextConfig | None = None) -> Phrase:
	"""Return one phrase of words merged from adjacent text runs."""
	return Phrase(make_words(texts, config))
