"""Exception taxonomy for primitive joining and axis calibration."""


#============================================
class SvgBuilderError(Exception):
	"""Base class for all svgbuilder errors."""


#============================================
class UnsupportedPrimitive(SvgBuilderError, TypeError):
	"""Raised when a primitive has no joinable wrapper."""

	def __init__(self, primitive):
		self.primitive = primitive
		super().__init__(f"Unsupported primitive: {type(primitive).__name__}")


#============================================
class SelfJoinError(SvgBuilderError, ValueError):
	"""Raised when a joinable is asked for a common point with itself."""

	def __init__(self, joinable):
		self.joinable = joinable
		super().__init__(f"Cannot join to self: {joinable!r}")


#============================================
class CalibrationError(SvgBuilderError):
	"""Base class for axis calibration failures.

	The partially built axis, when one exists, is kept in ``axis`` so callers
	can still inspect ticks and labels.
	"""

	def __init__(self, message: str, axis=None):
		self.axis = axis
		super().__init__(message)


#============================================
class TooManyTickLengthClasses(CalibrationError):
	"""Raised when tick lengths fall into more than two classes."""


#============================================
class TickLabelCountMismatch(CalibrationError):
	"""Raised when major ticks and scale values cannot be paired."""


#============================================
class DegenerateRange(CalibrationError):
	"""Raised when a tick or value range has zero width."""


#============================================
class AxisNotCalibrated(CalibrationError):
	"""Raised when a transform is requested from an axis without one."""
