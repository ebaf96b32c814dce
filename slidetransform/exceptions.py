"""Errors raised by the slide transformation core.

Each kind also derives from the builtin exception a caller would expect
(``ValueError`` for bad input, ``OSError`` for output failures), so code that
only knows about the builtins still catches them.
"""


class SlideTransformError (Exception):

	"""Base class for every error raised by slidetransform."""


class InvalidDuration (SlideTransformError, ValueError):

	"""A note duration was zero or negative where a positive value is required."""


class UnknownVariant (SlideTransformError, ValueError):

	"""A slide variant name is not part of the catalog."""


class InvalidNoteName (SlideTransformError, ValueError):

	"""Note text could not be parsed, or used a non-canonical spelling."""


class IOFailure (SlideTransformError, OSError):

	"""An input could not be read or an output could not be written."""
