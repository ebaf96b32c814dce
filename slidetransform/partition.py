"""Duration partitioning for slide ornaments.

A slide replaces one principal note with two or three short ornament notes
followed by the principal itself. The partition scheme decides how the
principal's duration is shared between them, and the meter picks between the
duple and triple proportions of that scheme.

Each leading part is written as ``(count, numerator, denominator)`` and
evaluated as ``count * (duration * numerator // denominator)``, which keeps
the integer rounding of every segment explicit. Conserving schemes give the
principal note whatever remains, so the parts always add up to the original
duration. ``PartitionScheme.SLIDE`` lists every part and does not correct the
remainder: for durations that are not a multiple of its denominator the parts
add up to less than the original.
"""

import enum
import typing

import slidetransform.exceptions


class Meter (enum.Enum):

	"""Selects the duple or triple proportions of a partition scheme."""

	DUPLE = "duple"
	TRIPLE = "triple"


	@classmethod
	def parse (cls, value: typing.Union["Meter", str]) -> "Meter":

		"""Accept a ``Meter`` or its case-insensitive name (``"duple"``, ``"triple"``)."""

		if isinstance(value, cls):
			return value

		try:
			return cls(str(value).strip().lower())
		except ValueError:
			raise ValueError(f"Unknown meter: {value!r}. Expected 'duple' or 'triple'.") from None


class PartitionScheme (enum.Enum):

	"""The seven ways a slide splits its principal note's duration.

	Values are the scheme ids. Schemes 2, 4 and 5 produce three parts (two
	ornament notes), the rest produce four parts (three ornament notes).
	"""

	SLIDE = 2
	THREE_TONE = 3
	DOTTED = 4
	DOTTED_SECOND = 5
	THREE_TONE_DOTTED_FIRST = 6
	THREE_TONE_DOTTED_SECOND = 7
	THREE_TONE_DOTTED_THIRD = 8


	@property
	def part_count (self) -> int:

		"""Number of durations this scheme returns."""

		return 3 if self in _THREE_PART_SCHEMES else 4


	@property
	def ornament_count (self) -> int:

		"""Number of ornament notes played before the principal."""

		return self.part_count - 1


	@property
	def conserving (self) -> bool:

		"""Whether the returned parts always sum to the input duration."""

		return self is not PartitionScheme.SLIDE


PartSpec = typing.Tuple[int, int, int]

_THREE_PART_SCHEMES = frozenset([PartitionScheme.SLIDE, PartitionScheme.DOTTED, PartitionScheme.DOTTED_SECOND])

# Conserving schemes list the leading parts only; the final part takes the remainder.
_SCHEME_PARTS: typing.Dict[PartitionScheme, typing.Dict[Meter, typing.Tuple[PartSpec, ...]]] = {
	PartitionScheme.SLIDE: {
		Meter.DUPLE: ((1, 1, 4), (1, 1, 4), (2, 1, 4)),
		Meter.TRIPLE: ((1, 1, 3), (1, 1, 3), (1, 1, 3)),
	},
	PartitionScheme.THREE_TONE: {
		Meter.DUPLE: ((1, 1, 6), (1, 1, 6), (1, 1, 6)),
		Meter.TRIPLE: ((1, 1, 8), (1, 1, 8), (1, 1, 8)),
	},
	PartitionScheme.DOTTED: {
		Meter.DUPLE: ((1, 3, 8), (1, 1, 8)),
		Meter.TRIPLE: ((1, 1, 3), (1, 1, 6)),
	},
	PartitionScheme.DOTTED_SECOND: {
		Meter.DUPLE: ((1, 1, 4), (1, 3, 8)),
		Meter.TRIPLE: ((1, 1, 6), (1, 1, 3)),
	},
	PartitionScheme.THREE_TONE_DOTTED_FIRST: {
		Meter.DUPLE: ((1, 1, 4), (1, 1, 8), (1, 1, 8)),
		Meter.TRIPLE: ((2, 1, 8), (1, 1, 8), (1, 1, 8)),
	},
	PartitionScheme.THREE_TONE_DOTTED_SECOND: {
		Meter.DUPLE: ((1, 1, 8), (1, 1, 4), (1, 1, 8)),
		Meter.TRIPLE: ((1, 1, 8), (2, 1, 8), (1, 1, 8)),
	},
	PartitionScheme.THREE_TONE_DOTTED_THIRD: {
		Meter.DUPLE: ((1, 1, 8), (1, 1, 8), (1, 1, 4)),
		Meter.TRIPLE: ((2, 1, 12), (2, 1, 12), (4, 1, 12)),
	},
}


def partition (scheme: PartitionScheme, meter: typing.Union[Meter, str], duration: int) -> typing.List[int]:

	"""Split ``duration`` ticks into the ordered parts of ``scheme`` under ``meter``.

	Parts are returned even when floor division leaves them at zero; a very
	short principal yields zero-length ornament notes rather than an error.

	Raises:
		InvalidDuration: If ``duration`` is not positive.

	Example:
		```python
		partition(PartitionScheme.SLIDE, Meter.DUPLE, 1024)       # → [256, 256, 512]
		partition(PartitionScheme.THREE_TONE, Meter.DUPLE, 100)   # → [16, 16, 16, 52]
		```
	"""

	if duration <= 0:
		raise slidetransform.exceptions.InvalidDuration(f"Duration must be positive, got {duration}")

	meter = Meter.parse(meter)

	parts = [count * (duration * numerator // denominator) for count, numerator, denominator in _SCHEME_PARTS[scheme][meter]]

	if scheme.conserving:
		parts.append(duration - sum(parts))

	return parts
