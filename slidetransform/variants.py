"""The slide variant catalog.

Every variant is a row of static data: a name, the ornament pitches as
semitone offsets from the principal note (in playing order), and the
partition scheme that times them. Names follow the family prefixes of the
ornament vocabulary:

- ``STT`` / ``ISTT`` - two-note slide from below / above
- ``DSTT`` / ``DISTT`` - the same with a dotted first note
- ``TTS`` / ``ITTS`` - three-tone slide from below / above
- ``TTSd1`` / ``TTSd2`` / ``TTSd3`` - three-tone slide with the first, second or third note dotted
- ``TTIT`` / ``ITTIT`` - three-tone slide that crosses the principal from below / above

The suffix spells the successive intervals (``M2`` major second, ``m3``
minor third and so on).

The catalog is built once at import and never modified. ``list_all()`` keeps
declaration order so that seeded sampling is reproducible.
"""

import dataclasses
import random
import typing

import slidetransform.exceptions
import slidetransform.partition

PartitionScheme = slidetransform.partition.PartitionScheme


INTERVAL_NAMES: typing.Dict[int, str] = {
	0: "unison",
	1: "m2",
	2: "M2",
	3: "m3",
	4: "M3",
	5: "P4",
	6: "A4",
}


@dataclasses.dataclass(frozen=True)
class VariantDefinition:

	"""
	A named slide ornament.
	"""

	name: str
	offsets: typing.Tuple[int, ...]
	scheme: PartitionScheme


	def describe (self) -> str:

		"""Return a readable account of the ornament, e.g. "starts a m3 below, up a M2, up a m2 to resolve"."""

		pitches = list(self.offsets) + [0]
		steps = [_start_phrase(self.offsets[0])]
		steps.extend(_motion(current - previous) for previous, current in zip(pitches, pitches[1:]))
		steps[-1] += " to resolve"

		return ", ".join(steps)


def _interval_name (semitones: int) -> str:

	return INTERVAL_NAMES.get(abs(semitones), f"{abs(semitones)} semitones")


def _start_phrase (offset: int) -> str:

	if offset == 0:
		return "starts on the principal"

	position = "below" if offset < 0 else "above"

	return f"starts a {_interval_name(offset)} {position}"


def _motion (interval: int) -> str:

	if interval == 0:
		return "repeat"

	direction = "up" if interval > 0 else "down"

	return f"{direction} a {_interval_name(interval)}"


def _variant (name: str, offsets: typing.Tuple[int, ...], scheme: PartitionScheme) -> VariantDefinition:

	if len(offsets) != scheme.ornament_count:
		raise ValueError(f"Variant {name} has {len(offsets)} offsets but {scheme.name} needs {scheme.ornament_count}")

	return VariantDefinition(name=name, offsets=offsets, scheme=scheme)


CATALOG: typing.Tuple[VariantDefinition, ...] = (
	# Two-note slides from below
	_variant("STTM2m", (-3, -1), PartitionScheme.SLIDE),
	_variant("STTm2M", (-3, -2), PartitionScheme.SLIDE),
	_variant("STTm3m", (-4, -1), PartitionScheme.SLIDE),
	_variant("STTM2M", (-4, -2), PartitionScheme.SLIDE),

	# Two-note slides from below, dotted first note
	_variant("DSTTM2m", (-3, -1), PartitionScheme.DOTTED),
	_variant("DSTTm2M", (-3, -2), PartitionScheme.DOTTED),
	_variant("DSTTm3m", (-4, -1), PartitionScheme.DOTTED),
	_variant("DSTTM2M", (-4, -2), PartitionScheme.DOTTED),

	# Two-note slides from above
	_variant("ISTTM2m", (4, 2), PartitionScheme.SLIDE),
	_variant("ISTTm2M", (3, 2), PartitionScheme.SLIDE),
	_variant("ISTTM3m", (4, 1), PartitionScheme.SLIDE),
	_variant("ISTTM2M", (3, 1), PartitionScheme.SLIDE),

	# Two-note slides from above, dotted first note
	_variant("DISTTM2m", (4, 2), PartitionScheme.DOTTED),
	_variant("DISTTm2M", (3, 2), PartitionScheme.DOTTED),
	_variant("DISTTm3m", (4, 1), PartitionScheme.DOTTED),
	_variant("DISTTM2M", (3, 1), PartitionScheme.DOTTED),

	# Three-tone slides from below
	_variant("TTSM2m2M", (-5, -3, -2), PartitionScheme.THREE_TONE),
	_variant("TTSm3M2M", (-6, -3, -2), PartitionScheme.THREE_TONE),
	_variant("TTSm2M2M", (-5, -4, -2), PartitionScheme.THREE_TONE),
	_variant("TTSM2M2m", (-5, -3, -1), PartitionScheme.THREE_TONE),
	_variant("TTSM2M2M", (-6, -4, -2), PartitionScheme.THREE_TONE),
	_variant("TTSm2m3m", (-5, -4, -1), PartitionScheme.THREE_TONE),
	_variant("TTSm3M2m", (-6, -3, -1), PartitionScheme.THREE_TONE),
	_variant("TTSM2m3m", (-6, -4, -1), PartitionScheme.THREE_TONE),

	# Three-tone slides, first note dotted
	_variant("TTSd1M2m2M", (-5, -3, -2), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1m3M2M", (-6, -3, -2), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1m2M2M", (-5, -4, -2), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1M2M2m", (-5, -3, -1), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1M2M2M", (-6, -4, -2), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1m2m3m", (-5, -4, -1), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1m3M2m", (-6, -3, -1), PartitionScheme.THREE_TONE_DOTTED_FIRST),
	_variant("TTSd1M2m3m", (-6, -4, -1), PartitionScheme.THREE_TONE_DOTTED_FIRST),

	# Three-tone slides, second note dotted
	_variant("TTSd2M2m2M", (-5, -3, -2), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2m3M2M", (-6, -3, -2), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2m2M2M", (-5, -4, -2), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2M2M2m", (-5, -3, -1), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2M2M2M", (-6, -4, -2), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2m2m3m", (-5, -4, -1), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2m3M2m", (-6, -3, -1), PartitionScheme.THREE_TONE_DOTTED_SECOND),
	_variant("TTSd2M2m3m", (-6, -4, -1), PartitionScheme.THREE_TONE_DOTTED_SECOND),

	# Three-tone slides, third note dotted
	_variant("TTSd3M2m2M", (-5, -3, -2), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3m3M2M", (-6, -3, -2), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3m2M2M", (-5, -4, -2), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3M2M2m", (-5, -3, -1), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3M2M2M", (-6, -4, -2), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3m2m3m", (-5, -4, -1), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3m3M2m", (-6, -3, -1), PartitionScheme.THREE_TONE_DOTTED_THIRD),
	_variant("TTSd3M2m3m", (-6, -4, -1), PartitionScheme.THREE_TONE_DOTTED_THIRD),

	# Three-tone slides crossing the principal from below
	_variant("TTITM2M2M", (-2, 0, 2), PartitionScheme.THREE_TONE),
	_variant("TTITM2M2m", (-3, -1, 1), PartitionScheme.THREE_TONE),
	_variant("TTITM2m3M", (-3, -1, 2), PartitionScheme.THREE_TONE),
	_variant("TTITm2M2m", (-2, -1, 1), PartitionScheme.THREE_TONE),
	_variant("TTITm3M2M", (-3, 0, 2), PartitionScheme.THREE_TONE),
	_variant("TTITm3m2m", (-3, 0, 1), PartitionScheme.THREE_TONE),
	_variant("TTITM2m2m", (-2, 0, 1), PartitionScheme.THREE_TONE),

	# Three-tone slides crossing the principal from above
	_variant("ITTITM2M2M", (2, 0, -2), PartitionScheme.THREE_TONE),
	_variant("ITTITm2M3m", (2, 1, -3), PartitionScheme.THREE_TONE),
	_variant("ITTITm3m2M", (2, -1, -2), PartitionScheme.THREE_TONE),
	_variant("ITTITm3m2m", (3, 0, -1), PartitionScheme.THREE_TONE),
	_variant("ITTITM2M3m", (3, 1, -3), PartitionScheme.THREE_TONE),
	_variant("ITTITM2m2M", (1, -1, -2), PartitionScheme.THREE_TONE),
	_variant("ITTITM2m2m", (2, 0, -1), PartitionScheme.THREE_TONE),
	_variant("ITTITM2m3m", (2, 0, -3), PartitionScheme.THREE_TONE),
	_variant("ITTITm2M2M", (1, 0, -2), PartitionScheme.THREE_TONE),
	_variant("ITTITm2m3M", (2, 1, -2), PartitionScheme.THREE_TONE),
	_variant("ITTITm3M2M", (3, 0, -2), PartitionScheme.THREE_TONE),

	# Three-tone slides from above
	_variant("ITTSM2M2m", (5, 3, 1), PartitionScheme.THREE_TONE),
	_variant("ITTSm2M2M", (5, 4, 2), PartitionScheme.THREE_TONE),
	_variant("ITTSm2m3m", (5, 4, 1), PartitionScheme.THREE_TONE),
	_variant("ITTSm3M2m", (6, 3, 1), PartitionScheme.THREE_TONE),
	_variant("ITTSm3m2M", (6, 3, 2), PartitionScheme.THREE_TONE),
	_variant("ITTSM2M2M", (6, 4, 2), PartitionScheme.THREE_TONE),
	_variant("ITTSM2m2m", (4, 2, 1), PartitionScheme.THREE_TONE),
	_variant("ITTSM2m3m", (6, 4, 1), PartitionScheme.THREE_TONE),
)

_BY_NAME: typing.Dict[str, VariantDefinition] = {variant.name: variant for variant in CATALOG}


def lookup (name: str) -> VariantDefinition:

	"""Return the variant called ``name``.

	Raises:
		UnknownVariant: If the catalog has no such variant.
	"""

	if name not in _BY_NAME:
		raise slidetransform.exceptions.UnknownVariant(f"Unknown slide variant: {name!r}")

	return _BY_NAME[name]


def list_all () -> typing.List[VariantDefinition]:

	"""Return every variant in declaration order."""

	return list(CATALOG)


def names () -> typing.List[str]:

	"""Return every variant name in declaration order."""

	return [variant.name for variant in CATALOG]


def sample (count: int, rng: typing.Union[random.Random, int, None] = None) -> typing.List[VariantDefinition]:

	"""Draw ``count`` distinct variants in random order.

	The whole catalog is shuffled and the first ``count`` entries kept, so the
	result is never longer than the catalog. ``rng`` may be a ``random.Random``
	or an integer seed; the same seed always yields the same pool.
	"""

	if not isinstance(rng, random.Random):
		rng = random.Random(rng)

	pool = list(CATALOG)
	rng.shuffle(pool)

	return pool[:max(count, 0)]
