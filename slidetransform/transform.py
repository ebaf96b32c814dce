import dataclasses
import logging
import typing

import slidetransform.partition
import slidetransform.variants


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ExpandedNote:

	"""
	One note of an expanded slide: a MIDI pitch and a duration in ticks.
	"""

	pitch: int
	duration: int


def expand (principal: int, duration: int, meter: typing.Union[slidetransform.partition.Meter, str], variant_name: str) -> typing.List[ExpandedNote]:

	"""Replace a principal note with a slide ornament followed by the principal.

	Ornament pitches are ``principal + offset`` for each of the variant's
	offsets, in order, and the principal itself comes last. Durations come from
	the variant's partition scheme. Pitches are not range-checked, so a slide
	below note 0 or above 127 comes back as-is.

	Parameters:
		principal: MIDI note number of the principal note.
		duration: Principal note duration in ticks.
		meter: Duple or triple proportions.
		variant_name: Catalog name, e.g. ``"STTM2m"``.

	Raises:
		UnknownVariant: If ``variant_name`` is not in the catalog.
		InvalidDuration: If ``duration`` is not positive.

	Example:
		```python
		expand(60, 1024, Meter.DUPLE, "STTM2m")
		# → [ExpandedNote(57, 256), ExpandedNote(59, 256), ExpandedNote(60, 512)]
		```
	"""

	variant = slidetransform.variants.lookup(variant_name)
	parts = slidetransform.partition.partition(variant.scheme, meter, duration)
	pitches = [principal + offset for offset in variant.offsets] + [principal]

	notes = [ExpandedNote(pitch=pitch, duration=part) for pitch, part in zip(pitches, parts)]

	logger.debug(f"{variant_name} on {principal} ({duration} ticks) -> {[(n.pitch, n.duration) for n in notes]}")

	return notes
