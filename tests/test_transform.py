import pytest

import slidetransform.exceptions
import slidetransform.partition
import slidetransform.transform
import slidetransform.variants

ExpandedNote = slidetransform.transform.ExpandedNote
Meter = slidetransform.partition.Meter


def test_expand_two_note_slide () -> None:

	"""STTM2m climbs a minor third below, then a major second, into the principal."""

	notes = slidetransform.transform.expand(60, 1024, Meter.DUPLE, "STTM2m")

	assert notes == [
		ExpandedNote(pitch=57, duration=256),
		ExpandedNote(pitch=59, duration=256),
		ExpandedNote(pitch=60, duration=512),
	]


def test_expand_two_note_slide_triple () -> None:

	"""Triple meter gives each note a third."""

	notes = slidetransform.transform.expand(60, 900, Meter.TRIPLE, "ISTTM2m")

	assert [(n.pitch, n.duration) for n in notes] == [(64, 300), (62, 300), (60, 300)]


def test_expand_three_tone_slide () -> None:

	"""TTSM2m2M starts a fourth below and gives the principal the remainder."""

	notes = slidetransform.transform.expand(60, 600, Meter.DUPLE, "TTSM2m2M")

	assert [(n.pitch, n.duration) for n in notes] == [(55, 100), (57, 100), (58, 100), (60, 300)]


def test_expand_dotted_slide () -> None:

	"""DSTT variants lengthen the first ornament note."""

	notes = slidetransform.transform.expand(62, 1024, Meter.DUPLE, "DSTTM2M")

	assert [(n.pitch, n.duration) for n in notes] == [(58, 384), (60, 128), (62, 512)]


def test_expand_accepts_meter_name () -> None:

	"""The meter may be given by name."""

	assert slidetransform.transform.expand(60, 900, "triple", "STTM2m") == slidetransform.transform.expand(60, 900, Meter.TRIPLE, "STTM2m")


@pytest.mark.parametrize("meter", list(Meter))
def test_every_variant_expands_to_offsets_plus_one (meter: Meter) -> None:

	"""Every variant yields one note per offset plus the principal, which comes last."""

	for variant in slidetransform.variants.list_all():

		notes = slidetransform.transform.expand(64, 1536, meter, variant.name)

		assert len(notes) == len(variant.offsets) + 1
		assert notes[-1].pitch == 64
		assert [n.pitch - 64 for n in notes[:-1]] == list(variant.offsets)


def test_pitches_are_not_range_checked () -> None:

	"""Slides below note 0 are returned as negative pitches."""

	notes = slidetransform.transform.expand(2, 1024, Meter.DUPLE, "TTSM2m2M")

	assert notes[0].pitch == -3


def test_unknown_variant_raises () -> None:

	"""An unknown variant raises and leaves the catalog untouched."""

	before = slidetransform.variants.names()

	with pytest.raises(slidetransform.exceptions.UnknownVariant):
		slidetransform.transform.expand(60, 1024, Meter.DUPLE, "NOPE")

	assert slidetransform.variants.names() == before


def test_zero_duration_raises () -> None:

	"""A zero duration raises InvalidDuration."""

	with pytest.raises(slidetransform.exceptions.InvalidDuration):
		slidetransform.transform.expand(60, 0, Meter.DUPLE, "STTM2m")


def test_unknown_variant_checked_before_duration () -> None:

	"""With both a bad name and a bad duration, the name is reported."""

	with pytest.raises(slidetransform.exceptions.UnknownVariant):
		slidetransform.transform.expand(60, 0, Meter.DUPLE, "NOPE")
