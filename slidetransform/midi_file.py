"""Standard MIDI File encoding.

Sequenced note events are written as a format 1 file at 1024 ticks per
quarter note, one ``MTrk`` chunk per track in ascending track order. Each
chunk is built in memory: a four byte placeholder is reserved for the chunk
length and filled in once the track body is complete, so the encoder never
needs to seek in its output.

Running status is never used; every event carries its own status byte.
Pitches are written as ``pitch & 0xFF`` without range checks, so a slide that
goes below note 0 or above 127 produces an invalid data byte rather than a
silently corrected note.
"""

import dataclasses
import logging
import os
import struct
import tempfile
import typing

import mido

import slidetransform.constants.midi
import slidetransform.event_sequencer
import slidetransform.exceptions


logger = logging.getLogger(__name__)


def encode_variable_length (value: int) -> bytes:

	"""Encode a non-negative integer as a MIDI variable-length quantity.

	Seven bits per byte, most significant group first, with the top bit set on
	every byte except the last.

	Example:
		```python
		encode_variable_length(0)    # → b"\\x00"
		encode_variable_length(480)  # → b"\\x83\\x60"
		```
	"""

	if value < 0:
		raise ValueError(f"Delta time cannot be negative, got {value}")

	if value > slidetransform.constants.midi.MAX_VARIABLE_LENGTH:
		raise ValueError(f"Delta time {value} exceeds the MIDI maximum of {slidetransform.constants.midi.MAX_VARIABLE_LENGTH}")

	groups = [value & 0x7F]
	value >>= 7

	while value:
		groups.append((value & 0x7F) | 0x80)
		value >>= 7

	return bytes(reversed(groups))


def _event_sort_key (event: slidetransform.event_sequencer.NoteEvent) -> typing.Tuple[int, bool]:

	# Note-offs sort before note-ons at the same tick.
	return (event.tick, event.is_note_on)


def encode_track (events: typing.Iterable[slidetransform.event_sequencer.NoteEvent]) -> bytes:

	"""Encode one track's events as a complete ``MTrk`` chunk."""

	chunk = bytearray(slidetransform.constants.midi.TRACK_CHUNK_TAG)
	length_position = len(chunk)
	chunk.extend(b"\x00\x00\x00\x00")
	body_start = len(chunk)

	chunk.extend(encode_variable_length(0))
	chunk.extend((slidetransform.constants.midi.PROGRAM_CHANGE, slidetransform.constants.midi.DEFAULT_PROGRAM))

	last_tick = 0

	for event in sorted(events, key=_event_sort_key):

		chunk.extend(encode_variable_length(event.tick - last_tick))
		last_tick = event.tick

		if event.is_note_on:
			chunk.extend((slidetransform.constants.midi.NOTE_ON, event.pitch & 0xFF, slidetransform.constants.midi.NOTE_ON_VELOCITY))
		else:
			chunk.extend((slidetransform.constants.midi.NOTE_OFF, event.pitch & 0xFF, slidetransform.constants.midi.NOTE_OFF_VELOCITY))

	chunk.extend(slidetransform.constants.midi.END_OF_TRACK)

	struct.pack_into(">I", chunk, length_position, len(chunk) - body_start)

	return bytes(chunk)


def encode (events_by_track: typing.Mapping[int, typing.Iterable[slidetransform.event_sequencer.NoteEvent]]) -> bytes:

	"""Encode every track into a complete format 1 MIDI file.

	The header counts one track per key in ``events_by_track``; tracks are
	written in ascending key order.
	"""

	track_ids = sorted(events_by_track)

	data = bytearray(slidetransform.constants.midi.HEADER_CHUNK_TAG)
	data.extend(struct.pack(
		">IHHH",
		slidetransform.constants.midi.HEADER_LENGTH,
		slidetransform.constants.midi.FORMAT_MULTI_TRACK,
		len(track_ids),
		slidetransform.constants.midi.TICKS_PER_QUARTER_NOTE
	))

	for track in track_ids:
		data.extend(encode_track(events_by_track[track]))

	return bytes(data)


def _current_umask () -> int:

	umask = os.umask(0)
	os.umask(umask)

	return umask


def write_midi_file (path: str, events_by_track: typing.Mapping[int, typing.Iterable[slidetransform.event_sequencer.NoteEvent]]) -> int:

	"""Encode ``events_by_track`` and write it to ``path``.

	The file is written under a temporary name in the same directory and then
	renamed into place, so ``path`` either holds the complete file or is left
	as it was.

	Returns:
		The number of bytes written.

	Raises:
		IOFailure: If the file cannot be written.
	"""

	data = encode(events_by_track)
	directory = os.path.dirname(os.path.abspath(path))
	temp_name: typing.Optional[str] = None

	try:
		with tempfile.NamedTemporaryFile("wb", dir=directory, prefix=".slidetransform-", suffix=".mid", delete=False) as handle:
			temp_name = handle.name
			handle.write(data)

		# Temporary files are created owner-only; match a plain open() instead.
		os.chmod(temp_name, 0o666 & ~_current_umask())
		os.replace(temp_name, path)

	except OSError as e:
		if temp_name is not None and os.path.exists(temp_name):
			os.remove(temp_name)
		raise slidetransform.exceptions.IOFailure(f"Failed to write MIDI file {path}: {e}") from e

	logger.info(f"Wrote {len(data)} bytes ({len(events_by_track)} tracks) to {path}")

	return len(data)


@dataclasses.dataclass
class MidiFileSummary:

	"""
	Headline facts about a MIDI file read back from disk.
	"""

	file_type: int
	ticks_per_beat: int
	track_count: int
	note_count: int
	length_ticks: int


def summarize_midi_file (path: str) -> MidiFileSummary:

	"""Read a MIDI file with mido and count its tracks and notes.

	Used after writing to confirm the output parses as a standard MIDI file.
	``note_count`` counts note-on messages with a non-zero velocity and
	``length_ticks`` is the longest track's total tick length.
	"""

	mid = mido.MidiFile(path)

	note_count = 0
	length_ticks = 0

	for track in mid.tracks:
		ticks = 0
		for message in track:
			ticks += message.time
			if message.type == "note_on" and message.velocity > 0:
				note_count += 1
		length_ticks = max(length_ticks, ticks)

	return MidiFileSummary(
		file_type = mid.type,
		ticks_per_beat = mid.ticks_per_beat,
		track_count = len(mid.tracks),
		note_count = note_count,
		length_ticks = length_ticks
	)
