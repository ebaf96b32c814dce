import os
import pathlib
import stat

import mido
import pytest

import slidetransform.event_sequencer
import slidetransform.exceptions
import slidetransform.midi_file
import slidetransform.transform

NoteEvent = slidetransform.event_sequencer.NoteEvent

HEADER_ONE_TRACK = b"MThd\x00\x00\x00\x06\x00\x01\x00\x01\x04\x00"


def _single_note_events () -> list:

	return [
		NoteEvent(track=1, pitch=60, tick=0, is_note_on=True),
		NoteEvent(track=1, pitch=60, tick=480, is_note_on=False),
	]


# ---------------------------------------------------------------------------
# Variable-length quantities
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
	(0, b"\x00"),
	(0x40, b"\x40"),
	(0x7F, b"\x7f"),
	(0x80, b"\x81\x00"),
	(480, b"\x83\x60"),
	(0x2000, b"\xc0\x00"),
	(0x3FFF, b"\xff\x7f"),
	(0x4000, b"\x81\x80\x00"),
	(0x0FFFFFFF, b"\xff\xff\xff\x7f"),
])
def test_encode_variable_length (value: int, expected: bytes) -> None:

	"""Values encode seven bits per byte, most significant first, with continuation bits."""

	assert slidetransform.midi_file.encode_variable_length(value) == expected


def test_encode_variable_length_rejects_negative () -> None:

	"""A negative delta time cannot be encoded."""

	with pytest.raises(ValueError):
		slidetransform.midi_file.encode_variable_length(-1)


def test_encode_variable_length_rejects_over_four_bytes () -> None:

	"""Deltas beyond 0x0FFFFFFF would need a fifth byte, which MIDI does not allow."""

	with pytest.raises(ValueError):
		slidetransform.midi_file.encode_variable_length(0x10000000)


# ---------------------------------------------------------------------------
# Byte layout
# ---------------------------------------------------------------------------

def test_encode_single_note_byte_exact () -> None:

	"""One note from tick 0 to 480 encodes to a known byte sequence."""

	data = slidetransform.midi_file.encode({1: _single_note_events()})

	body = (
		b"\x00\xc0\x00"
		b"\x00\x90\x3c\x64"
		b"\x83\x60\x80\x3c\x00"
		b"\x00\xff\x2f\x00"
	)

	assert data == HEADER_ONE_TRACK + b"MTrk" + len(body).to_bytes(4, "big") + body
	assert len(body) == 16


def test_track_length_field_matches_body () -> None:

	"""The MTrk length covers everything from after the length field to the end of track."""

	sequencer = slidetransform.event_sequencer.EventSequencer()
	sequencer.sequence(1, slidetransform.transform.expand(60, 100000, "duple", "TTSd3M2m3m"))

	chunk = slidetransform.midi_file.encode_track(sequencer.events_by_track()[1])

	assert chunk[:4] == b"MTrk"
	assert int.from_bytes(chunk[4:8], "big") == len(chunk) - 8
	assert chunk.endswith(b"\x00\xff\x2f\x00")


def test_note_off_sorts_before_note_on_at_same_tick () -> None:

	"""Back-to-back notes release the first before starting the second, whatever the input order."""

	events = [
		NoteEvent(track=1, pitch=62, tick=100, is_note_on=True),
		NoteEvent(track=1, pitch=62, tick=200, is_note_on=False),
		NoteEvent(track=1, pitch=60, tick=100, is_note_on=False),
		NoteEvent(track=1, pitch=60, tick=0, is_note_on=True),
	]

	chunk = slidetransform.midi_file.encode_track(events)

	assert chunk[8:] == (
		b"\x00\xc0\x00"
		b"\x00\x90\x3c\x64"
		b"\x64\x80\x3c\x00"
		b"\x00\x90\x3e\x64"
		b"\x64\x80\x3e\x00"
		b"\x00\xff\x2f\x00"
	)


def test_zero_duration_note_still_encoded () -> None:

	"""A zero-length note keeps both of its events."""

	events = [
		NoteEvent(track=1, pitch=60, tick=0, is_note_on=True),
		NoteEvent(track=1, pitch=60, tick=0, is_note_on=False),
	]

	chunk = slidetransform.midi_file.encode_track(events)

	assert chunk[8:] == b"\x00\xc0\x00" b"\x00\x80\x3c\x00" b"\x00\x90\x3c\x64" b"\x00\xff\x2f\x00"


def test_out_of_range_pitch_is_truncated_to_a_byte () -> None:

	"""Pitches outside 0-127 are written as their low eight bits."""

	events = [
		NoteEvent(track=1, pitch=-3, tick=0, is_note_on=True),
		NoteEvent(track=1, pitch=130, tick=0, is_note_on=True),
	]

	chunk = slidetransform.midi_file.encode_track(events)

	assert b"\x90\xfd\x64" in chunk
	assert b"\x90\x82\x64" in chunk


def test_empty_track_has_program_change_and_end () -> None:

	"""A track with no events still has its program change and end of track."""

	assert slidetransform.midi_file.encode_track([]) == b"MTrk\x00\x00\x00\x07\x00\xc0\x00\x00\xff\x2f\x00"


def test_encode_no_tracks () -> None:

	"""An empty mapping gives a header-only file with zero tracks."""

	assert slidetransform.midi_file.encode({}) == b"MThd\x00\x00\x00\x06\x00\x01\x00\x00\x04\x00"


def test_tracks_written_in_ascending_order () -> None:

	"""Track chunks follow track number order, not mapping order."""

	events = {
		9: [NoteEvent(track=9, pitch=72, tick=0, is_note_on=True), NoteEvent(track=9, pitch=72, tick=10, is_note_on=False)],
		2: [NoteEvent(track=2, pitch=48, tick=0, is_note_on=True), NoteEvent(track=2, pitch=48, tick=10, is_note_on=False)],
	}

	data = slidetransform.midi_file.encode(events)

	assert data[10:12] == b"\x00\x02"
	assert data.index(b"\x90\x30\x64") < data.index(b"\x90\x48\x64")


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def test_write_midi_file_reads_back_with_mido (tmp_path: pathlib.Path) -> None:

	"""The written file is a valid format 1 MIDI file at 1024 ticks per beat."""

	path = tmp_path / "single.mid"
	written = slidetransform.midi_file.write_midi_file(str(path), {1: _single_note_events()})

	assert written == os.path.getsize(path)

	mid = mido.MidiFile(str(path))

	assert mid.type == 1
	assert mid.ticks_per_beat == 1024
	assert len(mid.tracks) == 1

	messages = [message for message in mid.tracks[0] if not message.is_meta]

	assert [message.type for message in messages] == ["program_change", "note_on", "note_off"]
	assert messages[1].note == 60
	assert messages[1].velocity == 100
	assert messages[2].time == 480


def test_write_midi_file_matches_encode (tmp_path: pathlib.Path) -> None:

	"""The file holds exactly the encoded bytes."""

	path = tmp_path / "exact.mid"
	events = {1: _single_note_events()}
	slidetransform.midi_file.write_midi_file(str(path), events)

	assert path.read_bytes() == slidetransform.midi_file.encode(events)


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes only")
def test_write_midi_file_mode_matches_plain_file (tmp_path: pathlib.Path) -> None:

	"""The MIDI file gets the same permissions as any other newly written file."""

	path = tmp_path / "shared.mid"
	plain = tmp_path / "plain.bin"

	slidetransform.midi_file.write_midi_file(str(path), {1: _single_note_events()})
	plain.write_bytes(b"")

	assert stat.S_IMODE(path.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)


def test_write_midi_file_missing_directory_raises (tmp_path: pathlib.Path) -> None:

	"""An unwritable destination raises IOFailure and leaves nothing behind."""

	path = tmp_path / "missing" / "out.mid"

	with pytest.raises(slidetransform.exceptions.IOFailure):
		slidetransform.midi_file.write_midi_file(str(path), {1: _single_note_events()})

	assert not path.exists()


def test_failed_write_leaves_existing_file_and_no_temp_files (tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:

	"""If the final rename fails, the old file survives and the temporary file is removed."""

	path = tmp_path / "out.mid"
	path.write_bytes(b"previous")

	def _fail_replace (source: str, destination: str) -> None:
		raise PermissionError("read-only")

	monkeypatch.setattr(os, "replace", _fail_replace)

	with pytest.raises(slidetransform.exceptions.IOFailure):
		slidetransform.midi_file.write_midi_file(str(path), {1: _single_note_events()})

	assert path.read_bytes() == b"previous"
	assert [p.name for p in tmp_path.iterdir()] == ["out.mid"]


def test_io_failure_is_os_error (tmp_path: pathlib.Path) -> None:

	"""IOFailure can be caught as an OSError."""

	with pytest.raises(OSError):
		slidetransform.midi_file.write_midi_file(str(tmp_path / "no" / "such" / "dir.mid"), {})


def test_summarize_midi_file (tmp_path: pathlib.Path) -> None:

	"""The summary counts tracks, sounding notes and the longest track's length."""

	sequencer = slidetransform.event_sequencer.EventSequencer()
	sequencer.sequence(1, slidetransform.transform.expand(60, 1024, "duple", "STTM2m"))
	sequencer.sequence(2, slidetransform.transform.expand(67, 2048, "duple", "TTSM2m2M"))

	path = tmp_path / "summary.mid"
	slidetransform.midi_file.write_midi_file(str(path), sequencer.events_by_track())

	summary = slidetransform.midi_file.summarize_midi_file(str(path))

	assert summary.file_type == 1
	assert summary.ticks_per_beat == 1024
	assert summary.track_count == 2
	assert summary.note_count == 7
	assert summary.length_ticks == 2048
