import dataclasses
import typing

import slidetransform.exceptions
import slidetransform.transform


@dataclasses.dataclass(frozen=True)
class NoteEvent:

	"""
	A note-on or note-off at an absolute tick on one track.
	"""

	track: int
	pitch: int
	tick: int
	is_note_on: bool


class EventSequencer:

	"""
	Lays out consecutive notes on per-track timelines.

	Each track keeps its own cursor, starting at tick 0 the first time the
	track is seen. Notes on a track play back to back: every note starts where
	the previous one ended. Tracks never affect each other's cursors.

	Use one sequencer per output file.
	"""

	def __init__ (self) -> None:

		"""
		Initialize with no tracks.
		"""

		self._cursors: typing.Dict[int, int] = {}
		self._events: typing.Dict[int, typing.List[NoteEvent]] = {}


	def cursor (self, track: int) -> int:

		"""
		Return the tick where the next note on ``track`` will start.
		"""

		return self._cursors.get(track, 0)


	def sequence (self, track: int, notes: typing.Iterable[slidetransform.transform.ExpandedNote]) -> typing.List[NoteEvent]:

		"""Append ``notes`` to ``track`` and return their note-on/note-off events.

		Each note yields a note-on at the cursor and a note-off at
		``cursor + duration``, after which the cursor moves to the note-off.
		Zero-length notes still yield both events, at the same tick.

		Raises:
			InvalidDuration: If a note has a negative duration. Notes before it
				have already been sequenced.
		"""

		cursor = self._cursors.setdefault(track, 0)
		track_events = self._events.setdefault(track, [])
		events: typing.List[NoteEvent] = []

		for note in notes:

			if note.duration < 0:
				raise slidetransform.exceptions.InvalidDuration(
					f"Track {track}: note {note.pitch} has negative duration {note.duration}"
				)

			note_on = NoteEvent(track=track, pitch=note.pitch, tick=cursor, is_note_on=True)
			note_off = NoteEvent(track=track, pitch=note.pitch, tick=cursor + note.duration, is_note_on=False)

			events.append(note_on)
			events.append(note_off)
			track_events.append(note_on)
			track_events.append(note_off)

			cursor += note.duration
			self._cursors[track] = cursor

		return events


	def events_by_track (self) -> typing.Dict[int, typing.List[NoteEvent]]:

		"""
		Return every event sequenced so far, keyed by track.
		"""

		return {track: list(events) for track, events in self._events.items()}
