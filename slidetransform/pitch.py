"""MIDI note number and note name conversion.

Names are written ``<Pitch><Octave>`` using sharps only, with **C4 = 60**::

    note_name(60)      # "C4"
    note_name(61)      # "C#4"
    note_number("A4")  # 69

Flat spellings such as ``"Db4"`` are rejected: the chromatic table holds one
name per pitch class, so ``note_number(note_name(n)) == n`` for every ``n``.
"""

import re
import typing

import slidetransform.exceptions


PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

NOTE_NAME_TO_PC: typing.Dict[str, int] = {name: pc for pc, name in enumerate(PC_TO_NOTE_NAME)}

_NOTE_NAME_PATTERN = re.compile(r"(?P<pitch>.*?)(?P<octave>[+-]?[0-9]+)")


def note_name (note: int) -> str:

	"""Return the sharp-spelled name of a MIDI note number.

	The octave is ``note // 12 - 1`` using floor division, so numbers outside
	0-127 still produce a name (``-1`` is ``"B-2"``, ``128`` is ``"G#9"``).

	Example:
		```python
		note_name(60)  # → "C4"
		note_name(70)  # → "A#4"
		```
	"""

	octave = note // 12 - 1

	return f"{PC_TO_NOTE_NAME[note % 12]}{octave}"


def note_number (name: str) -> int:

	"""Parse a note name into a MIDI note number.

	The trailing integer (optionally signed) is the octave and everything in
	front of it must be one of the twelve names in ``PC_TO_NOTE_NAME``. The
	match is case-sensitive.

	Raises:
		InvalidNoteName: If there is no octave suffix or the pitch part is not
			a canonical sharp spelling.
	"""

	match = _NOTE_NAME_PATTERN.fullmatch(name)

	if match is None:
		raise slidetransform.exceptions.InvalidNoteName(f"Invalid note name: {name!r}")

	pitch = match.group("pitch")

	if pitch not in NOTE_NAME_TO_PC:
		raise slidetransform.exceptions.InvalidNoteName(
			f"Invalid note name: {name!r}. Expected e.g. 'C4', 'F#3', 'A-1'."
		)

	octave = int(match.group("octave"))

	return (octave + 1) * 12 + NOTE_NAME_TO_PC[pitch]
