"""Reading note lists and writing transformation reports.

A note list has one note per line::

    1 C4 1024 SAN
    1 E4 512 RN
    2 G3 2048

The fields are the track number, a note name (see ``slidetransform.pitch``),
a duration in ticks, and an optional analysis label that runs to the end of
the line.

The report written by ``slidetransform.processing.process_file`` uses fixed
width columns under a two line header, and can itself be read back with
``parse_report_line`` to build the MIDI file.
"""

import dataclasses
import typing


REPORT_COLUMNS: typing.List[typing.Tuple[str, int]] = [
	("Track", 11),
	("Note", 11),
	("Duration", 20),
	("Label", 20),
	("Slide_Variant", 25),
]

REPORT_SEPARATOR = "-" * 81

_HEADER_NOTE_NAMES = frozenset(["Note", "Track"])


@dataclasses.dataclass
class NoteLine:

	"""
	One parsed line of an input note list.
	"""

	track: int
	note_name: str
	duration: int
	label: str = ""


@dataclasses.dataclass
class ReportRow:

	"""
	One note row of a transformation report.
	"""

	track: int
	note_name: str
	duration: int
	label: str = ""
	variant: str = ""


def _parse_leading_fields (tokens: typing.List[str]) -> typing.Optional[typing.Tuple[int, str, int]]:

	if len(tokens) < 3:
		return None

	try:
		return int(tokens[0]), tokens[1], int(tokens[2])
	except ValueError:
		return None


def parse_note_line (line: str) -> typing.Optional[NoteLine]:

	"""Parse a note-list line, or return ``None`` if it is not a note.

	The note name is not validated here; the caller decides what an unknown
	name means. Surrounding whitespace and line endings are stripped from the
	label.
	"""

	tokens = line.split(None, 3)
	fields = _parse_leading_fields(tokens)

	if fields is None:
		return None

	track, note_name, duration = fields
	label = tokens[3].strip() if len(tokens) > 3 else ""

	return NoteLine(track=track, note_name=note_name, duration=duration, label=label)


def format_report_header () -> str:

	"""Return the report's column header and separator lines."""

	header = "".join(title.ljust(width) for title, width in REPORT_COLUMNS)

	return f"{header}\n{REPORT_SEPARATOR}\n"


def format_report_row (track: int, note_name: str, duration: int, label: str, variant: str = "") -> str:

	"""Return one fixed-width report line, including the trailing newline."""

	values = [str(track), note_name, str(duration), label, variant]

	return "".join(value.ljust(width) for value, (_, width) in zip(values, REPORT_COLUMNS)) + "\n"


def parse_report_line (line: str) -> typing.Optional[ReportRow]:

	"""Parse a report line, or return ``None`` for headers, separators and anything else that is not a note row."""

	stripped = line.strip()

	if not stripped or stripped.startswith("-"):
		return None

	tokens = stripped.split()
	fields = _parse_leading_fields(tokens)

	if fields is None:
		return None

	track, note_name, duration = fields

	if note_name in _HEADER_NOTE_NAMES:
		return None

	label = tokens[3] if len(tokens) > 3 else ""
	variant = tokens[4] if len(tokens) > 4 else ""

	return ReportRow(track=track, note_name=note_name, duration=duration, label=label, variant=variant)
