"""Whole-file processing: note list to report, report to MIDI file.

``process_file`` reads a note list and writes a report in which some eligible
notes have been replaced by slide ornaments. ``convert_to_midi`` reads such a
report back and writes the MIDI file. The two steps are separate so the report
can be reviewed or edited before it is rendered.

A bad note never stops a run. It is logged, recorded in the run's diagnostics
and written through unchanged, and processing carries on with the next line.
"""

import collections
import dataclasses
import logging
import random
import typing

import slidetransform.config
import slidetransform.constants.labels
import slidetransform.event_sequencer
import slidetransform.exceptions
import slidetransform.midi_file
import slidetransform.note_list
import slidetransform.pitch
import slidetransform.transform
import slidetransform.variants


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Selection policy
# ---------------------------------------------------------------------------

def should_transform (rng: random.Random, percentage: float) -> bool:

	"""Return True with a ``percentage`` in 100 chance."""

	return rng.random() * 100.0 < percentage


def choose_variant (rng: random.Random, selected: typing.Sequence[str]) -> str:

	"""Pick the variant for one note.

	An empty selection, or one that is just ``"RANDOM"``, draws from the whole
	catalog. Otherwise one of the selected names is drawn uniformly.
	"""

	if not selected or list(selected) == [slidetransform.constants.labels.RANDOM_SELECTION]:
		return rng.choice(slidetransform.variants.names())

	return rng.choice(list(selected))


def parse_user_choices (text: str, max_choice: int) -> typing.List[int]:

	"""Parse whitespace-separated 1-based menu choices.

	Tokens that are not integers or fall outside ``1..max_choice`` are
	ignored, as are repeats. The first-seen order is kept.

	Example:
		```python
		parse_user_choices("3 1 x 3 12", max_choice=10)  # → [3, 1]
		```
	"""

	choices: typing.List[int] = []

	for token in text.split():

		try:
			choice = int(token)
		except ValueError:
			continue

		if 1 <= choice <= max_choice and choice not in choices:
			choices.append(choice)

	return choices


# ---------------------------------------------------------------------------
# Note list -> report
# ---------------------------------------------------------------------------

@dataclasses.dataclass
class TransformationStats:

	"""
	Counts collected while processing one note list.
	"""

	total_eligible: int = 0
	transformed: int = 0
	failed: int = 0
	variant_usage: typing.Counter[str] = dataclasses.field(default_factory=collections.Counter)
	diagnostics: typing.List[str] = dataclasses.field(default_factory=list)
	selected_variants: typing.List[str] = dataclasses.field(default_factory=list)


	@property
	def actual_percentage (self) -> float:

		"""Share of eligible notes that received a slide, 0-100."""

		if self.total_eligible == 0:
			return 0.0

		return self.transformed / self.total_eligible * 100.0


	def summary (self) -> str:

		"""Return a multi-line, human readable account of the run."""

		lines = [
			"Transformation Statistics:",
			f"Total eligible notes found: {self.total_eligible}",
			f"Notes transformed: {self.transformed}",
			f"Actual transformation percentage: {self.actual_percentage:.1f}%",
		]

		if self.failed:
			lines.append(f"Notes that could not be transformed: {self.failed}")

		lines.append("")

		selected = self.selected_variants
		random_only = not selected or selected == [slidetransform.constants.labels.RANDOM_SELECTION]

		if random_only:
			lines.append("Variant selection: Random")

		elif len(selected) == 1:
			lines.append(f"Variant used: {selected[0]}")

		else:
			lines.append(f"Variants used ({len(selected)} total):")
			for name in sorted(self.variant_usage):
				lines.append(f"  {name}: {self.variant_usage[name]} times")

		return "\n".join(lines)


def _open_error (path: str, e: OSError) -> slidetransform.exceptions.IOFailure:

	return slidetransform.exceptions.IOFailure(f"Cannot open {path}: {e}")


def process_file (
	input_path: str,
	report_path: str,
	settings: typing.Optional[slidetransform.config.Settings] = None,
	rng: typing.Optional[random.Random] = None
) -> TransformationStats:

	"""Transform a note list into a report.

	Lines that are not notes are copied through as they are. Notes with an
	eligible label are offered to the percentage gate; those that pass are
	expanded with a chosen variant and written as one row per expanded note.
	Eligible notes that are not selected, or whose expansion fails, are
	written once and marked ``ORIGINAL``. Notes with other labels are written
	with an empty variant column.

	Parameters:
		input_path: Note list to read.
		report_path: Report file to (over)write.
		settings: Run options. Defaults to ``Settings()``.
		rng: Source of randomness. Defaults to ``random.Random(settings.seed)``.

	Raises:
		IOFailure: If either file cannot be opened.
	"""

	if settings is None:
		settings = slidetransform.config.Settings()

	if rng is None:
		rng = random.Random(settings.seed)

	stats = TransformationStats(selected_variants=list(settings.variants))

	try:
		source = open(input_path, 'r', encoding='utf-8', errors='replace')
	except OSError as e:
		raise _open_error(input_path, e) from e

	try:
		report = open(report_path, 'w', encoding='utf-8')
	except OSError as e:
		source.close()
		raise _open_error(report_path, e) from e

	with source, report:

		report.write(slidetransform.note_list.format_report_header())

		for line in source:

			note = slidetransform.note_list.parse_note_line(line)

			if note is None:
				report.write(line.rstrip("\r\n") + "\n")
				continue

			if note.label not in settings.labels:
				report.write(slidetransform.note_list.format_report_row(note.track, note.note_name, note.duration, note.label))
				continue

			stats.total_eligible += 1

			if not should_transform(rng, settings.percentage):
				report.write(_original_row(note))
				continue

			variant_name = choose_variant(rng, settings.variants)

			try:
				principal = slidetransform.pitch.note_number(note.note_name)
				expanded = slidetransform.transform.expand(principal, note.duration, settings.meter, variant_name)

			except slidetransform.exceptions.SlideTransformError as e:
				message = f"Error processing note '{note.note_name}' (track {note.track}): {e}"
				logger.warning(message)
				stats.diagnostics.append(message)
				stats.failed += 1
				report.write(_original_row(note))
				continue

			stats.transformed += 1
			stats.variant_usage[variant_name] += 1

			for expanded_note in expanded:
				report.write(slidetransform.note_list.format_report_row(
					note.track,
					slidetransform.pitch.note_name(expanded_note.pitch),
					expanded_note.duration,
					note.label,
					variant_name
				))

	logger.info(
		f"Transformed {stats.transformed} of {stats.total_eligible} eligible notes "
		f"({stats.actual_percentage:.1f}%), report written to {report_path}"
	)

	return stats


def _original_row (note: slidetransform.note_list.NoteLine) -> str:

	return slidetransform.note_list.format_report_row(
		note.track,
		note.note_name,
		note.duration,
		note.label,
		slidetransform.constants.labels.ORIGINAL_MARKER
	)


# ---------------------------------------------------------------------------
# Report -> MIDI
# ---------------------------------------------------------------------------

@dataclasses.dataclass
class ReportNote:

	"""
	A report row resolved to a MIDI note number.
	"""

	track: int
	pitch: int
	duration: int


def read_report (report_path: str, diagnostics: typing.Optional[typing.List[str]] = None) -> typing.List[ReportNote]:

	"""Read the note rows of a report, in file order.

	Rows whose note name cannot be parsed are skipped; a message for each is
	logged and appended to ``diagnostics`` when given.

	Raises:
		IOFailure: If the report cannot be opened.
	"""

	notes: typing.List[ReportNote] = []

	try:
		handle = open(report_path, 'r', encoding='utf-8', errors='replace')
	except OSError as e:
		raise _open_error(report_path, e) from e

	with handle:

		for line in handle:

			row = slidetransform.note_list.parse_report_line(line)

			if row is None:
				continue

			try:
				pitch = slidetransform.pitch.note_number(row.note_name)
			except slidetransform.exceptions.InvalidNoteName as e:
				message = f"Error processing note '{row.note_name}' (track {row.track}): {e}"
				logger.warning(message)
				if diagnostics is not None:
					diagnostics.append(message)
				continue

			notes.append(ReportNote(track=row.track, pitch=pitch, duration=row.duration))

	return notes


def convert_to_midi (report_path: str, midi_path: str) -> typing.List[str]:

	"""Render a report as a MIDI file.

	Each report row becomes one note, placed straight after the previous note
	on the same track. Rows that cannot be used are skipped.

	Returns:
		Diagnostic messages for the skipped rows.

	Raises:
		IOFailure: If the report cannot be read or the MIDI file cannot be written.
	"""

	diagnostics: typing.List[str] = []
	sequencer = slidetransform.event_sequencer.EventSequencer()

	for note in read_report(report_path, diagnostics):

		try:
			sequencer.sequence(note.track, [slidetransform.transform.ExpandedNote(pitch=note.pitch, duration=note.duration)])

		except slidetransform.exceptions.InvalidDuration as e:
			message = f"Error processing note {slidetransform.pitch.note_name(note.pitch)} (track {note.track}): {e}"
			logger.warning(message)
			diagnostics.append(message)

	slidetransform.midi_file.write_midi_file(midi_path, sequencer.events_by_track())

	return diagnostics
