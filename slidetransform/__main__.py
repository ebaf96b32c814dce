"""Command line entry point.

Usage::

    python -m slidetransform notes.txt report.txt --midi slides.mid
    python -m slidetransform notes.txt report.txt --percentage 30 --variant STTM2m --variant TTSM2m2M
    python -m slidetransform notes.txt report.txt --choose --seed 7
    python -m slidetransform --list-variants
"""

import argparse
import logging
import random
import sys
import typing

import slidetransform.config
import slidetransform.exceptions
import slidetransform.midi_file
import slidetransform.processing
import slidetransform.variants


logger = logging.getLogger(__name__)

CHOICE_POOL_SIZE = 10


def build_parser () -> argparse.ArgumentParser:

	"""Return the argument parser for ``python -m slidetransform``."""

	parser = argparse.ArgumentParser(prog="slidetransform", description="Add slide ornaments to a note list and render it as a MIDI file")
	parser.add_argument("input", nargs="?", help="Note list to transform")
	parser.add_argument("report", nargs="?", help="Report file to write")
	parser.add_argument("--midi", help="Also render the report to this MIDI file")
	parser.add_argument("--config", default=slidetransform.config.DEFAULT_CONFIG_PATH, help="YAML configuration file (default: %(default)s)")
	parser.add_argument("--percentage", type=float, help="Chance (0-100) that an eligible note gets a slide")
	parser.add_argument("--variant", action="append", dest="variants", help="Restrict to this variant (repeatable)")
	parser.add_argument("--meter", choices=["duple", "triple"], help="Duration proportions")
	parser.add_argument("--seed", type=int, help="Random seed for repeatable runs")
	parser.add_argument("--choose", action="store_true", help="Pick variants interactively from a random pool")
	parser.add_argument("--list-variants", action="store_true", help="Print every variant and exit")
	parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")

	return parser


def list_variants () -> None:

	"""Print the catalog, one variant per line."""

	for variant in slidetransform.variants.list_all():
		print(f"{variant.name:<12} scheme {variant.scheme.value}  {variant.describe()}")


def choose_variants (rng: random.Random) -> typing.List[str]:

	"""Offer a random pool of variants on the console and return the chosen names.

	An empty answer selects every variant in the pool.
	"""

	pool = slidetransform.variants.sample(CHOICE_POOL_SIZE, rng)

	print("\nAvailable slide variants:\n")
	for i, variant in enumerate(pool, 1):
		print(f"  {i:>2}. {variant.name:<12} {variant.describe()}")
	print()

	try:
		answer = input(f"Select variants (numbers 1-{len(pool)} separated by spaces, blank for all): ")
	except EOFError:
		answer = ""

	choices = slidetransform.processing.parse_user_choices(answer, len(pool))

	if not choices:
		return [variant.name for variant in pool]

	return [pool[choice - 1].name for choice in choices]


def log_midi_summary (path: str) -> None:

	"""Read the written file back and log what it contains."""

	try:
		summary = slidetransform.midi_file.summarize_midi_file(path)
	except (OSError, EOFError, KeyError, ValueError) as e:
		logger.warning(f"MIDI file {path} was written but could not be read back: {e}")
		return

	logger.info(f"MIDI file created: {path} ({summary.track_count} tracks, {summary.note_count} notes, {summary.length_ticks} ticks)")


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the slidetransform command line.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	if args.list_variants:
		list_variants()
		return 0

	if args.input is None or args.report is None:
		parser.error("input and report are required")

	config = slidetransform.config.load_config(args.config)

	overrides = {
		'percentage': args.percentage,
		'variants': args.variants,
		'meter': args.meter,
		'seed': args.seed,
	}
	transform = dict(config.get('transform') or {})
	transform.update({key: value for key, value in overrides.items() if value is not None})
	config['transform'] = transform

	try:
		settings = slidetransform.config.Settings.from_config(config)
	except ValueError as e:
		parser.error(str(e))

	logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

	rng = random.Random(settings.seed)

	if args.choose:
		settings.variants = choose_variants(rng)

	try:
		stats = slidetransform.processing.process_file(args.input, args.report, settings, rng)
		print(stats.summary())

		if args.midi:
			diagnostics = slidetransform.processing.convert_to_midi(args.report, args.midi)
			stats.diagnostics.extend(diagnostics)
			log_midi_summary(args.midi)

	except slidetransform.exceptions.SlideTransformError as e:
		logger.error(str(e))
		return 1

	for message in stats.diagnostics:
		print(message)

	return 0


if __name__ == "__main__":
	sys.exit(main())
