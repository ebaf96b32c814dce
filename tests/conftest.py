import pathlib
import random

import pytest


SAMPLE_NOTE_LIST = """\
MIDI File Analyzed: sample.mid
1 C4 1024 SAN
1 D4 512 XYZ
2 E4 400 RN
garbage line
1 Q4 100 SAN
"""


@pytest.fixture
def rng () -> random.Random:

	"""Seeded random source so selection is repeatable."""

	return random.Random(42)


@pytest.fixture
def note_list_path (tmp_path: pathlib.Path) -> pathlib.Path:

	"""A small note list mixing eligible, ineligible, junk and unparseable lines."""

	path = tmp_path / "notes.txt"
	path.write_text(SAMPLE_NOTE_LIST)

	return path
