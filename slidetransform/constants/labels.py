"""Note-list labels and report markers.

``ELIGIBLE_LABELS`` is the fixed allow-list of analysis labels whose notes may
receive a slide ornament. Notes with any other label pass through untouched.
"""

import typing


ELIGIBLE_LABELS: typing.FrozenSet[str] = frozenset([
	"SAN", "RLN", "SMP", "Mmd7", "I8", "U2R", "HT", "MmAug6",
	"RDN", "RN", "MmAug4", "Mmm3", "LAD", "DNW", "LNSN", "DBC",
	"DDN", "LNR", "LNSAS", "LNSAL", "DI", "SPCM", "SPDM", "SSN",
	"SVN", "ANS", "ANL", "FTB", "CDB",
])

# Report variant column for eligible notes left untransformed.
ORIGINAL_MARKER = "ORIGINAL"

# Selecting only this pseudo-variant means "any catalog variant".
RANDOM_SELECTION = "RANDOM"
