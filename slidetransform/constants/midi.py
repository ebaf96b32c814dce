"""MIDI file constants.

Output files are Standard MIDI File format 1 with a resolution of
**1024 ticks per quarter note**. Every track plays on channel 0 with a single
program change to program 0 (acoustic grand piano) before its first note.
"""

HEADER_CHUNK_TAG = b"MThd"
TRACK_CHUNK_TAG = b"MTrk"

HEADER_LENGTH = 6
FORMAT_MULTI_TRACK = 1
TICKS_PER_QUARTER_NOTE = 1024

# Channel voice status bytes (channel 0)
NOTE_OFF = 0x80
NOTE_ON = 0x90
PROGRAM_CHANGE = 0xC0

DEFAULT_PROGRAM = 0
NOTE_ON_VELOCITY = 100
NOTE_OFF_VELOCITY = 0

# Delta time 0, meta event 0x2F (end of track), length 0
END_OF_TRACK = b"\x00\xff\x2f\x00"

# Largest value a four byte variable-length quantity can hold
MAX_VARIABLE_LENGTH = 0x0FFFFFFF
