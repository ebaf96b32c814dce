"""Constants for slidetransform.

- ``slidetransform.constants.midi`` - Byte-level values used by the MIDI file encoder
- ``slidetransform.constants.labels`` - Note-list labels and report markers
"""
