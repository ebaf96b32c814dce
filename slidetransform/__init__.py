"""
slidetransform - slide ornaments for note lists, rendered to standard MIDI files.

A slide is a short run of grace notes that climbs or falls into a principal
note. slidetransform takes a list of timestamped notes, replaces a chosen
share of the eligible ones with one of 74 named slide variants, and writes the
result both as a readable report and as a format 1 MIDI file.

Pipeline:

- **Variants.** ``slidetransform.variants`` is a fixed catalog. Each variant
  gives the ornament pitches as semitone offsets from the principal note and
  names the partition scheme that times them.
- **Partitioning.** ``slidetransform.partition`` splits the principal's
  duration into ornament and principal parts, with separate duple and triple
  proportions for every scheme.
- **Expansion.** ``slidetransform.transform.expand()`` turns one note into
  three or four notes.
- **Sequencing.** ``slidetransform.event_sequencer.EventSequencer`` lays notes
  end to end on independent per-track timelines.
- **Encoding.** ``slidetransform.midi_file`` writes byte-exact MIDI at 1024
  ticks per quarter note.

Minimal example:

    ```python
    import slidetransform

    notes = slidetransform.expand(60, 1024, slidetransform.Meter.DUPLE, "STTM2m")

    sequencer = slidetransform.EventSequencer()
    sequencer.sequence(1, notes)

    slidetransform.write_midi_file("slide.mid", sequencer.events_by_track())
    ```

From the command line, ``python -m slidetransform notes.txt report.txt --midi out.mid``.

Package-level exports: ``EventSequencer``, ``ExpandedNote``, ``Meter``,
``NoteEvent``, ``PartitionScheme``, ``Settings``, ``expand``,
``note_name``, ``note_number``, ``write_midi_file``.
"""

import slidetransform.config
import slidetransform.event_sequencer
import slidetransform.midi_file
import slidetransform.partition
import slidetransform.pitch
import slidetransform.transform


EventSequencer = slidetransform.event_sequencer.EventSequencer
ExpandedNote = slidetransform.transform.ExpandedNote
Meter = slidetransform.partition.Meter
NoteEvent = slidetransform.event_sequencer.NoteEvent
PartitionScheme = slidetransform.partition.PartitionScheme
Settings = slidetransform.config.Settings
expand = slidetransform.transform.expand
note_name = slidetransform.pitch.note_name
note_number = slidetransform.pitch.note_number
write_midi_file = slidetransform.midi_file.write_midi_file
