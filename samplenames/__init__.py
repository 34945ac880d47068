"""
samplenames - filename tools for pitched sample libraries.

Two jobs, both pure text-in, text-out:

- **Range generation.** ``"C3-C4-Bass"`` becomes one filename per semitone,
  ``048-C3-Bass`` through ``060-C4-Bass``, with optional octave transpose,
  flat spelling, and per-note-class disabling.
- **Round-robin renumbering.** Alternate takes such as ``Kick-A.wav`` and
  ``Kick-B.wav`` are grouped and renamed ``Kick_RR1``, ``Kick_RR2``, with an
  optional MIDI-number prefix read from an embedded ``-<note>-`` token.

Convention: **C4 = 60** (Middle C).

Minimal example:

    ```python
    import samplenames

    settings = samplenames.GeneratorSettings(transpose=1, use_flats=True)
    samplenames.generate_range("C3-D3-Lead", settings).filenames
    # → ["060-C4-Lead", "061-Db4-Lead", "062-D4-Lead"]

    samplenames.normalize_filenames(["Kick-A.wav", "Kick-B.wav"])
    # → ["Kick_RR1", "Kick_RR2"]
    ```

Command line: ``python -m samplenames generate C3-C4-Bass`` and
``python -m samplenames convert files.txt --midi-prefix``.

Package-level exports: ``GeneratorSettings``, ``generate_range``,
``normalize_filenames``, ``note_to_midi``, ``midi_to_note``.
"""

import samplenames.pitch
import samplenames.range_generator
import samplenames.round_robin
import samplenames.session


GeneratorSettings = samplenames.session.GeneratorSettings
generate_range = samplenames.range_generator.generate_range
normalize_filenames = samplenames.round_robin.normalize_filenames
note_to_midi = samplenames.pitch.note_to_midi
midi_to_note = samplenames.pitch.midi_to_note
