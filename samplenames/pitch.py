"""Note name and MIDI number conversion.

Convention: **C4 = 60** (Middle C), so MIDI 0 is C at octave -1.  Octave and
pitch class are derived with floor division and floor modulo, which keeps the
pitch class in 0–11 for negative MIDI values too.

Module-level constants:
- `SHARP_NOTE_NAMES`: Pitch classes spelled with sharps (the canonical spelling)
- `FLAT_NOTE_NAMES`: Pitch classes spelled with flats
"""

import logging
import re
import typing


logger = logging.getLogger(__name__)


SHARP_NOTE_NAMES: typing.List[str] = [
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

FLAT_NOTE_NAMES: typing.List[str] = [
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
]

_NOTE_PATTERN = re.compile(r"^([A-G][#b]?)(\d+)$", re.ASCII)
_NOTE_CLASS_PATTERN = re.compile(r"^[A-G][#b]?")

_PAD_WIDTH = 3


def note_to_midi (note: str) -> typing.Optional[int]:

	"""Convert a note name with octave to a MIDI number.

	Sharp spellings are tried first, then flats.  Anything that is not a
	letter ``A``–``G``, an optional ``#`` or ``b`` and an octave number
	returns ``None``.

	Parameters:
		note: Note string such as ``"C4"``, ``"F#5"`` or ``"Gb3"``.

	Returns:
		The MIDI number, or ``None`` if the note cannot be read.

	Example:
		```python
		note_to_midi("C4")   # → 60
		note_to_midi("Gb3")  # → 54
		note_to_midi("H2")   # → None
		```
	"""

	if not isinstance(note, str):
		return None

	match = _NOTE_PATTERN.match(note)

	if match is None:
		return None

	name, octave = match.group(1), int(match.group(2))

	if name in SHARP_NOTE_NAMES:
		index = SHARP_NOTE_NAMES.index(name)
	elif name in FLAT_NOTE_NAMES:
		index = FLAT_NOTE_NAMES.index(name)
	else:
		return None

	return (octave + 1) * 12 + index


def midi_to_note (midi: int, use_flats: bool = False) -> str:

	"""Render a MIDI number as ``"<name><octave>"``.

	No range checking is done - values outside 0–127 still produce a
	syntactically valid note string.

	Example:
		```python
		midi_to_note(61)                  # → "C#4"
		midi_to_note(61, use_flats=True)  # → "Db4"
		midi_to_note(-1)                  # → "B-2"
		```
	"""

	octave = midi // 12 - 1
	names = FLAT_NOTE_NAMES if use_flats else SHARP_NOTE_NAMES

	return f"{names[midi % 12]}{octave}"


def note_class (note: str) -> typing.Optional[str]:

	"""Return the letter and accidental of a note string, without the octave."""

	match = _NOTE_CLASS_PATTERN.match(note)

	return match.group(0) if match else None


def pad_midi (midi: int) -> str:

	"""Zero-pad a MIDI number to three digits.

	Values outside 0–999 cannot be represented in three digits.  They are
	rendered in full rather than truncated, and a warning is logged.
	"""

	if not 0 <= midi < 10 ** _PAD_WIDTH:
		logger.warning(f"MIDI number {midi} does not fit in {_PAD_WIDTH} digits")

	return str(midi).zfill(_PAD_WIDTH)
